"""
GraphQL schema aggregation and type generation.
"""

from .builder import Api, format_validation_error, models
from .types import TypeGenerator

__all__ = ["Api", "TypeGenerator", "format_validation_error", "models"]
