"""
Validation derivation: per-operation argument schemas built from attributes.
"""

from .deriver import (
    ArgumentSchema,
    derive,
    parse_operation_key,
    refinement_rules,
    resolve_attribute,
)

__all__ = [
    "ArgumentSchema",
    "derive",
    "parse_operation_key",
    "refinement_rules",
    "resolve_attribute",
]
