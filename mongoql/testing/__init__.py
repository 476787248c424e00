"""
Public test utilities for mongoql.
"""

from .harness import build_request, build_store, execute

__all__ = ["build_request", "build_store", "execute"]
