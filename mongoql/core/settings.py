"""
MongoQLSettings implementation.

Settings are read from the ``MONGOQL`` dictionary in the Django settings
module and merged over ``mongoql.defaults.LIBRARY_DEFAULTS``.
"""

from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings as django_settings

from ..defaults import LIBRARY_DEFAULTS, merge_settings


def _normalize_keys(config: Any) -> dict[str, Any]:
    """Accept upper-case keys (``URI``, ``DATABASE``) as aliases."""
    if not isinstance(config, dict):
        return {}
    return {str(key).lower(): value for key, value in config.items()}


def get_project_settings() -> dict[str, Any]:
    """Return the raw ``MONGOQL`` block from Django settings."""
    if not django_settings.configured:
        return {}
    return _normalize_keys(getattr(django_settings, "MONGOQL", {}))


@dataclass
class MongoQLSettings:
    """Settings for the document store connection and the GraphQL endpoint."""

    uri: str = LIBRARY_DEFAULTS["uri"]
    database: Optional[str] = None
    server_selection_timeout_ms: int = LIBRARY_DEFAULTS["server_selection_timeout_ms"]
    log_operations: bool = False
    enable_graphiql: bool = True
    endpoint_path: str = LIBRARY_DEFAULTS["endpoint_path"]
    schema: Optional[str] = None

    @classmethod
    def from_django(cls, **overrides: Any) -> "MongoQLSettings":
        merged = merge_settings(LIBRARY_DEFAULTS, get_project_settings(), overrides)
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})


def get_settings(**overrides: Any) -> MongoQLSettings:
    """Load settings fresh so ``override_settings`` is honoured in tests."""
    return MongoQLSettings.from_django(**overrides)
