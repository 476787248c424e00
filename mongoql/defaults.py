"""
Default configuration for the mongoql library.

Every key the library reads from ``settings.MONGOQL`` has its default here.
Values in the project settings are merged over these.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "mongoql"

DEFAULT_DATABASE_NAME = "mongoql"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # Connection
    "uri": "mongodb://localhost:27017",
    "database": None,
    "server_selection_timeout_ms": 5000,
    # Log every built-in store call at INFO instead of DEBUG
    "log_operations": False,
    # HTTP installation
    "enable_graphiql": True,
    "endpoint_path": "graphql/",
    # Dotted path to the ``Api`` served by ``mongoql.urls`` and exported by
    # the ``export_mongoql_schema`` command.
    "schema": None,
}


def merge_settings(*sources: dict[str, Any]) -> dict[str, Any]:
    """Merge settings dictionaries, later sources taking precedence."""
    merged: dict[str, Any] = {}
    for source in sources:
        if source:
            merged.update(source)
    return merged
