"""Core module for mongoql.

Configuration, naming helpers, exceptions and the document store handle.
"""

from .exceptions import (
    ModelDefinitionError,
    MongoQLError,
    PersistenceError,
    PipelineError,
    StoreConfigurationError,
)
from .operations import Operation, RootKind
from .settings import MongoQLSettings, get_settings
from .store import DocumentStore, close_default_store, connect, get_default_store

__all__ = [
    "DocumentStore",
    "ModelDefinitionError",
    "MongoQLError",
    "MongoQLSettings",
    "Operation",
    "PersistenceError",
    "PipelineError",
    "RootKind",
    "StoreConfigurationError",
    "close_default_store",
    "connect",
    "get_default_store",
    "get_settings",
]
