"""
Exception types raised by mongoql.

Argument validation failures are reported with Django's
``django.core.exceptions.ValidationError`` so that callers can inspect
``message_dict`` the same way they would for a form or a model.
"""

from typing import Optional


class MongoQLError(Exception):
    """Base exception for mongoql errors."""

    code = "MONGOQL_ERROR"

    def __init__(self, message: str, model_name: Optional[str] = None):
        self.message = message
        self.model_name = model_name
        super().__init__(message)


class ModelDefinitionError(MongoQLError):
    """Raised when a model, attribute or refinement is declared incorrectly."""

    code = "MODEL_DEFINITION_ERROR"

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.field_name = field_name
        super().__init__(message, model_name)


class PersistenceError(MongoQLError):
    """Raised when the document store fails during insert/find/update/remove."""

    code = "PERSISTENCE_ERROR"

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        collection: Optional[str] = None,
        operation: Optional[str] = None,
    ):
        self.collection = collection
        self.operation = operation
        super().__init__(message, model_name)


class PipelineError(MongoQLError):
    """Raised when a handler misuses its continuation."""

    code = "PIPELINE_ERROR"


class StoreConfigurationError(MongoQLError):
    """Raised when no document store can be opened from the configuration."""

    code = "STORE_CONFIGURATION_ERROR"
