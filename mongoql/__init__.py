"""
mongoql - GraphQL CRUD schemas generated from declarative MongoDB models.

    from mongoql import connect, model, models, string

    store = connect("mongodb://localhost:27017/blog")
    user = model("user", {
        "name": string().refine(lambda it: {"create": it.required()}),
    })
    api = models(user)
    api.execute('mutation { createUser(name: "Craig") { _id name } }')
"""

from typing import Any, Optional

from .attributes import array, boolean, date, number, object, objectid, string
from .core import (
    DocumentStore,
    ModelDefinitionError,
    MongoQLError,
    Operation,
    PersistenceError,
    PipelineError,
    StoreConfigurationError,
    close_default_store,
    connect,
    get_default_store,
)
from .pipeline import Model, OperationContext, RequestDescriptor, mutation, query
from .schema import Api, models
from .validation import derive
from .views import graphqlize

__version__ = "0.1.0"


def model(singular: str, attributes: Optional[dict] = None, store: Any = None) -> Model:
    """Declare a model. Without ``store`` the default store is used lazily."""
    return Model(singular, attributes, store=store)


__all__ = [
    "Api",
    "DocumentStore",
    "Model",
    "ModelDefinitionError",
    "MongoQLError",
    "Operation",
    "OperationContext",
    "PersistenceError",
    "PipelineError",
    "RequestDescriptor",
    "StoreConfigurationError",
    "array",
    "boolean",
    "close_default_store",
    "connect",
    "date",
    "derive",
    "get_default_store",
    "graphqlize",
    "model",
    "models",
    "mutation",
    "number",
    "object",
    "objectid",
    "query",
    "string",
]
