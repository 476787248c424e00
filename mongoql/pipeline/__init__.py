"""
Model pipeline.

Core components:
- OperationContext / RequestDescriptor: state carried through the chain
- HandlerChain: runs ``handler(ctx, next)`` callables in order
- GuardedHandler: skips a handler unless its operation was invoked
- CrudHandler subclasses: the five built-in store operations
- Model: attributes, descriptors, interceptors and convenience methods
- StandaloneOperation: one-off queries and mutations

Usage:
    from mongoql.pipeline import Model

    tweet = Model("tweet", {"body": string()}, store=store)
    tweet.on("create", log_create)
    tweet.create({"body": "hello"})
"""

from .base import GuardedHandler, Handler, HandlerChain, compose
from .context import Invocation, OperationContext, RequestDescriptor
from .descriptors import OperationDescriptor
from .handlers import (
    CreateHandler,
    CrudHandler,
    DeleteHandler,
    ListHandler,
    ReadHandler,
    UpdateHandler,
)
from .model import Model, identifier
from .operations import StandaloneOperation, mutation, query

__all__ = [
    "CreateHandler",
    "CrudHandler",
    "DeleteHandler",
    "GuardedHandler",
    "Handler",
    "HandlerChain",
    "Invocation",
    "ListHandler",
    "Model",
    "OperationContext",
    "OperationDescriptor",
    "ReadHandler",
    "RequestDescriptor",
    "StandaloneOperation",
    "UpdateHandler",
    "compose",
    "identifier",
    "mutation",
    "query",
]
