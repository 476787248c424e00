"""
Model - CRUD operations, handler pipeline and convenience methods for one
document collection.
"""

import logging
from typing import Any, Callable, Optional, Union

from ..attributes.base import Attribute
from ..attributes.composite import ArrayAttribute, ObjectAttribute
from ..attributes.constructors import objectid
from ..core.exceptions import ModelDefinitionError
from ..core.operations import Operation, RootKind
from ..core.strings import capitalize, is_graphql_name, pluralize
from ..validation.deriver import ArgumentSchema, derive
from .base import GuardedHandler, Handler, HandlerChain
from .context import OperationContext, RequestDescriptor
from .descriptors import OperationDescriptor
from .handlers import BUILTIN_HANDLERS

logger = logging.getLogger(__name__)

ID_FIELD = "_id"


def identifier() -> Attribute:
    """The implicit ``_id`` attribute every model carries."""
    return (
        objectid()
        .describe("Unique ID")
        .refine(
            lambda it: {
                Operation.CREATE: it.forbidden(),
                (Operation.UPDATE, Operation.DELETE): it.required(),
            }
        )
    )


class Model:
    """
    A named document type with generated CRUD operations.

    Args:
        singular: Singular model name; the collection and list query use its
            plural (``tweet`` -> ``tweets``)
        attributes: Field name to attribute node
        store: Document store holding the collection. Defaults to the
            process default store (see ``mongoql.connect``).

    Example:
        user = store.model("user", {
            "name": string().refine(lambda it: {"create": it.required()}),
        })

        @user.on("create")
        def stamp(ctx, next):
            next()
            ctx.state["created"] = True

        user.create({"name": "Craig"})
    """

    def __init__(
        self,
        singular: str,
        attributes: Optional[dict[str, Attribute]] = None,
        store: Any = None,
    ):
        if not is_graphql_name(singular):
            raise ModelDefinitionError(
                f"Model name '{singular}' is not a valid GraphQL name",
                model_name=singular,
            )
        attributes = dict(attributes or {})
        for field_name, attribute in attributes.items():
            if not isinstance(attribute, Attribute):
                raise ModelDefinitionError(
                    f"Field '{field_name}' must be an attribute, got {type(attribute).__name__}",
                    model_name=singular,
                    field_name=field_name,
                )
            if not is_graphql_name(field_name):
                raise ModelDefinitionError(
                    f"Field name '{field_name}' is not a valid GraphQL name",
                    model_name=singular,
                    field_name=field_name,
                )

        self.singular = singular
        self.plural = pluralize(singular)
        if self.plural == singular:
            raise ModelDefinitionError(
                f"Model name '{singular}' has no distinct plural; the read and list "
                "operations would share one name",
                model_name=singular,
            )
        self.type_name = capitalize(singular)
        self._store = store
        self.attributes: dict[str, Attribute] = {**attributes, ID_FIELD: identifier()}

        self.operation_names: dict[Operation, str] = {
            Operation.CREATE: f"create{self.type_name}",
            Operation.READ: singular,
            Operation.UPDATE: f"update{self.type_name}",
            Operation.DELETE: f"delete{self.type_name}",
            Operation.LIST: self.plural,
        }
        self.query: dict[str, OperationDescriptor] = {}
        self.mutation: dict[str, OperationDescriptor] = {}
        self._build_descriptors()

        self._interceptors: list[GuardedHandler] = []
        self._builtins = [handler(self) for handler in BUILTIN_HANDLERS]

        self.create = self._convenience(Operation.CREATE)
        self.find = self._convenience(Operation.READ)
        self.update = self._convenience(Operation.UPDATE)
        self.destroy = self._convenience(Operation.DELETE)
        self.where = self._convenience(Operation.LIST)

    def _build_descriptors(self) -> None:
        document = ObjectAttribute(fields=self.attributes, type_name=self.type_name)
        for operation, name in self.operation_names.items():
            output = ArrayAttribute(item=document) if operation is Operation.LIST else document
            descriptor = OperationDescriptor(
                name=name,
                kind=operation.root_kind,
                output=output,
                arguments=self.schema_for(operation),
                operation=operation,
                type_name=self.type_name,
                description=f"{capitalize(operation.value)} {self.plural if operation is Operation.LIST else self.singular}",
            )
            target = self.query if operation.root_kind is RootKind.QUERY else self.mutation
            target[name] = descriptor

    # Store

    @property
    def store(self):
        if self._store is None:
            from ..core.store import get_default_store

            return get_default_store()
        return self._store

    @property
    def collection(self):
        """The collection holding this model's documents."""
        return self.store.collection(self.plural)

    # Validation

    def schema_for(self, operation: Union[Operation, str]) -> ArgumentSchema:
        return derive(self.attributes, operation)

    # Pipeline

    def on(self, operation: Union[Operation, str], handler: Optional[Handler] = None):
        """
        Register an interceptor for one operation of this model.

        Interceptors run in registration order, all before the built-in
        handlers. Each receives ``(ctx, next)`` and must call ``next()``;
        code after ``next()`` runs once the built-in step has completed.
        Can be used as a decorator when ``handler`` is omitted.
        """
        try:
            operation = Operation.coerce(operation)
        except ValueError as exc:
            raise ModelDefinitionError(str(exc), model_name=self.singular) from exc

        def register(fn: Handler) -> Handler:
            self._interceptors.append(
                GuardedHandler(fn, operation.root_kind, self.operation_names[operation])
            )
            logger.debug("Registered %s interceptor on %s", operation.value, self.singular)
            return fn

        if handler is None:
            return register
        return register(handler)

    @property
    def middleware(self) -> list[Handler]:
        """User interceptors followed by the five built-in handlers."""
        return [*self._interceptors, *self._builtins]

    @property
    def pipeline(self) -> HandlerChain:
        return HandlerChain(self.middleware)

    def invoke(self, operation: Union[Operation, str], args: Optional[dict[str, Any]] = None) -> Any:
        """
        Validate ``args`` and run the operation through the handler chain.

        This is the path used by the convenience methods. It builds the same
        request descriptor a GraphQL invocation would, so interceptors see
        both entry points alike.

        Raises:
            django.core.exceptions.ValidationError: Before any store I/O.
            PersistenceError: If the store call fails.
        """
        operation = Operation.coerce(operation)
        name = self.operation_names[operation]
        cleaned = self.schema_for(operation).validate(args)
        ctx = OperationContext(
            request=RequestDescriptor.single(operation.root_kind, name, cleaned)
        )
        self.pipeline.run(ctx)
        return ctx.response.get(name)

    def _convenience(self, operation: Operation) -> Callable[..., Any]:
        def method(args: Optional[dict[str, Any]] = None) -> Any:
            return self.invoke(operation, args)

        method.__name__ = operation.value
        method.__doc__ = f"Validate arguments and run {self.operation_names[operation]}."
        return method

    def __repr__(self) -> str:
        return f"<Model {self.singular} collection={self.plural}>"
