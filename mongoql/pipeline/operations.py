"""
Standalone queries and mutations.

For one-off operations that are not CRUD on a model::

    tags = query("tags", array(string()), lambda ctx, next: (
        ctx.response.update(tags=["hello", "world"]), next()
    ))
"""

from typing import Any, Optional

from ..attributes.base import Attribute
from ..core.exceptions import ModelDefinitionError
from ..core.operations import RootKind
from ..core.strings import capitalize, is_graphql_name
from ..validation.deriver import derive
from .base import GuardedHandler, Handler
from .descriptors import OperationDescriptor


class StandaloneOperation:
    """
    A single named query or mutation with its own handlers.

    Each handler is guarded so it only runs when this operation is invoked,
    and it is responsible for writing ``ctx.response[name]``.
    """

    def __init__(
        self,
        kind: RootKind,
        name: str,
        output: Attribute,
        handlers: tuple = (),
        args: Optional[dict[str, Attribute]] = None,
        description: Optional[str] = None,
    ):
        if not is_graphql_name(name):
            raise ModelDefinitionError(f"Operation name '{name}' is not a valid GraphQL name")
        if not isinstance(output, Attribute):
            raise ModelDefinitionError(
                f"Output of '{name}' must be an attribute, got {type(output).__name__}"
            )
        self.kind = RootKind(kind)
        self.name = name
        self.descriptor = OperationDescriptor(
            name=name,
            kind=self.kind,
            output=output,
            arguments=derive(dict(args or {})),
            type_name=capitalize(name),
            description=description or output.description,
        )
        self.query: dict[str, OperationDescriptor] = {}
        self.mutation: dict[str, OperationDescriptor] = {}
        target = self.query if self.kind is RootKind.QUERY else self.mutation
        target[name] = self.descriptor
        self.middleware: list[Handler] = [
            GuardedHandler(handler, self.kind, name) for handler in handlers
        ]

    def __repr__(self) -> str:
        return f"<StandaloneOperation {self.kind.value} {self.name}>"


def query(
    name: str,
    output: Attribute,
    *handlers: Handler,
    args: Optional[dict[str, Attribute]] = None,
    description: Optional[str] = None,
) -> StandaloneOperation:
    """Declare a one-off query."""
    return StandaloneOperation(RootKind.QUERY, name, output, handlers, args, description)


def mutation(
    name: str,
    output: Attribute,
    *handlers: Handler,
    args: Optional[dict[str, Attribute]] = None,
    description: Optional[str] = None,
) -> StandaloneOperation:
    """Declare a one-off mutation."""
    return StandaloneOperation(RootKind.MUTATION, name, output, handlers, args, description)
