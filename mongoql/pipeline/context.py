"""
OperationContext - Carries one invocation through the handler chain.

The context is created when a GraphQL root field is resolved (or a model
convenience method is called), passed to every handler in the chain, and
discarded once the chain completes.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.operations import RootKind


@dataclass
class Invocation:
    """Arguments supplied to one named query or mutation."""

    args: dict[str, Any] = field(default_factory=dict)


@dataclass
class RequestDescriptor:
    """
    Which named queries and mutations were invoked, and with what arguments.

    Attributes:
        query: Query name to invocation
        mutation: Mutation name to invocation
    """

    query: dict[str, Invocation] = field(default_factory=dict)
    mutation: dict[str, Invocation] = field(default_factory=dict)

    @classmethod
    def single(
        cls, kind: RootKind, name: str, args: Optional[dict[str, Any]] = None
    ) -> "RequestDescriptor":
        descriptor = cls()
        descriptor.entries(kind)[name] = Invocation(args=dict(args or {}))
        return descriptor

    def entries(self, kind: RootKind) -> dict[str, Invocation]:
        return self.query if RootKind(kind) is RootKind.QUERY else self.mutation

    def invocation(self, kind: RootKind, name: str) -> Optional[Invocation]:
        return self.entries(kind).get(name)

    def invokes(self, kind: RootKind, name: str) -> bool:
        return name in self.entries(kind)


@dataclass
class OperationContext:
    """
    Per-invocation state shared by every handler.

    Attributes:
        request: Parsed request descriptor
        response: Handler output keyed by operation name
        state: Free storage for interceptors
        info: GraphQL resolve info when invoked through the schema
    """

    request: RequestDescriptor
    response: dict[str, Any] = field(default_factory=dict)
    state: dict[str, Any] = field(default_factory=dict)
    info: Any = None

    def args(self, kind: RootKind, name: str) -> dict[str, Any]:
        """Arguments of an invoked operation, or an empty dict."""
        invocation = self.request.invocation(kind, name)
        return invocation.args if invocation is not None else {}

    @property
    def graphql_context(self) -> Any:
        """The GraphQL context value (usually the Django request)."""
        return getattr(self.info, "context", None)
