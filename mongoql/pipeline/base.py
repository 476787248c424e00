"""
Handler chain composition.

A handler is a callable ``handler(ctx, next)``. It decides whether it applies
to the request, does its work, and calls ``next()`` to run the rest of the
chain. Whatever runs after ``next()`` returns sees the effects of every later
handler, which is how interceptors post-process built-in CRUD steps.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional

from ..core.exceptions import PipelineError
from ..core.operations import RootKind
from .context import OperationContext

logger = logging.getLogger(__name__)

Next = Callable[[], Any]
Handler = Callable[[OperationContext, Next], Any]


def _handler_name(handler: Handler) -> str:
    return getattr(handler, "name", None) or getattr(
        handler, "__name__", handler.__class__.__name__
    )


class HandlerChain:
    """
    Runs an ordered list of handlers with explicit continuations.

    Example:
        chain = HandlerChain([audit, create_handler, read_handler])
        ctx = chain.run(OperationContext(request=descriptor))
    """

    def __init__(self, handlers: Iterable[Handler]):
        self.handlers: List[Handler] = list(handlers)

    def run(self, ctx: OperationContext, last: Optional[Next] = None) -> OperationContext:
        """
        Execute the chain against ``ctx``.

        Exceptions raised by a handler abort the remaining handlers and
        propagate to the caller.

        Raises:
            PipelineError: If a handler calls ``next()`` more than once.
        """
        handlers = self.handlers
        index = -1

        def dispatch(position: int) -> Any:
            nonlocal index
            if position <= index:
                raise PipelineError("next() called multiple times")
            index = position
            if position == len(handlers):
                return last() if last is not None else None
            handler = handlers[position]
            return handler(ctx, lambda: dispatch(position + 1))

        dispatch(0)
        return ctx

    def get_handler_names(self) -> List[str]:
        return [_handler_name(handler) for handler in self.handlers]

    def __len__(self) -> int:
        return len(self.handlers)

    def __repr__(self) -> str:
        return f"<HandlerChain handlers={self.get_handler_names()}>"


def compose(handlers: Iterable[Handler]) -> Callable[[OperationContext], OperationContext]:
    """Compose handlers into a single callable taking a context."""
    return HandlerChain(handlers).run


class GuardedHandler:
    """
    Wraps a handler so it only runs when a named operation was invoked.

    When the request does not name the operation the wrapped handler is
    skipped and the chain continues.
    """

    def __init__(self, handler: Handler, kind: RootKind, operation_name: str):
        self._handler = handler
        self.kind = RootKind(kind)
        self.operation_name = operation_name
        self.name = f"guarded:{operation_name}:{_handler_name(handler)}"

    def applies(self, ctx: OperationContext) -> bool:
        return ctx.request.invokes(self.kind, self.operation_name)

    def __call__(self, ctx: OperationContext, next: Next) -> Any:
        if not self.applies(ctx):
            return next()
        logger.debug("Running %s", self.name)
        return self._handler(ctx, next)

    def __repr__(self) -> str:
        return f"<GuardedHandler {self.name}>"
