"""
Built-in CRUD handlers.

One handler per generated operation. Each checks whether the request names
its operation; if not it defers to the next handler. Store failures are
raised as ``PersistenceError`` and abort the rest of the chain.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from pymongo.errors import PyMongoError

from ..core.exceptions import PersistenceError
from ..core.operations import Operation
from ..core.settings import get_settings
from .base import Next
from .context import OperationContext

if TYPE_CHECKING:
    from .model import Model

logger = logging.getLogger(__name__)


class CrudHandler(ABC):
    """
    Base class for the five built-in handlers.

    Attributes:
        operation: The operation this handler performs
        model: The model whose collection it works on
    """

    operation: Operation

    def __init__(self, model: "Model"):
        self.model = model

    @property
    def operation_name(self) -> str:
        return self.model.operation_names[self.operation]

    @property
    def name(self) -> str:
        return f"{self.model.singular}.{self.operation.value}"

    def applies(self, ctx: OperationContext) -> bool:
        return ctx.request.invokes(self.operation.root_kind, self.operation_name)

    def __call__(self, ctx: OperationContext, next: Next) -> Any:
        if not self.applies(ctx):
            return next()

        args = ctx.args(self.operation.root_kind, self.operation_name)
        collection = self.model.collection
        level = logging.INFO if get_settings().log_operations else logging.DEBUG
        logger.log(level, "%s on collection '%s' with %s", self.name, collection.name, args)
        try:
            ctx.response[self.operation_name] = self.perform(collection, args)
        except PyMongoError as exc:
            logger.warning(
                "Store failure during %s on '%s': %s", self.name, collection.name, exc
            )
            raise PersistenceError(
                f"{self.operation.value} on '{collection.name}' failed: {exc}",
                model_name=self.model.singular,
                collection=collection.name,
                operation=self.operation.value,
            ) from exc
        return next()

    @abstractmethod
    def perform(self, collection, args: dict[str, Any]) -> Any:
        """Run the store call and return the response value."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"


class CreateHandler(CrudHandler):
    """Insert the arguments as a new document; respond with them."""

    operation = Operation.CREATE

    def perform(self, collection, args):
        # insert_one sets the generated _id on the document it is given
        collection.insert_one(args)
        return args


class ReadHandler(CrudHandler):
    operation = Operation.READ

    def perform(self, collection, args):
        return collection.find_one(args)


class UpdateHandler(CrudHandler):
    """Replace the identified document wholesale and return what is stored."""

    operation = Operation.UPDATE

    def perform(self, collection, args):
        selector = {"_id": args["_id"]}
        result = collection.replace_one(selector, args)
        if result.matched_count == 0:
            logger.debug("%s matched no document for %s", self.name, selector)
            return None
        return collection.find_one(selector)


class DeleteHandler(CrudHandler):
    operation = Operation.DELETE

    def perform(self, collection, args):
        collection.delete_many(args)
        return None


class ListHandler(CrudHandler):
    operation = Operation.LIST

    def perform(self, collection, args):
        return list(collection.find(args))


BUILTIN_HANDLERS = (
    CreateHandler,
    ReadHandler,
    UpdateHandler,
    DeleteHandler,
    ListHandler,
)
