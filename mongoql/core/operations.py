"""
Operation kinds generated for every model.

Each model exposes five operations. Reads are GraphQL queries, writes are
GraphQL mutations.
"""

from enum import Enum
from typing import Union


class RootKind(str, Enum):
    """GraphQL root type an operation is exposed under."""

    QUERY = "query"
    MUTATION = "mutation"


class Operation(str, Enum):
    """The five CRUD operations derived for a model."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"

    @property
    def root_kind(self) -> RootKind:
        if self in (Operation.READ, Operation.LIST):
            return RootKind.QUERY
        return RootKind.MUTATION

    @classmethod
    def coerce(cls, value: Union["Operation", str]) -> "Operation":
        """
        Convert an operation name to an Operation.

        Raises:
            ValueError: If the name is not one of the five operations.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(op.value for op in cls)
            raise ValueError(
                f"Unknown operation '{value}'. Expected one of: {valid}"
            ) from None
