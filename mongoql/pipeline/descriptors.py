"""
Operation descriptors: what a query or mutation exposes to GraphQL.
"""

from dataclasses import dataclass
from typing import Optional

from ..attributes.base import Attribute
from ..core.operations import Operation, RootKind
from ..validation.deriver import ArgumentSchema


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Pairs a GraphQL output with the argument schema of one operation.

    Attributes:
        name: Root field name (``createTweet``, ``tweets``...)
        kind: Query or mutation
        output: Attribute describing the returned value
        arguments: Derived argument schema
        operation: CRUD operation for model descriptors, None for standalone ones
        type_name: Name hint for generated GraphQL types
        description: Root field description
    """

    name: str
    kind: RootKind
    output: Attribute
    arguments: ArgumentSchema
    operation: Optional[Operation] = None
    type_name: Optional[str] = None
    description: Optional[str] = None
