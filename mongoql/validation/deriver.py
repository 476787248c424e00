"""
Per-operation validation derivation.

``derive(attributes, operation)`` resolves every attribute's refinement for
one operation and returns the concrete ``ArgumentSchema`` used to validate
arguments for that operation.

Refinement keys are parsed into exact sets of operations. A key may be an
``Operation``, an operation name, several names separated by whitespace
(``"update delete"``) or an iterable of any of those. Names are matched
exactly, never as substrings.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..attributes.base import Attribute, clean_fields
from ..core.exceptions import ModelDefinitionError
from ..core.operations import Operation

logger = logging.getLogger(__name__)


def parse_operation_key(key: Any) -> frozenset:
    """
    Parse a refinement key into a set of operations.

    Raises:
        ModelDefinitionError: If the key names an unknown operation.
    """
    if isinstance(key, Operation):
        return frozenset({key})
    if isinstance(key, str):
        tokens = key.split()
    elif isinstance(key, Iterable):
        operations = set()
        for part in key:
            operations |= parse_operation_key(part)
        return frozenset(operations)
    else:
        raise ModelDefinitionError(f"Invalid refinement key {key!r}")

    if not tokens:
        raise ModelDefinitionError("Empty refinement key")
    try:
        return frozenset(Operation.coerce(token) for token in tokens)
    except ValueError as exc:
        raise ModelDefinitionError(str(exc)) from exc


def refinement_rules(attribute: Attribute) -> list:
    """
    Evaluate an attribute's refinement into ``(operations, node)`` pairs,
    preserving declaration order.
    """
    rules = attribute.refinement
    if rules is None:
        return []
    if callable(rules) and not isinstance(rules, Mapping):
        rules = rules(attribute)
    if not isinstance(rules, Mapping):
        raise ModelDefinitionError(
            f"Refinement must produce a mapping, got {type(rules).__name__}"
        )

    parsed = []
    for key, refined in rules.items():
        if not isinstance(refined, Attribute):
            raise ModelDefinitionError(
                f"Refinement for {key!r} must be an attribute, got {type(refined).__name__}"
            )
        parsed.append((parse_operation_key(key), refined))
    return parsed


def resolve_attribute(attribute: Attribute, operation: Operation) -> Attribute:
    """Return the node that applies to ``operation`` (the base node if none)."""
    resolved = attribute
    for operations, refined in refinement_rules(attribute):
        if operation in operations:
            resolved = refined
            break
    return resolved.map_children(lambda child: resolve_attribute(child, operation))


@dataclass(frozen=True)
class ArgumentSchema:
    """
    Concrete argument schema for one operation.

    Attributes:
        fields: Attribute name to resolved node
        operation: The operation the schema was derived for, if any
    """

    fields: dict = field(default_factory=dict)
    operation: Optional[Operation] = None

    def validate(self, args: Optional[Mapping[str, Any]] = None) -> dict:
        """
        Validate and convert arguments.

        Returns:
            Cleaned arguments with defaults applied and absent optional
            fields omitted.

        Raises:
            django.core.exceptions.ValidationError: With per-field messages.
        """
        return clean_fields(self.fields, args or {})

    def __getitem__(self, name: str) -> Attribute:
        return self.fields[name]

    def __contains__(self, name: str) -> bool:
        return name in self.fields

    def __iter__(self):
        return iter(self.fields)

    def items(self):
        return self.fields.items()


def derive(
    attributes: Mapping[str, Attribute],
    operation: Union[Operation, str, None] = None,
) -> ArgumentSchema:
    """
    Derive the argument schema for an operation.

    With no operation the base nodes are used unchanged. The input mapping is
    never mutated, so deriving twice yields equal schemas.
    """
    if operation is None:
        return ArgumentSchema(fields=dict(attributes))
    operation = Operation.coerce(operation)
    fields = {
        name: resolve_attribute(attribute, operation)
        for name, attribute in attributes.items()
    }
    logger.debug("Derived %s schema for fields %s", operation.value, list(fields))
    return ArgumentSchema(fields=fields, operation=operation)
