"""
Array and nested object attribute types.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional

from django.core.exceptions import ValidationError

from .base import NULL_MESSAGE, Attribute, clean_fields, merge_error


@dataclass(frozen=True)
class ArrayAttribute(Attribute):
    """A list of values, optionally validated element by element."""

    item: Optional[Attribute] = None

    type_label = "array"

    def items(self, item: Attribute) -> "ArrayAttribute":
        return replace(self, item=item)

    def map_children(self, transform: Callable[[Attribute], Attribute]) -> "ArrayAttribute":
        if self.item is None:
            return self
        return replace(self, item=transform(self.item))

    def to_python(self, value: Any) -> list:
        if not isinstance(value, (list, tuple)):
            raise ValidationError("Enter a list of values.", code="invalid_list")
        if self.item is None:
            return list(value)

        errors: dict = {}
        cleaned = []
        for index, element in enumerate(value):
            if element is None:
                errors[str(index)] = [ValidationError(NULL_MESSAGE, code="null")]
                continue
            try:
                cleaned.append(self.item.clean(element))
            except ValidationError as exc:
                merge_error(errors, str(index), exc)
        if errors:
            raise ValidationError(errors)
        return cleaned


@dataclass(frozen=True)
class ObjectAttribute(Attribute):
    """
    A nested document.

    With no declared fields any mapping is accepted as is. With fields, the
    mapping is validated like a set of arguments and unknown keys are
    rejected.
    """

    fields: dict = field(default_factory=dict, hash=False)
    type_name: Optional[str] = None

    type_label = "object"

    def named(self, name: str) -> "ObjectAttribute":
        """Name the GraphQL type generated for this object."""
        return replace(self, type_name=name)

    def keys(self, fields: dict) -> "ObjectAttribute":
        return replace(self, fields={**self.fields, **fields})

    def map_children(self, transform: Callable[[Attribute], Attribute]) -> "ObjectAttribute":
        if not self.fields:
            return self
        return replace(
            self, fields={name: transform(child) for name, child in self.fields.items()}
        )

    def to_python(self, value: Any) -> dict:
        if not isinstance(value, Mapping):
            raise ValidationError("Enter a valid object.", code="invalid_object")
        if not self.fields:
            return dict(value)
        return clean_fields(self.fields, value)
