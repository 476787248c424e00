"""
Base attribute node.

An attribute is an immutable description of one document field: its type,
whether it is required, forbidden or optional, an optional default, a
description, and an optional per-operation refinement. Every modifier
returns a new node so a base node can be shared and refined freely.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Union

from django.core.exceptions import ValidationError
from django.db.models.fields import NOT_PROVIDED

REQUIRED_MESSAGE = "This field is required."
NOT_ALLOWED_MESSAGE = "This field is not allowed."
NULL_MESSAGE = "This field cannot be null."

Rules = Union[Mapping[Any, "Attribute"], Callable[["Attribute"], Mapping[Any, "Attribute"]]]


class Presence(str, Enum):
    OPTIONAL = "optional"
    REQUIRED = "required"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Attribute:
    """
    Base class for all attribute types.

    Subclasses implement ``to_python`` to check and convert a raw value and
    may append Django validators through ``_with_validator``.
    """

    presence: Presence = Presence.OPTIONAL
    # Unhashable members (mapping refinements, list defaults, Django
    # validators) are compared but left out of the hash.
    default_value: Any = field(default=NOT_PROVIDED, hash=False)
    description_text: Optional[str] = None
    refinement: Optional[Rules] = field(default=None, hash=False)
    validators: tuple = field(default=(), hash=False)

    type_label = "value"

    # Modifiers

    def describe(self, text: str) -> "Attribute":
        return replace(self, description_text=text)

    def required(self) -> "Attribute":
        return replace(self, presence=Presence.REQUIRED)

    def optional(self) -> "Attribute":
        return replace(self, presence=Presence.OPTIONAL)

    def forbidden(self) -> "Attribute":
        return replace(self, presence=Presence.FORBIDDEN)

    def default(self, value: Any) -> "Attribute":
        """Use ``value`` (or its return value, if callable) when absent."""
        return replace(self, default_value=value)

    def refine(self, rules: Rules) -> "Attribute":
        """
        Attach per-operation refinements.

        ``rules`` maps operations to refined nodes, or is a callable that
        receives this node and returns such a mapping::

            string().refine(lambda it: {"create": it.required().max_length(150)})
        """
        return replace(self, refinement=rules)

    def _with_validator(self, validator: Callable[[Any], None]) -> "Attribute":
        return replace(self, validators=self.validators + (validator,))

    # Introspection

    @property
    def description(self) -> Optional[str]:
        return self.description_text

    @property
    def is_required(self) -> bool:
        return self.presence is Presence.REQUIRED

    @property
    def is_forbidden(self) -> bool:
        return self.presence is Presence.FORBIDDEN

    @property
    def has_default(self) -> bool:
        return self.default_value is not NOT_PROVIDED

    def get_default(self) -> Any:
        if callable(self.default_value):
            return self.default_value()
        return self.default_value

    def map_children(self, transform: Callable[["Attribute"], "Attribute"]) -> "Attribute":
        """Return a copy with nested attributes transformed. Leaves have none."""
        return self

    # Cleaning

    def to_python(self, value: Any) -> Any:
        return value

    def run_validators(self, value: Any) -> None:
        errors = []
        for validator in self.validators:
            try:
                validator(value)
            except ValidationError as exc:
                errors.extend(exc.error_list)
        if errors:
            raise ValidationError(errors)

    def clean(self, value: Any) -> Any:
        """Convert and validate a non-null value, raising ``ValidationError``."""
        value = self.to_python(value)
        self.run_validators(value)
        return value

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.presence.value}>"


def merge_error(errors: dict, path: str, exc: ValidationError) -> None:
    """Fold a (possibly nested) ValidationError into ``errors`` under ``path``."""
    if hasattr(exc, "error_dict"):
        for key, nested in exc.error_dict.items():
            errors.setdefault(f"{path}.{key}", []).extend(nested)
    else:
        errors.setdefault(path, []).extend(exc.error_list)


def clean_fields(fields: Mapping[str, Attribute], data: Mapping[str, Any]) -> dict:
    """
    Validate a mapping of values against a mapping of attributes.

    Absent and null values are treated alike: required fields report an
    error, fields with defaults receive them, other fields are omitted from
    the result. Keys with no matching attribute are rejected.

    Raises:
        ValidationError: With a ``{field_path: [messages]}`` dict.
    """
    errors: dict = {}
    cleaned: dict = {}

    for key in data:
        if key not in fields:
            errors[key] = [ValidationError(NOT_ALLOWED_MESSAGE, code="unknown")]

    for name, attribute in fields.items():
        value = data.get(name)
        if value is None:
            if attribute.is_required:
                errors[name] = [ValidationError(REQUIRED_MESSAGE, code="required")]
            elif attribute.has_default:
                cleaned[name] = attribute.get_default()
            continue
        if attribute.is_forbidden:
            errors[name] = [ValidationError(NOT_ALLOWED_MESSAGE, code="forbidden")]
            continue
        try:
            cleaned[name] = attribute.clean(value)
        except ValidationError as exc:
            merge_error(errors, name, exc)

    if errors:
        raise ValidationError(errors)
    return cleaned
