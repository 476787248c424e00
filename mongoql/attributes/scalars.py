"""
Scalar attribute types.

Primitive coercion is delegated to Django form fields and constraint
checks to Django validators, so messages match what Django forms report.
"""

import re
from dataclasses import dataclass, replace
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from django import forms
from django.core.exceptions import ValidationError
from django.core.validators import (
    EmailValidator,
    MaxLengthValidator,
    MaxValueValidator,
    MinLengthValidator,
    MinValueValidator,
    RegexValidator,
)

from .base import Attribute


@dataclass(frozen=True)
class StringAttribute(Attribute):
    type_label = "string"

    def min_length(self, length: int) -> "StringAttribute":
        return self._with_validator(MinLengthValidator(length))

    def max_length(self, length: int) -> "StringAttribute":
        return self._with_validator(MaxLengthValidator(length))

    def email(self) -> "StringAttribute":
        return self._with_validator(EmailValidator())

    def pattern(self, regex: str, message: Optional[str] = None) -> "StringAttribute":
        return self._with_validator(RegexValidator(re.compile(regex), message=message))

    def to_python(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValidationError("Enter a valid string.", code="invalid")
        return value


@dataclass(frozen=True)
class NumberAttribute(Attribute):
    integral: bool = False

    type_label = "number"

    def integer(self) -> "NumberAttribute":
        return replace(self, integral=True)

    def min(self, limit) -> "NumberAttribute":
        return self._with_validator(MinValueValidator(limit))

    def max(self, limit) -> "NumberAttribute":
        return self._with_validator(MaxValueValidator(limit))

    def to_python(self, value: Any):
        if isinstance(value, bool):
            raise ValidationError("Enter a number.", code="invalid")
        if isinstance(value, (int, float)) and not self.integral:
            return value
        field = forms.IntegerField() if self.integral else forms.FloatField()
        converted = field.to_python(value)
        if converted is None:
            raise ValidationError("Enter a number.", code="invalid")
        return converted


@dataclass(frozen=True)
class BooleanAttribute(Attribute):
    type_label = "boolean"

    def to_python(self, value: Any) -> bool:
        converted = forms.NullBooleanField().to_python(value)
        if converted is None:
            raise ValidationError("Enter a valid boolean.", code="invalid")
        return converted


@dataclass(frozen=True)
class DateAttribute(Attribute):
    type_label = "date"

    def to_python(self, value: Any):
        converted = forms.DateTimeField().to_python(value)
        if converted is None:
            raise ValidationError("Enter a valid date/time.", code="invalid")
        return converted


@dataclass(frozen=True)
class ObjectIdAttribute(Attribute):
    """A MongoDB ObjectId. 24 character hex strings are converted."""

    type_label = "objectid"

    def to_python(self, value: Any) -> ObjectId:
        if isinstance(value, ObjectId):
            return value
        if isinstance(value, str):
            try:
                return ObjectId(value)
            except InvalidId:
                pass
        raise ValidationError("Enter a valid object id.", code="invalid")
