"""
Typed attribute nodes used to declare model fields.
"""

from .base import Attribute, Presence, clean_fields
from .composite import ArrayAttribute, ObjectAttribute
from .constructors import array, boolean, date, number, object, objectid, string
from .scalars import (
    BooleanAttribute,
    DateAttribute,
    NumberAttribute,
    ObjectIdAttribute,
    StringAttribute,
)

__all__ = [
    "Attribute",
    "Presence",
    "clean_fields",
    "ArrayAttribute",
    "ObjectAttribute",
    "BooleanAttribute",
    "DateAttribute",
    "NumberAttribute",
    "ObjectIdAttribute",
    "StringAttribute",
    "array",
    "boolean",
    "date",
    "number",
    "object",
    "objectid",
    "string",
]
