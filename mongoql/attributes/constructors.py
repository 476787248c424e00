"""
Attribute constructors.

These are the names used in model definitions::

    tweet = store.model("tweet", {
        "body": string().describe("Tweet body").refine(
            lambda it: {"create": it.required().max_length(150)}
        ),
        "published": boolean().refine(lambda it: {"create": it.default(False)}),
    })
"""

from typing import Optional

from .base import Attribute
from .composite import ArrayAttribute, ObjectAttribute
from .scalars import (
    BooleanAttribute,
    DateAttribute,
    NumberAttribute,
    ObjectIdAttribute,
    StringAttribute,
)


def string() -> StringAttribute:
    return StringAttribute()


def number() -> NumberAttribute:
    return NumberAttribute()


def boolean() -> BooleanAttribute:
    return BooleanAttribute()


def date() -> DateAttribute:
    return DateAttribute()


def objectid() -> ObjectIdAttribute:
    return ObjectIdAttribute()


def array(item: Optional[Attribute] = None) -> ArrayAttribute:
    return ArrayAttribute(item=item)


def object(fields: Optional[dict] = None) -> ObjectAttribute:  # noqa: A001
    return ObjectAttribute(fields=dict(fields or {}))
