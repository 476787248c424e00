"""
Attribute to graphene type conversion.

One ``TypeGenerator`` is used per schema build so generated object types are
shared between the operations that return them and names stay unique.
"""

import logging
from typing import Any, Optional

import graphene

from ..attributes.base import Attribute
from ..attributes.composite import ArrayAttribute, ObjectAttribute
from ..attributes.scalars import NumberAttribute
from ..core.exceptions import ModelDefinitionError
from ..core.strings import capitalize
from ..validation.deriver import ArgumentSchema
from .constants import ATTRIBUTE_TYPE_MAP, INPUT_TYPE_SUFFIX, UNTYPED_SCALAR

logger = logging.getLogger(__name__)


def attribute_shape(attribute: Optional[Attribute]) -> Any:
    """
    The part of an attribute that determines its GraphQL type.

    Presence, defaults, descriptions and validators are left out: they do
    not change the generated type.
    """
    if attribute is None:
        return None
    if isinstance(attribute, ArrayAttribute):
        return ("array", attribute_shape(attribute.item))
    if isinstance(attribute, ObjectAttribute):
        fields = tuple(
            sorted((name, attribute_shape(child)) for name, child in attribute.fields.items())
        )
        return ("object", attribute.type_name, fields)
    integral = isinstance(attribute, NumberAttribute) and attribute.integral
    return (type(attribute).__name__, integral)


class TypeGenerator:
    """
    Builds graphene output types, input types and arguments from attributes.

    Nested object types are named by ``ObjectAttribute.named()`` when given,
    otherwise by the parent type name followed by the capitalized field
    name. Input types append ``Input``.

    Every generated name is claimed by the attribute that first produced it.
    A later attribute producing the same name with a different shape raises
    ``ModelDefinitionError``.
    """

    ATTRIBUTE_TYPE_MAP = ATTRIBUTE_TYPE_MAP.copy()

    def __init__(self):
        self._object_types: dict[str, type[graphene.ObjectType]] = {}
        self._input_types: dict[str, type[graphene.InputObjectType]] = {}
        self._claims: dict[str, tuple[Any, str]] = {}

    def _claim(self, name: str, attribute: ObjectAttribute, owner: str) -> None:
        shape = attribute_shape(attribute)
        claimed = self._claims.get(name)
        if claimed is None:
            self._claims[name] = (shape, owner)
            return
        claimed_shape, claimed_owner = claimed
        if claimed_shape != shape:
            raise ModelDefinitionError(
                f"GraphQL type '{name}' is generated by both {claimed_owner} and "
                f"{owner} with different fields; rename one with .named()"
            )

    def reserve(self, attribute: Attribute, name_hint: str, owner: str) -> None:
        """
        Claim the top-level type name of an operation output.

        Reserving every output type before building any of them keeps a
        nested fallback name (``TweetUser``) from taking the name of a
        model's own type.
        """
        while isinstance(attribute, ArrayAttribute):
            attribute = attribute.item
        if isinstance(attribute, ObjectAttribute) and attribute.fields:
            self._claim(attribute.type_name or name_hint, attribute, owner)

    def _scalar_type(self, attribute: Attribute):
        if isinstance(attribute, NumberAttribute) and attribute.integral:
            return graphene.Int
        for attribute_class, graphql_type in self.ATTRIBUTE_TYPE_MAP.items():
            if isinstance(attribute, attribute_class):
                return graphql_type
        return UNTYPED_SCALAR

    # Output types

    def output_type(self, attribute: Attribute, name_hint: str, owner: Optional[str] = None):
        """Return the graphene type for values described by ``attribute``."""
        owner = owner or f"'{name_hint}'"
        if isinstance(attribute, ArrayAttribute):
            if attribute.item is None:
                return graphene.List(UNTYPED_SCALAR)
            return graphene.List(self.output_type(attribute.item, name_hint, owner))
        if isinstance(attribute, ObjectAttribute):
            if not attribute.fields:
                return UNTYPED_SCALAR
            return self.object_type(attribute, attribute.type_name or name_hint, owner)
        return self._scalar_type(attribute)

    def object_type(
        self, attribute: ObjectAttribute, name: str, owner: Optional[str] = None
    ) -> type[graphene.ObjectType]:
        owner = owner or f"'{name}'"
        self._claim(name, attribute, owner)
        if name in self._object_types:
            return self._object_types[name]

        attrs: dict[str, Any] = {}
        for field_name, child in attribute.fields.items():
            child_type = self.output_type(
                child, f"{name}{capitalize(field_name)}", f"{owner} field '{field_name}'"
            )
            attrs[field_name] = graphene.Field(child_type, description=child.description)
        attrs["Meta"] = type("Meta", (), {"name": name, "description": attribute.description})

        object_type = type(name, (graphene.ObjectType,), attrs)
        self._object_types[name] = object_type
        logger.debug("Generated object type %s for %s", name, owner)
        return object_type

    # Input types

    def input_type(self, attribute: Attribute, name_hint: str, owner: Optional[str] = None):
        """Return the graphene input type accepting values for ``attribute``."""
        owner = owner or f"'{name_hint}'"
        if isinstance(attribute, ArrayAttribute):
            if attribute.item is None:
                return graphene.List(UNTYPED_SCALAR)
            return graphene.List(self.input_type(attribute.item, name_hint, owner))
        if isinstance(attribute, ObjectAttribute):
            if not attribute.fields:
                return UNTYPED_SCALAR
            return self.input_object_type(attribute, attribute.type_name or name_hint, owner)
        return self._scalar_type(attribute)

    def input_object_type(
        self, attribute: ObjectAttribute, name: str, owner: Optional[str] = None
    ) -> type[graphene.InputObjectType]:
        # Nested input fields stay nullable: presence rules differ per
        # operation and are enforced by argument validation instead.
        input_name = f"{name}{INPUT_TYPE_SUFFIX}"
        owner = owner or f"'{input_name}'"
        self._claim(input_name, attribute, owner)
        if input_name in self._input_types:
            return self._input_types[input_name]

        attrs: dict[str, Any] = {}
        for field_name, child in attribute.fields.items():
            child_type = self.input_type(
                child, f"{name}{capitalize(field_name)}", f"{owner} field '{field_name}'"
            )
            attrs[field_name] = graphene.InputField(child_type, description=child.description)
        attrs["Meta"] = type("Meta", (), {"name": input_name})

        input_type = type(input_name, (graphene.InputObjectType,), attrs)
        self._input_types[input_name] = input_type
        return input_type

    # Arguments

    def arguments(
        self,
        schema: ArgumentSchema,
        type_name: Optional[str],
        owner: Optional[str] = None,
    ) -> dict[str, graphene.Argument]:
        """
        Build root field arguments from a derived schema.

        Required attributes become non-null, forbidden ones are left out.
        """
        arguments: dict[str, graphene.Argument] = {}
        for field_name, attribute in schema.items():
            if attribute.is_forbidden:
                continue
            argument_type = self.input_type(
                attribute,
                f"{type_name or ''}{capitalize(field_name)}",
                f"{owner or repr(type_name)} argument '{field_name}'",
            )
            if attribute.is_required:
                argument_type = graphene.NonNull(argument_type)
            arguments[field_name] = graphene.Argument(
                argument_type, description=attribute.description
            )
        return arguments
