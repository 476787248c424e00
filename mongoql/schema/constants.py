"""
Constants and mappings for GraphQL type generation.
"""

import graphene
from graphene.types.generic import GenericScalar

from ..attributes.scalars import (
    BooleanAttribute,
    DateAttribute,
    NumberAttribute,
    ObjectIdAttribute,
    StringAttribute,
)

# Mapping of scalar attribute types to GraphQL scalar types
ATTRIBUTE_TYPE_MAP = {
    StringAttribute: graphene.String,
    NumberAttribute: graphene.Float,
    BooleanAttribute: graphene.Boolean,
    DateAttribute: graphene.DateTime,
    ObjectIdAttribute: graphene.ID,
}

# Used for arrays without an item type and objects without declared fields
UNTYPED_SCALAR = GenericScalar

INPUT_TYPE_SUFFIX = "Input"

# Placeholder keeping the Query root valid when only mutations are declared
PLACEHOLDER_QUERY_FIELD = "dummy"
