"""
Schema aggregation.

``models(*parts)`` merges the query and mutation maps of models and
standalone operations into one graphene schema, and concatenates their
handler chains into a single global chain run for every root field.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

import graphene
from django.core.exceptions import ValidationError
from graphql import GraphQLError, introspection_from_schema, print_schema

from ..core.operations import RootKind
from ..pipeline.base import Handler, HandlerChain
from ..pipeline.context import OperationContext, RequestDescriptor
from ..pipeline.descriptors import OperationDescriptor
from .constants import PLACEHOLDER_QUERY_FIELD
from .types import TypeGenerator

logger = logging.getLogger(__name__)

VALIDATION_ERROR_CODE = "VALIDATION_ERROR"


def _plain(value: Any) -> Any:
    """Convert graphene input containers into plain dicts and lists."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def format_validation_error(name: str, error: ValidationError) -> str:
    if hasattr(error, "error_dict"):
        details = "; ".join(
            f"{field}: {' '.join(messages)}"
            for field, messages in error.message_dict.items()
        )
    else:
        details = " ".join(error.messages)
    return f"Invalid arguments for {name}: {details}"


def validation_graphql_error(name: str, error: ValidationError) -> GraphQLError:
    fields = error.message_dict if hasattr(error, "error_dict") else {}
    return GraphQLError(
        format_validation_error(name, error),
        original_error=error,
        extensions={"code": VALIDATION_ERROR_CODE, "fields": fields},
    )


class Api:
    """
    Aggregated schema and handler chain for a set of models and operations.

    Attributes:
        query: Query name to descriptor, merged across parts
        mutation: Mutation name to descriptor, merged across parts
        middleware: Every part's handlers, in the order parts were given
        schema: The generated ``graphene.Schema``

    Name collisions between parts are not an error: the last part wins.
    """

    def __init__(self, parts: Iterable[Any]):
        self.parts = list(parts)
        self.query: dict[str, OperationDescriptor] = {}
        self.mutation: dict[str, OperationDescriptor] = {}
        self.middleware: list[Handler] = []

        for part in self.parts:
            self._merge(self.query, getattr(part, "query", {}) or {}, part)
            self._merge(self.mutation, getattr(part, "mutation", {}) or {}, part)
            self.middleware.extend(getattr(part, "middleware", []) or [])

        self.pipeline = HandlerChain(self.middleware)
        self.schema = self._build_schema()

    @staticmethod
    def _merge(target: dict, source: dict, part: Any) -> None:
        for name, descriptor in source.items():
            if name in target:
                logger.debug("%r overrides operation '%s'", part, name)
            target[name] = descriptor

    # Execution

    def dispatch(self, request: RequestDescriptor, info: Any = None) -> OperationContext:
        """Run the global handler chain for one request descriptor."""
        ctx = OperationContext(request=request, info=info)
        return self.pipeline.run(ctx)

    def _build_resolver(self, descriptor: OperationDescriptor):
        def resolve(root, info, **kwargs):
            try:
                args = descriptor.arguments.validate(_plain(kwargs))
            except ValidationError as exc:
                raise validation_graphql_error(descriptor.name, exc) from exc
            request = RequestDescriptor.single(descriptor.kind, descriptor.name, args)
            ctx = self.dispatch(request, info=info)
            return ctx.response.get(descriptor.name)

        resolve.__name__ = f"resolve_{descriptor.name}"
        return resolve

    def execute(self, document: str, **kwargs: Any):
        """Execute a GraphQL document against the aggregated schema."""
        return self.schema.execute(document, **kwargs)

    # Schema

    def _root_fields(
        self, descriptors: dict[str, OperationDescriptor], types: TypeGenerator
    ) -> dict[str, graphene.Field]:
        fields = {}
        for name, descriptor in descriptors.items():
            type_name = descriptor.type_name or name
            owner = f"operation '{name}'"
            fields[name] = graphene.Field(
                types.output_type(descriptor.output, type_name, owner),
                args=types.arguments(descriptor.arguments, type_name, owner),
                resolver=self._build_resolver(descriptor),
                description=descriptor.description,
            )
        return fields

    def _build_schema(self) -> graphene.Schema:
        types = TypeGenerator()
        for name, descriptor in [*self.query.items(), *self.mutation.items()]:
            types.reserve(
                descriptor.output, descriptor.type_name or name, f"operation '{name}'"
            )

        query_fields = self._root_fields(self.query, types)
        if not query_fields:
            query_fields[PLACEHOLDER_QUERY_FIELD] = graphene.String(
                description="Dummy query field to ensure schema validity"
            )
        query_type = type("Query", (graphene.ObjectType,), query_fields)

        mutation_type = None
        mutation_fields = self._root_fields(self.mutation, types)
        if mutation_fields:
            mutation_type = type("Mutation", (graphene.ObjectType,), mutation_fields)

        logger.debug(
            "Built schema with %d queries and %d mutations",
            len(self.query),
            len(self.mutation),
        )
        return graphene.Schema(
            query=query_type, mutation=mutation_type, auto_camelcase=False
        )

    # HTTP

    def as_view(self, graphiql: Optional[bool] = None, **kwargs: Any):
        """Return a Django view serving this schema."""
        from ..views import build_view

        return build_view(self.schema, graphiql=graphiql, **kwargs)

    # Export

    def print_sdl(self) -> str:
        """The schema in GraphQL SDL."""
        return print_schema(self.schema.graphql_schema)

    def introspect(self) -> dict:
        """The schema as an introspection query result."""
        return introspection_from_schema(self.schema.graphql_schema)

    def operation_names(self, kind: RootKind) -> list[str]:
        source = self.query if RootKind(kind) is RootKind.QUERY else self.mutation
        return list(source)

    def __repr__(self) -> str:
        return f"<Api queries={list(self.query)} mutations={list(self.mutation)}>"


def models(*parts: Any) -> Api:
    """
    Combine models and standalone operations into one ``Api``.

    Raises:
        ModelDefinitionError: If two parts generate the same GraphQL type
            name with different fields.
    """
    return Api(parts)
