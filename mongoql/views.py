"""
Django views serving an aggregated mongoql schema.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from django.views.decorators.csrf import csrf_exempt
from graphene_django.views import GraphQLView

from .core.settings import get_settings

logger = logging.getLogger(__name__)


class MongoQLGraphQLView(GraphQLView):
    """GraphQL view bound to one generated schema."""


def build_view(schema, graphiql: Optional[bool] = None, **kwargs: Any):
    """
    Wrap ``schema`` in a CSRF-exempt ``GraphQLView``.

    GraphiQL follows ``MONGOQL["enable_graphiql"]`` unless given explicitly.
    """
    if graphiql is None:
        graphiql = get_settings().enable_graphiql
    return csrf_exempt(
        MongoQLGraphQLView.as_view(schema=schema, graphiql=graphiql, **kwargs)
    )


def graphqlize(parts: Union[Mapping[str, Any], Iterable[Any]], **view_kwargs: Any):
    """
    Combine models and operations into a Django view in one step.

    Example:
        urlpatterns = [path("graphql/", graphqlize({"tweet": tweet, "user": user}))]
    """
    from .schema.builder import models

    if isinstance(parts, Mapping):
        parts = parts.values()
    api = models(*parts)
    logger.debug("Serving %r", api)
    return api.as_view(**view_kwargs)
