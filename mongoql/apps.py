"""
Django app configuration for the mongoql library.

Installing the app makes the ``export_mongoql_schema`` management command
available.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

from .core.settings import get_settings

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for mongoql."""

    name = "mongoql"
    verbose_name = "MongoQL GraphQL"
    label = "mongoql"

    def ready(self):
        config = get_settings()
        logger.debug(
            "mongoql ready (database=%s, endpoint=%s, schema=%s)",
            config.database,
            config.endpoint_path,
            config.schema,
        )
