"""
URL configuration for the configured mongoql API.

Serves the ``Api`` named by ``MONGOQL["schema"]`` at
``MONGOQL["endpoint_path"]``::

    urlpatterns = [path("", include("mongoql.urls"))]
"""

from typing import Any, Optional

from django.core.exceptions import ImproperlyConfigured
from django.urls import path
from django.utils.module_loading import import_string

from .core.settings import get_settings


def get_configured_api(dotted_path: Optional[str] = None) -> Any:
    """Import the ``Api`` named by ``dotted_path`` or ``MONGOQL["schema"]``."""
    dotted_path = dotted_path or get_settings().schema
    if not dotted_path:
        raise ImproperlyConfigured("MONGOQL['schema'] is not configured")
    try:
        return import_string(dotted_path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"Could not import API '{dotted_path}': {exc}") from exc


def build_urlpatterns(api: Any = None, endpoint_path: Optional[str] = None) -> list:
    api = api if api is not None else get_configured_api()
    endpoint_path = endpoint_path or get_settings().endpoint_path
    return [path(endpoint_path, api.as_view(), name="mongoql-graphql")]


urlpatterns = build_urlpatterns() if get_settings().schema else []
