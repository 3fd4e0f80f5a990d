"""
Django app configuration for schema-bridge.
"""

import logging

from django.apps import AppConfig as BaseAppConfig

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for schema-bridge."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "schema_bridge"
    verbose_name = "Schema Bridge"
    label = "schema_bridge"

    def ready(self):
        """Validate configuration once Django has loaded."""
        from .introspection.query import resolve_type_ref_depth

        try:
            depth = resolve_type_ref_depth()
        except ValueError as e:
            logger.error(f"Invalid schema-bridge configuration: {e}")
            raise
        logger.debug("schema-bridge ready (type ref depth %s)", depth)
