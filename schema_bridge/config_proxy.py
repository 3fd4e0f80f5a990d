"""
Configuration access for schema-bridge.

Settings are resolved in the following order:
1. Django setting ``SCHEMA_BRIDGE`` (nested dict)
2. Library defaults (``LIBRARY_DEFAULTS``)
"""

from typing import Any

from django.conf import settings

from .defaults import LIBRARY_DEFAULTS


class SettingsProxy:
    """Proxy for reading schema-bridge settings with dotted keys."""

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Dotted setting key, e.g. ``introspection_settings.type_ref_depth``
            default: Value returned when neither source defines the key

        Returns:
            The setting value from the highest priority source
        """
        django_value = self._get_nested_value(
            getattr(settings, "SCHEMA_BRIDGE", {}), key
        )
        if django_value is not None:
            return django_value

        library_value = self._get_nested_value(LIBRARY_DEFAULTS, key)
        if library_value is not None:
            return library_value

        return default

    def _get_nested_value(self, data: dict[str, Any], key: str) -> Any:
        if not isinstance(data, dict):
            return None

        current = data
        for k in key.split("."):
            if not isinstance(current, dict) or k not in current:
                return None
            current = current[k]

        return current


settings_proxy = SettingsProxy()


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value using the settings proxy."""
    return settings_proxy.get(key, default)


__all__ = ["SettingsProxy", "get_setting", "settings_proxy"]
