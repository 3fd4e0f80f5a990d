import copy

from schema_bridge.defaults import LIBRARY_DEFAULTS

from .framework_settings import *  # noqa: F403

ENVIRONMENT = "testing"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "unique-snowflake",
    }
}

SCHEMA_BRIDGE = copy.deepcopy(LIBRARY_DEFAULTS)
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = []
