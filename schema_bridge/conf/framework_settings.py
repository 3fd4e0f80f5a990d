"""
Base settings for running schema-bridge.
Projects may import * from this file in their own settings.py.
"""

import copy
import os
from pathlib import Path

from schema_bridge.defaults import LIBRARY_DEFAULTS

BASE_DIR = Path(__file__).resolve().parents[2]

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get(
    "DJANGO_SECRET_KEY", "django-insecure-schema-bridge-default-key-change-me"
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get("DJANGO_DEBUG", "False").lower() == "true"


def _split_env_list(raw_value: str) -> list[str]:
    if not raw_value:
        return []
    return [item.strip() for item in raw_value.split(",") if item.strip()]


ALLOWED_HOSTS = _split_env_list(
    os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1")
)

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.staticfiles",
    # Third-party apps
    "graphene_django",
    "corsheaders",
    # Framework apps
    "schema_bridge",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "schema_bridge.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# The sample dataset lives in memory; the database is only here for
# contrib apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# GraphQL settings
GRAPHENE = {
    "SCHEMA": "schema_bridge.sample.schema.schema",
    "MIDDLEWARE": [],
}
if DEBUG:
    GRAPHENE["MIDDLEWARE"].append("graphene_django.debug.DjangoDebugMiddleware")

# CORS settings
CORS_ALLOW_ALL_ORIGINS = (
    os.environ.get("CORS_ALLOW_ALL_ORIGINS", "False").lower() == "true"
)
CORS_ALLOWED_ORIGINS = _split_env_list(os.environ.get("CORS_ALLOWED_ORIGINS", ""))

# Load library defaults into Django settings
SCHEMA_BRIDGE = copy.deepcopy(LIBRARY_DEFAULTS)

if os.environ.get("SCHEMA_BRIDGE_INTROSPECTION_URL"):
    SCHEMA_BRIDGE["introspection_settings"]["endpoint_url"] = os.environ[
        "SCHEMA_BRIDGE_INTROSPECTION_URL"
    ]

if os.environ.get("SCHEMA_BRIDGE_GRAPHQL_URL"):
    SCHEMA_BRIDGE["client_settings"]["endpoint_url"] = os.environ[
        "SCHEMA_BRIDGE_GRAPHQL_URL"
    ]

if os.environ.get("SCHEMA_BRIDGE_TYPE_REF_DEPTH"):
    try:
        depth = int(os.environ["SCHEMA_BRIDGE_TYPE_REF_DEPTH"])
        if depth >= 1:
            SCHEMA_BRIDGE["introspection_settings"]["type_ref_depth"] = depth
    except (TypeError, ValueError):
        pass

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "schema_bridge": {
            "handlers": ["console"],
            "level": os.environ.get("SCHEMA_BRIDGE_LOG_LEVEL", "INFO").upper(),
            "propagate": True,
        },
    },
}
