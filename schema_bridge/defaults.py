"""
Default configuration for schema-bridge.

Single source of truth for every setting the package consumes. Projects
override individual keys through the ``SCHEMA_BRIDGE`` Django setting.
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "schema-bridge"


# --------------------------------------------------------------------------- #
# Library-wide defaults (grouped by feature area)
# --------------------------------------------------------------------------- #
LIBRARY_DEFAULTS: dict[str, Any] = {
    "introspection_settings": {
        # Remote endpoint queried by the fetch_schema command.
        "endpoint_url": "http://localhost:4000/graphql",
        # Number of ofType levels requested by the TypeRef fragment.
        "type_ref_depth": 7,
        "output_path": "schema.graphql",
        "timeout_seconds": 15,
        "include_schema_block": False,
    },
    "client_settings": {
        # GraphQL endpoint used by the REST facade.
        "endpoint_url": "http://localhost:8000/graphql/",
        "timeout_seconds": 15,
    },
    "api_settings": {
        "cors_enabled": True,
    },
}


__all__ = ["LIBRARY_DEFAULTS", "LIBRARY_NAME", "LIBRARY_VERSION"]
