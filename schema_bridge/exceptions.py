"""
Custom exceptions for schema-bridge.

Both error kinds are fatal for the operation that raised them: nothing is
retried and no partial output is written.
"""

from typing import Any, Optional


class SchemaBridgeError(Exception):
    """Base exception for schema-bridge errors."""


class FetchError(SchemaBridgeError):
    """Raised when a GraphQL endpoint cannot be queried successfully.

    Covers transport failures, non-JSON response bodies, non-2xx responses
    and GraphQL responses carrying an ``errors`` array.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[list[dict[str, Any]]] = None,
        status_code: Optional[int] = None,
    ):
        self.errors = list(errors or [])
        self.status_code = status_code
        super().__init__(message)


class StructureError(SchemaBridgeError):
    """Raised when an introspection payload has no usable shape."""


__all__ = ["SchemaBridgeError", "FetchError", "StructureError"]
