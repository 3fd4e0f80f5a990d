"""
HTTP client for GraphQL endpoints.

A ``GraphQLClient`` is a plain value: construct one per endpoint and pass it
to whatever needs it. There is no module-level client.
"""

import json
import logging
from typing import Any, Mapping, Optional

import requests

from ..config_proxy import get_setting
from ..exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15


class GraphQLClient:
    """POSTs GraphQL documents to a single endpoint."""

    def __init__(
        self,
        endpoint_url: str,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.headers = {"Content-Type": "application/json"}
        if headers:
            self.headers.update(headers)

    @classmethod
    def from_settings(cls, section: str = "client_settings", **kwargs: Any) -> "GraphQLClient":
        """Build a client from the ``endpoint_url``/``timeout_seconds`` of a settings section."""
        kwargs.setdefault(
            "timeout",
            get_setting(f"{section}.timeout_seconds", DEFAULT_TIMEOUT_SECONDS),
        )
        return cls(get_setting(f"{section}.endpoint_url"), **kwargs)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
        operation_name: Optional[str] = None,
    ) -> dict[str, Any]:
        """
        Execute a GraphQL document and return its ``data`` object.

        Raises:
            FetchError: on transport failure, a non-JSON body, a GraphQL
                ``errors`` array or a non-2xx status
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables
        if operation_name:
            payload["operationName"] = operation_name

        try:
            response = self.session.post(
                self.endpoint_url,
                data=json.dumps(payload),
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("GraphQL request to %s failed: %s", self.endpoint_url, exc)
            raise FetchError(str(exc)) from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise FetchError(
                f"Failed to parse response: {exc}", status_code=response.status_code
            ) from exc

        errors = body.get("errors") if isinstance(body, dict) else None
        if errors:
            logger.warning("GraphQL endpoint %s returned errors: %s", self.endpoint_url, errors)
            raise FetchError(
                f"GraphQL errors: {json.dumps(errors)}",
                errors=errors,
                status_code=response.status_code,
            )

        if not response.ok:
            raise FetchError(f"HTTP {response.status_code}", status_code=response.status_code)

        if not isinstance(body, dict):
            raise FetchError("Failed to parse response: expected a JSON object")
        return body.get("data") or {}


__all__ = ["GraphQLClient"]
