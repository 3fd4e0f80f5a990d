"""
Base view for the REST facade.
"""

import json
import logging
from typing import Any, Optional

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from ..client import GraphQLClient
from ..config_proxy import get_setting

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name="dispatch")
class BaseAPIView(View):
    """Base class for API views with CORS handling and JSON helpers.

    The GraphQL client is injected with ``as_view(client=...)``; when left
    unset a client is built from ``client_settings`` for the request and
    closed once the response is ready.
    """

    client: Optional[GraphQLClient] = None
    _owns_client = False
    _json_body_cache_attr = "_schema_bridge_json_body_cache"
    _json_body_cache_set_attr = "_schema_bridge_json_body_cache_set"

    def get_client(self) -> GraphQLClient:
        if self.client is None:
            self.client = GraphQLClient.from_settings()
            self._owns_client = True
        return self.client

    def dispatch(self, request: HttpRequest, *args, **kwargs):
        """Handle CORS and common headers."""
        try:
            response = super().dispatch(request, *args, **kwargs)
        finally:
            # A client built for this request lives only as long as the view.
            if self._owns_client:
                self.client.close()
                self.client = None
                self._owns_client = False

        if get_setting("api_settings.cors_enabled", True):
            allowed_origins = getattr(settings, "CORS_ALLOWED_ORIGINS", [])
            origin = request.META.get("HTTP_ORIGIN")
            if getattr(settings, "CORS_ALLOW_ALL_ORIGINS", False) or not allowed_origins:
                response["Access-Control-Allow-Origin"] = "*"
            elif origin and origin in allowed_origins:
                response["Access-Control-Allow-Origin"] = origin
                response["Vary"] = "Origin"

            response["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
            response["Access-Control-Allow-Headers"] = "Content-Type, Authorization"

        return response

    def options(self, request: HttpRequest, *args, **kwargs):
        """Handle preflight requests."""
        return JsonResponse({}, status=200)

    def json_response(self, data: dict[str, Any], status: int = 200) -> JsonResponse:
        return JsonResponse(data, status=status)

    def error_response(self, message: str, status: int = 400) -> JsonResponse:
        return self.json_response({"error": message}, status=status)

    def parse_json_body(self, request: HttpRequest) -> Optional[Any]:
        """Parse JSON body from request. Returns ``None`` when absent or invalid."""
        if getattr(request, self._json_body_cache_set_attr, False):
            return getattr(request, self._json_body_cache_attr, None)

        parsed_body = None
        try:
            content_type = (request.content_type or "").lower()
            if request.body and (not content_type or content_type.startswith("application/json")):
                parsed_body = json.loads(request.body.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Error parsing JSON body: {e}")
        setattr(request, self._json_body_cache_attr, parsed_body)
        setattr(request, self._json_body_cache_set_attr, True)
        return parsed_body


__all__ = ["BaseAPIView"]
