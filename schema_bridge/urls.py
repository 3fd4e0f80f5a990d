"""
URL configuration for schema-bridge.

This module provides URL patterns for:
- The sample GraphQL endpoint (with GraphiQL)
- The REST facade over the typed GraphQL client
- Health monitoring
"""

from django.urls import include, path
from django.views.decorators.csrf import csrf_exempt
from graphene_django.views import GraphQLView

from .http.urls.health import health_urlpatterns
from .sample.schema import schema

urlpatterns = [
    path("graphql/", csrf_exempt(GraphQLView.as_view(graphiql=True, schema=schema)), name="graphql"),
    path("api/", include("schema_bridge.api.urls", namespace="api")),
]
urlpatterns += health_urlpatterns
