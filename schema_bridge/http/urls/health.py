"""
URL patterns for the health endpoint.
"""

from django.urls import path

from ..views.health import health_view

health_urlpatterns = [
    path("health/", health_view, name="health"),
]
