"""
URL patterns for the REST facade.
"""

from django.urls import path

from .views import (
    PostDetailAPIView,
    PostListAPIView,
    UserDetailAPIView,
    UserListAPIView,
    UserSearchAPIView,
)

app_name = "api"

urlpatterns = [
    path("users/", UserListAPIView.as_view(), name="user-list"),
    path(
        "users/search/<str:name>/",
        UserSearchAPIView.as_view(),
        name="user-search",
    ),
    path("users/<str:user_id>/", UserDetailAPIView.as_view(), name="user-detail"),
    path("posts/", PostListAPIView.as_view(), name="post-list"),
    path("posts/<str:post_id>/", PostDetailAPIView.as_view(), name="post-detail"),
]
