"""REST API views over the typed GraphQL client.

Each handler maps one HTTP verb/path to one GraphQL operation and
translates ``FetchError`` into a 500 JSON error."""

import logging
from typing import Any, Optional

from django.http import HttpRequest, JsonResponse

from ..client import operations
from ..exceptions import FetchError
from .base import BaseAPIView

logger = logging.getLogger(__name__)

USER_FIELD_TYPES = {"name": str, "email": str, "age": int}


def _validate_user_payload(body: Any, partial: bool) -> tuple[dict[str, Any], Optional[str]]:
    """
    Validate a user JSON body.

    Returns:
        ``(values, error)``; ``error`` is ``None`` when the body is valid
    """
    if not isinstance(body, dict):
        return {}, "Invalid request: expected a JSON object"

    values: dict[str, Any] = {}
    missing = []
    for field_name, expected in USER_FIELD_TYPES.items():
        value = body.get(field_name)
        if value is None or value == "":
            if not partial:
                missing.append(field_name)
            continue
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, expected):
            return {}, f"Invalid request: '{field_name}' must be of type {expected.__name__}"
        values[field_name] = value

    if missing:
        return {}, f"Invalid request: missing required fields: {', '.join(missing)}"
    return values, None


class UserListAPIView(BaseAPIView):
    """List and create users."""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            users = operations.get_users(self.get_client())
        except FetchError as e:
            logger.error(f"Failed to fetch users: {e}")
            return self.error_response(f"Failed to fetch users: {e}", status=500)

        return self.json_response(
            {"data": {"users": [u.to_dict() for u in users]}, "count": len(users)}
        )

    def post(self, request: HttpRequest) -> JsonResponse:
        values, error = _validate_user_payload(self.parse_json_body(request), partial=False)
        if error:
            return self.error_response(error, status=400)

        try:
            user = operations.create_user(self.get_client(), **values)
        except FetchError as e:
            logger.error(f"Failed to create user: {e}")
            return self.error_response(f"Failed to create user: {e}", status=500)

        return self.json_response(
            {"data": user.to_dict(), "message": "User created successfully"},
            status=201,
        )


class UserDetailAPIView(BaseAPIView):
    """Retrieve, update and delete a single user."""

    def get(self, request: HttpRequest, user_id: str) -> JsonResponse:
        try:
            user = operations.get_user(self.get_client(), user_id)
        except FetchError as e:
            logger.error(f"Failed to fetch user {user_id}: {e}")
            return self.error_response(f"Failed to fetch user: {e}", status=500)

        if user is None:
            return self.error_response("User not found", status=404)
        return self.json_response({"data": user.to_dict()})

    def put(self, request: HttpRequest, user_id: str) -> JsonResponse:
        values, error = _validate_user_payload(self.parse_json_body(request), partial=True)
        if error:
            return self.error_response(error, status=400)

        try:
            user = operations.update_user(self.get_client(), user_id, **values)
        except FetchError as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            return self.error_response(f"Failed to update user: {e}", status=500)

        if user is None:
            return self.error_response("User not found", status=404)
        return self.json_response(
            {"data": user.to_dict(), "message": "User updated successfully"}
        )

    def delete(self, request: HttpRequest, user_id: str) -> JsonResponse:
        try:
            deleted = operations.delete_user(self.get_client(), user_id)
        except FetchError as e:
            logger.error(f"Failed to delete user {user_id}: {e}")
            return self.error_response(f"Failed to delete user: {e}", status=500)

        if not deleted:
            return self.error_response("User not found", status=404)
        return self.json_response({"message": "User deleted successfully", "deleted": True})


class UserSearchAPIView(BaseAPIView):
    def get(self, request: HttpRequest, name: str) -> JsonResponse:
        try:
            users = operations.search_users(self.get_client(), name)
        except FetchError as e:
            logger.error(f"Failed to search users: {e}")
            return self.error_response(f"Failed to search users: {e}", status=500)

        return self.json_response(
            {
                "data": {"searchUsers": [u.to_dict() for u in users]},
                "count": len(users),
                "search_term": name,
            }
        )


class PostListAPIView(BaseAPIView):
    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            posts = operations.get_posts(self.get_client())
        except FetchError as e:
            logger.error(f"Failed to fetch posts: {e}")
            return self.error_response(f"Failed to fetch posts: {e}", status=500)

        return self.json_response(
            {"data": {"posts": [p.to_dict() for p in posts]}, "count": len(posts)}
        )


class PostDetailAPIView(BaseAPIView):
    def get(self, request: HttpRequest, post_id: str) -> JsonResponse:
        try:
            post = operations.get_post(self.get_client(), post_id)
        except FetchError as e:
            logger.error(f"Failed to fetch post {post_id}: {e}")
            return self.error_response(f"Failed to fetch post: {e}", status=500)

        if post is None:
            return self.error_response("Post not found", status=404)
        return self.json_response({"data": post.to_dict()})


__all__ = [
    "PostDetailAPIView",
    "PostListAPIView",
    "UserDetailAPIView",
    "UserListAPIView",
    "UserSearchAPIView",
]
