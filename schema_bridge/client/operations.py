"""
Typed GraphQL operations against the sample users/posts schema.

Each function sends one fixed operation document through a ``GraphQLClient``
and converts the response into frozen records, so callers never index into
raw response dictionaries.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .client import GraphQLClient

USER_FIELDS = "id name email age"

GET_USERS = f"""query GetUsers {{
  users {{ {USER_FIELDS} }}
}}"""

GET_USER = f"""query GetUser($id: ID!) {{
  user(id: $id) {{ {USER_FIELDS} }}
}}"""

SEARCH_USERS = f"""query SearchUsers($name: String) {{
  searchUsers(name: $name) {{ {USER_FIELDS} }}
}}"""

POST_FIELDS = "id title content authorId author { id name email }"

GET_POSTS = f"""query GetPosts {{
  posts {{ {POST_FIELDS} }}
}}"""

GET_POST = f"""query GetPost($id: ID!) {{
  post(id: $id) {{ {POST_FIELDS} }}
}}"""

CREATE_USER = f"""mutation CreateUser($name: String!, $email: String!, $age: Int!) {{
  createUser(name: $name, email: $email, age: $age) {{ {USER_FIELDS} }}
}}"""

UPDATE_USER = f"""mutation UpdateUser($id: ID!, $name: String, $email: String, $age: Int) {{
  updateUser(id: $id, name: $name, email: $email, age: $age) {{ {USER_FIELDS} }}
}}"""

DELETE_USER = """mutation DeleteUser($id: ID!) {
  deleteUser(id: $id)
}"""


@dataclass(frozen=True)
class UserRecord:
    id: str
    name: str
    email: str
    age: int

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserRecord":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            age=int(data["age"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email, "age": self.age}


@dataclass(frozen=True)
class AuthorRecord:
    id: str
    name: str
    email: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthorRecord":
        return cls(id=str(data["id"]), name=data["name"], email=data["email"])

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass(frozen=True)
class PostRecord:
    id: str
    title: str
    content: str
    author_id: str
    author: Optional[AuthorRecord] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PostRecord":
        author = data.get("author")
        return cls(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            author_id=str(data["authorId"]),
            author=AuthorRecord.from_dict(author) if author else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "authorId": self.author_id,
            "author": self.author.to_dict() if self.author else None,
        }


def get_users(client: GraphQLClient) -> list[UserRecord]:
    data = client.execute(GET_USERS, operation_name="GetUsers")
    return [UserRecord.from_dict(u) for u in data.get("users") or []]


def get_user(client: GraphQLClient, user_id: str) -> Optional[UserRecord]:
    data = client.execute(GET_USER, {"id": user_id}, operation_name="GetUser")
    user = data.get("user")
    return UserRecord.from_dict(user) if user else None


def search_users(client: GraphQLClient, name: Optional[str]) -> list[UserRecord]:
    data = client.execute(SEARCH_USERS, {"name": name}, operation_name="SearchUsers")
    return [UserRecord.from_dict(u) for u in data.get("searchUsers") or []]


def get_posts(client: GraphQLClient) -> list[PostRecord]:
    data = client.execute(GET_POSTS, operation_name="GetPosts")
    return [PostRecord.from_dict(p) for p in data.get("posts") or []]


def get_post(client: GraphQLClient, post_id: str) -> Optional[PostRecord]:
    data = client.execute(GET_POST, {"id": post_id}, operation_name="GetPost")
    post = data.get("post")
    return PostRecord.from_dict(post) if post else None


def create_user(client: GraphQLClient, name: str, email: str, age: int) -> UserRecord:
    data = client.execute(
        CREATE_USER,
        {"name": name, "email": email, "age": age},
        operation_name="CreateUser",
    )
    return UserRecord.from_dict(data["createUser"])


def update_user(
    client: GraphQLClient,
    user_id: str,
    name: Optional[str] = None,
    email: Optional[str] = None,
    age: Optional[int] = None,
) -> Optional[UserRecord]:
    """Update a user; fields left as ``None`` are not sent and stay unchanged."""
    variables: dict[str, Any] = {"id": user_id}
    for key, value in (("name", name), ("email", email), ("age", age)):
        if value is not None:
            variables[key] = value
    data = client.execute(UPDATE_USER, variables, operation_name="UpdateUser")
    user = data.get("updateUser")
    return UserRecord.from_dict(user) if user else None


def delete_user(client: GraphQLClient, user_id: str) -> bool:
    data = client.execute(DELETE_USER, {"id": user_id}, operation_name="DeleteUser")
    return bool(data.get("deleteUser"))


__all__ = [
    "AuthorRecord",
    "PostRecord",
    "UserRecord",
    "create_user",
    "delete_user",
    "get_post",
    "get_posts",
    "get_user",
    "get_users",
    "search_users",
    "update_user",
]
