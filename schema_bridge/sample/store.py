"""
In-memory users and posts backing the sample GraphQL schema.
"""

import threading
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class User:
    id: str
    name: str
    email: str
    age: int


@dataclass
class Post:
    id: str
    title: str
    content: str
    author_id: str


def _seed_users() -> list[User]:
    return [
        User(id="1", name="John Doe", email="john@example.com", age=30),
        User(id="2", name="Jane Smith", email="jane@example.com", age=25),
        User(id="3", name="Bob Johnson", email="bob@example.com", age=35),
    ]


def _seed_posts() -> list[Post]:
    return [
        Post(id="1", title="First Post", content="This is the first post", author_id="1"),
        Post(id="2", title="Second Post", content="This is the second post", author_id="2"),
        Post(id="3", title="Third Post", content="This is the third post", author_id="1"),
    ]


class SampleStore:
    """Two lists and linear scans. Lookups return copies."""

    def __init__(self, users: Optional[list[User]] = None, posts: Optional[list[Post]] = None):
        self._users = list(users) if users is not None else _seed_users()
        self._posts = list(posts) if posts is not None else _seed_posts()
        self._lock = threading.Lock()

    def list_users(self) -> list[User]:
        with self._lock:
            return [replace(u) for u in self._users]

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._find_user(user_id)
            return replace(user) if user else None

    def search_users(self, name: Optional[str]) -> list[User]:
        if not name:
            return self.list_users()
        needle = name.lower()
        return [u for u in self.list_users() if needle in u.name.lower()]

    def list_posts(self) -> list[Post]:
        with self._lock:
            return [replace(p) for p in self._posts]

    def get_post(self, post_id: str) -> Optional[Post]:
        with self._lock:
            for post in self._posts:
                if post.id == post_id:
                    return replace(post)
        return None

    def posts_by_author(self, author_id: str) -> list[Post]:
        return [p for p in self.list_posts() if p.author_id == author_id]

    def create_user(self, name: str, email: str, age: int) -> User:
        with self._lock:
            user = User(id=self._next_user_id(), name=name, email=email, age=age)
            self._users.append(user)
            return replace(user)

    def update_user(
        self,
        user_id: str,
        name: Optional[str] = None,
        email: Optional[str] = None,
        age: Optional[int] = None,
    ) -> Optional[User]:
        with self._lock:
            user = self._find_user(user_id)
            if user is None:
                return None
            if name is not None:
                user.name = name
            if email is not None:
                user.email = email
            if age is not None:
                user.age = age
            return replace(user)

    def delete_user(self, user_id: str) -> bool:
        with self._lock:
            user = self._find_user(user_id)
            if user is None:
                return False
            self._users.remove(user)
            return True

    def _find_user(self, user_id: str) -> Optional[User]:
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def _next_user_id(self) -> str:
        numeric_ids = [int(u.id) for u in self._users if u.id.isdigit()]
        return str(max(numeric_ids, default=0) + 1)


default_store = SampleStore()


__all__ = ["Post", "SampleStore", "User", "default_store"]
