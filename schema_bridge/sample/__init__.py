"""
Sample in-memory dataset served over GraphQL.
"""

from .schema import schema
from .store import Post, SampleStore, User, default_store

__all__ = ["Post", "SampleStore", "User", "default_store", "schema"]
