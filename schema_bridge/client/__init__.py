"""
GraphQL client package.

Usage:
    from schema_bridge.client import GraphQLClient, operations

    client = GraphQLClient("http://localhost:8000/graphql/")
    users = operations.get_users(client)
"""

from . import operations
from .client import GraphQLClient
from .operations import AuthorRecord, PostRecord, UserRecord

__all__ = [
    "AuthorRecord",
    "GraphQLClient",
    "PostRecord",
    "UserRecord",
    "operations",
]
