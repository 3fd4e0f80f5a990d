"""
Schema introspection module.

Builds introspection queries, fetches introspection results from GraphQL
endpoints and renders them as SDL documents.
"""

from .fetcher import fetch_introspection, fetch_schema_sdl, write_schema_file
from .query import build_introspection_query, build_type_ref_selection
from .renderer import SDLRenderer, render_sdl, unwrap_type_ref
from .types import (
    ArgumentDescriptor,
    FieldDescriptor,
    SchemaDescriptor,
    TypeDescriptor,
    TypeRef,
)

__all__ = [
    "ArgumentDescriptor",
    "FieldDescriptor",
    "SDLRenderer",
    "SchemaDescriptor",
    "TypeDescriptor",
    "TypeRef",
    "build_introspection_query",
    "build_type_ref_selection",
    "fetch_introspection",
    "fetch_schema_sdl",
    "render_sdl",
    "unwrap_type_ref",
    "write_schema_file",
]
