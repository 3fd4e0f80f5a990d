"""
Fetch a remote schema by introspection and render it to SDL.
"""

import logging
from pathlib import Path
from typing import Any, Optional, Union

from ..client import GraphQLClient
from .query import build_introspection_query, resolve_type_ref_depth
from .renderer import render_sdl

logger = logging.getLogger(__name__)


def fetch_introspection(client: GraphQLClient, depth: Optional[int] = None) -> dict[str, Any]:
    """
    Run the introspection query and return the response ``data`` object.

    Raises:
        FetchError: if the endpoint fails or reports GraphQL errors
    """
    depth = resolve_type_ref_depth(depth)
    logger.info("Fetching schema from %s (type ref depth %s)", client.endpoint_url, depth)
    return client.execute(
        build_introspection_query(depth), operation_name="IntrospectionQuery"
    )


def fetch_schema_sdl(
    client: GraphQLClient,
    depth: Optional[int] = None,
    include_schema_block: bool = False,
) -> str:
    """Fetch introspection data and render it. Rendering only runs after a successful fetch."""
    payload = fetch_introspection(client, depth)
    return render_sdl(payload, include_schema_block=include_schema_block)


def write_schema_file(content: str, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info("Schema saved to %s", path)
    return path


__all__ = ["fetch_introspection", "fetch_schema_sdl", "write_schema_file"]
