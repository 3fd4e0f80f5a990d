"""
Introspection query generation.

The ``TypeRef`` fragment is generated from an explicit depth instead of
being written out by hand, so deeper schemas only need a larger depth.
"""

from typing import Optional

from ..config_proxy import get_setting

DEFAULT_TYPE_REF_DEPTH = 7

_QUERY_TEMPLATE = """query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types {
      ...FullType
    }
    directives {
      name
      description
      locations
      args {
        ...InputValue
      }
    }
  }
}

fragment FullType on __Type {
  kind
  name
  description
  fields(includeDeprecated: true) {
    name
    description
    args {
      ...InputValue
    }
    type {
      ...TypeRef
    }
    isDeprecated
    deprecationReason
  }
  inputFields {
    ...InputValue
  }
  interfaces {
    ...TypeRef
  }
  enumValues(includeDeprecated: true) {
    name
    description
    isDeprecated
    deprecationReason
  }
  possibleTypes {
    ...TypeRef
  }
}

fragment InputValue on __InputValue {
  name
  description
  type { ...TypeRef }
  defaultValue
}

fragment TypeRef on __Type {
%(type_ref)s
}
"""


def build_type_ref_selection(depth: int, indent: int = 1) -> str:
    """
    Build the selection set for a type reference nested ``depth`` levels.

    ``depth=0`` selects ``kind`` and ``name`` only; every extra level adds an
    ``ofType { ... }`` around the next one.
    """
    pad = "  " * indent
    lines = [f"{pad}kind", f"{pad}name"]
    if depth > 0:
        lines.append(f"{pad}ofType {{")
        lines.append(build_type_ref_selection(depth - 1, indent + 1))
        lines.append(f"{pad}}}")
    return "\n".join(lines)


def resolve_type_ref_depth(depth: Optional[int] = None) -> int:
    """Return ``depth`` or the configured default, validated."""
    if depth is None:
        depth = get_setting("introspection_settings.type_ref_depth", DEFAULT_TYPE_REF_DEPTH)
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise ValueError(f"type_ref_depth must be a positive integer, got {depth!r}")
    return depth


def build_introspection_query(depth: Optional[int] = None) -> str:
    """Build the full introspection query with a ``depth``-level TypeRef fragment."""
    depth = resolve_type_ref_depth(depth)
    return _QUERY_TEMPLATE % {"type_ref": build_type_ref_selection(depth)}


__all__ = [
    "DEFAULT_TYPE_REF_DEPTH",
    "build_introspection_query",
    "build_type_ref_selection",
    "resolve_type_ref_depth",
]
