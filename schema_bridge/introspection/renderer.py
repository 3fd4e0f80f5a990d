"""
Introspection to SDL renderer.

Turns a GraphQL introspection result into an SDL-like document covering
object, input object and enum types. Scalars, interfaces, unions,
directives, descriptions and default values are not emitted.
"""

import logging
from typing import Any, Optional, Union

from ..exceptions import StructureError
from .types import ArgumentDescriptor, SchemaDescriptor, TypeDescriptor, TypeRef

logger = logging.getLogger(__name__)

INDENT = "  "


def unwrap_type_ref(type_ref: Optional[TypeRef]) -> str:
    """
    Render a type reference as an SDL type string.

    ``NON_NULL`` appends ``!`` to its inner type, ``LIST`` wraps it in
    brackets, anything else is the bare type name::

        NON_NULL(LIST(NON_NULL(String)))  ->  [String!]!

    Raises:
        StructureError: on a wrapper without ``ofType`` (typically a payload
            nested deeper than the query that fetched it) or a named kind
            without a name
    """
    if type_ref is None:
        raise StructureError("Invalid schema structure: missing type reference")
    if type_ref.kind == "NON_NULL":
        return _unwrap_inner(type_ref) + "!"
    if type_ref.kind == "LIST":
        return "[" + _unwrap_inner(type_ref) + "]"
    if not type_ref.name:
        raise StructureError(
            f"Invalid schema structure: {type_ref.kind or 'unknown'} type reference has no name"
        )
    return type_ref.name


def _unwrap_inner(type_ref: TypeRef) -> str:
    if type_ref.of_type is None:
        raise StructureError(
            f"Invalid schema structure: {type_ref.kind} type reference has no ofType "
            "(was the introspection query deep enough?)"
        )
    return unwrap_type_ref(type_ref.of_type)


class SDLRenderer:
    """Renders a ``SchemaDescriptor`` to SDL text."""

    def __init__(self, include_schema_block: bool = False):
        self.include_schema_block = include_schema_block

    def render(self, schema: SchemaDescriptor) -> str:
        custom_types = schema.rendered_types
        logger.info(
            "Found %s custom types: %s",
            len(custom_types),
            [t.name for t in custom_types],
        )

        blocks = []
        if self.include_schema_block and schema.root_types:
            blocks.append(self._render_schema_block(schema))
        for type_descriptor in custom_types:
            blocks.append(self._render_type(type_descriptor))
        return "".join(blocks)

    def _render_schema_block(self, schema: SchemaDescriptor) -> str:
        lines = ["schema {"]
        for operation, type_name in schema.root_types.items():
            lines.append(f"{INDENT}{operation}: {type_name}")
        return "\n".join(lines) + "\n}\n\n"

    def _render_type(self, type_descriptor: TypeDescriptor) -> str:
        if type_descriptor.kind == "OBJECT":
            keyword = "type"
            lines = [self._render_field(f) for f in type_descriptor.fields or ()]
        elif type_descriptor.kind == "INPUT_OBJECT":
            keyword = "input"
            lines = [self._render_input_value(f) for f in type_descriptor.input_fields or ()]
        else:
            keyword = "enum"
            lines = [f"{INDENT}{value}" for value in type_descriptor.enum_values or ()]

        body = "".join(line + "\n" for line in lines)
        return f"{keyword} {type_descriptor.name} {{\n{body}}}\n\n"

    def _render_field(self, field) -> str:
        field_def = f"{INDENT}{field.name}"
        if field.args:
            args = ", ".join(
                f"{arg.name}: {unwrap_type_ref(arg.type)}" for arg in field.args
            )
            field_def += f"({args})"
        return f"{field_def}: {unwrap_type_ref(field.type)}"

    def _render_input_value(self, input_value: ArgumentDescriptor) -> str:
        return f"{INDENT}{input_value.name}: {unwrap_type_ref(input_value.type)}"


def render_sdl(
    payload: Union[SchemaDescriptor, dict[str, Any]],
    include_schema_block: bool = False,
) -> str:
    """
    Render an introspection payload to SDL text.

    Args:
        payload: Introspection ``data`` object (``{"__schema": ...}``), a bare
            ``{"types": [...]}`` mapping, or an already normalized descriptor
        include_schema_block: Prefix a ``schema { ... }`` block naming the
            root operation types

    Raises:
        StructureError: if the payload has no usable ``types`` list
    """
    if isinstance(payload, SchemaDescriptor):
        schema = payload
    else:
        schema = SchemaDescriptor.from_payload(payload)
    return SDLRenderer(include_schema_block=include_schema_block).render(schema)


__all__ = ["SDLRenderer", "render_sdl", "unwrap_type_ref"]
