"""
Data classes for GraphQL introspection payloads.

The introspection result is normalized once, at the boundary, by
``SchemaDescriptor.from_payload``. Everything downstream works on these
immutable records instead of raw dictionaries.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..exceptions import StructureError

WRAPPER_KINDS = ("LIST", "NON_NULL")
RENDERED_KINDS = ("OBJECT", "INPUT_OBJECT", "ENUM")
META_TYPE_PREFIX = "__"

TYPES_NOT_FOUND_MESSAGE = "Invalid schema structure: types not found or not an array"


@dataclass(frozen=True)
class TypeRef:
    """A possibly wrapped reference to a named type."""
    kind: str  # 'SCALAR', 'OBJECT', ..., 'LIST', 'NON_NULL'
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = None

    @property
    def is_wrapper(self) -> bool:
        return self.kind in WRAPPER_KINDS

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["TypeRef"]:
        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise StructureError(f"Type reference must be an object, got {type(data).__name__}")
        return cls(
            kind=data.get("kind") or "",
            name=data.get("name"),
            of_type=cls.from_dict(data.get("ofType")),
        )


def _require_object(data: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise StructureError(
            f"Invalid schema structure: {where} must be an object, got {type(data).__name__}"
        )
    return data


def _optional_list(data: Mapping[str, Any], key: str, owner: str) -> Optional[list]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise StructureError(f"Invalid schema structure: {owner}.{key} is not an array")
    return list(value)


@dataclass(frozen=True)
class ArgumentDescriptor:
    """An argument or input field: a name and a type reference."""
    name: str
    type: Optional[TypeRef] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ArgumentDescriptor":
        data = _require_object(data, "argument")
        return cls(name=data.get("name") or "", type=TypeRef.from_dict(data.get("type")))


@dataclass(frozen=True)
class FieldDescriptor:
    """An object field with its ordered arguments."""
    name: str
    type: Optional[TypeRef] = None
    args: tuple[ArgumentDescriptor, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldDescriptor":
        data = _require_object(data, "field")
        name = data.get("name") or ""
        return cls(
            name=name,
            type=TypeRef.from_dict(data.get("type")),
            args=tuple(
                ArgumentDescriptor.from_dict(arg)
                for arg in _optional_list(data, "args", name or "field") or ()
            ),
        )


def _is_rendered(kind: Any, name: Any) -> bool:
    return bool(
        isinstance(name, str)
        and name
        and not name.startswith(META_TYPE_PREFIX)
        and kind in RENDERED_KINDS
    )


@dataclass(frozen=True)
class TypeDescriptor:
    """
    A named type from the introspection ``types`` list.

    Collections are ``None`` when the payload omits them, which is distinct
    from an empty tuple. Types the renderer skips keep only kind and name.
    """
    kind: str
    name: Optional[str] = None
    fields: Optional[tuple[FieldDescriptor, ...]] = None
    input_fields: Optional[tuple[ArgumentDescriptor, ...]] = None
    enum_values: Optional[tuple[str, ...]] = None

    @property
    def is_rendered(self) -> bool:
        """Whether the SDL renderer emits a block for this type."""
        return _is_rendered(self.kind, self.name)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TypeDescriptor":
        data = _require_object(data, "type")
        kind = data.get("kind") or ""
        name = data.get("name")
        if not _is_rendered(kind, name):
            return cls(kind=kind, name=name)

        fields = _optional_list(data, "fields", name)
        input_fields = _optional_list(data, "inputFields", name)
        enum_values = _optional_list(data, "enumValues", name)
        return cls(
            kind=kind,
            name=name,
            fields=(
                tuple(FieldDescriptor.from_dict(f) for f in fields)
                if fields is not None else None
            ),
            input_fields=(
                tuple(ArgumentDescriptor.from_dict(f) for f in input_fields)
                if input_fields is not None else None
            ),
            enum_values=(
                tuple(
                    _require_object(value, "enum value").get("name") or ""
                    for value in enum_values
                )
                if enum_values is not None else None
            ),
        )


@dataclass(frozen=True)
class SchemaDescriptor:
    """Ordered type descriptors plus the root operation type names."""
    types: tuple[TypeDescriptor, ...] = ()
    query_type: Optional[str] = None
    mutation_type: Optional[str] = None
    subscription_type: Optional[str] = None

    @property
    def rendered_types(self) -> list[TypeDescriptor]:
        return [t for t in self.types if t.is_rendered]

    @property
    def root_types(self) -> dict[str, str]:
        roots = {
            "query": self.query_type,
            "mutation": self.mutation_type,
            "subscription": self.subscription_type,
        }
        return {operation: name for operation, name in roots.items() if name}

    @classmethod
    def from_payload(cls, payload: Any) -> "SchemaDescriptor":
        """
        Normalize an introspection payload.

        Accepts either ``{"__schema": {"types": [...]}}`` or a bare
        ``{"types": [...]}``.

        Raises:
            StructureError: if ``types`` is missing or is not a list
        """
        if not isinstance(payload, Mapping):
            raise StructureError(TYPES_NOT_FOUND_MESSAGE)

        schema = payload.get("__schema")
        if not isinstance(schema, Mapping):
            schema = payload

        types = schema.get("types")
        if not isinstance(types, (list, tuple)):
            raise StructureError(TYPES_NOT_FOUND_MESSAGE)

        descriptors = []
        for index, entry in enumerate(types):
            if not isinstance(entry, Mapping):
                raise StructureError(f"Invalid schema structure: types[{index}] is not an object")
            descriptors.append(TypeDescriptor.from_dict(entry))

        return cls(
            types=tuple(descriptors),
            query_type=_root_name(schema.get("queryType")),
            mutation_type=_root_name(schema.get("mutationType")),
            subscription_type=_root_name(schema.get("subscriptionType")),
        )


def _root_name(value: Any) -> Optional[str]:
    if isinstance(value, Mapping):
        return value.get("name")
    return None


__all__ = [
    "ArgumentDescriptor",
    "FieldDescriptor",
    "SchemaDescriptor",
    "TypeDescriptor",
    "TypeRef",
    "TYPES_NOT_FOUND_MESSAGE",
]
