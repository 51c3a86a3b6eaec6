"""Support utilities shared by constraints and contracts."""
from .optional import OptionalMixin, resolve as resolve_optional
from .type_registry import TypeReference, list_types, register_type, resolve_type, unregister_type
from .undefined import UNDEFINED
from .coercion import presence_constraint, type_constraint

__all__ = [
    "OptionalMixin",
    "resolve_optional",
    "TypeReference",
    "list_types",
    "register_type",
    "resolve_type",
    "unregister_type",
    "UNDEFINED",
    "presence_constraint",
    "type_constraint",
]
