"""Type registry - lazy binding of type names for Type constraints.

A Type constraint may name its expected type instead of holding it, so
contracts can reference classes defined later (or in modules that import
the contract). Names resolve through this registry on first use.
"""
from __future__ import annotations

from typing import Callable, overload

_TYPES: dict[str, type] = {}


@overload
def register_type(cls: type, name: str | None = None) -> type: ...


@overload
def register_type(cls: None = None, name: str | None = None) -> Callable[[type], type]: ...


def register_type(cls: type | None = None, name: str | None = None):
    """Register a class under its name (or an explicit name).

    Usable directly or as a class decorator:

        @register_type
        class Manufacturer: ...

        register_type(Factory, name="factories.Factory")
    """
    if cls is None:
        return lambda klass: register_type(klass, name)
    if not isinstance(cls, type):
        raise TypeError("registered type must be a class")
    _TYPES[name or cls.__name__] = cls
    return cls


def resolve_type(name: str) -> type:
    """Get a registered class by name."""
    if name not in _TYPES:
        available = ", ".join(sorted(_TYPES)) or "none"
        raise ValueError(f"Type '{name}' not registered. Available: {available}")
    return _TYPES[name]


def list_types() -> list[str]:
    """List all registered type names."""
    return sorted(_TYPES)


def unregister_type(name: str) -> None:
    _TYPES.pop(name, None)


class TypeReference:
    """Either a concrete type (or tuple of types) or a name resolved once."""

    __slots__ = ("name", "_resolved")

    def __init__(self, type_or_name: type | tuple[type, ...] | str):
        if isinstance(type_or_name, str):
            if not type_or_name:
                raise ValueError("type name can't be blank")
            self.name, self._resolved = type_or_name, None
        elif isinstance(type_or_name, type) or (
            isinstance(type_or_name, tuple) and type_or_name and all(isinstance(t, type) for t in type_or_name)
        ):
            self.name, self._resolved = None, type_or_name
        else:
            raise TypeError("expected type must be a class, a tuple of classes or a type name")

    @property
    def is_resolved(self) -> bool: return self._resolved is not None

    def resolve(self) -> type | tuple[type, ...]:
        if self._resolved is None:
            self._resolved = resolve_type(self.name)
        return self._resolved

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypeReference):
            return NotImplemented
        if self.name is not None and self.name == other.name:
            return True
        return self.resolve() == other.resolve()

    __hash__ = None

    def __repr__(self) -> str:
        return f"TypeReference({self.name or self._resolved!r})"
