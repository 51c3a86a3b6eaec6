"""Contracts whose definitions apply to properties of the matched value.

A property is an attribute name, a sequence index, or a list of them for
nested access:

    contract.add_constraint(Presence(), property=["manufacturer", "factory", "address"])

Missing attributes and out-of-range indices resolve to None. Errors are
reported at property_name when given, otherwise at the property path.
"""
from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from typing import Any

from stannum.constraints.base import Constraint
from stannum.contracts.base import BaseContract
from stannum.contracts.definition import PropertyType
from stannum.errors import Errors, as_path_segment


def _valid_segment(segment: Any) -> bool:
    if isinstance(segment, bool): return False
    if isinstance(segment, int): return True
    return isinstance(segment, str) and bool(segment)


def property_path(prop: Any) -> list[Any]:
    """Normalize a property (single name, index or list) into a path list."""
    if prop is None: return []
    if isinstance(prop, (list, tuple)): return list(prop)
    return [prop]


class PropertyContract(BaseContract):
    def add_constraint(self, constraint: Constraint, *, sanity: bool = False, **options: Any) -> PropertyContract:
        """Add a constraint, optionally scoped to a property.

        Raises:
            TypeError: If constraint is not a Constraint.
            ValueError: If the property is not valid for this contract.
        """
        if options.get("property") is not None and not self.valid_property(**options):
            raise ValueError(f"invalid property name {options['property']!r}")
        return super().add_constraint(constraint, sanity=sanity, **options)

    def valid_property(self, *, property: Any = None, property_type: PropertyType | None = None, **options: Any) -> bool:
        if isinstance(property, (list, tuple)):
            return bool(property) and all(_valid_segment(segment) for segment in property)
        return _valid_segment(property)

    # ========================================================================
    # Hooks
    # ========================================================================

    def map_value(self, actual: Any, **options: Any) -> Any:
        prop = options.get("property")
        if prop is None: return actual
        return reduce(self.access_property, property_path(prop), actual)

    def map_errors(self, errors: Errors, **options: Any) -> Errors:
        name = options.get("property_name", options.get("property"))
        if name is None: return errors
        if options.get("property_type") == PropertyType.KEY and "property_name" not in options:
            return errors[as_path_segment(name)]
        return errors.dig(*property_path(name))

    def access_property(self, obj: Any, prop: Any) -> Any:
        if isinstance(prop, int):
            if isinstance(obj, Sequence) and 0 <= prop < len(obj):
                return obj[prop]
            return None
        return getattr(obj, prop, None)
