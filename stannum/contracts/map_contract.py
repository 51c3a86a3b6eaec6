"""Contracts for mappings with constraints on their keys."""
from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Callable

from stannum.constraints.base import Constraint
from stannum.constraints.hashes import ExtraKeys
from stannum.constraints.signature import Signature
from stannum.contracts.definition import PropertyType
from stannum.contracts.property_contract import PropertyContract


class MapContract(PropertyContract):
    """Contract for mappings such as dicts.

    The value must be indexable, iterable and keyed. Unless allow_extra_keys
    is set, keys without a constraint are reported as extra keys. A missing
    key resolves to None.
    """

    class Builder(PropertyContract.Builder):
        def key(self, key: Hashable, constraint: Constraint | Callable[[Any], Any], /, **options: Any) -> MapContract.Builder:
            return self.constraint(constraint, property=key, property_type=PropertyType.KEY, **options)

    def __init__(self, define: Callable[[Any], Any] | None = None, /, *, allow_extra_keys: bool = False, **options: Any) -> None:
        super().__init__(define, allow_extra_keys=allow_extra_keys, **options)

    @property
    def allow_extra_keys(self) -> bool: return bool(self.options.get("allow_extra_keys"))

    def add_key_constraint(self, key: Hashable, constraint: Constraint, *, sanity: bool = False, **options: Any) -> MapContract:
        return self.add_constraint(constraint, property=key, property_type=PropertyType.KEY, sanity=sanity, **options)

    def expected_keys(self) -> list[Hashable]:
        return [d.property for d in self.each_constraint() if d.property_type == PropertyType.KEY]

    def with_options(self, **options: Any) -> MapContract:
        if "allow_extra_keys" in options:
            raise ValueError("can't change option 'allow_extra_keys'")
        return super().with_options(**options)

    def define_constraints(self, define: Callable[[Any], Any] | None) -> None:
        self.add_type_constraint()
        self.add_extra_keys_constraint()
        super().define_constraints(define)

    def add_type_constraint(self) -> None:
        self.add_constraint(Signature.Map(), sanity=True)

    def add_extra_keys_constraint(self) -> None:
        if self.allow_extra_keys: return
        self.add_constraint(ExtraKeys(self.expected_keys))

    # ========================================================================
    # Hooks
    # ========================================================================

    def valid_property(self, *, property: Any = None, property_type: PropertyType | None = None, **options: Any) -> bool:
        if property_type != PropertyType.KEY:
            return super().valid_property(property=property, property_type=property_type, **options)
        if isinstance(property, str): return bool(property)
        return isinstance(property, Hashable)

    def map_value(self, actual: Any, **options: Any) -> Any:
        if options.get("property_type") != PropertyType.KEY:
            return super().map_value(actual, **options)
        key = options["property"]
        if hasattr(actual, "keys") and key in actual.keys():
            return actual[key]
        return None
