"""Contracts for ordered sequences with constraints on their items."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Callable

from stannum.constraints.base import Constraint
from stannum.constraints.signature import Signature
from stannum.constraints.tuples import ExtraItems
from stannum.contracts.definition import PropertyType
from stannum.contracts.property_contract import PropertyContract


class TupleContract(PropertyContract):
    """Contract for sequences such as lists and tuples.

    The value must be indexable, iterable and sized. Unless
    allow_extra_items is set, items past the last constrained index are
    reported as extra items:

        contract = TupleContract(lambda c: (
            c.item(Type(str)), c.item(Type(str)), c.item(Type(str)),
        ))
        contract.errors_for(["Who", "What", "I Don't Know", "Tomorrow", "Today"])
        # extra_items at [3] and [4]
    """

    class Builder(PropertyContract.Builder):
        def __init__(self, contract: TupleContract) -> None:
            super().__init__(contract)
            self._current_index = -1

        def item(self, constraint: Constraint | Callable[[Any], Any], /, **options: Any) -> TupleContract.Builder:
            """Add a constraint for the next item."""
            self._current_index += 1
            return self.constraint(constraint, property=self._current_index, property_type=PropertyType.INDEX, **options)

    def __init__(self, define: Callable[[Any], Any] | None = None, /, *, allow_extra_items: bool = False, **options: Any) -> None:
        super().__init__(define, allow_extra_items=allow_extra_items, **options)

    @property
    def allow_extra_items(self) -> bool: return bool(self.options.get("allow_extra_items"))

    def add_index_constraint(self, index: int, constraint: Constraint, *, sanity: bool = False, **options: Any) -> TupleContract:
        return self.add_constraint(constraint, property=index, property_type=PropertyType.INDEX, sanity=sanity, **options)

    def expected_count(self) -> int:
        """One past the highest constrained index."""
        count = 0
        for definition in self.each_constraint():
            if definition.property_type == PropertyType.INDEX:
                count = max(count, 1 + definition.property)
        return count

    def with_options(self, **options: Any) -> TupleContract:
        if "allow_extra_items" in options:
            raise ValueError("can't change option 'allow_extra_items'")
        return super().with_options(**options)

    def define_constraints(self, define: Callable[[Any], Any] | None) -> None:
        self.add_type_constraint()
        self.add_extra_items_constraint()
        super().define_constraints(define)

    def add_type_constraint(self) -> None:
        self.add_constraint(Signature.Tuple(), sanity=True)

    def add_extra_items_constraint(self) -> None:
        if self.allow_extra_items: return
        self.add_constraint(ExtraItems(self.expected_count))

    # ========================================================================
    # Hooks
    # ========================================================================

    def valid_property(self, *, property: Any = None, property_type: PropertyType | None = None, **options: Any) -> bool:
        if property_type != PropertyType.INDEX:
            return super().valid_property(property=property, property_type=property_type, **options)
        return isinstance(property, int) and not isinstance(property, bool) and property >= 0

    def map_value(self, actual: Any, **options: Any) -> Any:
        if options.get("property_type") != PropertyType.INDEX:
            return super().map_value(actual, **options)
        index = options["property"]
        if isinstance(actual, Sequence) and index < len(actual):
            return actual[index]
        return None
