"""Contract for the positional arguments of a call."""
from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.base import Constraint
from stannum.constraints.delegator import Delegator
from stannum.constraints.parameters import ExtraArguments, VariadicItems
from stannum.contracts.definition import Definition, PropertyType
from stannum.contracts.parameters.defaults import DefaultValuesMixin, split_type_options
from stannum.contracts.tuple_contract import TupleContract
from stannum.logging import contract_logger
from stannum.support.coercion import type_constraint
from stannum.support.undefined import UNDEFINED


class ArgumentsContract(DefaultValuesMixin, TupleContract):
    """Validates a list of positional arguments.

    Indices past the end of the list map to UNDEFINED rather than None, so
    an omitted argument can be told apart from an explicit None:

        contract = ArgumentsContract()
        contract.add_argument_constraint(None, int)
        contract.add_argument_constraint(None, str, default=True)
        contract.matches([1])        # True, second argument omitted
        contract.matches([1, None])  # False, explicit None is checked

    Extra arguments fail unless a variadic constraint is set, which then
    governs every argument past the declared ones.
    """

    def __init__(self, define: Callable[[Any], Any] | None = None, /, **options: Any) -> None:
        options.setdefault("allow_extra_items", False)
        super().__init__(define, **options)

    def add_argument_constraint(
        self,
        index: int | None,
        type_or_constraint: Any,
        *,
        default: bool = False,
        sanity: bool = False,
        **options: Any,
    ) -> ArgumentsContract:
        """Add a constraint for the argument at index (the next index when None).

        Raises:
            TypeError: If index is not an integer or the type is not a class or constraint.
        """
        if index is None:
            index = self.next_index()
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("index must be an integer")
        constraint = type_constraint(type_or_constraint, **split_type_options(options))
        self.add_index_constraint(index, constraint, default=bool(default), sanity=sanity, **options)
        return self

    def set_variadic_constraint(self, constraint: Constraint, *, name: str | None = None) -> ArgumentsContract:
        """Accept extra arguments, validating the whole argument list with constraint.

        Raises:
            RuntimeError: If a variadic constraint is already set.
        """
        if self.allow_extra_items:
            raise RuntimeError("variadic arguments constraint is already set")
        if not isinstance(constraint, Constraint):
            raise TypeError("must be an instance of Constraint")
        self.options["allow_extra_items"] = True
        self._variadic_constraint.receiver = constraint
        if name is not None:
            self._variadic_definition.options["property_name"] = name
        contract_logger().debug(
            "variadic_constraint_set", contract=type(self).__name__, constraint=type(constraint).__name__, name=name
        )
        return self

    def set_variadic_item_constraint(self, item_type: Any, *, name: str | None = None) -> ArgumentsContract:
        """Accept extra arguments, each of which must match item_type."""
        return self.set_variadic_constraint(VariadicItems(item_type, self.expected_count), name=name)

    def next_index(self) -> int:
        index = -1
        for definition in self.each_constraint():
            if definition.property_type == PropertyType.INDEX:
                index = max(index, definition.property)
        return 1 + index

    def add_extra_items_constraint(self) -> None:
        self._variadic_constraint = Delegator(ExtraArguments(self.expected_count))
        self.add_constraint(self._variadic_constraint)
        self._variadic_definition: Definition = self._definitions[-1]

    def map_value(self, actual: Any, **options: Any) -> Any:
        if (
            options.get("property_type") == PropertyType.INDEX
            and isinstance(actual, (list, tuple))
            and options["property"] >= len(actual)
        ):
            return UNDEFINED
        return super().map_value(actual, **options)
