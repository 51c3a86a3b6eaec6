"""Contract Base Class

A contract is an ordered collection of constraint definitions and is itself
a constraint, so contracts nest inside other contracts. Definitions come
from the contract itself and, live, from every included contract:

    positive = BaseContract(lambda c: c.constraint(lambda n: n > 0))
    contract = BaseContract().include(positive).add_constraint(Type(int))

Evaluation order is sanity definitions first, then the rest; within each
group included contracts come before the contract's own definitions. A
failing sanity definition stops the evaluation.

Matching is dispatched to the contract that owns each definition, so an
included contract maps values and errors its own way.
"""
from __future__ import annotations

from itertools import zip_longest
from typing import Any, Callable, Iterator

from stannum.constraints.base import Constraint
from stannum.constraints.custom import Custom
from stannum.contracts.definition import Definition
from stannum.errors import Errors
from stannum.logging import contract_logger

Define = Callable[[Any], Any]

_CUSTOM_OPTIONS = ("type", "negated_type", "message", "negated_message")


class BaseContract(Constraint):
    """Generic contract engine.

    Subclasses customize matching through the hook methods map_value,
    map_errors, match_constraint, match_negated_constraint, add_errors_for
    and add_negated_errors_for.
    """

    class Builder:
        """Passed to the define callback given to a contract's constructor."""

        def __init__(self, contract: BaseContract) -> None:
            self.contract = contract

        def constraint(self, constraint: Constraint | Callable[[Any], Any], /, **options: Any) -> BaseContract.Builder:
            """Add a constraint, or a predicate wrapped in a Custom constraint."""
            constraint, options = self.resolve_constraint(constraint, **options)
            self.contract.add_constraint(constraint, **options)
            return self

        def resolve_constraint(self, constraint: Any, /, **options: Any) -> tuple[Constraint, dict[str, Any]]:
            if isinstance(constraint, Constraint):
                return constraint, options
            if callable(constraint) and not isinstance(constraint, type):
                custom = {key: options.pop(key) for key in _CUSTOM_OPTIONS if key in options}
                return Custom(constraint, **custom), options
            raise TypeError(f"invalid constraint {constraint!r}")

    def __init__(self, define: Define | None = None, /, **options: Any) -> None:
        self._definitions: list[Definition] = []
        self._included: list[BaseContract] = []
        super().__init__(**options)
        self.define_constraints(define)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return super().__eq__(other) and self._equal_definitions(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(definitions={len(self._definitions)}, included={len(self._included)})"

    # ========================================================================
    # Building
    # ========================================================================

    def add_constraint(self, constraint: Constraint, *, sanity: bool = False, **options: Any) -> BaseContract:
        """Add a constraint to the contract. Returns self.

        Raises:
            TypeError: If constraint is not a Constraint.
        """
        if not isinstance(constraint, Constraint):
            raise TypeError("must be an instance of Constraint")
        self._definitions.append(Definition(constraint=constraint, contract=self, options={**options, "sanity": sanity}))
        contract_logger().debug(
            "constraint_added",
            contract=type(self).__name__,
            constraint=type(constraint).__name__,
            property=options.get("property"),
            sanity=sanity,
        )
        return self

    def include(self, other: BaseContract) -> BaseContract:
        """Include another contract's definitions, including ones added to it later.

        Raises:
            TypeError: If other is not a contract.
        """
        if not isinstance(other, BaseContract):
            raise TypeError("must be an instance of BaseContract")
        self._included.append(other)
        contract_logger().debug("contract_included", contract=type(self).__name__, included=type(other).__name__)
        return self

    def define_constraints(self, define: Define | None) -> None:
        if define is not None:
            define(self.Builder(self))

    # ========================================================================
    # Enumeration
    # ========================================================================

    def each_constraint(self) -> Iterator[Definition]:
        """Yield every definition, sanity definitions first."""
        for definition in self._each_unscoped_constraint():
            if definition.sanity:
                yield definition
        for definition in self._each_unscoped_constraint():
            if not definition.sanity:
                yield definition

    def each_included(self) -> Iterator[BaseContract]:
        """Yield included contracts depth-first."""
        for contract in self._included:
            yield contract
            yield from contract.each_included()

    def each_pair(self, actual: Any) -> Iterator[tuple[Definition, Any]]:
        """Yield each definition with the value it applies to."""
        for definition in self.each_constraint():
            yield definition, definition.contract.map_value(actual, **definition.options)

    # ========================================================================
    # Matching
    # ========================================================================

    def matches(self, actual: Any) -> bool:
        for definition, value in self.each_pair(actual):
            if not definition.contract.match_constraint(definition, value):
                return False
        return True

    def does_not_match(self, actual: Any) -> bool:
        """True when every definition's constraint does not match its value.

        This is not the negation of matches(): a value matching some
        definitions and failing others satisfies neither.
        """
        for definition, value in self.each_pair(actual):
            if definition.contract.match_negated_constraint(definition, value):
                if definition.sanity: return True
                continue
            return False
        return True

    def match(self, actual: Any) -> tuple[bool, Errors]:
        status, errors = True, Errors()
        for definition, value in self.each_pair(actual):
            if definition.contract.match_constraint(definition, value):
                continue
            status = False
            definition.contract.add_errors_for(definition, value, errors)
            if definition.sanity: break
        return status, errors

    def negated_match(self, actual: Any) -> tuple[bool, Errors]:
        status, errors = True, Errors()
        for definition, value in self.each_pair(actual):
            if definition.contract.match_negated_constraint(definition, value):
                if definition.sanity: return True, errors
                continue
            status = False
            definition.contract.add_negated_errors_for(definition, value, errors)
        return status, errors

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        for definition, value in self.each_pair(actual):
            if definition.contract.match_constraint(definition, value):
                continue
            definition.contract.add_errors_for(definition, value, errors)
            if definition.sanity: break
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        for definition, value in self.each_pair(actual):
            if definition.contract.match_negated_constraint(definition, value):
                if definition.sanity: break
                continue
            definition.contract.add_negated_errors_for(definition, value, errors)
        return errors

    # ========================================================================
    # Hooks
    # ========================================================================

    def map_value(self, actual: Any, **options: Any) -> Any:
        return actual

    def map_errors(self, errors: Errors, **options: Any) -> Errors:
        return errors

    def match_constraint(self, definition: Definition, value: Any) -> bool:
        return definition.constraint.matches(value)

    def match_negated_constraint(self, definition: Definition, value: Any) -> bool:
        return definition.constraint.does_not_match(value)

    def add_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        return definition.constraint.update_errors_for(actual=value, errors=self.map_errors(errors, **definition.options))

    def add_negated_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        return definition.constraint.update_negated_errors_for(
            actual=value, errors=self.map_errors(errors, **definition.options)
        )

    # ========================================================================
    # Copying
    # ========================================================================

    def copy_properties(self, source: Constraint, *, options: dict[str, Any] | None = None) -> None:
        super().copy_properties(source, options=options)
        self._definitions = list(source._definitions)
        self._included = list(source._included)

    # ========================================================================
    # Internals
    # ========================================================================

    def _each_unscoped_constraint(self) -> Iterator[Definition]:
        for contract in self._included:
            yield from contract.each_constraint()
        yield from self._definitions

    def _equal_definitions(self, other: BaseContract) -> bool:
        for own, theirs in zip_longest(self._each_unscoped_constraint(), other._each_unscoped_constraint()):
            if own is None or theirs is None:
                return False
            if own.constraint != theirs.constraint or own.options != theirs.options:
                return False
        return True
