"""Constraints for positional arguments and keywords of a call.

ExtraArguments and ExtraKeywords reject parameters beyond those declared.
VariadicItems and VariadicValues replace them once a contract accepts
variadic parameters: only the undeclared items (or keywords) are checked,
and each failure is reported at its absolute index (or its keyword).
"""
from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Callable, Iterable, Iterator

from stannum.constraints.base import Constraint
from stannum.constraints.hashes import ExtraKeys
from stannum.constraints.tuples import ExtraItems
from stannum.constraints.type import Type
from stannum.constraints.types.hash_type import HashType
from stannum.errors import Errors, as_path_segment
from stannum.support.coercion import type_constraint


class ExtraArguments(ExtraItems):
    NEGATED_TYPE = "stannum.constraints.parameters.no_extra_arguments"
    TYPE = "stannum.constraints.parameters.extra_arguments"


class ExtraKeywords(ExtraKeys):
    NEGATED_TYPE = "stannum.constraints.parameters.no_extra_keywords"
    TYPE = "stannum.constraints.parameters.extra_keywords"


class VariadicItems(Constraint):
    """Checks the items of a list or tuple past expected_count.

    The declared items are left to their own constraints. does_not_match()
    only asks whether the value is a sequence at all.
    """

    NEGATED_TYPE = Type.NEGATED_TYPE
    TYPE = Type.TYPE

    def __init__(self, item_type: Any, expected_count: int | Callable[[], int], **options: Any) -> None:
        super().__init__(
            item_type=type_constraint(item_type, as_="item type"),
            expected_count=expected_count,
            **options,
        )

    @property
    def item_type(self) -> Constraint: return self.options["item_type"]

    @property
    def expected_count(self) -> int:
        count = self.options["expected_count"]
        return count() if callable(count) else count

    def matches(self, actual: Any) -> bool:
        if not isinstance(actual, (list, tuple)): return False
        return next(self.each_non_matching_item(actual), None) is None

    def does_not_match(self, actual: Any) -> bool:
        return not isinstance(actual, (list, tuple))

    def each_non_matching_item(self, actual: list | tuple) -> Iterator[tuple[int, Any]]:
        count = self.expected_count
        for index, item in enumerate(actual):
            if index >= count and not self.item_type.matches(item):
                yield index, item

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not isinstance(actual, (list, tuple)):
            return errors.add(self.type, self.message, required=True, type=list)
        for index, item in self.each_non_matching_item(actual):
            self.item_type.errors_for(item, errors=errors[index])
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.negated_type, self.negated_message, required=True, type=list)


class VariadicValues(Constraint):
    """Checks the values of a keywords dict for keys outside expected_keys.

    Keys must be strings; values failing value_type are reported under
    their key.
    """

    NEGATED_TYPE = Type.NEGATED_TYPE
    TYPE = Type.TYPE

    def __init__(
        self,
        value_type: Any,
        expected_keys: Iterable[Hashable] | Callable[[], Iterable[Hashable]],
        **options: Any,
    ) -> None:
        super().__init__(
            value_type=type_constraint(value_type, as_="value type"),
            expected_keys=expected_keys,
            **options,
        )

    @property
    def value_type(self) -> Constraint: return self.options["value_type"]

    @property
    def expected_keys(self) -> set[Hashable]:
        keys = self.options["expected_keys"]
        return set(keys() if callable(keys) else keys)

    def matches(self, actual: Any) -> bool:
        if not isinstance(actual, dict): return False
        if self.invalid_keys(actual): return False
        return next(self.each_non_matching_value(actual), None) is None

    def does_not_match(self, actual: Any) -> bool:
        return not isinstance(actual, dict)

    @staticmethod
    def invalid_keys(actual: dict) -> list[Any]:
        return [key for key in actual if not isinstance(key, str)]

    def each_non_matching_value(self, actual: dict) -> Iterator[tuple[Any, Any]]:
        expected = self.expected_keys
        for key, value in actual.items():
            if key not in expected and not self.value_type.matches(value):
                yield key, value

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not isinstance(actual, dict):
            return errors.add(self.type, self.message, required=True, type=dict)
        if keys := self.invalid_keys(actual):
            errors.add(HashType.INVALID_KEY_TYPE, keys=keys)
        for key, value in self.each_non_matching_value(actual):
            self.value_type.errors_for(value, errors=errors[as_path_segment(key)])
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.negated_type, self.negated_message, required=True, type=dict)
