"""Constraints for fixed-size sequences."""
from __future__ import annotations

from collections.abc import Sized
from typing import Any, Callable, Iterator

from stannum.constraints.base import Constraint
from stannum.constraints.signature import Capability, Signature
from stannum.errors import Errors


class ExtraItems(Constraint):
    """Matches sized values with at most expected_count items.

    expected_count may be a callable, evaluated on every check, so a
    contract can bind it to its current number of declared items. Each
    extra item is reported at its index with the item as data:

        ExtraItems(2).errors_for(["a", "b", "c"])
        # [{"type": "stannum.constraints.tuples.extra_items",
        #   "data": {"value": "c"}, "path": [2], "message": None}]
    """

    NEGATED_TYPE = "stannum.constraints.tuples.no_extra_items"
    TYPE = "stannum.constraints.tuples.extra_items"

    def __init__(self, expected_count: int | Callable[[], int], **options: Any) -> None:
        if not (callable(expected_count) or (isinstance(expected_count, int) and not isinstance(expected_count, bool))):
            raise TypeError("expected count must be an integer or a callable")
        super().__init__(expected_count=expected_count, **options)

    @property
    def expected_count(self) -> int:
        count = self.options["expected_count"]
        return count() if callable(count) else count

    def matches(self, actual: Any) -> bool:
        if not isinstance(actual, Sized): return False
        return len(actual) <= self.expected_count

    def does_not_match(self, actual: Any) -> bool:
        if not isinstance(actual, Sized): return False
        return len(actual) > self.expected_count

    def each_extra_item(self, actual: Any) -> Iterator[tuple[int, Any]]:
        count = self.expected_count
        for index, item in enumerate(actual):
            if index >= count:
                yield index, item

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not isinstance(actual, Sized):
            return self._add_invalid_tuple_error(errors)
        for index, item in self.each_extra_item(actual):
            errors[index].add(self.type, self.message, value=item)
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not isinstance(actual, Sized):
            return self._add_invalid_tuple_error(errors)
        return super().update_negated_errors_for(actual=actual, errors=errors)

    def _add_invalid_tuple_error(self, errors: Errors) -> Errors:
        methods = [Capability.SIZED.value]
        return errors.add(Signature.TYPE, methods=methods, missing=methods)
