"""ArrayType - list values with optional item and emptiness checks."""
from __future__ import annotations

from typing import Any, Iterator

from stannum.constraints.base import Constraint
from stannum.constraints.presence import Presence
from stannum.constraints.type import Type
from stannum.errors import Errors
from stannum.support.coercion import type_constraint


class ArrayType(Type):
    """Matches lists, optionally checking each item against item_type.

    Item failures are reported under the item's index:

        ArrayType(item_type=str).errors_for(["a", 2])
        # [{"type": "stannum.constraints.is_not_type", "path": [1], ...}]
    """

    def __init__(self, *, allow_empty: bool = True, item_type: Any = None, **options: Any) -> None:
        super().__init__(
            list,
            allow_empty=bool(allow_empty),
            item_type=type_constraint(item_type, allow_none=True, as_="item type"),
            **options,
        )

    @property
    def allow_empty(self) -> bool: return self.options["allow_empty"]

    @property
    def item_type(self) -> Constraint | None: return self.options["item_type"]

    def matches(self, actual: Any) -> bool:
        if not super().matches(actual): return False
        if actual is None: return True
        return self.presence_matches(actual) and self.item_type_matches(actual)

    def presence_matches(self, actual: Any) -> bool:
        return self.allow_empty or len(actual) > 0

    def item_type_matches(self, actual: Any) -> bool:
        if self.item_type is None: return True
        return all(self.item_type.matches(item) for item in actual)

    def error_properties(self) -> dict[str, Any]:
        return {**super().error_properties(), "allow_empty": self.allow_empty}

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not isinstance(actual, list):
            return super().update_errors_for(actual=actual, errors=errors)
        if not self.presence_matches(actual):
            return errors.add(Presence.TYPE, self.message, **self.error_properties())
        for index, item in self._non_matching_items(actual):
            self.item_type.errors_for(item, errors=errors[index])
        return errors

    def _non_matching_items(self, actual: list) -> Iterator[tuple[int, Any]]:
        if self.item_type is None: return
        for index, item in enumerate(actual):
            if not self.item_type.matches(item):
                yield index, item
