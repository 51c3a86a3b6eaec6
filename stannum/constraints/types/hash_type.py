"""HashType - dict values with optional key, value and emptiness checks."""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.presence import Presence
from stannum.constraints.type import Type
from stannum.errors import Errors, as_path_segment
from stannum.support.coercion import type_constraint


class HashType(Type):
    """Matches dicts, optionally checking keys and values.

    Invalid keys are reported together in one record at the dict's own path;
    invalid values are reported under their key.
    """

    INVALID_KEY_TYPE = "stannum.constraints.types.hash.invalid_key"

    def __init__(
        self,
        *,
        allow_empty: bool = True,
        key_type: Any = None,
        value_type: Any = None,
        **options: Any,
    ) -> None:
        super().__init__(
            dict,
            allow_empty=bool(allow_empty),
            key_type=type_constraint(key_type, allow_none=True, as_="key type"),
            value_type=type_constraint(value_type, allow_none=True, as_="value type"),
            **options,
        )

    @property
    def allow_empty(self) -> bool: return self.options["allow_empty"]

    @property
    def key_type(self) -> Constraint | None: return self.options["key_type"]

    @property
    def value_type(self) -> Constraint | None: return self.options["value_type"]

    def matches(self, actual: Any) -> bool:
        if not super().matches(actual): return False
        if actual is None: return True
        return self.presence_matches(actual) and not self.non_matching_keys(actual) and not self.non_matching_values(actual)

    def presence_matches(self, actual: dict) -> bool:
        return self.allow_empty or len(actual) > 0

    def non_matching_keys(self, actual: dict) -> list[Any]:
        if self.key_type is None: return []
        return [key for key in actual if not self.key_type.matches(key)]

    def non_matching_values(self, actual: dict) -> list[tuple[Any, Any]]:
        if self.value_type is None: return []
        return [(key, value) for key, value in actual.items() if not self.value_type.matches(value)]

    def error_properties(self) -> dict[str, Any]:
        return {**super().error_properties(), "allow_empty": self.allow_empty}

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not isinstance(actual, dict):
            return super().update_errors_for(actual=actual, errors=errors)
        if not self.presence_matches(actual):
            return errors.add(Presence.TYPE, self.message, **self.error_properties())
        if keys := self.non_matching_keys(actual):
            errors.add(self.INVALID_KEY_TYPE, keys=keys)
        for key, value in self.non_matching_values(actual):
            self.value_type.errors_for(value, errors=errors[as_path_segment(key)])
        return errors
