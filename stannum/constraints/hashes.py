"""Constraints for mappings with a fixed key set."""
from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Callable, Iterable, Iterator

from stannum.constraints.base import Constraint
from stannum.constraints.signature import Capability, Signature
from stannum.errors import Errors, as_path_segment


class ExtraKeys(Constraint):
    """Matches mappings whose keys are all among the expected keys.

    expected_keys may be a callable returning the keys, evaluated on every
    check. Each extra key is reported under that key with its value as data.
    """

    NEGATED_TYPE = "stannum.constraints.hashes.no_extra_keys"
    TYPE = "stannum.constraints.hashes.extra_keys"

    def __init__(self, expected_keys: Iterable[Hashable] | Callable[[], Iterable[Hashable]], **options: Any) -> None:
        keys = expected_keys() if callable(expected_keys) else expected_keys
        if not isinstance(keys, (list, tuple, set, frozenset)):
            raise TypeError("expected keys must be a list or a callable")
        if not all(isinstance(key, Hashable) for key in keys):
            raise TypeError("expected key must be hashable")
        super().__init__(expected_keys=expected_keys if callable(expected_keys) else list(keys), **options)

    @property
    def expected_keys(self) -> set[Hashable]:
        keys = self.options["expected_keys"]
        return set(keys() if callable(keys) else keys)

    def matches(self, actual: Any) -> bool:
        if not self.is_map(actual): return False
        return set(actual.keys()) <= self.expected_keys

    def does_not_match(self, actual: Any) -> bool:
        if not self.is_map(actual): return False
        return not set(actual.keys()) <= self.expected_keys

    def each_extra_key(self, actual: Any) -> Iterator[tuple[Any, Any]]:
        expected = self.expected_keys
        for key in actual.keys():
            if key not in expected:
                yield key, actual[key]

    @staticmethod
    def is_map(actual: Any) -> bool:
        return hasattr(actual, Capability.INDEXABLE.value) and hasattr(actual, Capability.KEYED.value)

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not self.is_map(actual):
            return self._add_invalid_hash_error(errors)
        for key, value in self.each_extra_key(actual):
            errors[as_path_segment(key)].add(self.type, self.message, value=value)
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not self.is_map(actual):
            return self._add_invalid_hash_error(errors)
        return super().update_negated_errors_for(actual=actual, errors=errors)

    def _add_invalid_hash_error(self, errors: Errors) -> Errors:
        methods = [Capability.INDEXABLE.value, Capability.KEYED.value]
        return errors.add(Signature.TYPE, methods=methods, missing=methods)
