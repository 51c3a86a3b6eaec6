"""Property Matching Constraints

Compare properties of a mapping against a reference property, e.g. a
password and its confirmation:

    MatchProperty("password", "confirmation").matches(
        {"password": "tronlives", "confirmation": "tronlives"}
    )  # True

Values of properties whose names look sensitive (see
Settings.FILTERED_PARAMETERS) are reported as "[FILTERED]".
"""
from __future__ import annotations

import re
from collections.abc import Mapping, Sized
from functools import cached_property
from typing import Any, Iterator

from stannum.config import get_settings
from stannum.constraints.base import Constraint
from stannum.constraints.equality import Equality
from stannum.constraints.signature import Capability, Signature
from stannum.errors import Errors

FILTERED_VALUE = "[FILTERED]"


def _is_empty(value: Any) -> bool:
    return isinstance(value, Sized) and len(value) == 0


def _validate_name(name: Any, *, as_: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f"{as_} must be a string")
    if not name:
        raise ValueError(f"{as_} can't be blank")


class PropertiesConstraint(Constraint):
    """Shared handling of property names, skipping and filtering."""

    def __init__(self, reference_name: str, *property_names: str, **options: Any) -> None:
        _validate_name(reference_name, as_="reference name")
        if not property_names:
            raise ValueError("property names can't be empty")
        for index, name in enumerate(property_names):
            _validate_name(name, as_=f"property name at {index}")
        super().__init__(
            **{
                **options,
                "allow_empty": bool(options.get("allow_empty")),
                "allow_nil": bool(options.get("allow_nil")),
                "property_names": list(property_names),
                "reference_name": reference_name,
            }
        )

    @property
    def allow_empty(self) -> bool: return self.options["allow_empty"]

    @property
    def allow_nil(self) -> bool: return self.options["allow_nil"]

    @property
    def property_names(self) -> list[str]: return self.options["property_names"]

    @property
    def reference_name(self) -> str: return self.options["reference_name"]

    @cached_property
    def filter_parameters(self) -> bool:
        filters = [re.compile(param) for param in get_settings().FILTERED_PARAMETERS]
        names = [self.reference_name, *self.property_names]
        return any(f.search(name) for f in filters for name in names)

    def can_match_properties(self, actual: Any) -> bool:
        return isinstance(actual, Mapping)

    def each_property(self, actual: Mapping) -> Iterator[tuple[str, Any]]:
        for name in self.property_names:
            yield name, actual.get(name)

    def expected_value(self, actual: Mapping) -> Any:
        return actual.get(self.reference_name)

    def skip_property(self, value: Any) -> bool:
        return (self.allow_empty and _is_empty(value)) or (self.allow_nil and value is None)

    def filtered(self, value: Any) -> Any:
        return FILTERED_VALUE if self.filter_parameters else value

    def invalid_object_errors(self, actual: Any, errors: Errors) -> Errors:
        methods = [Capability.INDEXABLE.value, Capability.KEYED.value]
        missing = [method for method in methods if not hasattr(actual, method)] or methods
        return errors.add(Signature.TYPE, methods=methods, missing=missing)

    def generic_errors(self, errors: Errors) -> Errors:
        return errors.add(Constraint.NEGATED_TYPE)


class MatchProperty(PropertiesConstraint):
    """Each named property must equal the reference property.

    allow_empty / allow_nil skip empty or None values, both for the
    reference and for the compared properties.
    """

    NEGATED_TYPE = Equality.NEGATED_TYPE
    TYPE = Equality.TYPE

    def matches(self, actual: Any) -> bool:
        if not self.can_match_properties(actual): return False
        expected = self.expected_value(actual)
        if self.skip_property(expected): return True
        return next(self._each_non_matching(actual, expected), None) is None

    def does_not_match(self, actual: Any) -> bool:
        if not self.can_match_properties(actual): return False
        expected = self.expected_value(actual)
        if self.skip_property(expected): return False
        return next(self._each_matching(actual, expected), None) is None

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not self.can_match_properties(actual):
            return self.invalid_object_errors(actual, errors)
        expected = self.expected_value(actual)
        for name, value in self._each_non_matching(actual, expected):
            errors[name].add(self.type, self.message, expected=self.filtered(expected), actual=self.filtered(value))
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not self.can_match_properties(actual):
            return self.invalid_object_errors(actual, errors)
        matching = list(self._each_matching(actual, self.expected_value(actual)))
        if not matching:
            return self.generic_errors(errors)
        for name, _ in matching:
            errors[name].add(self.negated_type, self.negated_message)
        return errors

    def _value_matches(self, expected: Any, value: Any) -> bool:
        return self.skip_property(value) or value == expected

    def _each_matching(self, actual: Mapping, expected: Any) -> Iterator[tuple[str, Any]]:
        return ((name, value) for name, value in self.each_property(actual) if self._value_matches(expected, value))

    def _each_non_matching(self, actual: Mapping, expected: Any) -> Iterator[tuple[str, Any]]:
        return ((name, value) for name, value in self.each_property(actual) if not self._value_matches(expected, value))


class DoNotMatchProperty(PropertiesConstraint):
    """No named property may equal the reference property."""

    NEGATED_TYPE = Equality.TYPE
    TYPE = Equality.NEGATED_TYPE

    def matches(self, actual: Any) -> bool:
        if not self.can_match_properties(actual): return False
        expected = self.expected_value(actual)
        if self.skip_property(expected): return True
        return next(self._each_matching(actual, expected), None) is None

    def does_not_match(self, actual: Any) -> bool:
        if not self.can_match_properties(actual): return False
        expected = self.expected_value(actual)
        if self.skip_property(expected): return False
        return next(self._each_non_matching(actual, expected, include_all=True), None) is None

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not self.can_match_properties(actual):
            return self.invalid_object_errors(actual, errors)
        matching = list(self._each_matching(actual, self.expected_value(actual)))
        if not matching:
            return self.generic_errors(errors)
        for name, _ in matching:
            errors[name].add(self.type, self.message)
        return errors

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if not self.can_match_properties(actual):
            return self.invalid_object_errors(actual, errors)
        expected = self.expected_value(actual)
        non_matching = list(self._each_non_matching(actual, expected, include_all=True))
        if not non_matching:
            return self.generic_errors(errors)
        for name, value in non_matching:
            errors[name].add(
                self.negated_type, self.negated_message, expected=self.filtered(expected), actual=self.filtered(value)
            )
        return errors

    def _each_matching(self, actual: Mapping, expected: Any, *, include_all: bool = False) -> Iterator[tuple[str, Any]]:
        for name, value in self.each_property(actual):
            if not include_all and self.skip_property(value): continue
            if value == expected:
                yield name, value

    def _each_non_matching(
        self, actual: Mapping, expected: Any, *, include_all: bool = False
    ) -> Iterator[tuple[str, Any]]:
        for name, value in self.each_property(actual):
            if not include_all and self.skip_property(value): continue
            if value != expected:
                yield name, value
