"""Signature Constraints

Duck-type checks: a value matches when it exposes every expected
capability (attribute name). Capability names are usually taken from the
Capability enum:

    Signature(Capability.INDEXABLE, Capability.SIZED).matches([1, 2])  # True
    Signature("read", "close").matches(io.StringIO())                  # True
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Iterator

from stannum.constraints.base import Constraint
from stannum.errors import Errors


class Capability(str, Enum):
    """Attribute names probed for common container and call protocols."""

    INDEXABLE = "__getitem__"
    ITERABLE = "__iter__"
    SIZED = "__len__"
    KEYED = "keys"
    CALLABLE = "__call__"


def _method_name(method: Capability | str) -> str:
    return method.value if isinstance(method, Capability) else method


class Signature(Constraint):
    """Matches values having every expected method.

    does_not_match() is true only when every expected method is missing,
    so a value exposing some but not all of them matches neither.
    """

    NEGATED_TYPE = "stannum.constraints.has_methods"
    TYPE = "stannum.constraints.does_not_have_methods"

    def __init__(self, *expected_methods: Capability | str, **options: Any) -> None:
        if not expected_methods:
            raise ValueError("expected methods can't be blank")
        if not all(isinstance(method, str) for method in expected_methods):
            raise TypeError("expected method must be a string")
        super().__init__(expected_methods=[_method_name(m) for m in expected_methods], **options)

    @property
    def expected_methods(self) -> list[str]: return self.options["expected_methods"]

    def matches(self, actual: Any) -> bool:
        return next(self.each_missing_method(actual), None) is None

    def does_not_match(self, actual: Any) -> bool:
        return list(self.each_missing_method(actual)) == self.expected_methods

    def each_missing_method(self, actual: Any) -> Iterator[str]:
        for method_name in self.expected_methods:
            if not hasattr(actual, method_name):
                yield method_name

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(
            self.type, self.message, methods=self.expected_methods, missing=list(self.each_missing_method(actual))
        )

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(
            self.negated_type,
            self.negated_message,
            methods=self.expected_methods,
            missing=list(self.each_missing_method(actual)),
        )


class TupleSignature(Signature):
    """Indexable, iterable and sized: lists, tuples, strings and the like."""

    def __init__(self, **options: Any) -> None:
        super().__init__(Capability.INDEXABLE, Capability.ITERABLE, Capability.SIZED, **options)


class MapSignature(Signature):
    """Indexable, iterable and keyed: dicts and other mappings."""

    def __init__(self, **options: Any) -> None:
        super().__init__(Capability.INDEXABLE, Capability.ITERABLE, Capability.KEYED, **options)


Signature.Tuple = TupleSignature
Signature.Map = MapSignature
