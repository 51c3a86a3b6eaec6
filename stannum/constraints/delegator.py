"""Delegator - a fixed slot forwarding to a replaceable constraint."""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors


class Delegator(Constraint):
    """Forwards every call to its receiver.

    Contracts add a Delegator once and swap its receiver later, so the
    definition keeps its position while the constraint behind it changes.
    """

    def __init__(self, receiver: Constraint) -> None:
        self.receiver = receiver

    @property
    def receiver(self) -> Constraint: return self._receiver

    @receiver.setter
    def receiver(self, value: Constraint) -> None:
        if not isinstance(value, Constraint):
            raise TypeError("receiver must be a Constraint")
        self._receiver = value

    @property
    def options(self) -> dict[str, Any]: return self.receiver.options

    @property
    def type(self) -> str: return self.receiver.type

    @property
    def negated_type(self) -> str: return self.receiver.negated_type

    @property
    def message(self) -> str | None: return self.receiver.message

    @property
    def negated_message(self) -> str | None: return self.receiver.negated_message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return type(other) is type(self) and other.receiver == self.receiver

    __hash__ = None

    def __repr__(self) -> str:
        return f"Delegator({self.receiver!r})"

    def matches(self, actual: Any) -> bool: return self.receiver.matches(actual)

    def does_not_match(self, actual: Any) -> bool: return self.receiver.does_not_match(actual)

    def match(self, actual: Any) -> tuple[bool, Errors]: return self.receiver.match(actual)

    def negated_match(self, actual: Any) -> tuple[bool, Errors]: return self.receiver.negated_match(actual)

    def errors_for(self, actual: Any, *, errors: Errors | None = None) -> Errors:
        return self.receiver.errors_for(actual, errors=errors)

    def negated_errors_for(self, actual: Any, *, errors: Errors | None = None) -> Errors:
        return self.receiver.negated_errors_for(actual, errors=errors)

    def with_options(self, **options: Any) -> Delegator:
        return Delegator(self.receiver.with_options(**options))

    def copy_properties(self, source: Constraint, *, options: dict[str, Any] | None = None) -> None:
        self._receiver = source.receiver

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return self.receiver.update_errors_for(actual=actual, errors=errors)

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return self.receiver.update_negated_errors_for(actual=actual, errors=errors)
