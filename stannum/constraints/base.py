"""Constraint Base Class

A constraint is a predicate over a single value that reports failures as
typed error records instead of raising. Every constraint answers two
independent questions:

- matches(actual): does the value satisfy the constraint?
- does_not_match(actual): does the value satisfy the negated constraint?

The two are not required to be complements. A composite constraint can
fail both for the same value, so subclasses override each one separately
when needed.
"""
from __future__ import annotations

import copy as _copy
from typing import Any

from stannum.errors import Errors


class Constraint:
    """Base class for all constraints and contracts.

    Subclasses set TYPE and NEGATED_TYPE, override matches() (and
    does_not_match() where it is not the plain negation), and customize the
    reported records by overriding update_errors_for() and
    update_negated_errors_for().

    Options:
        type / negated_type: override the reported error types.
        message / negated_message: attach a fixed message to the records.
    """

    NEGATED_TYPE = "stannum.constraints.valid"
    TYPE = "stannum.constraints.invalid"

    def __init__(self, **options: Any) -> None:
        self.options: dict[str, Any] = dict(options)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return type(other) is type(self) and other.options == self.options

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(f'{k}={v!r}' for k, v in self.options.items())})"

    # ========================================================================
    # Matching
    # ========================================================================

    def matches(self, actual: Any) -> bool:
        """Check if the value matches the constraint."""
        return False

    def does_not_match(self, actual: Any) -> bool:
        """Check if the value matches the negated constraint."""
        return not self.matches(actual)

    def match(self, actual: Any) -> tuple[bool, Errors]:
        """Match the value, returning the status and the errors (empty on success)."""
        if self.matches(actual): return True, Errors()
        return False, self.errors_for(actual)

    def negated_match(self, actual: Any) -> tuple[bool, Errors]:
        """Match the value against the negated constraint."""
        if self.does_not_match(actual): return True, Errors()
        return False, self.negated_errors_for(actual)

    def errors_for(self, actual: Any, *, errors: Errors | None = None) -> Errors:
        """Generate the errors for a non-matching value.

        The value is assumed not to match; the errors are generated
        regardless. When errors is given, the records are added to it.
        """
        return self.update_errors_for(actual=actual, errors=Errors() if errors is None else errors)

    def negated_errors_for(self, actual: Any, *, errors: Errors | None = None) -> Errors:
        """Generate the errors for a value that matches when it should not."""
        return self.update_negated_errors_for(actual=actual, errors=Errors() if errors is None else errors)

    # ========================================================================
    # Error Types
    # ========================================================================

    @property
    def type(self) -> str:
        return self.options.get("type", type(self).TYPE)

    @property
    def negated_type(self) -> str:
        return self.options.get("negated_type", type(self).NEGATED_TYPE)

    @property
    def message(self) -> str | None:
        return self.options.get("message")

    @property
    def negated_message(self) -> str | None:
        return self.options.get("negated_message")

    # ========================================================================
    # Copying
    # ========================================================================

    def copy(self) -> Constraint:
        """Shallow copy with an independent options dict."""
        copied = _copy.copy(self)
        copied.copy_properties(self)
        return copied

    def with_options(self, **options: Any) -> Constraint:
        """Copy of the constraint with the given options merged in."""
        copied = _copy.copy(self)
        copied.copy_properties(self, options={**self.options, **options})
        return copied

    def copy_properties(self, source: Constraint, *, options: dict[str, Any] | None = None) -> None:
        self.options = dict(source.options) if options is None else options

    # ========================================================================
    # Error Generation Hooks
    # ========================================================================

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.type, self.message)

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.negated_type, self.negated_message)
