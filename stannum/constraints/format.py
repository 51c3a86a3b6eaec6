"""Format Constraints

String values matched against a substring or a regular expression.
Non-string values fail with the Type error for str rather than the
format error.
"""
from __future__ import annotations

import re
from functools import cached_property
from typing import Any

from stannum.constraints.base import Constraint
from stannum.constraints.type import Type
from stannum.errors import Errors


class Format(Constraint):
    NEGATED_TYPE = "stannum.constraints.matches_format"
    TYPE = "stannum.constraints.does_not_match_format"

    def __init__(self, expected_format: str | re.Pattern[str], **options: Any) -> None:
        if not isinstance(expected_format, (str, re.Pattern)):
            raise TypeError("expected format must be a string or a compiled pattern")
        super().__init__(expected_format=expected_format, **options)

    @property
    def expected_format(self) -> str | re.Pattern[str]: return self.options["expected_format"]

    @cached_property
    def type_constraint(self) -> Type:
        return Type(str)

    def matches(self, actual: Any) -> bool:
        if not self.type_constraint.matches(actual): return False
        if isinstance(self.expected_format, str):
            return self.expected_format in actual
        return self.expected_format.search(actual) is not None

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        if self.type_constraint.matches(actual):
            return super().update_errors_for(actual=actual, errors=errors)
        return self.type_constraint.update_errors_for(actual=actual, errors=errors)


class Uuid(Format):
    """Matches canonical 8-4-4-4-12 hexadecimal UUID strings."""

    NEGATED_TYPE = "stannum.constraints.is_a_uuid"
    TYPE = "stannum.constraints.is_not_a_uuid"

    UUID_FORMAT = re.compile(r"\A[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z")

    def __init__(self, **options: Any) -> None:
        super().__init__(self.UUID_FORMAT, **options)
