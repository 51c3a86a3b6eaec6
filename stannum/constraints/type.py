"""Type Constraint

Matches values that are instances of an expected class. The class may be
given directly, as a tuple of classes, or as a registered type name that
is resolved on first use:

    Type(int).matches(3)                    # True
    Type(str, optional=True).matches(None)  # True
    Type("Manufacturer").matches(acme)      # resolved via register_type
"""
from __future__ import annotations

from typing import Any

from stannum.constraints.base import Constraint
from stannum.errors import Errors
from stannum.support.optional import OptionalMixin, resolve as resolve_optional
from stannum.support.type_registry import TypeReference


class Type(OptionalMixin, Constraint):
    """Constraint for type checking an object.

    With required=False (or optional=True), None also matches. The negated
    check ignores the optional flag for None: an optional Type never
    "does not match" None.
    """

    NEGATED_TYPE = "stannum.constraints.is_type"
    TYPE = "stannum.constraints.is_not_type"

    def __init__(
        self,
        expected_type: type | tuple[type, ...] | str,
        *,
        optional: bool | None = None,
        required: bool | None = None,
        **options: Any,
    ) -> None:
        self._reference = TypeReference(expected_type)
        super().__init__(
            **resolve_optional(optional=optional, required=required, expected_type=expected_type, **options)
        )

    @property
    def expected_type(self) -> type | tuple[type, ...]:
        return self._reference.resolve()

    def matches(self, actual: Any) -> bool:
        return self.matches_type(actual)

    def does_not_match(self, actual: Any) -> bool:
        return not self.matches_type(actual)

    def matches_type(self, actual: Any) -> bool:
        return isinstance(actual, self.expected_type) or (self.optional and actual is None)

    def copy_properties(self, source: Constraint, *, options: dict[str, Any] | None = None) -> None:
        super().copy_properties(source, options=options)
        self._reference = TypeReference(self.options["expected_type"])

    def error_properties(self) -> dict[str, Any]:
        return {"required": self.required, "type": self.expected_type}

    def update_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.type, self.message, **self.error_properties())

    def update_negated_errors_for(self, *, actual: Any, errors: Errors) -> Errors:
        return errors.add(self.negated_type, self.negated_message, **self.error_properties())
