"""Handling of omitted parameters shared by arguments and keywords contracts.

An omitted argument or keyword maps to UNDEFINED. Definitions with
default=True pass on UNDEFINED without checking the constraint; the rest
check the constraint against None, so a required parameter that was left
out fails exactly like one passed as None.
"""
from __future__ import annotations

from typing import Any

from stannum.contracts.definition import Definition
from stannum.errors import Errors
from stannum.support.undefined import UNDEFINED


class DefaultValuesMixin:
    def match_constraint(self, definition: Definition, value: Any) -> bool:
        if value is not UNDEFINED:
            return super().match_constraint(definition, value)
        return True if definition.default else super().match_constraint(definition, None)

    def match_negated_constraint(self, definition: Definition, value: Any) -> bool:
        if value is not UNDEFINED:
            return super().match_negated_constraint(definition, value)
        return False if definition.default else super().match_negated_constraint(definition, None)

    def add_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        return super().add_errors_for(definition, None if value is UNDEFINED else value, errors)

    def add_negated_errors_for(self, definition: Definition, value: Any, errors: Errors) -> Errors:
        return super().add_negated_errors_for(definition, None if value is UNDEFINED else value, errors)


def split_type_options(options: dict[str, Any]) -> dict[str, Any]:
    """Pop the optional/required flags that belong to a coerced Type constraint."""
    return {key: options.pop(key) for key in ("optional", "required") if key in options}
