"""Contract for the keyword arguments of a call."""
from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.base import Constraint
from stannum.constraints.delegator import Delegator
from stannum.constraints.parameters import ExtraKeywords, VariadicValues
from stannum.contracts.definition import Definition, PropertyType
from stannum.contracts.hash_contract import HashContract
from stannum.contracts.parameters.defaults import DefaultValuesMixin, split_type_options
from stannum.logging import contract_logger
from stannum.support.coercion import type_constraint
from stannum.support.undefined import UNDEFINED


class KeywordsContract(DefaultValuesMixin, HashContract):
    """Validates a dict of keyword arguments keyed by name.

    A keyword missing from the dict maps to UNDEFINED; see ArgumentsContract
    for how defaults apply. Undeclared keywords fail unless a variadic
    constraint is set.
    """

    def __init__(self, define: Callable[[Any], Any] | None = None, /, **options: Any) -> None:
        options.setdefault("allow_extra_keys", False)
        options.setdefault("key_type", str)
        super().__init__(define, **options)

    def add_keyword_constraint(
        self,
        keyword: str,
        type_or_constraint: Any,
        *,
        default: bool = False,
        sanity: bool = False,
        **options: Any,
    ) -> KeywordsContract:
        """Add a constraint for the named keyword.

        Raises:
            TypeError: If keyword is not a string or the type is not a class or constraint.
            ValueError: If keyword is blank.
        """
        if not isinstance(keyword, str):
            raise TypeError("keyword must be a string")
        if not keyword:
            raise ValueError("keyword can't be blank")
        constraint = type_constraint(type_or_constraint, **split_type_options(options))
        self.add_key_constraint(keyword, constraint, default=bool(default), sanity=sanity, **options)
        return self

    def set_variadic_constraint(self, constraint: Constraint, *, name: str | None = None) -> KeywordsContract:
        """Accept extra keywords, validating the whole keywords dict with constraint.

        Raises:
            RuntimeError: If a variadic constraint is already set.
        """
        if self.allow_extra_keys:
            raise RuntimeError("variadic keywords constraint is already set")
        if not isinstance(constraint, Constraint):
            raise TypeError("must be an instance of Constraint")
        self.options["allow_extra_keys"] = True
        self._variadic_constraint.receiver = constraint
        if name is not None:
            self._variadic_definition.options["property_name"] = name
        contract_logger().debug(
            "variadic_constraint_set", contract=type(self).__name__, constraint=type(constraint).__name__, name=name
        )
        return self

    def set_variadic_value_constraint(self, value_type: Any, *, name: str | None = None) -> KeywordsContract:
        """Accept extra keywords, each of whose values must match value_type."""
        return self.set_variadic_constraint(VariadicValues(value_type, self.expected_keys), name=name)

    def add_extra_keys_constraint(self) -> None:
        self._variadic_constraint = Delegator(ExtraKeywords(self.expected_keys))
        self.add_constraint(self._variadic_constraint)
        self._variadic_definition: Definition = self._definitions[-1]

    def map_value(self, actual: Any, **options: Any) -> Any:
        if (
            options.get("property_type") == PropertyType.KEY
            and isinstance(actual, dict)
            and options["property"] not in actual
        ):
            return UNDEFINED
        return super().map_value(actual, **options)
