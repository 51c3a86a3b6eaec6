"""ParametersContract - validates the arguments, keywords and block of a call.

The matched value is a dict with exactly three keys:

    {"arguments": [...], "keywords": {...}, "block": callable or None}

    contract = ParametersContract(lambda c: (
        c.argument("name", str),
        c.argument("size", int, default=True),
        c.arguments("tools", str),
        c.keyword("cook_time", int),
        c.keywords("ingredients", dict),
        c.block(True),
    ))

Errors for named arguments are reported under their name, e.g.
["arguments", "name"]; errors for keywords under the keyword.
"""
from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.base import Constraint
from stannum.constraints.custom import Custom
from stannum.constraints.types.scalar_types import CallableType, NilType
from stannum.contracts.hash_contract import HashContract
from stannum.contracts.parameters.arguments_contract import ArgumentsContract
from stannum.contracts.parameters.keywords_contract import KeywordsContract
from stannum.contracts.parameters.signature_contract import SignatureContract
from stannum.logging import contract_logger
from stannum.support.coercion import presence_constraint


def _build_block_constraint(present: bool, **options: Any) -> Constraint:
    return CallableType(**options) if present else NilType(**options)


class ParametersContract(HashContract):
    """Contract over the three parts of a call."""

    class Builder(HashContract.Builder):
        def argument(self, name: str, type_or_constraint: Any, /, *, index: int | None = None, **options: Any) -> ParametersContract.Builder:
            """Add a named positional argument at index (the next index when None)."""
            constraint = self.resolve_type(type_or_constraint)
            self.contract.add_argument_constraint(index, constraint, property_name=name, **options)
            return self

        def arguments(self, name: str, item_type: Any, /) -> ParametersContract.Builder:
            """Accept extra positional arguments matching item_type, reported under name."""
            self.contract.set_arguments_item_constraint(name, item_type)
            return self

        def keyword(self, name: str, type_or_constraint: Any, /, **options: Any) -> ParametersContract.Builder:
            self.contract.add_keyword_constraint(name, self.resolve_type(type_or_constraint), **options)
            return self

        def keywords(self, name: str, value_type: Any, /) -> ParametersContract.Builder:
            """Accept extra keywords whose values match value_type, reported under name."""
            self.contract.set_keywords_value_constraint(name, value_type)
            return self

        def block(self, present: bool | Constraint, /) -> ParametersContract.Builder:
            self.contract.set_block_constraint(present)
            return self

        def resolve_type(self, value: Any) -> Any:
            if isinstance(value, (Constraint, type, str, tuple)):
                return value
            if callable(value):
                return Custom(value)
            raise TypeError(f"invalid constraint {value!r}")

    def __init__(self, define: Callable[[Any], Any] | None = None, /, **options: Any) -> None:
        self._block_constraint: Constraint | None = None
        super().__init__(define, **options)

    @property
    def arguments_contract(self) -> ArgumentsContract: return self._arguments_contract

    @property
    def keywords_contract(self) -> KeywordsContract: return self._keywords_contract

    @property
    def block_constraint(self) -> Constraint | None: return self._block_constraint

    def add_argument_constraint(self, index: int | None, type_or_constraint: Any, **options: Any) -> ParametersContract:
        self.arguments_contract.add_argument_constraint(index, type_or_constraint, **options)
        return self

    def add_keyword_constraint(self, keyword: str, type_or_constraint: Any, **options: Any) -> ParametersContract:
        self.keywords_contract.add_keyword_constraint(keyword, type_or_constraint, **options)
        return self

    def set_arguments_item_constraint(self, name: str, item_type: Any) -> ParametersContract:
        self.arguments_contract.set_variadic_item_constraint(item_type, name=name)
        return self

    def set_keywords_value_constraint(self, name: str, value_type: Any) -> ParametersContract:
        self.keywords_contract.set_variadic_value_constraint(value_type, name=name)
        return self

    def set_block_constraint(self, present: bool | Constraint) -> ParametersContract:
        """Require a block (True), forbid one (False), or check it with a constraint.

        Raises:
            RuntimeError: If a block constraint is already set.
        """
        if self._block_constraint is not None:
            raise RuntimeError("block constraint is already set")
        self._block_constraint = presence_constraint(present, as_="block", builder=_build_block_constraint)
        self.add_key_constraint("block", self._block_constraint)
        contract_logger().debug(
            "block_constraint_set", contract=type(self).__name__, constraint=type(self._block_constraint).__name__
        )
        return self

    def define_constraints(self, define: Callable[[Any], Any] | None) -> None:
        self._arguments_contract = ArgumentsContract()
        self._keywords_contract = KeywordsContract()
        self.add_key_constraint("arguments", self._arguments_contract)
        self.add_key_constraint("keywords", self._keywords_contract)
        super().define_constraints(define)

    def add_type_constraint(self) -> None:
        self.add_constraint(SignatureContract(), sanity=True)

    def add_extra_keys_constraint(self) -> None:
        """Extra keys are reported by the SignatureContract."""
