from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.types.array_type import ArrayType
from stannum.constraints.types.hash_type import HashType
from stannum.constraints.types.scalar_types import CallableType
from stannum.contracts.hash_contract import HashContract


class SignatureContract(HashContract):
    """Shape of a call: {"arguments": list, "keywords": dict[str, ...], "block": callable or None}."""

    def __init__(self, define: Callable[[Any], Any] | None = None, /, **options: Any) -> None:
        options.setdefault("key_type", str)
        super().__init__(define, **options)

    def define_constraints(self, define: Callable[[Any], Any] | None) -> None:
        super().define_constraints(define)
        self.add_key_constraint("arguments", ArrayType())
        self.add_key_constraint("keywords", HashType(key_type=str))
        self.add_key_constraint("block", CallableType(optional=True))
