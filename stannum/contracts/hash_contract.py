from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.types.hash_type import HashType
from stannum.contracts.map_contract import MapContract


class HashContract(MapContract):
    """MapContract for dicts, optionally checking every key and value type.

        contract = HashContract(lambda c: c.key("name", Type(str)), key_type=str)
    """

    def __init__(
        self,
        define: Callable[[Any], Any] | None = None,
        /,
        *,
        allow_extra_keys: bool = False,
        key_type: Any = None,
        value_type: Any = None,
        **options: Any,
    ) -> None:
        super().__init__(define, allow_extra_keys=allow_extra_keys, key_type=key_type, value_type=value_type, **options)

    @property
    def key_type(self) -> Any: return self.options.get("key_type")

    @property
    def value_type(self) -> Any: return self.options.get("value_type")

    def with_options(self, **options: Any) -> HashContract:
        for option in ("key_type", "value_type"):
            if option in options:
                raise ValueError(f"can't change option {option!r}")
        return super().with_options(**options)

    def add_type_constraint(self) -> None:
        self.add_constraint(HashType(key_type=self.key_type, value_type=self.value_type), sanity=True)
