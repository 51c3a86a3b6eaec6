from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.types.array_type import ArrayType
from stannum.contracts.tuple_contract import TupleContract


class ArrayContract(TupleContract):
    """TupleContract for lists, optionally checking every item against item_type."""

    def __init__(
        self,
        define: Callable[[Any], Any] | None = None,
        /,
        *,
        allow_extra_items: bool = False,
        item_type: Any = None,
        **options: Any,
    ) -> None:
        super().__init__(define, allow_extra_items=allow_extra_items, item_type=item_type, **options)

    @property
    def item_type(self) -> Any: return self.options.get("item_type")

    def with_options(self, **options: Any) -> ArrayContract:
        if "item_type" in options:
            raise ValueError("can't change option 'item_type'")
        return super().with_options(**options)

    def add_type_constraint(self) -> None:
        self.add_constraint(ArrayType(item_type=self.item_type), sanity=True)
