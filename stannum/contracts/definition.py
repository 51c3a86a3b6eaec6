"""A single constraint entry inside a contract."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stannum.constraints.base import Constraint
    from stannum.contracts.base import BaseContract


class PropertyType(str, Enum):
    """How a definition's property is read from the matched value."""

    KEY = "key"
    INDEX = "index"


@dataclass(eq=False, slots=True)
class Definition:
    """Constraint plus the contract that owns it and its options.

    Options used by the contracts:
        property: None, a name, an index, or a list of them (nested access)
        property_name: path the errors are reported at, defaults to property
        property_type: PropertyType.KEY / PropertyType.INDEX, or None
        sanity: failure stops the evaluation of later definitions
        default: an omitted parameter passes without being checked
    """

    constraint: Constraint
    contract: BaseContract
    options: dict[str, Any] = field(default_factory=dict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Definition):
            return NotImplemented
        return (
            other.constraint == self.constraint
            and other.contract is self.contract
            and other.options == self.options
        )

    __hash__ = None

    @property
    def property_name(self) -> Any: return self.options.get("property_name", self.property)

    @property
    def property_type(self) -> PropertyType | None: return self.options.get("property_type")

    @property
    def sanity(self) -> bool: return bool(self.options.get("sanity"))

    @property
    def default(self) -> bool: return bool(self.options.get("default"))

    @property
    def property(self) -> Any: return self.options.get("property")
