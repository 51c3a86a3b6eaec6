"""Contract - the general-purpose contract over object properties."""
from __future__ import annotations

from typing import Any, Callable

from stannum.constraints.base import Constraint
from stannum.contracts.property_contract import PropertyContract


class Contract(PropertyContract):
    """Contract with a property-aware builder.

        contract = Contract(lambda c: (
            c.property("name", Presence()),
            c.property(["manufacturer", "factory", "address"], Presence()),
        ))
    """

    class Builder(PropertyContract.Builder):
        def property(
            self, property: Any, constraint: Constraint | Callable[[Any], Any], /, **options: Any
        ) -> Contract.Builder:
            return self.constraint(constraint, property=property, **options)
