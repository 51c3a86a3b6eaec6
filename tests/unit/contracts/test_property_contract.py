"""Unit tests for Contract (property-scoped definitions).

File: tests/unit/contracts/test_property_contract.py
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from stannum import Contract
from stannum.constraints import Presence, Type


@pytest.fixture
def contract() -> Contract:
    return Contract(
        lambda c: (
            c.property("name", Presence()),
            c.property(["factory", "address"], Presence()),
            c.property(["towns", 1, "name"], Type(str)),
        )
    )


def test_matches_nested_properties(contract: Contract) -> None:
    value = SimpleNamespace(
        name="Acme",
        factory=SimpleNamespace(address="123 Main St"),
        towns=[SimpleNamespace(name="Springfield"), SimpleNamespace(name="Shelbyville")],
    )

    assert contract.matches(value)


def test_missing_properties_resolve_to_none(contract: Contract) -> None:
    errors = contract.errors_for(SimpleNamespace(name="", towns=[]))

    assert errors == [
        {"type": "stannum.constraints.absent", "data": {}, "message": None, "path": ["name"]},
        {"type": "stannum.constraints.absent", "data": {}, "message": None, "path": ["factory", "address"]},
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"required": True, "type": str},
            "message": None,
            "path": ["towns", 1, "name"],
        },
    ]


def test_property_name_overrides_the_error_path() -> None:
    contract = Contract(lambda c: c.property("name", Presence(), property_name="title"))

    assert contract.errors_for(SimpleNamespace(name=None)).to_list()[0]["path"] == ["title"]


@pytest.mark.parametrize("prop", ["", [], True, ["name", ""], 1.5])
def test_invalid_property_names_are_rejected(prop) -> None:
    with pytest.raises(ValueError, match="invalid property name"):
        Contract().add_constraint(Presence(), property=prop)


def test_unscoped_constraint_applies_to_the_whole_value() -> None:
    contract = Contract(lambda c: c.constraint(Type(SimpleNamespace)))

    assert contract.errors_for("x").to_list()[0]["path"] == []
