"""Unit tests for MapContract and HashContract.

File: tests/unit/contracts/test_map_and_hash_contract.py
"""

from __future__ import annotations

import pytest

from stannum.constraints import Presence, Type
from stannum.contracts import HashContract, MapContract


@pytest.fixture
def contract() -> MapContract:
    return MapContract(lambda c: (c.key("name", Type(str)), c.key("age", Type(int, optional=True))))


def test_matches_with_missing_optional_key(contract: MapContract) -> None:
    assert contract.matches({"name": "Alan"})
    assert contract.expected_keys() == ["name", "age"]


def test_reports_invalid_and_extra_keys(contract: MapContract) -> None:
    errors = contract.errors_for({"name": 1, "extra": True})

    assert errors == [
        {"type": "stannum.constraints.hashes.extra_keys", "data": {"value": True}, "message": None, "path": ["extra"]},
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"required": True, "type": str},
            "message": None,
            "path": ["name"],
        },
    ]


def test_non_mapping_fails_the_signature_check(contract: MapContract) -> None:
    errors = contract.errors_for([])

    assert errors.to_list()[0]["type"] == "stannum.constraints.does_not_have_methods"
    assert errors.size == 1


def test_allow_extra_keys() -> None:
    contract = MapContract(lambda c: c.key("name", Presence()), allow_extra_keys=True)

    assert contract.matches({"name": "Alan", "age": 42})
    with pytest.raises(ValueError, match="can't change option 'allow_extra_keys'"):
        contract.with_options(allow_extra_keys=False)


def test_non_string_keys_are_reported_by_repr() -> None:
    contract = MapContract(lambda c: c.key(("x", "y"), Presence()))

    assert contract.errors_for({}).to_list()[0]["path"] == ["('x', 'y')"]


def test_blank_key_is_rejected() -> None:
    with pytest.raises(ValueError, match="invalid property name"):
        MapContract().add_key_constraint("", Presence())


def test_hash_contract_checks_key_and_value_types() -> None:
    contract = HashContract(key_type=str, value_type=int, allow_extra_keys=True)

    assert contract.matches({"a": 1})
    assert contract.errors_for({1: 1, "b": "x"}) == [
        {"type": "stannum.constraints.types.hash.invalid_key", "data": {"keys": [1]}, "message": None, "path": []},
        {"type": "stannum.constraints.is_not_type", "data": {"required": True, "type": int}, "message": None, "path": ["b"]},
    ]


def test_hash_contract_types_are_fixed() -> None:
    with pytest.raises(ValueError, match="can't change option 'key_type'"):
        HashContract().with_options(key_type=str)
