"""Unit tests for KeywordsContract.

File: tests/unit/contracts/test_keywords_contract.py
"""

from __future__ import annotations

import pytest

from stannum.contracts import KeywordsContract


@pytest.fixture
def contract() -> KeywordsContract:
    contract = KeywordsContract()
    contract.add_keyword_constraint("name", str)
    contract.add_keyword_constraint("size", int, default=True)
    return contract


def test_omitted_required_keyword_fails(contract: KeywordsContract) -> None:
    assert contract.errors_for({}).to_list() == [
        {"type": "stannum.constraints.is_not_type", "data": {"required": True, "type": str}, "message": None, "path": ["name"]}
    ]


def test_omitted_default_keyword_passes(contract: KeywordsContract) -> None:
    assert contract.matches({"name": "Alan"})
    assert not contract.matches({"name": "Alan", "size": None})


def test_extra_keywords_fail(contract: KeywordsContract) -> None:
    assert contract.errors_for({"name": "Alan", "color": "red"}).to_list() == [
        {
            "type": "stannum.constraints.parameters.extra_keywords",
            "data": {"value": "red"},
            "message": None,
            "path": ["color"],
        }
    ]


def test_non_string_keys_fail_the_sanity_check(contract: KeywordsContract) -> None:
    assert contract.errors_for({1: "x", "name": "Alan"}).to_list() == [
        {"type": "stannum.constraints.types.hash.invalid_key", "data": {"keys": [1]}, "message": None, "path": []}
    ]


def test_variadic_values_are_reported_under_their_name(contract: KeywordsContract) -> None:
    contract.set_variadic_value_constraint(int, name="options")

    assert contract.matches({"name": "Alan", "count": 3})
    assert contract.errors_for({"name": "Alan", "color": "red"}).to_list()[0]["path"] == ["options", "color"]

    with pytest.raises(RuntimeError, match="variadic keywords constraint is already set"):
        contract.set_variadic_value_constraint(int)


def test_keyword_validation() -> None:
    with pytest.raises(TypeError, match="keyword must be a string"):
        KeywordsContract().add_keyword_constraint(1, int)
    with pytest.raises(ValueError, match="keyword can't be blank"):
        KeywordsContract().add_keyword_constraint("", int)
