"""Unit tests for MatchProperty and DoNotMatchProperty.

File: tests/unit/constraints/test_property_matching.py
"""

from __future__ import annotations

import pytest

from stannum.constraints import DoNotMatchProperty, MatchProperty


def test_match_property_filters_sensitive_values() -> None:
    constraint = MatchProperty("password", "confirmation")

    assert constraint.matches({"password": "tronlives", "confirmation": "tronlives"})
    assert constraint.errors_for({"password": "tronlives", "confirmation": "flynn"}).to_list() == [
        {
            "type": "stannum.constraints.is_not_equal_to",
            "data": {"expected": "[FILTERED]", "actual": "[FILTERED]"},
            "message": None,
            "path": ["confirmation"],
        }
    ]


def test_match_property_reports_plain_values() -> None:
    constraint = MatchProperty("email", "email_confirmation")
    actual = {"email": "user@example.com", "email_confirmation": "other@example.com"}

    assert constraint.errors_for(actual).to_list()[0]["data"] == {
        "expected": "user@example.com",
        "actual": "other@example.com",
    }


def test_match_property_skips_empty_values_when_allowed() -> None:
    constraint = MatchProperty("email", "email_confirmation", allow_empty=True)

    assert constraint.matches({"email": "", "email_confirmation": "x"})
    assert constraint.matches({"email": "x", "email_confirmation": ""})


def test_match_property_negated_errors() -> None:
    constraint = MatchProperty("email", "email_confirmation")
    actual = {"email": "a", "email_confirmation": "a"}

    assert not constraint.does_not_match(actual)
    assert constraint.negated_errors_for(actual).to_list() == [
        {"type": "stannum.constraints.is_equal_to", "data": {}, "message": None, "path": ["email_confirmation"]}
    ]


def test_match_property_rejects_non_mappings() -> None:
    constraint = MatchProperty("email", "email_confirmation")

    assert not constraint.matches(None)
    assert not constraint.does_not_match(None)
    assert constraint.errors_for(None).to_list()[0]["type"] == "stannum.constraints.does_not_have_methods"


def test_do_not_match_property() -> None:
    constraint = DoNotMatchProperty("name", "nickname", "alias")
    actual = {"name": "Kevin", "nickname": "Kevin", "alias": "Flynn"}

    assert not constraint.matches(actual)
    assert constraint.errors_for(actual).to_list() == [
        {"type": "stannum.constraints.is_equal_to", "data": {}, "message": None, "path": ["nickname"]}
    ]
    assert constraint.matches({"name": "Kevin", "nickname": "Flynn", "alias": "Clu"})


def test_property_names_are_validated() -> None:
    with pytest.raises(ValueError, match="property names can't be empty"):
        MatchProperty("password")
    with pytest.raises(TypeError, match="reference name must be a string"):
        MatchProperty(1, "confirmation")
    with pytest.raises(ValueError, match="property name at 0 can't be blank"):
        MatchProperty("password", "")
