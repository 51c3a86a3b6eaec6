"""Unit tests for the Constraint base class.

File: tests/unit/constraints/test_constraint_base.py
"""

from __future__ import annotations

from stannum.constraints import Constraint
from stannum.errors import Errors


def test_base_constraint_never_matches() -> None:
    constraint = Constraint()

    assert constraint.matches(None) is False
    assert constraint.does_not_match(None) is True


def test_match_returns_status_and_errors() -> None:
    status, errors = Constraint().match("value")

    assert status is False
    assert errors == [{"type": "stannum.constraints.invalid", "data": {}, "message": None, "path": []}]


def test_negated_match_passes_with_empty_errors() -> None:
    status, errors = Constraint().negated_match("value")

    assert status is True
    assert errors.is_empty


def test_negated_errors_for_uses_the_negated_type() -> None:
    errors = Constraint().negated_errors_for("value")

    assert errors.to_list()[0]["type"] == "stannum.constraints.valid"


def test_type_and_message_options_override_records() -> None:
    constraint = Constraint(type="app.errors.rejected", message="was rejected")

    assert constraint.errors_for(None).to_list() == [
        {"type": "app.errors.rejected", "data": {}, "message": "was rejected", "path": []}
    ]


def test_errors_for_writes_into_a_given_node() -> None:
    errors = Errors()

    Constraint().errors_for(None, errors=errors["name"])

    assert errors.to_list()[0]["path"] == ["name"]


def test_equality_compares_class_and_options() -> None:
    assert Constraint(type="a") == Constraint(type="a")
    assert Constraint(type="a") != Constraint(type="b")


def test_with_options_returns_a_new_constraint() -> None:
    constraint = Constraint(type="a")

    copied = constraint.with_options(message="changed")

    assert copied.options == {"type": "a", "message": "changed"}
    assert constraint.options == {"type": "a"}


def test_copy_has_independent_options() -> None:
    constraint = Constraint(type="a")

    copied = constraint.copy()
    copied.options["type"] = "b"

    assert constraint.type == "a"
