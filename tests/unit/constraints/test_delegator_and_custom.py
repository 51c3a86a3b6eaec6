"""Unit tests for Delegator and Custom constraints.

File: tests/unit/constraints/test_delegator_and_custom.py
"""

from __future__ import annotations

import pytest

from stannum.constraints import Custom, Delegator, Presence, Type, constraint


def test_delegator_forwards_to_its_receiver() -> None:
    delegator = Delegator(Type(int))

    assert delegator.matches(1)
    assert delegator.type == "stannum.constraints.is_not_type"
    assert delegator.options == Type(int).options
    assert delegator.errors_for("x") == Type(int).errors_for("x")


def test_delegator_receiver_can_be_replaced() -> None:
    delegator = Delegator(Type(int))

    delegator.receiver = Presence()

    assert delegator.matches("x")
    assert delegator.errors_for(None).to_list()[0]["type"] == "stannum.constraints.absent"


def test_delegator_requires_a_constraint() -> None:
    with pytest.raises(TypeError, match="receiver must be a Constraint"):
        Delegator(int)
    with pytest.raises(TypeError):
        Delegator(Presence()).receiver = "present"


@constraint(type="app.constraints.is_even", negated_type="app.constraints.is_odd")
def odd(value):
    return isinstance(value, int) and value % 2 == 1


def test_constraint_decorator_builds_a_custom_constraint() -> None:
    assert isinstance(odd, Custom)
    assert odd.matches(3)
    assert not odd.matches(4)
    assert odd.errors_for(4).to_list() == [{"type": "app.constraints.is_even", "data": {}, "message": None, "path": []}]
    assert odd.negated_errors_for(3).to_list()[0]["type"] == "app.constraints.is_odd"
    assert odd.__name__ == "odd"


def test_bare_constraint_decorator_uses_base_identifiers() -> None:
    @constraint
    def positive(value):
        return value > 0

    assert positive.errors_for(-1).to_list()[0]["type"] == "stannum.constraints.invalid"


def test_custom_predicate_exceptions_propagate() -> None:
    custom = Custom(lambda value: value > 0)

    with pytest.raises(TypeError):
        custom.matches("x")


def test_custom_requires_a_callable() -> None:
    with pytest.raises(TypeError, match="predicate must be callable"):
        Custom("not callable")
