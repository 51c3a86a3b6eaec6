"""Unit tests for type/presence coercion and the UNDEFINED sentinel.

File: tests/unit/support/test_coercion.py
"""

from __future__ import annotations

import copy

import pytest

from stannum.constraints import Absence, Presence, Type
from stannum.support import UNDEFINED, presence_constraint, type_constraint


def test_type_constraint_from_class() -> None:
    assert type_constraint(int) == Type(int)
    assert type_constraint(int, optional=True) == Type(int, optional=True)


def test_type_constraint_passes_constraints_through() -> None:
    constraint = Presence()

    assert type_constraint(constraint) is constraint
    assert type_constraint(Type(int), required=False).optional


def test_type_constraint_allows_none_when_asked() -> None:
    assert type_constraint(None, allow_none=True) is None
    with pytest.raises(TypeError, match="item type must be a class or a constraint"):
        type_constraint(None, as_="item type")


def test_type_constraint_uses_the_builder() -> None:
    assert type_constraint(str, builder=lambda value, **options: Presence(**options)) == Presence()


def test_presence_constraint() -> None:
    assert presence_constraint(True) == Presence()
    assert presence_constraint(False) == Absence()
    with pytest.raises(TypeError, match="block must be true or false or a constraint"):
        presence_constraint("yes", as_="block")


def test_undefined_sentinel() -> None:
    assert repr(UNDEFINED) == "UNDEFINED"
    assert not UNDEFINED
    assert UNDEFINED is not None
    assert copy.deepcopy(UNDEFINED) is UNDEFINED
    assert type(UNDEFINED)() is UNDEFINED
