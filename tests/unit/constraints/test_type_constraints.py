"""Unit tests for Type and the typed shortcuts.

File: tests/unit/constraints/test_type_constraints.py
"""

from __future__ import annotations

import collections.abc
import datetime

import pytest

from stannum.constraints import Type
from stannum.constraints.types import (
    ArrayType,
    CallableType,
    DateTimeType,
    DateType,
    FloatType,
    HashType,
    IntegerType,
    NilType,
    StringType,
)
from stannum.support.type_registry import register_type


def test_type_matches_instances() -> None:
    constraint = Type(int)

    assert constraint.matches(3)
    assert not constraint.matches("3")
    assert not constraint.matches(None)


def test_type_accepts_a_tuple_of_classes() -> None:
    assert Type((int, float)).matches(1.5)


def test_optional_type_matches_none() -> None:
    constraint = Type(str, optional=True)

    assert constraint.matches(None)
    assert not constraint.does_not_match(None)
    assert constraint.required is False


def test_type_errors_carry_type_and_required() -> None:
    assert Type(int).errors_for("x").to_list() == [
        {"type": "stannum.constraints.is_not_type", "data": {"required": True, "type": int}, "message": None, "path": []}
    ]
    assert Type(int).negated_errors_for(3).to_list() == [
        {"type": "stannum.constraints.is_type", "data": {"required": True, "type": int}, "message": None, "path": []}
    ]


def test_type_names_resolve_through_the_registry() -> None:
    constraint = Type("Gadget")

    @register_type
    class Gadget:
        pass

    assert constraint.matches(Gadget())
    assert constraint.expected_type is Gadget


def test_unregistered_type_name_fails_on_use() -> None:
    constraint = Type("Missing")

    with pytest.raises(ValueError, match="Type 'Missing' not registered"):
        constraint.matches(1)


@pytest.mark.parametrize(("expected_type", "exception"), [(3, TypeError), ("", ValueError)])
def test_type_rejects_invalid_expected_types(expected_type, exception) -> None:
    with pytest.raises(exception):
        Type(expected_type)


def test_conflicting_optional_and_required_raise() -> None:
    with pytest.raises(ValueError, match="required and optional must match"):
        Type(int, optional=True, required=True)


def test_type_equality_and_with_options() -> None:
    assert Type(int) == Type(int)
    assert Type(int) != Type(str)
    assert Type(int).with_options(required=False).matches(None)


@pytest.mark.parametrize(
    ("constraint", "valid", "invalid"),
    [
        (StringType(), "x", 1),
        (IntegerType(), 1, True),
        (FloatType(), 1.5, 1),
        (DateType(), datetime.date(2024, 1, 1), "2024-01-01"),
        (DateTimeType(), datetime.datetime(2024, 1, 1), datetime.date(2024, 1, 1)),
        (CallableType(), len, "len"),
        (NilType(), None, 0),
    ],
)
def test_typed_shortcuts(constraint, valid, invalid) -> None:
    assert constraint.matches(valid)
    assert not constraint.matches(invalid)


def test_nil_type_identifiers() -> None:
    assert NilType().errors_for(0).to_list()[0]["type"] == "stannum.constraints.types.is_not_nil"
    assert NilType().negated_errors_for(None).to_list()[0]["type"] == "stannum.constraints.types.is_nil"


def test_callable_type_reports_the_abstract_type() -> None:
    data = CallableType().errors_for(1).to_list()[0]["data"]

    assert data == {"required": True, "type": collections.abc.Callable}


def test_array_type_reports_items_by_index() -> None:
    constraint = ArrayType(item_type=str)

    assert constraint.matches(["a", "b"])
    assert constraint.errors_for(["a", 2]).to_list() == [
        {"type": "stannum.constraints.is_not_type", "data": {"required": True, "type": str}, "message": None, "path": [1]}
    ]


def test_array_type_reports_non_lists() -> None:
    assert ArrayType().errors_for("ab").to_list() == [
        {
            "type": "stannum.constraints.is_not_type",
            "data": {"allow_empty": True, "required": True, "type": list},
            "message": None,
            "path": [],
        }
    ]


def test_array_type_rejects_empty_lists_when_not_allowed() -> None:
    constraint = ArrayType(allow_empty=False)

    assert not constraint.matches([])
    assert constraint.errors_for([]).to_list() == [
        {
            "type": "stannum.constraints.absent",
            "data": {"allow_empty": False, "required": True, "type": list},
            "message": None,
            "path": [],
        }
    ]


def test_array_type_negation_only_checks_the_type() -> None:
    constraint = ArrayType(item_type=str)

    assert not constraint.does_not_match([1])
    assert constraint.does_not_match("x")


def test_array_type_rejects_invalid_item_types() -> None:
    with pytest.raises(TypeError, match="item type must be a class or a constraint"):
        ArrayType(item_type=3)


def test_hash_type_reports_invalid_keys_together() -> None:
    constraint = HashType(key_type=str)

    assert constraint.errors_for({1: "a", 2: "b", "c": "d"}).to_list() == [
        {"type": "stannum.constraints.types.hash.invalid_key", "data": {"keys": [1, 2]}, "message": None, "path": []}
    ]


def test_hash_type_reports_values_under_their_key() -> None:
    constraint = HashType(value_type=int)

    assert constraint.matches({"a": 1})
    assert constraint.errors_for({"a": 1, "b": "2"}).to_list() == [
        {"type": "stannum.constraints.is_not_type", "data": {"required": True, "type": int}, "message": None, "path": ["b"]}
    ]


def test_optional_hash_type_matches_none() -> None:
    assert HashType(optional=True, allow_empty=False).matches(None)
