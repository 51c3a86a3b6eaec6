"""Unit tests for duck-typed Signature constraints.

File: tests/unit/constraints/test_signature.py
"""

from __future__ import annotations

import pytest

from stannum.constraints import Capability, Signature


def test_signature_matches_values_with_every_method() -> None:
    constraint = Signature(Capability.INDEXABLE, Capability.SIZED)

    assert constraint.matches([])
    assert constraint.matches("abc")
    assert not constraint.matches(1)


def test_signature_accepts_plain_method_names() -> None:
    class Reader:
        def read(self) -> str:
            return ""

    assert Signature("read").matches(Reader())
    assert Signature("read").expected_methods == ["read"]


def test_signature_errors_list_missing_methods() -> None:
    constraint = Signature(Capability.INDEXABLE, Capability.SIZED)

    assert constraint.errors_for({1, 2}).to_list() == [
        {
            "type": "stannum.constraints.does_not_have_methods",
            "data": {"methods": ["__getitem__", "__len__"], "missing": ["__getitem__"]},
            "message": None,
            "path": [],
        }
    ]


def test_does_not_match_requires_every_method_missing() -> None:
    constraint = Signature(Capability.INDEXABLE, Capability.SIZED)

    assert constraint.does_not_match(1)
    assert not constraint.does_not_match({1, 2})
    assert not constraint.matches({1, 2})


def test_prebuilt_signatures() -> None:
    assert Signature.Tuple().matches((1, 2))
    assert not Signature.Tuple().matches({1, 2})
    assert Signature.Map().matches({"a": 1})
    assert not Signature.Map().matches([1])


def test_signature_requires_methods() -> None:
    with pytest.raises(ValueError, match="expected methods can't be blank"):
        Signature()
    with pytest.raises(TypeError, match="expected method must be a string"):
        Signature(1)
