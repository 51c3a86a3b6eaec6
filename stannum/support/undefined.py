"""Sentinel for parameters that were not supplied at all."""
from __future__ import annotations


class _Undefined:
    """Distinct from None: the argument or keyword was omitted, not passed as None."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "UNDEFINED"

    def __bool__(self) -> bool: return False

    def __copy__(self) -> _Undefined: return self

    def __deepcopy__(self, memo: dict) -> _Undefined: return self


UNDEFINED = _Undefined()
