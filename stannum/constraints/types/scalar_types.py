"""Type shortcuts for scalar values."""
from __future__ import annotations

import collections.abc
import datetime
import decimal
from typing import Any

from stannum.constraints.type import Type


class StringType(Type):
    def __init__(self, **options: Any) -> None:
        super().__init__(str, **options)


class IntegerType(Type):
    """Matches ints. Booleans are excluded even though bool subclasses int."""

    def __init__(self, **options: Any) -> None:
        super().__init__(int, **options)

    def matches_type(self, actual: Any) -> bool:
        if isinstance(actual, bool): return False
        return super().matches_type(actual)


class FloatType(Type):
    def __init__(self, **options: Any) -> None:
        super().__init__(float, **options)


class DecimalType(Type):
    def __init__(self, **options: Any) -> None:
        super().__init__(decimal.Decimal, **options)


class DateType(Type):
    def __init__(self, **options: Any) -> None:
        super().__init__(datetime.date, **options)


class DateTimeType(Type):
    def __init__(self, **options: Any) -> None:
        super().__init__(datetime.datetime, **options)


class TimeType(Type):
    def __init__(self, **options: Any) -> None:
        super().__init__(datetime.time, **options)


class CallableType(Type):
    """Matches functions, methods, classes and any object defining __call__."""

    def __init__(self, **options: Any) -> None:
        super().__init__(collections.abc.Callable, **options)


class NilType(Type):
    """Matches only None."""

    NEGATED_TYPE = "stannum.constraints.types.is_nil"
    TYPE = "stannum.constraints.types.is_not_nil"

    def __init__(self, **options: Any) -> None:
        super().__init__(type(None), **options)
