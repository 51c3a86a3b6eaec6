"""Type constraints for common Python types."""
from .array_type import ArrayType
from .hash_type import HashType
from .scalar_types import (
    CallableType,
    DateTimeType,
    DateType,
    DecimalType,
    FloatType,
    IntegerType,
    NilType,
    StringType,
    TimeType,
)

__all__ = [
    "ArrayType",
    "HashType",
    "CallableType",
    "DateTimeType",
    "DateType",
    "DecimalType",
    "FloatType",
    "IntegerType",
    "NilType",
    "StringType",
    "TimeType",
]
