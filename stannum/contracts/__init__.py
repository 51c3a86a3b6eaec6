"""Contracts - ordered, composable collections of constraints."""
from .definition import Definition, PropertyType
from .base import BaseContract
from .property_contract import PropertyContract
from .tuple_contract import TupleContract
from .array_contract import ArrayContract
from .map_contract import MapContract
from .hash_contract import HashContract
from .parameters import ArgumentsContract, KeywordsContract, SignatureContract
from .parameters_contract import ParametersContract

__all__ = [
    "Definition",
    "PropertyType",
    "BaseContract",
    "PropertyContract",
    "TupleContract",
    "ArrayContract",
    "MapContract",
    "HashContract",
    "ArgumentsContract",
    "KeywordsContract",
    "SignatureContract",
    "ParametersContract",
]
