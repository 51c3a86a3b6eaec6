"""Constraints - atomic predicates reporting typed error records."""
from .base import Constraint
from .anything import Anything, Nothing
from .boolean import Boolean
from .custom import Custom, constraint
from .delegator import Delegator
from .enum import Enum
from .equality import Equality
from .format import Format, Uuid
from .identity import Identity
from .presence import Absence, Presence
from .signature import Capability, MapSignature, Signature, TupleSignature
from .type import Type
from .union import Union
from .tuples import ExtraItems
from .hashes import ExtraKeys
from .parameters import ExtraArguments, ExtraKeywords, VariadicItems, VariadicValues
from .properties import DoNotMatchProperty, MatchProperty
from . import types

__all__ = [
    "Constraint",
    "Anything",
    "Nothing",
    "Boolean",
    "Custom",
    "constraint",
    "Delegator",
    "Enum",
    "Equality",
    "Format",
    "Uuid",
    "Identity",
    "Absence",
    "Presence",
    "Capability",
    "MapSignature",
    "Signature",
    "TupleSignature",
    "Type",
    "Union",
    "ExtraItems",
    "ExtraKeys",
    "ExtraArguments",
    "ExtraKeywords",
    "VariadicItems",
    "VariadicValues",
    "DoNotMatchProperty",
    "MatchProperty",
    "types",
]
