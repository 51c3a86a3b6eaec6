"""Stannum - runtime validation with composable constraints and contracts.

    from stannum import Contract, Presence, Type

    contract = Contract(lambda c: (
        c.property("name", Presence()),
        c.property("price", Type(int)),
    ))

    status, errors = contract.match(widget)
    errors.to_list()
    # [{"type": "stannum.constraints.absent", "message": None, "data": {}, "path": ["name"]}]

Failures never raise: they are returned as an Errors tree. Exceptions are
reserved for mistakes made while building constraints and contracts.
"""
__version__ = "0.1.0"

from stannum.errors import Errors
from stannum.constraints import (
    Absence,
    Anything,
    Boolean,
    Capability,
    Constraint,
    Custom,
    Delegator,
    DoNotMatchProperty,
    Enum,
    Equality,
    Format,
    Identity,
    MatchProperty,
    Nothing,
    Presence,
    Signature,
    Type,
    Union,
    Uuid,
    constraint,
)
from stannum.contract import Contract
from stannum.contracts import (
    ArrayContract,
    HashContract,
    MapContract,
    ParametersContract,
    TupleContract,
)
from stannum.messages import DefaultStrategy
from stannum.parameter_validation import InvalidParametersError, validate_parameters
from stannum.support import UNDEFINED, register_type

__all__ = [
    "__version__",
    "Errors",
    "Absence",
    "Anything",
    "Boolean",
    "Capability",
    "Constraint",
    "Custom",
    "Delegator",
    "DoNotMatchProperty",
    "Enum",
    "Equality",
    "Format",
    "Identity",
    "MatchProperty",
    "Nothing",
    "Presence",
    "Signature",
    "Type",
    "Union",
    "Uuid",
    "constraint",
    "Contract",
    "ArrayContract",
    "HashContract",
    "MapContract",
    "ParametersContract",
    "TupleContract",
    "DefaultStrategy",
    "InvalidParametersError",
    "validate_parameters",
    "UNDEFINED",
    "register_type",
]
