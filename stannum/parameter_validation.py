"""Parameter Validation Decorator

Checks every call of a function against a ParametersContract before the
function runs:

    @validate_parameters(lambda c: (
        c.argument("name", str),
        c.keyword("quantity", int, default=True),
    ))
    def order(name, *, quantity=1): ...

    order(3)
    # InvalidParametersError: invalid parameters for order: arguments.name: is not a str

Positional arguments are matched as a list, keyword arguments as a dict.
The keyword named by `block` is taken out of the keywords and matched as
the call's block.
"""
from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, TypeVar

from stannum.contracts.parameters_contract import ParametersContract
from stannum.errors import Errors
from stannum.logging import validation_logger
from stannum.messages import MessageStrategy

F = TypeVar("F", bound=Callable[..., Any])


class InvalidParametersError(TypeError):
    """Raised when a decorated function is called with invalid parameters.

    Attributes:
        errors: The Errors from matching the call.
        function: The decorated function.
    """

    def __init__(self, function: Callable[..., Any], errors: Errors, strategy: MessageStrategy | None = None) -> None:
        self.function = function
        self.errors = errors
        super().__init__(f"invalid parameters for {function.__qualname__}: {errors.summary(strategy)}")


def validate_parameters(
    define: Callable[[ParametersContract.Builder], Any],
    *,
    block: str | None = None,
    method: bool = False,
    strategy: MessageStrategy | None = None,
) -> Callable[[F], F]:
    """Build a ParametersContract once and check each call against it.

    Args:
        define: Receives the contract's builder.
        block: Name of the keyword argument treated as the block.
        method: Skip the first positional argument (self or cls).
        strategy: Message strategy for the error summary.
    """
    contract = ParametersContract(define)

    def parameters_for(args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
        keywords = dict(kwargs)
        return {
            "arguments": list(args[1:] if method else args),
            "keywords": keywords,
            "block": keywords.pop(block, None) if block else None,
        }

    def check(func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        status, errors = contract.match(parameters_for(args, kwargs))
        if status: return
        validation_logger().warning("invalid_parameters", function=func.__qualname__, error_count=len(errors))
        raise InvalidParametersError(func, errors, strategy)

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                check(func, args, kwargs)
                return await func(*args, **kwargs)

            async_wrapper.contract = contract
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check(func, args, kwargs)
            return func(*args, **kwargs)

        wrapper.contract = contract
        return wrapper

    return decorator
