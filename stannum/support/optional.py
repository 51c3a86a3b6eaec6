"""Resolution of the optional/required option pair."""
from __future__ import annotations

from typing import Any


def resolve(
    *,
    optional: bool | None = None,
    required: bool | None = None,
    required_by_default: bool = True,
    **options: Any,
) -> dict[str, Any]:
    """Merge a resolved ``required`` flag into options.

    Either flag may be given; when both are given they must agree.
    """
    default = _validate_option(required_by_default, as_="required_by_default")
    return {
        **options,
        "required": _required(
            default=default,
            optional=_validate_option(optional, as_="optional"),
            required=_validate_option(required, as_="required"),
        ),
    }


def _required(*, default: bool, optional: bool | None, required: bool | None) -> bool:
    if optional is None and required is None: return default
    if required is None: return not optional
    if optional is None: return required
    if required != optional: return required
    raise ValueError("required and optional must match")


def _validate_option(option: Any, *, as_: str) -> bool | None:
    if option is None or option is True or option is False:
        return option
    raise TypeError(f"{as_} must be true or false")


class OptionalMixin:
    """Adds optional/required readers backed by options["required"]."""

    options: dict[str, Any]

    @property
    def required(self) -> bool: return bool(self.options.get("required", True))

    @property
    def optional(self) -> bool: return not self.required
