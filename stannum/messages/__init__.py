"""Message strategies - turn (type, data) error records into text."""
from __future__ import annotations

from typing import Any, Protocol

from .strategy import DEFAULT_FORMATTERS, LOCALES_PATH, DefaultStrategy


class MessageStrategy(Protocol):
    """Anything callable as strategy(error_type, **data) -> str."""

    def __call__(self, error_type: str, /, **data: Any) -> str: ...


__all__ = ["DEFAULT_FORMATTERS", "LOCALES_PATH", "DefaultStrategy", "MessageStrategy"]
