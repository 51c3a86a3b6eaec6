"""Default Message Strategy

Generates messages for error records from YAML locale files:

    strategy = DefaultStrategy()
    strategy("stannum.constraints.absent")                            # "is nil or empty"
    strategy("stannum.constraints.is_not_type", type=int, required=False)  # "is not a int or nil"

Locale files are nested mappings keyed by locale, then by the dotted parts
of the error type. Files later in the load path override earlier ones.
Placeholders like %{name} are filled from the record's data.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Callable

import yaml

from stannum.config import get_settings
from stannum.logging import messages_logger

LOCALES_PATH = Path(__file__).parent / "locales"

_PLACEHOLDER = re.compile(r"%\{(\w+)\}")

Formatter = Callable[[str, str, dict[str, Any]], str]


def _type_formatter(error_type: str, message: str, data: dict[str, Any]) -> str:
    return message if data.get("required", True) else f"{message} or nil"


DEFAULT_FORMATTERS: dict[str, Formatter] = {
    "stannum.constraints.is_not_type": _type_formatter,
    "stannum.constraints.is_type": _type_formatter,
}


def _display(value: Any) -> str:
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, tuple) and value and all(isinstance(item, type) for item in value):
        return " or ".join(item.__name__ for item in value)
    return str(value)


def _deep_merge(source: dict[str, Any], target: dict[str, Any]) -> dict[str, Any]:
    merged = dict(source)
    for key, value in target.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class DefaultStrategy:
    """Message strategy backed by YAML locale files.

    Args:
        configuration: Preloaded configuration; skips reading the load path.
        load_path: Files or directories of .yml files. Defaults to the bundled
            locale followed by Settings.MESSAGES_LOAD_PATH.
        locale: Top-level key to read messages from. Defaults to
            Settings.MESSAGES_LOCALE.
        formatters: Post-processing per error type, applied before interpolation.
    """

    def __init__(
        self,
        configuration: dict[str, Any] | None = None,
        load_path: list[str | Path] | None = None,
        locale: str | None = None,
        formatters: dict[str, Formatter] | None = None,
    ) -> None:
        settings = get_settings()
        self.locale = locale or settings.MESSAGES_LOCALE
        if load_path is None:
            load_path = [LOCALES_PATH / f"{self.locale}.yml", *settings.MESSAGES_LOAD_PATH]
        self.load_path = [Path(path) for path in load_path]
        self.formatters = {**DEFAULT_FORMATTERS, **(formatters or {})}
        self._configuration = configuration

    @property
    def configuration(self) -> dict[str, Any]:
        if self._configuration is None:
            self._configuration = self.load_configuration()
        return self._configuration

    def __call__(self, error_type: str, /, **data: Any) -> str:
        if not isinstance(error_type, str):
            raise TypeError("error type must be a string")
        message = self.generate_message(error_type, data)
        return self.interpolate(message, data)

    def reload_configuration(self) -> DefaultStrategy:
        self._configuration = self.load_configuration()
        return self

    def generate_message(self, error_type: str, data: dict[str, Any]) -> str:
        node: Any = self.configuration.get(self.locale, {})
        for part in error_type.split("."):
            node = node.get(part) if isinstance(node, dict) else None
            if node is None: break
        if node is None:
            return f"no message defined for {error_type!r}"
        if isinstance(node, dict):
            return f"configuration is a namespace at {error_type}"
        message = str(node)
        formatter = self.formatters.get(error_type)
        return formatter(error_type, message, data) if formatter else message

    @staticmethod
    def interpolate(message: str, data: dict[str, Any]) -> str:
        def replace(match: re.Match[str]) -> str:
            key = match.group(1)
            return _display(data[key]) if key in data else match.group(0)

        return _PLACEHOLDER.sub(replace, message)

    def load_configuration(self) -> dict[str, Any]:
        configuration: dict[str, Any] = {}
        files = [file for path in self.load_path for file in self._expand(path)]
        for filename in files:
            configuration = _deep_merge(configuration, self.read_configuration(filename))
        messages_logger().info("messages_loaded", locale=self.locale, files=[str(f) for f in files])
        return configuration

    @staticmethod
    def read_configuration(filename: Path) -> dict[str, Any]:
        if filename.suffix not in (".yml", ".yaml"):
            raise ValueError(f"unable to load configuration file {filename} with extension {filename.suffix}")
        with filename.open(encoding="utf-8") as file:
            return yaml.safe_load(file) or {}

    @staticmethod
    def _expand(path: Path) -> list[Path]:
        if path.is_dir():
            return sorted([*path.glob("*.yml"), *path.glob("*.yaml")])
        return [path]
