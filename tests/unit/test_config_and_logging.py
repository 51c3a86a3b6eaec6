"""Unit tests for settings and structured logging.

File: tests/unit/test_config_and_logging.py
"""

from __future__ import annotations

import json

from stannum.constraints import Type
from stannum.contracts import BaseContract
from stannum.logging import LoggerRegistry, configure_logging, contract_logger, get_logger


def test_settings_defaults(fresh_settings) -> None:
    settings = fresh_settings()

    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_JSON is False
    assert settings.MESSAGES_LOCALE == "en"
    assert "passw" in settings.FILTERED_PARAMETERS


def test_settings_read_the_environment(monkeypatch, fresh_settings) -> None:
    monkeypatch.setenv("STANNUM_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("STANNUM_MESSAGES_LOCALE", "fr")

    settings = fresh_settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.MESSAGES_LOCALE == "fr"


def test_logger_registry_caches_loggers(restore_logging) -> None:
    assert LoggerRegistry.get("contracts") is contract_logger()
    assert LoggerRegistry.get("contracts") is not LoggerRegistry.get("messages")


def test_json_logs_redact_sensitive_keys(restore_logging, capsys) -> None:
    configure_logging(level="INFO", json_logs=True)

    get_logger("stannum.test").info("login", user="flynn", password="reindeerflotilla")

    event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert event["event"] == "login"
    assert event["password"] == "[REDACTED]"
    assert event["user"] == "flynn"
    assert event["library"] == "stannum"


def test_contract_building_logs_debug_events(restore_logging, capsys) -> None:
    configure_logging(level="DEBUG", json_logs=True)

    BaseContract().add_constraint(Type(int))

    events = [json.loads(line) for line in capsys.readouterr().out.strip().splitlines()]
    assert any(e["event"] == "constraint_added" and e["constraint"] == "Type" for e in events)
