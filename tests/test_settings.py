from __future__ import annotations

import logging

import pytest

from core import logging as log_setup
from core.logging import configure_logging
from core.settings import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "HOST", "APP_ENV", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.port == 3000
    assert settings.environment == "development"
    assert not settings.is_test


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("APP_ENV", "Test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.port == 8080
    assert settings.is_test
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("value", ["eighty", "0", "70000"])
def test_invalid_port(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("PORT", value)
    with pytest.raises(ValueError):
        Settings()


def test_configure_logging_is_idempotent() -> None:
    root = logging.getLogger()
    configure_logging("INFO")
    count = len(root.handlers)
    configure_logging("WARNING")
    assert len(root.handlers) == count
    assert root.level == logging.WARNING
    assert root.handlers.count(log_setup._handler) == 1
