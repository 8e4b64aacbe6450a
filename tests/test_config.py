from __future__ import annotations

import pytest
from pydantic import ValidationError

from andorsearch.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ANDOR_LOG_LEVEL", "ANDOR_RECURSION_LIMIT", "ANDOR_TRACE_DIR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.log_level == "INFO"
    assert settings.recursion_limit == 10000
    assert settings.trace_dir is None


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANDOR_RECURSION_LIMIT", "2500")
    monkeypatch.setenv("ANDOR_TRACE_DIR", "/tmp/traces")
    settings = Settings()
    assert settings.recursion_limit == 2500
    assert settings.trace_dir == "/tmp/traces"


def test_recursion_limit_lower_bound(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANDOR_RECURSION_LIMIT", "10")
    with pytest.raises(ValidationError):
        Settings()


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANDOR_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANDOR_LOG_LEVEL", "bogus")
    with pytest.raises(ValidationError):
        Settings()
