"""Tests for environment-driven settings."""

import pytest

from video_mock.core.config import AppSettings, LogSettings


def test_port_defaults_to_3000(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("APP_PORT", raising=False)

    assert AppSettings().port == 3000


def test_port_read_from_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8081")

    assert AppSettings().port == 8081


def test_port_read_from_prefixed_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("APP_PORT", "9090")

    assert AppSettings().port == 9090


def test_port_out_of_range_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "70000")

    with pytest.raises(ValueError):
        AppSettings()


def test_log_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "plain")

    cfg = LogSettings()

    assert cfg.level == "debug"
    assert cfg.format == "plain"
    assert cfg.request_id_header == "X-Request-ID"
