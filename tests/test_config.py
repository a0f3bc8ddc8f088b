from __future__ import annotations

import pytest

from circuit_load.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CIRCUIT_LOAD_DEFAULT_VOLTAGE", "CIRCUIT_LOAD_DEFAULT_BREAKER_RATING"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "circuit-load"
    assert settings.default_voltage == 120
    assert settings.default_breaker_rating == 15


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CIRCUIT_LOAD_DEFAULT_VOLTAGE", "240")
    monkeypatch.setenv("CIRCUIT_LOAD_SEED_DEMO_CIRCUIT", "false")

    settings = Settings(_env_file=None)

    assert settings.default_voltage == 240
    assert settings.seed_demo_circuit is False


def test_settings_reject_non_positive_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CIRCUIT_LOAD_DEFAULT_BREAKER_RATING", "0")

    with pytest.raises(ValueError):
        Settings(_env_file=None)
