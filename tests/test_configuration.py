"""Mini README: Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pocketledger.configuration import PocketLedgerSettings, get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_keep_menu_output_quiet() -> None:
    settings = PocketLedgerSettings()

    assert settings.log_level == "WARNING"
    assert settings.currency_symbol == "$"
    assert settings.id_length == 8


def test_environment_overrides_are_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETLEDGER_LOG_LEVEL", "debug")
    monkeypatch.setenv("POCKETLEDGER_CURRENCY_SYMBOL", "€")
    monkeypatch.setenv("POCKETLEDGER_ID_LENGTH", "10")

    settings = get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.currency_symbol == "€"
    assert settings.id_length == 10
    assert get_settings() is settings


@pytest.mark.parametrize(
    "variable, value",
    [("POCKETLEDGER_LOG_LEVEL", "chatty"), ("POCKETLEDGER_ID_LENGTH", "4")],
)
def test_invalid_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, variable: str, value: str
) -> None:
    monkeypatch.setenv(variable, value)

    with pytest.raises(ValidationError):
        PocketLedgerSettings()
