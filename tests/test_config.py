from __future__ import annotations

import pytest

from app.config import get_funding_settings, get_logging_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_funding_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_funding_settings.cache_clear()
    get_logging_settings.cache_clear()


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("FUNDING_TOP_N_DEFAULT", raising=False)
    monkeypatch.delenv("FUNDING_TOP_N_MAX", raising=False)
    settings = get_funding_settings()
    assert (settings.top_n_default, settings.top_n_max) == (3, 1000)


def test_max_is_never_below_default(monkeypatch) -> None:
    monkeypatch.setenv("FUNDING_TOP_N_DEFAULT", "5")
    monkeypatch.setenv("FUNDING_TOP_N_MAX", "2")
    settings = get_funding_settings()
    assert (settings.top_n_default, settings.top_n_max) == (5, 5)


def test_invalid_integer_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("FUNDING_TOP_N_DEFAULT", "three")
    monkeypatch.delenv("FUNDING_TOP_N_MAX", raising=False)
    assert get_funding_settings().top_n_default == 3


def test_log_level_upper_cased(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_logging_settings().level == "DEBUG"
