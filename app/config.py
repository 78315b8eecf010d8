"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"


@dataclass(frozen=True)
class FundingSettings:
    """
    Runtime settings for the funding endpoints.
    """

    top_n_default: int = 3
    top_n_max: int = 1000


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    return LoggingSettings(level=_get_str_env("LOG_LEVEL", "INFO").upper())


@lru_cache(maxsize=1)
def get_funding_settings() -> FundingSettings:
    """
    Return cached funding settings from environment variables.

    ``top_n_max`` is never lower than ``top_n_default``.
    """

    top_n_default = max(0, _get_int_env("FUNDING_TOP_N_DEFAULT", 3))
    top_n_max = max(top_n_default, _get_int_env("FUNDING_TOP_N_MAX", 1000))
    return FundingSettings(top_n_default=top_n_default, top_n_max=top_n_max)
