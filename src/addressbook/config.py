"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_DEFAULT_LOG_LEVEL = "WARNING"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no"}


def _env_log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if level not in logging.getLevelNamesMapping():
        return default
    return level


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///data/addressbook.db"
    log_level: str = _DEFAULT_LOG_LEVEL
    seed_sample_data: bool = True

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("ADDRESSBOOK_ENV", cls.environment),
            database_url=os.getenv("ADDRESSBOOK_DATABASE_URL", cls.database_url),
            log_level=_env_log_level("ADDRESSBOOK_LOG_LEVEL", cls.log_level),
            seed_sample_data=_env_bool("ADDRESSBOOK_SEED_SAMPLE", cls.seed_sample_data),
        )


__all__ = ["AppSettings"]
