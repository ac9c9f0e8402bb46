"""Shared CLI dependency helpers."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from addressbook.config import AppSettings
from addressbook.container import ServiceContainer, build_container


def configure_logging(level: str) -> None:
    """Route log records to stderr through Rich."""

    root = logging.getLogger()
    root.setLevel(level)
    if any(isinstance(handler, RichHandler) for handler in root.handlers):
        return
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Return a cached service container for CLI commands."""

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    settings = AppSettings.from_env()
    configure_logging(settings.log_level)
    return build_container(settings)


def reset_container() -> None:
    """Clear the cached container (useful for tests)."""

    get_container.cache_clear()
