"""geoabbrev runtime settings.

All settings are backed by environment variables following the GA_* naming
convention. No side effects on import beyond reading the environment.

Example:
    >>> from geoabbrev.config import settings
    >>> settings.build_workers
    1

Environment Variables:
    GA_BUILD_WORKERS: Languages compiled in parallel by build_catalog (default: 1)
    GA_LOG_DIR: Directory for JSONL build logs (default: unset, no file logging)
    GA_LOG_CONSOLE: Echo structured log lines to stdout (default: off)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _env(name: str, default: str) -> str:
    """Get environment variable with GA_* prefix validation."""
    if not name.startswith("GA_"):
        raise ValueError(f"Only GA_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except Exception:
        return default


def _env_optional(name: str) -> Optional[str]:
    raw = _env(name, "")
    return raw or None


@dataclass(frozen=True)
class Settings:
    """Runtime settings for catalog building.

    Frozen to prevent mutation at runtime. For tests, set environment
    variables and reload this module, or monkeypatch ``settings``.
    """

    build_workers: int = max(1, _env_int("GA_BUILD_WORKERS", 1))
    log_dir: Optional[str] = _env_optional("GA_LOG_DIR")
    log_console: bool = _env_bool("GA_LOG_CONSOLE", False)


settings = Settings()

__all__ = ["settings", "Settings"]
