"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants (default expiration, backing store
selection, HTTP timeouts and limits). Nothing in ``core`` reads these
directly; they are passed to constructors by the caller.
"""

from __future__ import annotations

import os
from typing import Optional


def _env(name: str) -> Optional[str]:
    # Unset and blank variables both mean "use the default"
    raw = os.environ.get(name, "").strip()
    return raw or None


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name)
    try:
        return default if raw is None else int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    try:
        return default if raw is None else float(raw)
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    return _env(name) or default


# Expiration applied when a write carries no override (720 hours)
DEFAULT_EXPIRATION = _env_float("EXPIRING_DEFAULT_EXPIRATION", 720 * 60 * 60.0)

# Backing store
CACHE_STORE = _env_str("CACHE_STORE", "memory").lower()
CACHE_STORE_URL = _env_str("CACHE_STORE_URL", "")
CACHE_STORE_TIMEOUT = _env_float("CACHE_STORE_TIMEOUT", 20.0)
CACHE_MAXSIZE = _env_int("CACHE_MAXSIZE", 10_000)

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)
