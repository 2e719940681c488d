"""
Environment-driven settings.

Values are read on every call so tests (and reloads) can change the
environment without re-importing modules. Malformed values fall back to the
default instead of failing startup.
"""

from __future__ import annotations

import os

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: tuple[str, ...]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def db_pool_min_size() -> int:
    return max(1, _env_int("DB_POOL_MIN_SIZE", 1))


def db_pool_max_size() -> int:
    return max(db_pool_min_size(), _env_int("DB_POOL_MAX_SIZE", 5))


def db_command_timeout_s() -> float:
    return _env_float("DB_COMMAND_TIMEOUT_S", 30.0)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_allow_origins() -> list[str]:
    return _env_list("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)


def bcrypt_rounds() -> int:
    # bcrypt only accepts a cost between 4 and 31.
    return min(31, max(4, _env_int("BCRYPT_ROUNDS", 12)))
