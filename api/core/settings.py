"""
Environment-driven settings.

Values are read on each call so tests can monkeypatch the environment.
A `.env` file is loaded once by the entry points (`main.py`, `seed.py`).
"""

from __future__ import annotations

import os
from urllib.parse import quote

DEFAULT_DB_NAME = "hotel_db"
DEFAULT_PORT = 3001


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


def db_name() -> str:
    return _env_str("DB_NAME", DEFAULT_DB_NAME)


def compose_database_url() -> str:
    """
    Build a DSN from the DB_* variables (used when DATABASE_URL is unset).
    """
    user = quote(_env_str("DB_USER", "postgres"), safe="")
    password = quote(_env_str("DB_PASSWORD", "postgres"), safe="")
    db_host = _env_str("DB_HOST", "localhost")
    db_port = _env_int("DB_PORT", 5432)
    return f"postgresql://{user}:{password}@{db_host}:{db_port}/{db_name()}"


def pool_min_size() -> int:
    # 0 keeps the pool lazy: startup does not need a reachable database.
    return max(0, _env_int("DB_POOL_MIN_SIZE", 0))


def pool_max_size() -> int:
    return max(1, _env_int("DB_POOL_MAX_SIZE", 5))


def command_timeout() -> int:
    return _env_int("DB_COMMAND_TIMEOUT", 30)


def host() -> str:
    return _env_str("HOST", "0.0.0.0")


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def log_level() -> str:
    return _env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    raw = _env_str("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
