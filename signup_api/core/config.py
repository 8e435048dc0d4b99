"""
Configuration helpers for the signup backend.

Routers, repositories and scripts read a Settings object instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    cors_origins: tuple[str, ...]
    signup_rate_limit: int
    signup_rate_window_seconds: int
    auto_create_tables: bool
    trusted_proxies: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None) -> tuple[str, ...]:
        items = (item.strip().rstrip("/") for item in (value or "").split(","))
        return tuple(item for item in items if item)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./signup.db"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
        signup_rate_limit=_int(os.getenv("SIGNUP_RATE_LIMIT", "10"), 10),
        signup_rate_window_seconds=_int(os.getenv("SIGNUP_RATE_WINDOW_SECONDS", "60"), 60),
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
        trusted_proxies=_list(os.getenv("TRUSTED_PROXIES")),
    )
