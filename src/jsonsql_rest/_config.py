"""Environment based settings."""

import os
from dataclasses import dataclass, field

from dotenv import find_dotenv, load_dotenv


def _env(key: str, default: str | None = None) -> str | None:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(key: str, default: int) -> int:
    raw = _env(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_bool(key: str, default: bool = False) -> bool:
    raw = _env(key)
    if raw is None:
        return default
    return raw.lower() in ("1", "true", "yes", "y", "on")


def _env_list(key: str) -> list[str]:
    raw = _env(key)
    if raw is None:
        return []
    return [x.strip() for x in raw.split(",") if x.strip()]


@dataclass(frozen=True)
class Settings:
    database_url: str | None = None
    host: str = "0.0.0.0"
    port: int = 3030
    pool_size: int = 5
    pool_pre_ping: bool = True
    cors_origins: list[str] = field(default_factory=list)
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the process environment.

    A `.env` file in the working directory is loaded first; variables
    already set in the environment win.
    """
    load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        database_url=_env("DATABASE_URL"),
        host=_env("JSONSQL_HOST", "0.0.0.0"),
        port=_env_int("JSONSQL_PORT", 3030),
        pool_size=_env_int("JSONSQL_POOL_SIZE", 5),
        pool_pre_ping=_env_bool("JSONSQL_POOL_PRE_PING", True),
        cors_origins=_env_list("JSONSQL_CORS_ORIGINS"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def engine_options(settings: Settings) -> dict:
    """Keyword arguments for ``create_engine`` derived from settings.

    SQLite engines use their own default pools, which reject ``pool_size``.
    """
    options: dict = {"pool_pre_ping": settings.pool_pre_ping}
    if settings.database_url and not settings.database_url.startswith("sqlite"):
        options["pool_size"] = settings.pool_size
    return options
