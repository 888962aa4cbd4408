# shared/config.py
import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()

# Fixed ceiling on concurrent storage operations; extra requests wait for a connection.
DB_POOL_SIZE = 10


class ConfigError(Exception):
    """Raised when required configuration is missing or malformed."""


@dataclass
class DatabaseConfig:
    host: str
    port: int
    user: str
    password: str
    name: str
    driver: str = "postgresql+asyncpg"
    pool_size: int = DB_POOL_SIZE
    echo: bool = False

    @property
    def url(self) -> URL:
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.name,
        )


@dataclass
class AppConfig:
    database: DatabaseConfig
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: list = field(default_factory=lambda: ["*"])


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _get_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Build the application config from environment variables."""
    on_railway = os.getenv("RAILWAY_ENVIRONMENT") is not None
    host = os.getenv("DB_HOST")
    if not host:
        if on_railway:
            raise ConfigError("DB_HOST must be set when running on Railway")
        host = "127.0.0.1"

    database = DatabaseConfig(
        host=host,
        port=_get_int("DB_PORT", 5432),
        user=os.getenv("DB_USER", "postgres"),
        password=os.getenv("DB_PASSWORD", ""),
        name=os.getenv("DB_NAME", "school_db"),
        driver=os.getenv("DB_DRIVER", "postgresql+asyncpg"),
        echo=_get_bool("DB_ECHO"),
    )

    return AppConfig(
        database=database,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 3000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache()
def get_config() -> AppConfig:
    return load_config()
