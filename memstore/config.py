from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration loaded from ``MEMSTORE_*`` env vars and .env file.

    Only the factory helpers in :mod:`memstore.factory` read these values;
    constructing ``LRUCache`` or a time map directly ignores them.
    """

    model_config = SettingsConfigDict(
        env_prefix="MEMSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default capacity for caches built by create_cache()
    cache_capacity: int = Field(default=128, ge=0)

    # create_time_map() returns the lock-striped variant unless disabled
    thread_safe_time_map: bool = True

    # Logging — file output is off unless a path is given
    log_level: str = "INFO"
    log_file: Path | None = None


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the cached Settings singleton. Created on first call."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached settings. Used in tests."""
    global _settings  # noqa: PLW0603
    _settings = None
