"""Runtime settings.

Loaded from environment variables with the ``STOREFRONT_`` prefix, or
from a ``.env`` file in the working directory.

Example:
    >>> settings = Settings()                      # from environment
    >>> settings = Settings(data_dir=Path("/tmp/shop"), log_json=True)
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the JSON stores",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON instead of console lines",
    )
    host: str = Field(default="127.0.0.1", description="HTTP bind address")
    port: int = Field(default=8000, description="HTTP port")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
