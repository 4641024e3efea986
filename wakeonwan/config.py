"""wakeonwan configuration — Pydantic BaseSettings holding the CLI defaults."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the command-line flags. Flags always win."""

    # Destination
    uri: str = "255.255.255.255"
    port: int = Field(default=9, ge=0, le=65535)

    # Logging (-v forces DEBUG)
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    log_datefmt: str = "%Y-%m-%d %H:%M:%S"

    model_config = SettingsConfigDict(extra="ignore")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # The environment never changes the destination or log level.
        return (init_settings,)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
