"""Settings loader with .env support."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Service configuration. The ComicInfo schema itself is fixed, see rules.py."""

    log_level: LogLevel = Field(default="INFO", validation_alias="COMICINFO_LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="COMICINFO_DEBUG")
    max_upload_bytes: int = Field(default=1024 * 1024, validation_alias="COMICINFO_MAX_UPLOAD_BYTES")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
