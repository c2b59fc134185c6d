from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weektask.utils.store import DEFAULT_WEEK_FILE

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """WEEKTASK_FILE, WEEKTASK_LOG_LEVEL and WEEKTASK_LOG_FILE, from the environment or .env."""

    week_file: Path = Field(
        default=DEFAULT_WEEK_FILE,
        validation_alias=AliasChoices("week_file", "WEEKTASK_FILE"),
    )
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WEEKTASK_",
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("week_file", "log_file")
    @classmethod
    def expand_user(cls, value: Optional[Path]) -> Optional[Path]:
        return value.expanduser() if value is not None else None

    @field_validator("log_level", mode="before")
    @classmethod
    def known_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        return level if level in LOG_LEVELS else "WARNING"
