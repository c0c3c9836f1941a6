"""
swessn configuration management using pydantic-settings.

Settings are read from SWESSN_* environment variables or a .env file.
"""

import logging
from datetime import date
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SWESSN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # Generator
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for generated numbers when no random source is passed",
    )
    generator_min_date: date = Field(
        default=date(1974, 1, 1),
        description="Earliest birth date used by generate_random_person",
    )
    generator_max_date: date = Field(
        default=date(2013, 12, 31),
        description="Latest birth date used by generate_random_person",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @model_validator(mode="after")
    def validate_generator_window(self) -> "Settings":
        """Ensure the random birth date window is not empty."""
        if self.generator_min_date > self.generator_max_date:
            raise ValueError("GENERATOR_MIN_DATE must not be after GENERATOR_MAX_DATE")
        if self.generator_min_date.year < 100:
            raise ValueError("GENERATOR_MIN_DATE must be in year 100 or later")
        return self


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for applications using swessn.

    The library itself never calls this; it only creates module loggers.
    """
    name = (level or settings.log_level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=getattr(logging, name),
        format=LOG_FORMAT,
    )


# Global settings instance
settings = Settings()
