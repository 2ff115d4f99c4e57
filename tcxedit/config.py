"""
Configuration management for tcxedit.

Settings are read from environment variables prefixed with ``TCXEDIT_`` and
from an optional ``.env`` file in the working directory, falling back to the
defaults in ``tcxedit.const``.
"""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import DEFAULT_LOG_LEVEL, DEFAULT_LOG_DIR, DEFAULT_TRIMMED_SUFFIX

load_dotenv()


class EditorSettings(BaseSettings):
    """Runtime settings for the editor and its logging."""

    model_config = SettingsConfigDict(env_prefix="TCXEDIT_", extra="ignore")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL)
    log_dir: Optional[str] = Field(default=DEFAULT_LOG_DIR)
    trimmed_suffix: str = Field(default=DEFAULT_TRIMMED_SUFFIX, min_length=1)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the logging level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache()
def get_settings() -> EditorSettings:
    """Get the cached settings instance."""
    return EditorSettings()
