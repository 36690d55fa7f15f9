"""
Centralized configuration for the Fachdatenkatalog tooling

Type-safe settings built on Pydantic Settings:
- environment variable binding with defaults
- optional .env file (ignored inside containers)
- a single process-wide instance with an explicit reload for tests
"""

import os
from enum import Enum
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fdk_shared.utils.language import DEFAULT_LANGUAGE, normalize_language

REPO_ROOT = Path(__file__).resolve().parents[3]


def _settings_config(prefix: str = "") -> SettingsConfigDict:
    return SettingsConfigDict(
        env_prefix=prefix,
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


class LogFormat(str, Enum):
    """Log output formats"""
    TEXT = "text"
    JSON = "json"


class PathSettings(BaseSettings):
    """Location of the JSON data files"""

    model_config = _settings_config("FDK_")

    data_dir: Path = Field(
        default=REPO_ROOT / "data",
        description="Directory holding the catalog JSON files"
    )
    documents_file: str = Field(
        default="documents.json",
        description="Documents file, migrated in place"
    )
    models_file: str = Field(
        default="models.json",
        description="Models file, migrated in place"
    )
    classifications_file: str = Field(
        default="classifications.json",
        description="Classification catalog (read-only)"
    )

    @property
    def documents_path(self) -> Path:
        return self.data_dir / self.documents_file

    @property
    def models_path(self) -> Path:
        return self.data_dir / self.models_file

    @property
    def classifications_path(self) -> Path:
        return self.data_dir / self.classifications_file


class LoggingSettings(BaseSettings):
    """Logging configuration"""

    model_config = _settings_config()

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_format: LogFormat = Field(
        default=LogFormat.TEXT,
        description="'text' for plain lines, 'json' for structured logs"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_level(cls, v):
        return str(v or "INFO").strip().upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def lower_format(cls, v):
        if isinstance(v, str):
            return v.strip().lower() or LogFormat.TEXT
        return v


class I18nSettings(BaseSettings):
    """Localization defaults"""

    model_config = _settings_config("FDK_")

    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Display language set at startup (de, fr, it, en)"
    )

    @field_validator("default_language", mode="before")
    @classmethod
    def supported_language(cls, v):
        return normalize_language(v) or DEFAULT_LANGUAGE


class ApplicationSettings(BaseSettings):
    """Main application settings - aggregates all other settings"""

    model_config = _settings_config()

    paths: PathSettings = Field(default_factory=PathSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    i18n: I18nSettings = Field(default_factory=I18nSettings)


settings = ApplicationSettings()


def get_settings() -> ApplicationSettings:
    """
    Get the global settings instance

    Returns:
        ApplicationSettings: The global settings instance
    """
    return settings


def reload_settings() -> ApplicationSettings:
    """
    Reload settings from environment (useful for testing)

    Returns:
        ApplicationSettings: New settings instance with reloaded values
    """
    global settings
    settings = ApplicationSettings()
    return settings
