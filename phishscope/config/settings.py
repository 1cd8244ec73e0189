"""Application settings and scoring thresholds."""

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log renderers supported by the logging setup."""
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """PhishScope settings, read from ``PHISHSCOPE_*`` environment variables."""

    # Application
    APP_NAME: str = "PhishScope"
    APP_VERSION: str = "1.0.0"

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # URL analysis
    URL_MAX_LENGTH: int = Field(default=100, ge=1)

    # Behavioral analysis
    MIN_BODY_LENGTH: int = Field(default=30, ge=0)

    # Marketing dampening
    MARKETING_PHRASE_THRESHOLD: int = Field(default=3, ge=1)
    MARKETING_SCORE_CAP: int = Field(default=30, ge=0, le=100)

    # Trusted sender dampening
    TRUSTED_SENDER_SCORE_CAP: int = Field(default=30, ge=0, le=100)
    TRUSTED_SEVERITY_MULTIPLIER: float = Field(default=0.5, ge=0.0, le=1.0)

    # Risk bands used when rendering a score
    MEDIUM_RISK_THRESHOLD: int = Field(default=40, ge=0, le=100)
    HIGH_RISK_THRESHOLD: int = Field(default=80, ge=0, le=100)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid LOG_LEVEL '{v}'")
        return level

    model_config = SettingsConfigDict(
        env_prefix="PHISHSCOPE_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
