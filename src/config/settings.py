"""Configuration settings for CuraLink."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.relevance.models import UserType


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_user_type: UserType = Field(
        default=UserType.PATIENT,
        description="User type assumed when neither the CLI nor the profile sets one",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )

    @field_validator("default_user_type", mode="before")
    @classmethod
    def validate_default_user_type(cls, v: str | UserType) -> UserType:
        """Convert string user type to UserType enum."""
        if isinstance(v, UserType):
            return v
        if isinstance(v, str):
            value = v.lower().strip()
            if value == "patient":
                return UserType.PATIENT
            elif value == "researcher":
                return UserType.RESEARCHER
            else:
                raise ValueError(
                    f"Invalid user type: {v}. Must be 'patient' or 'researcher'"
                )
        raise ValueError(f"Invalid user type: {type(v)}")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance for easy import
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the application settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (useful for testing)."""
    global _settings
    _settings = None
