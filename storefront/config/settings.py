from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Storefront configuration using Pydantic BaseSettings.
    Values are loaded from environment variables and an optional .env file.
    """

    PROJECT_NAME: str = "Storefront Records"
    VERSION: str = "0.1.0"

    # Apper backend
    APPER_API_BASE_URL: str = Field("https://api.apper.io/v1", description="Base URL of the Apper records API")
    APPER_PROJECT_ID: str | None = Field(None, description="Apper project identifier")
    APPER_PUBLIC_KEY: str | None = Field(None, description="Apper public API key")
    APPER_API_TIMEOUT: float = Field(30.0, description="Request timeout in seconds")

    # Logging
    LOG_LEVEL: str = Field("INFO", description="Root log level")
    LOG_FORMAT: str = Field("plain", description="Log output format: plain or json")

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("APPER_API_BASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in {"plain", "json"}:
            raise ValueError(f"Invalid LOG_FORMAT: {v}")
        return fmt

    @property
    def apper_configured(self) -> bool:
        """True when both Apper credentials are present."""
        return bool(self.APPER_PROJECT_ID and self.APPER_PUBLIC_KEY)


# Cached settings singleton
_settings_instance = None


def get_settings() -> Settings:
    """
    Return a cached Settings instance.
    Avoids re-reading the environment on every call.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
