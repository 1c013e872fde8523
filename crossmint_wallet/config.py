"""Configuration architecture using pydantic-settings for typed environment loading."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from crossmint_wallet.client import BASE_URL


class CrossmintConfig(BaseSettings):
    """Crossmint API configuration.

    Only the command line reads these; the client functions take
    credentials per call.
    """

    model_config = SettingsConfigDict(
        env_prefix="CROSSMINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: SecretStr = SecretStr("")
    base_url: str = BASE_URL


class LogConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"


class Settings:
    """Root settings aggregating all configuration sections."""

    def __init__(self) -> None:
        self.crossmint = CrossmintConfig()
        self.log = LogConfig()


# Global settings instance - lazily loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
