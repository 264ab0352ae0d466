"""Application Settings using Pydantic.

Environment-based configuration with validation. Only ambient concerns
(environment name, logging) are configurable; the upstream address and
request timeout are fixed in ``constants``.

Environment Variables:
    ENVIRONMENT: development | staging | production
    LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    LOG_FORMAT: json | console

Example .env file:
    ENVIRONMENT=production
    LOG_LEVEL=INFO
    LOG_FORMAT=json
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bridge settings.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Core ====================
    environment: Literal["development", "staging", "production"] = "development"

    # ==================== Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "console"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Call get_settings.cache_clear() to reload.
    """
    return Settings()
