"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    log_level: str = "INFO"
    problem_media_type: str = "application/problem+json"
    correlation_header: str = "X-Correlation-Id"

    model_config = SettingsConfigDict(env_prefix="SERVICE_ERRORS_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
