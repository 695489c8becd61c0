"""
Configuration settings for the AutoCare admin console.
Uses Pydantic for type-safe configuration management.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Application
    app_name: str = "AutoCare Admin Console"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False

    # Remote API
    api_base_url: str = "http://localhost:8080"
    api_timeout: float = 30.0

    # Security
    secret_key: str = "your-secret-key-change-this-in-production"
    csrf_exclude_paths: list[str] = ["/health", "/static"]

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def is_production(self) -> bool:
        return self.environment == "production"

    def is_development(self) -> bool:
        return self.environment == "development"

    def is_test(self) -> bool:
        return self.environment == "test"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
