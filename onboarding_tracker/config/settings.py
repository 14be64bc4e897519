"""
Application settings and configuration management.

This module centralizes all application configuration using Pydantic settings
for type validation and environment variable handling.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Main application settings class.

    Uses Pydantic BaseSettings to automatically load configuration from:
    1. Environment variables
    2. .env file
    3. Default values defined here
    """

    # Store Configuration
    # "memory" keeps everything in-process, "redis" persists to redis_url
    store_backend: str = "memory"
    redis_url: str = "redis://localhost:6379/0"
    storage_namespace: str = "onboarding"

    # Onboarding Configuration
    activity_log_limit: int = 100
    seed_demo_data: bool = True

    # Application Configuration
    debug: bool = True
    log_level: str = "INFO"

    # API Configuration
    api_v1_str: str = "/api/v1"
    project_name: str = "Onboarding Tracker"

    class Config:
        """Pydantic configuration for settings loading."""
        env_file = ".env"
        case_sensitive = False


# Global settings instance
# This will be imported throughout the application for configuration access
settings = Settings()
