"""Configuration management for the Inclusive Hiring Toolkit."""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Configuration
    environment: str = Field("development", description="Deployment environment (development/staging/production)")
    debug: bool = Field(False, description="Enable debug mode")
    log_level: str = Field("INFO", description="Logging level")

    # Analytics Configuration
    analytics_enabled: bool = Field(True, description="Forward analysis events to the analytics collector")
    mixpanel_token: Optional[str] = Field(None, description="Mixpanel project token")
    analytics_endpoint: str = Field("https://api.mixpanel.com/track", description="Analytics collector URL")
    analytics_timeout: float = Field(10.0, description="Analytics request timeout in seconds")

    # Server Configuration
    host: str = Field("0.0.0.0", description="Server host")
    port: int = Field(8000, description="Server port")
    reload: bool = Field(False, description="Enable auto-reload")
    allowed_origins: list[str] = Field(["*"], description="CORS allowed origins")


# Global settings instance
settings = Settings()
