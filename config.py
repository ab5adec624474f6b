"""Application configuration."""

from functools import lru_cache
from typing import Optional
from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    environment: str = "development"
    debug: bool = True
    host: str = "0.0.0.0"
    port: int = 8000

    # Gemini
    gemini_api_key: Optional[SecretStr] = None
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout_seconds: float = 30.0

    # CORS
    cors_allow_origin: str = "*"

    @property
    def gemini_endpoint(self) -> str:
        """Full generateContent URL, without the key."""
        return f"{self.gemini_api_base_url.rstrip('/')}/models/{self.gemini_model}:generateContent"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
