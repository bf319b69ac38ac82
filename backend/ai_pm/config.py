"""
Application Configuration
Centralized settings loaded once at startup from the environment
"""
from functools import lru_cache
from fastapi import Request
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Groq / LLM API
    groq_api_key: str = ""
    groq_api_url: str = "https://api.groq.com/v1/chat/completions"
    groq_model: str = "mixtral-8x7b-32768"

    # Sampling
    temperature: float = 0.7
    max_tokens: int = 2000
    upstream_timeout: Optional[float] = None  # None = wait indefinitely

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    allowed_origins: str = "*"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        frozen = True

    @property
    def api_key_configured(self) -> bool:
        return bool(self.groq_api_key)

    @property
    def origins(self) -> list:
        if self.allowed_origins == "*":
            return ["*"]
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Dependency for getting the settings the app was built with"""
    return request.app.state.settings

