"""
Centralized configuration for Traffic Analyzer
All environment variables and settings are defined here
"""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Provides centralized configuration with validation and defaults.
    """

    # ======================
    # Upstream Analytics API
    # ======================
    RAPIDAPI_KEY: str = Field(default="", description="RapidAPI key for the analytics provider")
    RAPIDAPI_HOST: str = Field(
        default="similar-web.p.rapidapi.com",
        description="Value sent as x-rapidapi-host"
    )
    UPSTREAM_BASE_URL: str = Field(
        default="https://similar-web.p.rapidapi.com",
        description="Base URL of the analytics provider"
    )
    UPSTREAM_TIMEOUT: Optional[float] = Field(
        default=None,
        description="Timeout in seconds for upstream calls (None = library default)"
    )

    # ======================
    # Dashboard Configuration
    # ======================
    DASHBOARD_API_URL: str = Field(
        default="http://localhost:8000",
        description="Base URL of the proxy the dashboard talks to"
    )

    # ======================
    # Server Configuration
    # ======================
    API_HOST: str = Field(default="0.0.0.0", description="Uvicorn bind host")
    API_PORT: int = Field(default=8000, description="Uvicorn bind port")
    ALLOWED_ORIGINS: List[str] = Field(
        default=["*"],
        description="Origins allowed by the CORS middleware"
    )

    # ======================
    # Logging Configuration
    # ======================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    @property
    def analysis_url(self) -> str:
        """Full URL of the upstream analysis endpoint"""
        return f"{self.UPSTREAM_BASE_URL.rstrip('/')}/get-analysis"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Allow extra env vars in .env file


# Global settings instance
settings = Settings()


# ======================
# Convenience Functions
# ======================

def get_settings() -> Settings:
    """
    Build settings from the current environment.

    Called per request by the proxy so the API key is looked up at request
    time instead of being frozen at import.
    """
    return Settings()

