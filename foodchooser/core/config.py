"""
Centralized configuration for the FoodChooser backend.

All environment variables and settings should be defined here
to avoid duplication across modules.
"""
import os
from functools import lru_cache


class Settings:
    """Application settings loaded from environment variables."""

    # CORS - comma-separated list of allowed origins
    ALLOWED_ORIGINS: list = os.environ.get(
        "ALLOWED_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173"
    ).split(",")

    # Database
    DB_PATH: str = os.environ.get("FOODCHOOSER_DB_PATH", "data/foodchooser.db")

    # API key for protecting destructive endpoints (optional)
    API_KEY: str = os.environ.get("FOODCHOOSER_API_KEY", "")

    # Weather (Open-Meteo forecast API, no key required)
    WEATHER_API_URL: str = os.environ.get(
        "WEATHER_API_URL", "https://api.open-meteo.com/v1/forecast"
    )
    WEATHER_LAT: float = float(os.environ.get("WEATHER_LAT", "40.7128"))
    WEATHER_LON: float = float(os.environ.get("WEATHER_LON", "-74.0060"))
    WEATHER_TIMEOUT: int = int(os.environ.get("WEATHER_TIMEOUT", "5"))

    # Half-width of the uniform score jitter; 0 makes scoring deterministic
    JITTER_SCALE: float = float(os.environ.get("FOODCHOOSER_JITTER", "1.5"))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Singleton instance for easy import
settings = get_settings()
