"""
Current weather lookup via the Open-Meteo forecast API.

Weather only adds a small bonus to scores, so any failure here falls back
to a mild 72F context instead of raising.
"""
import logging
from typing import Optional

import requests

from .config import settings
from .recommender import FALLBACK_WEATHER, WeatherContext, classify_weather

logger = logging.getLogger(__name__)


def fetch_current_weather(
    lat: Optional[float] = None,
    lon: Optional[float] = None,
    timeout: Optional[int] = None,
) -> WeatherContext:
    """
    Fetch and classify current conditions for a location.

    Args:
        lat: Latitude (defaults to WEATHER_LAT)
        lon: Longitude (defaults to WEATHER_LON)
        timeout: Request timeout in seconds

    Returns:
        WeatherContext, or FALLBACK_WEATHER if the provider is unavailable
    """
    params = {
        "latitude": settings.WEATHER_LAT if lat is None else lat,
        "longitude": settings.WEATHER_LON if lon is None else lon,
        "current": "temperature_2m,weather_code",
        "temperature_unit": "fahrenheit",
    }

    try:
        resp = requests.get(
            settings.WEATHER_API_URL,
            params=params,
            timeout=timeout or settings.WEATHER_TIMEOUT,
        )
        resp.raise_for_status()
        current = resp.json()["current"]
        code = int(current["weather_code"])
        temp_f = float(current["temperature_2m"])
    except requests.RequestException as e:
        logger.warning(f"Weather request failed, using fallback: {e}")
        return FALLBACK_WEATHER
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Unexpected weather payload, using fallback: {e}")
        return FALLBACK_WEATHER

    condition = classify_weather(code, temp_f)
    logger.info(f"Weather at ({params['latitude']}, {params['longitude']}): code={code} temp={temp_f}F -> {condition.value}")
    return WeatherContext(condition=condition, temp_f=temp_f)
