"""Weather classification and the cuisine lists that get a weather bonus."""

from ..models import WeatherCondition, WeatherContext

# WMO weather interpretation codes that mean precipitation
DRIZZLE_CODES = {51, 53, 55, 56, 57}
RAIN_CODES = {61, 63, 65, 66, 67}
SHOWER_CODES = {80, 81, 82}
THUNDERSTORM_CODES = {95, 96, 99}
PRECIPITATION_CODES = frozenset(DRIZZLE_CODES | RAIN_CODES | SHOWER_CODES | THUNDERSTORM_CODES)

HOT_THRESHOLD_F = 85
COLD_THRESHOLD_F = 58

# Exact cuisine names favoured by each condition
WEATHER_CUISINES = {
    WeatherCondition.HOT: frozenset({"Japanese", "Salad", "Mexican"}),
    WeatherCondition.COLD: frozenset({"Ramen", "Indian", "Italian"}),
    WeatherCondition.RAIN: frozenset({"Pho", "Ramen", "Curry"}),
}


def classify_weather(code: int, temp_f: float) -> WeatherCondition:
    """Precipitation wins over temperature; anything else is mild."""
    if code in PRECIPITATION_CODES:
        return WeatherCondition.RAIN
    if temp_f >= HOT_THRESHOLD_F:
        return WeatherCondition.HOT
    if temp_f <= COLD_THRESHOLD_F:
        return WeatherCondition.COLD
    return WeatherCondition.MILD


def weather_bonus(cuisine: str, weather: WeatherContext, magnitudes: dict) -> float:
    """Bonus from magnitudes[condition] when the cuisine is on that condition's list."""
    condition = WeatherCondition(weather.condition)
    if cuisine in WEATHER_CUISINES.get(condition, ()):
        return magnitudes.get(condition, 0)
    return 0
