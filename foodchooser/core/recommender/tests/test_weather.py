"""Tests for weather classification and bonuses."""

import pytest
from ..models import WeatherCondition, WeatherContext
from ..services.weather import classify_weather, weather_bonus
from ..services.scoring import MEAL_WEATHER_BONUS
from ..services.cuisine import CUISINE_WEATHER_BONUS


@pytest.mark.parametrize("code", [51, 57, 61, 67, 80, 82, 95, 99])
def test_precipitation_is_rain(code):
    """Rain wins even on a hot day."""
    assert classify_weather(code, 95) == WeatherCondition.RAIN


def test_temperature_thresholds():
    assert classify_weather(0, 85) == WeatherCondition.HOT
    assert classify_weather(0, 84.9) == WeatherCondition.MILD
    assert classify_weather(3, 58) == WeatherCondition.COLD
    assert classify_weather(3, 58.1) == WeatherCondition.MILD


def test_meal_weather_bonus():
    hot = WeatherContext(WeatherCondition.HOT, 90)
    cold = WeatherContext(WeatherCondition.COLD, 40)
    rain = WeatherContext(WeatherCondition.RAIN, 60)
    assert weather_bonus("Mexican", hot, MEAL_WEATHER_BONUS) == 2
    assert weather_bonus("Ramen", cold, MEAL_WEATHER_BONUS) == 3
    assert weather_bonus("Ramen", rain, MEAL_WEATHER_BONUS) == 3
    assert weather_bonus("Mexican", cold, MEAL_WEATHER_BONUS) == 0


def test_cuisine_weather_bonus():
    rain = WeatherContext(WeatherCondition.RAIN, 60)
    assert weather_bonus("Pho", rain, CUISINE_WEATHER_BONUS) == 5


def test_mild_has_no_bonus():
    mild = WeatherContext(WeatherCondition.MILD, 70)
    assert weather_bonus("Ramen", mild, MEAL_WEATHER_BONUS) == 0


def test_cuisine_match_is_exact():
    hot = WeatherContext(WeatherCondition.HOT, 90)
    assert weather_bonus("mexican", hot, MEAL_WEATHER_BONUS) == 0
