"""Shared builders for recommender tests."""

from datetime import date, timedelta

from ..models import BudgetPreferences, MealRecord, WeatherCondition, WeatherContext

TODAY = date(2026, 3, 15)
MILD = WeatherContext(condition=WeatherCondition.MILD, temp_f=70.0)
BUDGET = BudgetPreferences(min=10, max=35, forbid_repeat_days=1)


def make_meal(dish="Bowl", cuisine="Mexican", cost=14.5, days_ago=6,
              restaurant="Chipotle", rating=4, meal_id=None, **extra):
    return MealRecord(
        id=meal_id or f"{restaurant}-{dish}-{days_ago}",
        date=TODAY - timedelta(days=days_ago),
        dish=dish,
        cuisine=cuisine,
        cost=cost,
        restaurant=restaurant,
        rating=rating,
        **extra,
    )
