"""
Database package for FoodChooser.

Every table is scoped by household_id; callers pass it explicitly.

    from foodchooser.core.db import list_meals, get_preferences
"""

# Base - connection, initialization
from .base import (
    DB_PATH,
    SCHEMA_SQL,
    ALLOWED_MEAL_COLUMNS,
    ALLOWED_GROCERY_COLUMNS,
    get_db,
    init_db,
)

# Meals
from .meals import (
    create_meal,
    get_meal,
    list_meals,
    load_meal_history,
    update_meal,
    delete_meal,
    delete_seed_meals,
)

# Groceries
from .groceries import (
    create_grocery,
    get_grocery,
    list_groceries,
    update_grocery,
    delete_grocery,
)

# Preferences, overrides, disabled items
from .preferences import (
    get_preferences,
    save_preferences,
    list_overrides,
    get_overrides_map,
    upsert_override,
    increment_override,
    get_disabled_items,
    set_disabled_item,
)

__all__ = [
    "DB_PATH",
    "SCHEMA_SQL",
    "ALLOWED_MEAL_COLUMNS",
    "ALLOWED_GROCERY_COLUMNS",
    "get_db",
    "init_db",
    "create_meal",
    "get_meal",
    "list_meals",
    "load_meal_history",
    "update_meal",
    "delete_meal",
    "delete_seed_meals",
    "create_grocery",
    "get_grocery",
    "list_groceries",
    "update_grocery",
    "delete_grocery",
    "get_preferences",
    "save_preferences",
    "list_overrides",
    "get_overrides_map",
    "upsert_override",
    "increment_override",
    "get_disabled_items",
    "set_disabled_item",
]
