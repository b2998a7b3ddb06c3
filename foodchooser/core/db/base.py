"""
Database base module - connection management and initialization.
"""
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from ..config import settings

# Database location
DB_PATH = Path(settings.DB_PATH)

# Whitelists of columns callers may update (SQL injection prevention)
ALLOWED_MEAL_COLUMNS = {
    'date', 'restaurant', 'dish', 'cuisine', 'cost', 'rating',
    'notes', 'seed_only', 'purchaser_name'
}

ALLOWED_GROCERY_COLUMNS = {
    'date', 'amount', 'notes', 'trip_label', 'purchaser_name'
}

SCHEMA_SQL = """
    -- Meals: every logged dinner, the history the recommenders rank
    CREATE TABLE IF NOT EXISTS meals (
        id TEXT PRIMARY KEY,
        household_id TEXT NOT NULL,
        date TEXT NOT NULL,              -- YYYY-MM-DD calendar day
        restaurant TEXT,
        dish TEXT NOT NULL,
        cuisine TEXT NOT NULL,
        cost REAL NOT NULL CHECK (cost >= 0),
        rating INTEGER CHECK (rating IS NULL OR (rating >= 1 AND rating <= 5)),
        notes TEXT,
        seed_only INTEGER NOT NULL DEFAULT 0,
        purchaser_name TEXT NOT NULL DEFAULT '',
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP
    );

    -- Grocery trips, spend tracking only
    CREATE TABLE IF NOT EXISTS groceries (
        id TEXT PRIMARY KEY,
        household_id TEXT NOT NULL,
        date TEXT NOT NULL,
        amount REAL NOT NULL CHECK (amount >= 0),
        notes TEXT,
        trip_label TEXT,
        purchaser_name TEXT NOT NULL DEFAULT '',
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP
    );

    -- One preferences row per household
    CREATE TABLE IF NOT EXISTS preferences (
        household_id TEXT PRIMARY KEY,
        budget_min REAL NOT NULL DEFAULT 10.00 CHECK (budget_min >= 0),
        budget_max REAL NOT NULL DEFAULT 35.00 CHECK (budget_max >= budget_min),
        forbid_repeat_days INTEGER NOT NULL DEFAULT 1
            CHECK (forbid_repeat_days >= 0 AND forbid_repeat_days <= 14),
        strict_budget INTEGER NOT NULL DEFAULT 0,
        monthly_budget REAL,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP
    );

    -- Manual cuisine picks, boost the cuisine recommender
    CREATE TABLE IF NOT EXISTS cuisine_overrides (
        id TEXT PRIMARY KEY,
        household_id TEXT NOT NULL,
        cuisine TEXT NOT NULL,
        count INTEGER NOT NULL DEFAULT 1 CHECK (count >= 0),
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP,
        UNIQUE(household_id, cuisine)
    );

    -- (restaurant, dish) pairs hidden from the meal ranking
    CREATE TABLE IF NOT EXISTS disabled_items (
        id TEXT PRIMARY KEY,
        household_id TEXT NOT NULL,
        restaurant_norm TEXT NOT NULL,
        dish_norm TEXT NOT NULL,
        disabled INTEGER NOT NULL DEFAULT 1,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP,
        updated_at TEXT DEFAULT CURRENT_TIMESTAMP,
        UNIQUE(household_id, restaurant_norm, dish_norm)
    );

    -- Create indexes
    CREATE INDEX IF NOT EXISTS idx_meals_household ON meals(household_id);
    CREATE INDEX IF NOT EXISTS idx_meals_date ON meals(date);
    CREATE INDEX IF NOT EXISTS idx_meals_cuisine ON meals(cuisine);
    CREATE INDEX IF NOT EXISTS idx_groceries_household_date ON groceries(household_id, date DESC);
    CREATE INDEX IF NOT EXISTS idx_overrides_household ON cuisine_overrides(household_id);
    CREATE INDEX IF NOT EXISTS idx_disabled_household ON disabled_items(household_id);
"""


@contextmanager
def get_db():
    """Context manager for database connections."""
    conn = sqlite3.connect(str(DB_PATH))
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db():
    """Initialize database tables."""
    DB_PATH.parent.mkdir(parents=True, exist_ok=True)

    with get_db() as conn:
        # WAL allows concurrent reads during writes
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA busy_timeout=5000")
        conn.executescript(SCHEMA_SQL)

