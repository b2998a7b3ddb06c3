"""
Test configuration and fixtures for the FoodChooser test suite.

Provides:
- In-memory SQLite test database (isolated per test)
- FastAPI TestClient fixture
- Factory functions for creating test data
"""
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import date, datetime, timedelta
from typing import Optional
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from foodchooser.core.db.base import SCHEMA_SQL

HOUSEHOLD = "test-household"


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

def _create_test_db() -> sqlite3.Connection:
    """Create an in-memory SQLite database with the full FoodChooser schema."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.executescript(SCHEMA_SQL)
    return conn


@contextmanager
def _test_get_db(conn: sqlite3.Connection):
    """Replacement for get_db() that uses the shared test connection."""
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise


@pytest.fixture()
def test_db():
    """Provide a fresh in-memory SQLite database for each test."""
    conn = _create_test_db()
    yield conn
    conn.close()


@pytest.fixture()
def patch_db(test_db):
    """
    Patch the get_db context manager across all db modules so that
    every database call uses the in-memory test database.
    """
    cm = lambda: _test_get_db(test_db)  # noqa: E731

    with (
        patch("foodchooser.core.db.base.get_db", cm),
        patch("foodchooser.core.db.meals.get_db", cm),
        patch("foodchooser.core.db.groceries.get_db", cm),
        patch("foodchooser.core.db.preferences.get_db", cm),
    ):
        yield test_db


@pytest.fixture()
def client(patch_db):
    """
    Provide a FastAPI TestClient with the database patched.

    Skips init_db so the on-disk database is never touched.
    """
    from foodchooser.api.main import app

    with patch("foodchooser.api.main.init_db"):
        with TestClient(app) as c:
            yield c


# ---------------------------------------------------------------------------
# Factory functions
# ---------------------------------------------------------------------------

def create_meal_row(
    db: sqlite3.Connection,
    *,
    meal_id: Optional[str] = None,
    household_id: str = HOUSEHOLD,
    days_ago: int = 6,
    restaurant: Optional[str] = "Chipotle",
    dish: str = "Chipotle Bowl",
    cuisine: str = "Mexican",
    cost: float = 14.50,
    rating: Optional[int] = 4,
    notes: Optional[str] = None,
    seed_only: bool = False,
    purchaser_name: str = "Sam",
) -> str:
    """Insert a meal record and return its ID."""
    mid = meal_id or str(uuid.uuid4())
    now = datetime.utcnow().isoformat()
    day = (date.today() - timedelta(days=days_ago)).isoformat()

    db.execute(
        """INSERT INTO meals
           (id, household_id, date, restaurant, dish, cuisine, cost,
            rating, notes, seed_only, purchaser_name, created_at, updated_at)
           VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
        (mid, household_id, day, restaurant, dish, cuisine, cost,
         rating, notes, int(seed_only), purchaser_name, now, now),
    )
    db.commit()
    return mid


def create_grocery_row(
    db: sqlite3.Connection,
    *,
    household_id: str = HOUSEHOLD,
    days_ago: int = 2,
    amount: float = 85.0,
    trip_label: Optional[str] = "Weekly shop",
    purchaser_name: str = "Sam",
) -> str:
    """Insert a grocery trip and return its ID."""
    gid = str(uuid.uuid4())
    now = datetime.utcnow().isoformat()
    day = (date.today() - timedelta(days=days_ago)).isoformat()

    db.execute(
        """INSERT INTO groceries
           (id, household_id, date, amount, notes, trip_label, purchaser_name,
            created_at, updated_at)
           VALUES (?, ?, ?, ?, NULL, ?, ?, ?, ?)""",
        (gid, household_id, day, amount, trip_label, purchaser_name, now, now),
    )
    db.commit()
    return gid
