"""
Household preferences, cuisine overrides and disabled items.
"""
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..recommender import BudgetPreferences, ItemKey, normalize_key
from .base import get_db

logger = logging.getLogger(__name__)


# ============== Budget Preferences ==============

def get_preferences(household_id: str) -> BudgetPreferences:
    """Saved preferences, or the defaults when the household has none."""
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM preferences WHERE household_id = ?",
            (household_id,)
        ).fetchone()

    if not row:
        return BudgetPreferences()

    return BudgetPreferences(
        min=row["budget_min"],
        max=row["budget_max"],
        forbid_repeat_days=row["forbid_repeat_days"],
        strict_budget=bool(row["strict_budget"]),
        monthly_budget=row["monthly_budget"],
    )


def save_preferences(household_id: str, prefs: BudgetPreferences) -> BudgetPreferences:
    """Validate and upsert. Raises InvalidPreferencesError before writing anything."""
    prefs.validate()
    now = datetime.utcnow().isoformat()
    monthly = float(prefs.monthly_budget) if prefs.monthly_budget is not None else None

    with get_db() as conn:
        conn.execute("""
            INSERT INTO preferences (
                household_id, budget_min, budget_max, forbid_repeat_days,
                strict_budget, monthly_budget, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(household_id) DO UPDATE SET
                budget_min = excluded.budget_min,
                budget_max = excluded.budget_max,
                forbid_repeat_days = excluded.forbid_repeat_days,
                strict_budget = excluded.strict_budget,
                monthly_budget = excluded.monthly_budget,
                updated_at = excluded.updated_at
        """, (
            household_id, float(prefs.min), float(prefs.max), prefs.forbid_repeat_days,
            int(prefs.strict_budget), monthly, now, now
        ))

    return get_preferences(household_id)


# ============== Cuisine Overrides ==============

def list_overrides(household_id: str) -> List[Dict[str, Any]]:
    with get_db() as conn:
        rows = conn.execute(
            "SELECT * FROM cuisine_overrides WHERE household_id = ? ORDER BY cuisine",
            (household_id,)
        ).fetchall()
        return [dict(row) for row in rows]


def get_overrides_map(household_id: str) -> Dict[str, int]:
    """cuisine -> manual pick count, the shape the cuisine recommender takes."""
    return {row["cuisine"]: row["count"] for row in list_overrides(household_id)}


def upsert_override(household_id: str, cuisine: str, count: int) -> Dict[str, Any]:
    if count < 0:
        raise ValueError(f"Override count must be non-negative, got {count}")
    now = datetime.utcnow().isoformat()

    with get_db() as conn:
        conn.execute("""
            INSERT INTO cuisine_overrides (id, household_id, cuisine, count, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(household_id, cuisine) DO UPDATE SET
                count = excluded.count,
                updated_at = excluded.updated_at
        """, (str(uuid.uuid4()), household_id, cuisine, count, now, now))

        row = conn.execute(
            "SELECT * FROM cuisine_overrides WHERE household_id = ? AND cuisine = ?",
            (household_id, cuisine)
        ).fetchone()
        return dict(row)


def increment_override(household_id: str, cuisine: str) -> int:
    """Record one more manual pick of a cuisine; returns the new count."""
    now = datetime.utcnow().isoformat()

    with get_db() as conn:
        conn.execute("""
            INSERT INTO cuisine_overrides (id, household_id, cuisine, count, created_at, updated_at)
            VALUES (?, ?, ?, 1, ?, ?)
            ON CONFLICT(household_id, cuisine) DO UPDATE SET
                count = cuisine_overrides.count + 1,
                updated_at = excluded.updated_at
        """, (str(uuid.uuid4()), household_id, cuisine, now, now))

        row = conn.execute(
            "SELECT count FROM cuisine_overrides WHERE household_id = ? AND cuisine = ?",
            (household_id, cuisine)
        ).fetchone()

    logger.info(f"Cuisine override for {household_id}/{cuisine} is now {row['count']}")
    return row["count"]


# ============== Disabled Items ==============

def get_disabled_items(household_id: str) -> Dict[ItemKey, bool]:
    with get_db() as conn:
        rows = conn.execute(
            "SELECT restaurant_norm, dish_norm, disabled FROM disabled_items WHERE household_id = ?",
            (household_id,)
        ).fetchall()
        return {
            ItemKey(restaurant=row["restaurant_norm"], dish=row["dish_norm"]): bool(row["disabled"])
            for row in rows
        }


def set_disabled_item(
    household_id: str,
    restaurant: Optional[str],
    dish: str,
    disabled: bool = True
) -> ItemKey:
    """Flag or unflag a (restaurant, dish) pair; inputs are normalized here."""
    key = normalize_key(restaurant, dish)
    now = datetime.utcnow().isoformat()

    with get_db() as conn:
        conn.execute("""
            INSERT INTO disabled_items (
                id, household_id, restaurant_norm, dish_norm, disabled, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(household_id, restaurant_norm, dish_norm) DO UPDATE SET
                disabled = excluded.disabled,
                updated_at = excluded.updated_at
        """, (str(uuid.uuid4()), household_id, key.restaurant, key.dish, int(disabled), now, now))

    return key
