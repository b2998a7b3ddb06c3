"""
Meal history database operations.
"""
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..recommender import MealRecord, normalize_key
from .base import get_db, ALLOWED_MEAL_COLUMNS

logger = logging.getLogger(__name__)


def _clean_restaurant(restaurant: Optional[str]) -> Optional[str]:
    return (restaurant or "").strip() or None


def _row_to_meal(row) -> Dict[str, Any]:
    result = dict(row)
    result["seed_only"] = bool(result.get("seed_only"))
    return result


def create_meal(
    household_id: str,
    *,
    date: Any,
    dish: str,
    cuisine: str,
    cost: float,
    restaurant: Optional[str] = None,
    rating: Optional[int] = None,
    notes: Optional[str] = None,
    seed_only: bool = False,
    purchaser_name: str = "",
    meal_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Insert a meal and return the stored row."""
    # Validates cost, rating and required fields before touching the db
    record = MealRecord(
        id=meal_id or str(uuid.uuid4()),
        date=date,
        dish=dish,
        cuisine=cuisine,
        cost=cost,
        restaurant=_clean_restaurant(restaurant),
        rating=rating,
        notes=notes,
        seed_only=seed_only,
        purchaser_name=purchaser_name or "",
    )
    now = datetime.utcnow().isoformat()

    with get_db() as conn:
        conn.execute("""
            INSERT INTO meals (
                id, household_id, date, restaurant, dish, cuisine, cost,
                rating, notes, seed_only, purchaser_name, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, (
            record.id, household_id, record.date.isoformat(), record.restaurant,
            record.dish.strip(), record.cuisine.strip(), float(record.cost),
            record.rating, record.notes, int(record.seed_only),
            record.purchaser_name, now, now
        ))

    return get_meal(household_id, record.id)


def get_meal(household_id: str, meal_id: str) -> Optional[Dict[str, Any]]:
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM meals WHERE id = ? AND household_id = ?",
            (meal_id, household_id)
        ).fetchone()
        return _row_to_meal(row) if row else None


def list_meals(
    household_id: str,
    include_seed: bool = True,
    limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """List meals for a household, newest first."""
    query = "SELECT * FROM meals WHERE household_id = ?"
    params: list = [household_id]

    if not include_seed:
        query += " AND seed_only = 0"

    query += " ORDER BY date DESC, created_at DESC"
    if limit:
        query += " LIMIT ?"
        params.append(limit)

    with get_db() as conn:
        rows = conn.execute(query, params).fetchall()
        return [_row_to_meal(row) for row in rows]


def load_meal_history(household_id: str) -> List[MealRecord]:
    """Full history as MealRecords for the recommenders."""
    return [MealRecord.from_row(row) for row in list_meals(household_id)]


def update_meal(household_id: str, meal_id: str, **updates) -> Optional[Dict[str, Any]]:
    """
    Update a meal in place, unless restaurant or dish changes.

    A different (restaurant, dish) is a different meal, so the edit is saved
    as a new record and the original stays in the history. Returns the
    resulting row (check its id), or None if the meal does not exist.
    """
    current = get_meal(household_id, meal_id)
    if current is None:
        return None

    invalid = set(updates) - ALLOWED_MEAL_COLUMNS
    if invalid:
        raise ValueError(f"Invalid meal columns: {sorted(invalid)}")

    merged = {k: current[k] for k in ALLOWED_MEAL_COLUMNS}
    merged.update(updates)

    old_key = normalize_key(current["restaurant"], current["dish"])
    new_key = normalize_key(merged["restaurant"], merged["dish"])
    if new_key != old_key:
        logger.info(f"Meal {meal_id} changed from {old_key} to {new_key}; saving as new record")
        return create_meal(household_id, **merged)

    # Re-validate the merged values before writing
    record = MealRecord(id=meal_id, **merged)
    values = {
        "date": record.date.isoformat(),
        "restaurant": _clean_restaurant(record.restaurant),
        "dish": record.dish.strip(),
        "cuisine": record.cuisine.strip(),
        "cost": float(record.cost),
        "rating": record.rating,
        "notes": record.notes,
        "seed_only": int(record.seed_only),
        "purchaser_name": record.purchaser_name,
    }
    # seed_only follows the notes marker, so it is rewritten with any change
    columns = list(updates)
    if columns and "seed_only" not in columns:
        columns.append("seed_only")
    set_clause = ", ".join(f"{col} = ?" for col in columns)
    params = [values[col] for col in columns]
    params.extend([datetime.utcnow().isoformat(), meal_id, household_id])

    if updates:
        with get_db() as conn:
            conn.execute(
                f"UPDATE meals SET {set_clause}, updated_at = ? WHERE id = ? AND household_id = ?",
                params
            )

    return get_meal(household_id, meal_id)


def delete_meal(household_id: str, meal_id: str) -> bool:
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM meals WHERE id = ? AND household_id = ?",
            (meal_id, household_id)
        )
        return cursor.rowcount > 0


def delete_seed_meals(household_id: str) -> int:
    """Remove demo data; returns number of rows deleted."""
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM meals WHERE household_id = ? AND seed_only = 1",
            (household_id,)
        )
        return cursor.rowcount
