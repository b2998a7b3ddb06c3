"""
Grocery trip database operations.
"""
import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..recommender.dates import parse_day
from .base import get_db, ALLOWED_GROCERY_COLUMNS


def _check_amount(amount: Any) -> float:
    value = float(amount)
    if value < 0:
        raise ValueError(f"Grocery amount must be non-negative, got {value}")
    return value


def create_grocery(
    household_id: str,
    *,
    date: Any,
    amount: float,
    notes: Optional[str] = None,
    trip_label: Optional[str] = None,
    purchaser_name: str = "",
    grocery_id: Optional[str] = None,
) -> Dict[str, Any]:
    gid = grocery_id or str(uuid.uuid4())
    now = datetime.utcnow().isoformat()

    with get_db() as conn:
        conn.execute("""
            INSERT INTO groceries (
                id, household_id, date, amount, notes, trip_label,
                purchaser_name, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
        """, (
            gid, household_id, parse_day(date).isoformat(), _check_amount(amount),
            notes, trip_label, purchaser_name or "", now, now
        ))

    return get_grocery(household_id, gid)


def get_grocery(household_id: str, grocery_id: str) -> Optional[Dict[str, Any]]:
    with get_db() as conn:
        row = conn.execute(
            "SELECT * FROM groceries WHERE id = ? AND household_id = ?",
            (grocery_id, household_id)
        ).fetchone()
        return dict(row) if row else None


def list_groceries(household_id: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    """List grocery trips, newest first."""
    query = "SELECT * FROM groceries WHERE household_id = ? ORDER BY date DESC, created_at DESC"
    params: list = [household_id]
    if limit:
        query += " LIMIT ?"
        params.append(limit)

    with get_db() as conn:
        rows = conn.execute(query, params).fetchall()
        return [dict(row) for row in rows]


def update_grocery(household_id: str, grocery_id: str, **updates) -> Optional[Dict[str, Any]]:
    invalid = set(updates) - ALLOWED_GROCERY_COLUMNS
    if invalid:
        raise ValueError(f"Invalid grocery columns: {sorted(invalid)}")

    if "amount" in updates:
        updates["amount"] = _check_amount(updates["amount"])
    if "date" in updates:
        updates["date"] = parse_day(updates["date"]).isoformat()

    if updates:
        set_clause = ", ".join(f"{col} = ?" for col in updates)
        params = list(updates.values())
        params.extend([datetime.utcnow().isoformat(), grocery_id, household_id])

        with get_db() as conn:
            conn.execute(
                f"UPDATE groceries SET {set_clause}, updated_at = ? WHERE id = ? AND household_id = ?",
                params
            )

    return get_grocery(household_id, grocery_id)


def delete_grocery(household_id: str, grocery_id: str) -> bool:
    with get_db() as conn:
        cursor = conn.execute(
            "DELETE FROM groceries WHERE id = ? AND household_id = ?",
            (grocery_id, household_id)
        )
        return cursor.rowcount > 0
