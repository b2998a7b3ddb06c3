"""Demo history for new households."""
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .db import create_meal, delete_seed_meals
from .recommender import SEED_MARKER

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).parent / "seed_data" / "demo_meals.yaml"


def load_demo_meals(path: Optional[Path] = None, today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Read the demo file and resolve days_ago into concrete dates."""
    path = path or SEED_PATH
    today = today or date.today()

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    meals = []
    for entry in config.get("meals", []):
        entry = dict(entry)
        days_ago = int(entry.pop("days_ago", 0))
        entry["date"] = today - timedelta(days=days_ago)
        meals.append(entry)
    return meals


def seed_household(household_id: str, path: Optional[Path] = None, today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Insert demo meals flagged seed_only so they never count as spend."""
    created = []
    for meal in load_demo_meals(path, today):
        created.append(create_meal(
            household_id,
            seed_only=True,
            notes=f"{SEED_MARKER} demo data",
            **meal,
        ))
    logger.info(f"Seeded {len(created)} demo meals for household {household_id}")
    return created


def clear_seed(household_id: str) -> int:
    removed = delete_seed_meals(household_id)
    logger.info(f"Removed {removed} demo meals for household {household_id}")
    return removed
