"""(restaurant, dish) normalization used by dedup and the disabled set."""

from typing import Optional

from ..models import ItemKey

# Stands in for a missing restaurant (home cooking / unknown)
NO_RESTAURANT = "-"


def _norm(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def normalize_key(restaurant: Optional[str], dish: str) -> ItemKey:
    """Trim + lowercase both parts; blank restaurant becomes NO_RESTAURANT."""
    return ItemKey(restaurant=_norm(restaurant) or NO_RESTAURANT, dish=_norm(dish))


def parse_key(text: str) -> ItemKey:
    """Inverse of str(ItemKey) for "restaurant|dish" strings."""
    restaurant, sep, dish = text.partition("|")
    if not sep:
        raise ValueError(f"Item key must look like 'restaurant|dish', got {text!r}")
    return normalize_key(restaurant, dish)
