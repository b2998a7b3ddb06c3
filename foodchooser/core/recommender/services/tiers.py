"""
Reward tiers by cost.

Bands are half-open [low, high) and kept in integer cents so the
exclusive upper bound compares exactly against an inclusive budget.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from ..models import BudgetPreferences, Tier, TierEligibility, to_decimal

# (tier, low cents inclusive, high cents exclusive or None)
TIER_BANDS: list[tuple[Tier, int, Optional[int]]] = [
    (Tier.BRONZE, 0, 1500),
    (Tier.SILVER, 1500, 3000),
    (Tier.GOLD, 3000, 5500),
    (Tier.DIAMOND, 5500, None),
]


def to_cents(value: Any) -> int:
    return int((to_decimal(value) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _dollars(cents: int) -> str:
    return f"${cents / 100:.2f}"


def classify_tier(cost: Any) -> Tier:
    amount = to_decimal(cost)
    if amount < 0:
        raise ValueError(f"Cannot classify negative cost {amount}")
    for tier, low, high in TIER_BANDS:
        if high is None or amount < Decimal(high) / 100:
            return tier
    return Tier.DIAMOND


def tier_eligibility(budget: BudgetPreferences) -> list[TierEligibility]:
    """Which tiers a meal inside [budget.min, budget.max] can land in."""
    min_cents = to_cents(budget.min)
    max_cents = to_cents(budget.max)

    results = []
    for tier, low, high in TIER_BANDS:
        reaches_min = high is None or high - 1 >= min_cents
        reaches_max = max_cents >= low
        hint = None
        if not reaches_max:
            hint = f"Raise max to {_dollars(low)}"
        elif not reaches_min:
            hint = f"Lower min below {_dollars(high)}"
        results.append(TierEligibility(tier=tier, eligible=reaches_min and reaches_max, hint=hint))
    return results
