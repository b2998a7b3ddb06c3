"""Tests for tier classification and budget eligibility."""

from decimal import Decimal

import pytest
from ..models import BudgetPreferences, Tier
from ..services.tiers import classify_tier, tier_eligibility, to_cents


@pytest.mark.parametrize("cost,expected", [
    (0, Tier.BRONZE),
    (14.99, Tier.BRONZE),
    (15, Tier.SILVER),
    (29.99, Tier.SILVER),
    (30, Tier.GOLD),
    (54.99, Tier.GOLD),
    (55, Tier.DIAMOND),
    (1000, Tier.DIAMOND),
])
def test_classify_tier_boundaries(cost, expected):
    assert classify_tier(cost) == expected


def test_classify_tier_accepts_decimal():
    assert classify_tier(Decimal("14.999")) == Tier.BRONZE


def test_classify_tier_rejects_negative():
    with pytest.raises(ValueError):
        classify_tier(-1)


def test_to_cents_rounds():
    assert to_cents("14.995") == 1500
    assert to_cents(30) == 3000


def test_default_budget_eligibility():
    """$10-$35 reaches Bronze, Silver and Gold but not Diamond."""
    results = {r.tier: r for r in tier_eligibility(BudgetPreferences(min=10, max=35))}
    assert results[Tier.BRONZE].eligible
    assert results[Tier.SILVER].eligible
    assert results[Tier.GOLD].eligible
    assert not results[Tier.DIAMOND].eligible
    assert results[Tier.DIAMOND].hint == "Raise max to $55.00"


def test_high_min_excludes_bronze():
    results = {r.tier: r for r in tier_eligibility(BudgetPreferences(min=20, max=60))}
    assert not results[Tier.BRONZE].eligible
    assert results[Tier.BRONZE].hint == "Lower min below $15.00"
    assert results[Tier.DIAMOND].eligible


def test_exclusive_upper_bound():
    """A min of exactly $15 can never be Bronze."""
    results = {r.tier: r for r in tier_eligibility(BudgetPreferences(min=15, max=15))}
    assert not results[Tier.BRONZE].eligible
    assert results[Tier.SILVER].eligible
    assert results[Tier.SILVER].hint is None
