"""
Data models for the meal recommender.

All structured data uses dataclasses for type hints, __eq__, and __repr__.
Money values use Decimal for precision; scores are plain floats.
"""

from dataclasses import dataclass, field, asdict
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from .dates import DateLike, parse_day

# Marker written into the notes of generated demo meals
SEED_MARKER = "#seed"


class WeatherCondition(str, Enum):
    HOT = "hot"
    COLD = "cold"
    MILD = "mild"
    RAIN = "rain"


class Tier(str, Enum):
    """Reward tier of a meal, by cost."""
    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    DIAMOND = "Diamond"


class InvalidPreferencesError(ValueError):
    """Budget preferences that must not be persisted."""


def to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class ItemKey:
    """Normalized (restaurant, dish) identity, see keys.normalize_key."""
    restaurant: str
    dish: str

    def __str__(self) -> str:
        return f"{self.restaurant}|{self.dish}"


@dataclass
class MealRecord:
    """
    A single logged meal.

    seed_only meals are demo data: excluded from spending totals but
    still part of the history the recommenders rank.
    """
    id: str
    date: date
    dish: str
    cuisine: str
    cost: Decimal
    restaurant: Optional[str] = None
    rating: Optional[int] = None  # 1-5, None scores as 3
    notes: Optional[str] = None
    seed_only: bool = False
    purchaser_name: str = ""

    def __post_init__(self):
        self.date = parse_day(self.date)
        self.cost = to_decimal(self.cost)
        if self.cost < 0:
            raise ValueError(f"Meal cost must be non-negative, got {self.cost}")
        if self.rating is not None and not 1 <= int(self.rating) <= 5:
            raise ValueError(f"Meal rating must be between 1 and 5, got {self.rating}")
        if not self.dish or not self.dish.strip():
            raise ValueError("Meal dish is required")
        if not self.cuisine or not self.cuisine.strip():
            raise ValueError("Meal cuisine is required")
        if self.notes and SEED_MARKER in self.notes:
            self.seed_only = True

    @classmethod
    def from_row(cls, row: dict) -> "MealRecord":
        """Build from a meals table row (see core.db.meals)."""
        return cls(
            id=row["id"],
            date=row["date"],
            dish=row["dish"],
            cuisine=row["cuisine"],
            cost=row["cost"],
            restaurant=row.get("restaurant"),
            rating=row.get("rating"),
            notes=row.get("notes"),
            seed_only=bool(row.get("seed_only")),
            purchaser_name=row.get("purchaser_name") or "",
        )


@dataclass
class BudgetPreferences:
    """Household budget range and repeat window."""
    min: Decimal = Decimal("10")
    max: Decimal = Decimal("35")
    forbid_repeat_days: int = 1
    strict_budget: bool = False
    monthly_budget: Optional[Decimal] = None

    def __post_init__(self):
        self.min = to_decimal(self.min)
        self.max = to_decimal(self.max)
        if self.monthly_budget is not None:
            self.monthly_budget = to_decimal(self.monthly_budget)

    def contains(self, cost: Any) -> bool:
        """Inclusive range check."""
        return self.min <= to_decimal(cost) <= self.max

    def validate(self) -> "BudgetPreferences":
        """Raise InvalidPreferencesError unless the preferences can be saved."""
        if self.min < 0 or self.max < 0:
            raise InvalidPreferencesError("Budget bounds must be non-negative")
        if self.max < self.min:
            raise InvalidPreferencesError(
                f"Budget max ({self.max}) must be at least min ({self.min})"
            )
        if isinstance(self.forbid_repeat_days, bool) or not isinstance(self.forbid_repeat_days, int):
            raise InvalidPreferencesError("forbid_repeat_days must be an integer")
        if not 0 <= self.forbid_repeat_days <= 14:
            raise InvalidPreferencesError("forbid_repeat_days must be between 0 and 14")
        if self.monthly_budget is not None and self.monthly_budget < 0:
            raise InvalidPreferencesError("Monthly budget must be non-negative")
        return self


@dataclass(frozen=True)
class WeatherContext:
    condition: WeatherCondition
    temp_f: float


FALLBACK_WEATHER = WeatherContext(condition=WeatherCondition.MILD, temp_f=72.0)


@dataclass
class ScoreBreakdown:
    """Per-component meal score; every part is kept for display."""
    rating_weight: float
    recency_penalty: float
    budget_fit: float
    weather_bonus: float
    jitter: float = 0.0

    @property
    def total(self) -> float:
        return (
            self.rating_weight
            + self.recency_penalty
            + self.budget_fit
            + self.weather_bonus
            + self.jitter
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["total"] = self.total
        return data


@dataclass
class ScoredCandidate:
    record: MealRecord
    breakdown: ScoreBreakdown

    @property
    def score(self) -> float:
        return self.breakdown.total


@dataclass
class TierEligibility:
    tier: Tier
    eligible: bool
    hint: Optional[str] = None


@dataclass
class CuisineRecommendation:
    """One cuisine-level suggestion from the aggregate recommender."""
    cuisine: str
    score: float
    avg_rating: float
    last_cost: Decimal
    last_days: int
    est_cost: Decimal
    tier: Tier
    suggested_restaurant: Optional[str] = None
    dish: Optional[str] = None
    breakdown: dict = field(default_factory=dict)


@dataclass
class EggResult:
    """Top choices plus the single sampled pick shared by every presentation."""
    choices: list[ScoredCandidate]
    chosen_index: Optional[int]

    @property
    def chosen(self) -> Optional[ScoredCandidate]:
        if self.chosen_index is None:
            return None
        return self.choices[self.chosen_index]
