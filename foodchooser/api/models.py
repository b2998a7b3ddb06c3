"""
Pydantic request/response models for the API.
"""
import datetime as dt
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


# ============== Meals ==============

class MealRequest(BaseModel):
    date: dt.date
    dish: str = Field(..., min_length=1)
    cuisine: str = Field(..., min_length=1)
    cost: float = Field(..., ge=0)
    restaurant: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None
    purchaser_name: str = ""


class MealUpdateRequest(BaseModel):
    """Partial update; only fields that are set get written."""
    date: Optional[dt.date] = None
    dish: Optional[str] = Field(None, min_length=1)
    cuisine: Optional[str] = Field(None, min_length=1)
    cost: Optional[float] = Field(None, ge=0)
    restaurant: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    notes: Optional[str] = None
    purchaser_name: Optional[str] = None


# ============== Groceries ==============

class GroceryRequest(BaseModel):
    date: dt.date
    amount: float = Field(..., ge=0)
    notes: Optional[str] = None
    trip_label: Optional[str] = None
    purchaser_name: str = ""


class GroceryUpdateRequest(BaseModel):
    date: Optional[dt.date] = None
    amount: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = None
    trip_label: Optional[str] = None
    purchaser_name: Optional[str] = None


# ============== Preferences ==============

class PreferencesRequest(BaseModel):
    budget_min: float = Field(..., ge=0)
    budget_max: float = Field(..., ge=0)
    forbid_repeat_days: int = Field(1, ge=0, le=14)
    strict_budget: bool = False
    monthly_budget: Optional[float] = Field(None, ge=0)

    @model_validator(mode="after")
    def check_range(self):
        if self.budget_max < self.budget_min:
            raise ValueError("budget_max must be greater than or equal to budget_min")
        return self


class OverrideRequest(BaseModel):
    count: int = Field(..., ge=0)


class DisabledItemRequest(BaseModel):
    """Either restaurant + dish, or the "restaurant|dish" key from GET /disabled."""
    restaurant: Optional[str] = None
    dish: Optional[str] = Field(None, min_length=1)
    key: Optional[str] = None
    disabled: bool = True

    @model_validator(mode="after")
    def check_item(self):
        if not self.key and not self.dish:
            raise ValueError("Either key or dish is required")
        return self


# ============== Recommendations ==============

class SelectRecommendationRequest(BaseModel):
    """Log a recommendation as tonight's meal."""
    dish: str = Field(..., min_length=1)
    cuisine: str = Field(..., min_length=1)
    cost: float = Field(..., ge=0)
    restaurant: Optional[str] = None
    purchaser_name: str = ""
    # True when the user picked from the list instead of taking the egg's pick
    manual: bool = False


class ScoreBreakdownResponse(BaseModel):
    rating_weight: float
    recency_penalty: float
    budget_fit: float
    weather_bonus: float
    jitter: float
    total: float


class MealCandidateResponse(BaseModel):
    meal: Dict[str, Any]
    score: float
    tier: str
    breakdown: ScoreBreakdownResponse


class MealRecommendationsResponse(BaseModel):
    weather: Dict[str, Any]
    choices: List[MealCandidateResponse]
    chosen_index: Optional[int]
    total_candidates: int


class CuisineRecommendationResponse(BaseModel):
    cuisine: str
    score: float
    avg_rating: float
    last_cost: float
    last_days: int
    est_cost: float
    tier: str
    suggested_restaurant: Optional[str]
    dish: Optional[str]
    breakdown: Dict[str, float]


class TierEligibilityResponse(BaseModel):
    tier: str
    eligible: bool
    hint: Optional[str] = None
