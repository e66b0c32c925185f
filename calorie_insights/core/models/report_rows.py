"""
Report row models produced by the aggregation functions.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .consumption_record import ConsumptionRecord


class DailyCalorieTotal(BaseModel):
    """Sum of calories for one user on one calendar day."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    day: date
    total_calories: float


class UserDaysUnder(BaseModel):
    """Number of distinct days a user stayed under the calorie threshold."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    days_under: int = Field(..., ge=0)


class FavoriteItem(BaseModel):
    """A distinct (user, item) pair marked as favorite."""

    model_config = ConfigDict(frozen=True)

    user_id: int
    name: str


class MonthlyCalorieSummary(BaseModel):
    """Count and calorie sum of the entries kept for one month."""

    model_config = ConfigDict(frozen=True)

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$")
    count: int = Field(..., ge=0)
    total_calories: float


class ReportBundle(BaseModel):
    """
    All reports computed from one record set.

    ``highest_protein`` is None when no record matches the target date.
    """

    model_config = ConfigDict(frozen=True)

    record_count: int = 0
    daily_totals: List[DailyCalorieTotal] = Field(default_factory=list)
    days_under_threshold: List[UserDaysUnder] = Field(default_factory=list)
    favorite_items: List[FavoriteItem] = Field(default_factory=list)
    highest_protein: Optional[ConsumptionRecord] = None
    monthly_summary: List[MonthlyCalorieSummary] = Field(default_factory=list)
    top_protein: List[ConsumptionRecord] = Field(default_factory=list)
