"""
Core data models for the calorie report pipeline.

All models use Pydantic for runtime validation and type safety.
"""

from .consumption_record import ConsumptionRecord
from .decode_result import DecodeResult
from .report_rows import (
    DailyCalorieTotal,
    FavoriteItem,
    MonthlyCalorieSummary,
    ReportBundle,
    UserDaysUnder,
)

__all__ = [
    "ConsumptionRecord",
    "DecodeResult",
    "DailyCalorieTotal",
    "UserDaysUnder",
    "FavoriteItem",
    "MonthlyCalorieSummary",
    "ReportBundle",
]
