"""
Report computations and orchestration.
"""

from .aggregations import (
    distinct_favorite_items,
    highest_protein_on,
    monthly_calorie_summary,
    top_by_protein,
    total_calories_per_user_per_day,
    users_with_most_days_under,
)
from .report_runner import REPORT_NAMES, ReportRunner

__all__ = [
    "total_calories_per_user_per_day",
    "users_with_most_days_under",
    "distinct_favorite_items",
    "highest_protein_on",
    "monthly_calorie_summary",
    "top_by_protein",
    "REPORT_NAMES",
    "ReportRunner",
]
