"""
Report computations over decoded consumption records.

Every function is a pure, read-only transform of the record sequence and
returns freshly allocated rows. Date grouping always uses the calendar date
(``ConsumptionRecord.consumed_on``), never the time-of-day.
"""

from collections import defaultdict
from collections.abc import Sequence
from datetime import date

from calorie_insights.core.models import (
    ConsumptionRecord,
    DailyCalorieTotal,
    FavoriteItem,
    MonthlyCalorieSummary,
    UserDaysUnder,
)

DEFAULT_CALORIE_THRESHOLD = 1800
DEFAULT_PROTEIN_DATE = date(2022, 11, 1)
DEFAULT_MONTHLY_MIN_CALORIES = 30
DEFAULT_TOP_N = 3


def _daily_sums(records: Sequence[ConsumptionRecord]) -> dict[tuple[int, date], float]:
    sums: dict[tuple[int, date], float] = defaultdict(float)
    for record in records:
        sums[(record.user_id, record.consumed_on)] += record.calories
    return sums


def total_calories_per_user_per_day(records: Sequence[ConsumptionRecord]) -> list[DailyCalorieTotal]:
    """
    Sum calories for every (user, calendar day).

    Args:
        records: Decoded records

    Returns:
        Rows sorted by user_id, then day
    """
    return [
        DailyCalorieTotal(user_id=user_id, day=day, total_calories=total)
        for (user_id, day), total in sorted(_daily_sums(records).items())
    ]


def users_with_most_days_under(
    records: Sequence[ConsumptionRecord],
    threshold: float = DEFAULT_CALORIE_THRESHOLD,
) -> list[UserDaysUnder]:
    """
    Count, per user, the distinct days whose calorie total is below a threshold.

    Days are kept when their total is strictly less than ``threshold``.
    Users without any such day are omitted.

    Args:
        records: Decoded records
        threshold: Daily calorie limit (exclusive)

    Returns:
        Rows sorted by days_under descending, ties by user_id ascending
    """
    days_under: dict[int, int] = defaultdict(int)
    for (user_id, _day), total in _daily_sums(records).items():
        if total < threshold:
            days_under[user_id] += 1

    ranked = sorted(days_under.items(), key=lambda item: (-item[1], item[0]))
    return [UserDaysUnder(user_id=user_id, days_under=count) for user_id, count in ranked]


def distinct_favorite_items(records: Sequence[ConsumptionRecord]) -> list[FavoriteItem]:
    """
    List the distinct (user, item name) pairs flagged as favorite.

    Returns:
        Rows sorted by user_id, then name
    """
    pairs = {(record.user_id, record.name) for record in records if record.favorite}
    return [FavoriteItem(user_id=user_id, name=name) for user_id, name in sorted(pairs)]


def highest_protein_on(
    records: Sequence[ConsumptionRecord],
    target_date: date = DEFAULT_PROTEIN_DATE,
) -> ConsumptionRecord | None:
    """
    Find the highest-protein record consumed on a calendar date.

    On ties the record that appears first in the input wins.

    Args:
        records: Decoded records
        target_date: Calendar date to inspect

    Returns:
        The matching record, or None when no record has that date
    """
    same_day = (record for record in records if record.consumed_on == target_date)
    # max() keeps the first maximal element
    return max(same_day, key=lambda record: record.protein, default=None)


def monthly_calorie_summary(
    records: Sequence[ConsumptionRecord],
    min_calories: float = DEFAULT_MONTHLY_MIN_CALORIES,
) -> list[MonthlyCalorieSummary]:
    """
    Count and sum the calories of entries above a floor, per calendar month.

    Args:
        records: Decoded records
        min_calories: Entries must have strictly more calories than this

    Returns:
        Rows sorted ascending by "YYYY-MM"
    """
    counts: dict[str, int] = defaultdict(int)
    totals: dict[str, float] = defaultdict(float)
    for record in records:
        if record.calories > min_calories:
            counts[record.consumed_month] += 1
            totals[record.consumed_month] += record.calories

    return [
        MonthlyCalorieSummary(month=month, count=counts[month], total_calories=totals[month])
        for month in sorted(counts)
    ]


def top_by_protein(records: Sequence[ConsumptionRecord], limit: int = DEFAULT_TOP_N) -> list[ConsumptionRecord]:
    """
    Return the ``limit`` records with the most protein.

    Equal protein values keep their input order.
    """
    if limit <= 0:
        return []
    # sorted() is stable, reverse=True keeps equal keys in input order
    return sorted(records, key=lambda record: record.protein, reverse=True)[:limit]
