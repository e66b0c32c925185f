"""
Unit tests for Pydantic data models.

Tests record immutability, derived date keys and report row constraints.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from calorie_insights.core.models import (
    ConsumptionRecord,
    DailyCalorieTotal,
    DecodeResult,
    FavoriteItem,
    MonthlyCalorieSummary,
    ReportBundle,
    UserDaysUnder,
)


class TestConsumptionRecord:
    """Tests for ConsumptionRecord model"""

    def test_defaults_are_zero_values(self):
        record = ConsumptionRecord()
        assert record.id == 0
        assert record.name == ""
        assert record.calories == 0.0
        assert record.favorite is False
        assert record.type is None
        assert record.procedence is None
        assert record.time_consumed is None
        assert record.date_consumed == datetime.min

    def test_record_is_immutable(self):
        record = ConsumptionRecord(id=1, calories=100)
        with pytest.raises(ValidationError):
            record.calories = 200

    def test_consumed_on_drops_time_of_day(self):
        record = ConsumptionRecord(date_consumed=datetime(2022, 11, 1, 23, 59))
        assert record.consumed_on == date(2022, 11, 1)

    def test_consumed_month(self):
        assert ConsumptionRecord(date_consumed=datetime(2022, 3, 9)).consumed_month == "2022-03"
        assert ConsumptionRecord().consumed_month == "0001-01"

    def test_to_raw_uses_json_keys_and_iso_date(self):
        record = ConsumptionRecord(id=3, user_id=9, date_consumed=datetime(2022, 11, 1, 8, 30), type="lunch")
        raw = record.to_raw()
        assert raw["user_id"] == 9
        assert raw["date_consumed"] == "2022-11-01T08:30:00"
        assert raw["type"] == "lunch"
        assert raw["procedence"] is None

    def test_empty_name_and_absent_type_are_distinct(self):
        record = ConsumptionRecord(name="", type=None)
        assert record.name == ""
        assert record.type is None


class TestReportRows:
    """Tests for report row models"""

    def test_daily_total(self):
        row = DailyCalorieTotal(user_id=1, day=date(2022, 11, 1), total_calories=800)
        assert row.total_calories == 800.0

    def test_days_under_cannot_be_negative(self):
        with pytest.raises(ValidationError) as exc_info:
            UserDaysUnder(user_id=1, days_under=-1)
        assert "days_under" in str(exc_info.value)

    def test_month_format_enforced(self):
        MonthlyCalorieSummary(month="2022-11", count=2, total_calories=90)
        with pytest.raises(ValidationError) as exc_info:
            MonthlyCalorieSummary(month="2022/11", count=2, total_calories=90)
        assert "month" in str(exc_info.value)

    def test_favorite_items_are_hashable_and_comparable(self):
        assert FavoriteItem(user_id=1, name="A") == FavoriteItem(user_id=1, name="A")
        assert len({FavoriteItem(user_id=1, name="A"), FavoriteItem(user_id=1, name="A")}) == 1

    def test_empty_bundle(self):
        bundle = ReportBundle()
        assert bundle.record_count == 0
        assert bundle.daily_totals == []
        assert bundle.highest_protein is None


class TestDecodeResult:
    """Tests for DecodeResult model"""

    def test_clean_when_no_fallbacks(self):
        assert DecodeResult(record=ConsumptionRecord()).clean is True

    def test_not_clean_with_fallbacks(self):
        result = DecodeResult(record=ConsumptionRecord(), fallbacks_applied=["age"])
        assert result.clean is False
