"""
Pytest configuration and fixtures for calorie-insights tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import pytest

from calorie_insights.core.decoding import RecordDecoder
from calorie_insights.core.models import ConsumptionRecord


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests across several components"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that run the CLI"
    )


# =======================
# RECORD FIXTURES
# =======================

@pytest.fixture
def make_record() -> Callable[..., ConsumptionRecord]:
    """
    Build ConsumptionRecord instances with sensible defaults

    Usage:
        make_record(user_id=1, date="2022-11-01", calories=500)
    """
    counter = {"next_id": 1}

    def _make(date: str = "2022-11-01", **fields: Any) -> ConsumptionRecord:
        fields.setdefault("id", counter["next_id"])
        counter["next_id"] += 1
        fields.setdefault("date_consumed", datetime.fromisoformat(date))
        return ConsumptionRecord(**fields)

    return _make


@pytest.fixture
def decoder() -> RecordDecoder:
    """Decoder with default settings"""
    return RecordDecoder()


@pytest.fixture(scope="session")
def dirty_raw_records() -> list[dict[str, Any]]:
    """
    Raw elements mixing numbers, numeric strings and human-readable booleans,
    shaped like the public calories.json screener document
    """
    return [
        {
            "id": 1, "user_id": "1", "age": "34", "user_weight": "81.5", "name": "Oatmeal",
            "price": 2.5, "weight": 250, "calories": 900, "fat": 6.1, "carbs": 54, "protein": 12,
            "time_consumed": "08:00", "date_consumed": "2022-11-01", "type": "breakfast",
            "favorite": "yes", "procedence": "home",
        },
        {
            "id": 2, "user_id": 1, "age": 34, "name": "Chicken salad",
            "price": "7.90", "weight": 320, "calories": "700", "fat": 11, "carbs": 9, "protein": 48,
            "time_consumed": "13:15", "date_consumed": "2022-11-01T13:15:00", "type": "lunch",
            "favorite": "Y", "procedence": "restaurant",
        },
        {
            "id": 3, "user_id": 1, "age": 34, "name": "Pasta",
            "price": 9, "weight": 400, "calories": 1950, "fat": 20, "carbs": 120, "protein": 25,
            "date_consumed": "2022-11-02", "type": "dinner", "favorite": "no",
        },
        {
            "id": "4", "user_id": "2", "age": "not-a-number", "name": "Steak",
            "price": 21, "weight": 300, "calories": 1200, "fat": 40, "carbs": 0, "protein": 62,
            "time_consumed": "20:00", "date_consumed": "2022-11-01", "type": "dinner",
            "favorite": 1, "procedence": None,
        },
        {
            "id": 5, "user_id": 2, "age": 41, "name": "Apple",
            "price": 0.5, "weight": 150, "calories": 25, "fat": 0.2, "carbs": 19, "protein": 0.5,
            "date_consumed": "2022-12-03", "favorite": True,
        },
        {
            "id": 6, "user_id": 2, "age": 41, "name": "Steak",
            "price": 21, "weight": 300, "calories": 1250, "fat": 40, "carbs": 0, "protein": 62,
            "date_consumed": "2022-12-04", "favorite": "TRUE",
        },
    ]


@pytest.fixture
def calories_json_file(tmp_path: Path, dirty_raw_records) -> Path:
    """Write the dirty raw records to a temporary JSON file"""
    path = tmp_path / "calories.json"
    path.write_text(json.dumps(dirty_raw_records), encoding="utf-8")
    return path
