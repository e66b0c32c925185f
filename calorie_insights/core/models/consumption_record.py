"""
ConsumptionRecord model representing one decoded food-consumption entry.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class ConsumptionRecord(BaseModel):
    """
    One meal or food item consumed by a user on a date.

    Records are produced by the RecordDecoder only and are never mutated
    afterwards. Reports group and filter by the calendar date
    (``consumed_on``), the time-of-day in ``date_consumed`` is informational.

    Attributes:
        id: Entry identifier (duplicates pass through)
        user_id: Consumer identifier
        age: Consumer age
        user_weight: Consumer body weight
        name: Consumed item label ("" when absent)
        price, weight, calories, fat, carbs, protein: Numeric magnitudes
        time_consumed: Raw time-of-day text, None when absent
        date_consumed: Consumption timestamp
        type: Category label, None when absent
        favorite: Whether the user marked the item as favorite
        procedence: Provenance label, None when absent
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "user_id": 7,
                "age": 34,
                "user_weight": 81.5,
                "name": "Grilled chicken",
                "price": 8.5,
                "weight": 250.0,
                "calories": 412.0,
                "fat": 9.1,
                "carbs": 0.0,
                "protein": 62.0,
                "time_consumed": "13:05",
                "date_consumed": "2022-11-01T00:00:00",
                "type": "lunch",
                "favorite": True,
                "procedence": "home",
            }
        },
    )

    id: int = 0
    user_id: int = 0
    age: int = 0
    user_weight: float = 0.0
    name: str = ""
    price: float = 0.0
    weight: float = 0.0
    calories: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    protein: float = 0.0
    time_consumed: str | None = None
    date_consumed: datetime = datetime.min
    type: str | None = None
    favorite: bool = False
    procedence: str | None = None

    @property
    def consumed_on(self) -> date:
        """Calendar date used for all date-based grouping."""
        return self.date_consumed.date()

    @property
    def consumed_month(self) -> str:
        """Year-month key, e.g. "2022-11"."""
        return f"{self.date_consumed.year:04d}-{self.date_consumed.month:02d}"

    def to_raw(self) -> dict[str, Any]:
        """
        Re-express the record as its canonical JSON mapping.

        Decoding the returned mapping yields an equal record.
        """
        payload = self.model_dump()
        payload["date_consumed"] = self.date_consumed.isoformat()
        return payload
