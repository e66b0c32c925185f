"""
Settings models for sources, decoding and reports.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SOURCE_URL = "https://git.toptal.com/screeners/calories-json/-/raw/main/calories.json"


class SourceSettings(BaseModel):
    """
    Where the raw JSON document comes from.

    Attributes:
        url: HTTP(S) URL of the JSON array
        timeout_seconds: Request timeout for the fetch
    """

    model_config = ConfigDict(frozen=True)

    url: str = DEFAULT_SOURCE_URL
    timeout_seconds: float = Field(30.0, gt=0)


class DecoderSettings(BaseModel):
    """
    Decoder tuning.

    Attributes:
        truthy_tokens: Strings (case-insensitive) that decode to True
    """

    model_config = ConfigDict(frozen=True)

    truthy_tokens: tuple[str, ...] = ("true", "1", "yes", "y")

    @field_validator("truthy_tokens")
    @classmethod
    def normalize_tokens(cls, v):
        """Store tokens trimmed and lower-cased, rejecting an empty set."""
        tokens = tuple(str(token).strip().lower() for token in v)
        if not tokens:
            raise ValueError("truthy_tokens must contain at least one token")
        return tokens


class ReportSettings(BaseModel):
    """
    Report parameters.

    Attributes:
        calorie_threshold: Daily total must be strictly below this to count a day
        protein_date: Date inspected by the highest-protein report
        monthly_min_calories: Entries must exceed this to enter the monthly summary
        top_n: Number of entries in the top-by-protein report
    """

    model_config = ConfigDict(frozen=True)

    calorie_threshold: float = 1800
    protein_date: date = date(2022, 11, 1)
    monthly_min_calories: float = 30
    top_n: int = Field(3, ge=0)


class Settings(BaseModel):
    """Top-level application settings."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "source": {"url": DEFAULT_SOURCE_URL, "timeout_seconds": 30},
                "decoder": {"truthy_tokens": ["true", "1", "yes", "y"]},
                "reports": {
                    "calorie_threshold": 1800,
                    "protein_date": "2022-11-01",
                    "monthly_min_calories": 30,
                    "top_n": 3,
                },
            }
        },
    )

    source: SourceSettings = Field(default_factory=SourceSettings)
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    reports: ReportSettings = Field(default_factory=ReportSettings)
