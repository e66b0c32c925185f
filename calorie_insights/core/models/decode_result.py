"""
DecodeResult model representing the outcome of decoding one raw element (ephemeral).
"""

from typing import List

from pydantic import BaseModel, Field

from .consumption_record import ConsumptionRecord


class DecodeResult(BaseModel):
    """
    Outcome of decoding one raw JSON element (used in-memory only).

    Attributes:
        record: The decoded record (always present, decoding is total)
        fallbacks_applied: Fields whose raw value could not be coerced and
            were replaced by the field's zero value
        absent_fields: Recognized fields missing from the raw element or null
    """

    record: ConsumptionRecord
    fallbacks_applied: List[str] = Field(default_factory=list)
    absent_fields: List[str] = Field(default_factory=list)

    @property
    def clean(self) -> bool:
        """True when no field needed a fallback."""
        return not self.fallbacks_applied
