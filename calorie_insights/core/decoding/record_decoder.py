"""
Record decoder for turning raw JSON elements into consumption records.

The decoder maps every recognized field to a coercer, applies them
independently and never lets a single bad field fail the record or the batch.
"""

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from calorie_insights.core.coercion import (
    BaseCoercer,
    BooleanCoercer,
    DateTimeCoercer,
    FloatCoercer,
    IntegerCoercer,
    TextCoercer,
)
from calorie_insights.core.config import DecoderSettings
from calorie_insights.core.models import ConsumptionRecord, DecodeResult
from calorie_insights.observability.logger import get_logger
from calorie_insights.observability.metrics import record_decoded_batch

logger = get_logger(__name__)

# (field name, rule type, parameters) in record order
FIELD_RULES: list[tuple[str, str, dict[str, Any]]] = [
    ("id", "integer", {}),
    ("user_id", "integer", {}),
    ("age", "integer", {}),
    ("user_weight", "float", {}),
    ("name", "text", {}),
    ("price", "float", {}),
    ("weight", "float", {}),
    ("calories", "float", {}),
    ("fat", "float", {}),
    ("carbs", "float", {}),
    ("protein", "float", {}),
    ("time_consumed", "text", {"optional": True}),
    ("date_consumed", "datetime", {}),
    ("type", "text", {"optional": True}),
    ("favorite", "boolean", {}),
    ("procedence", "text", {"optional": True}),
]


def fold_keys(raw: Any) -> dict[str, Any]:
    """
    Index an element's keys case-insensitively.

    "User_Id" and "USER_ID" both reach the user_id field. When several
    spellings are present the exact lower-case key wins, otherwise the
    first one seen.

    Args:
        raw: Parsed JSON element; non-mappings fold to an empty dict

    Returns:
        Values keyed by lower-cased key
    """
    if not isinstance(raw, Mapping):
        return {}

    folded: dict[str, Any] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        lowered = key.lower()
        if lowered not in folded or key == lowered:
            folded[lowered] = value
    return folded


class RecordDecoder:
    """
    Decodes raw JSON elements into ConsumptionRecord instances.

    Each field is converted by its own coercer. A missing or null key yields
    the field's zero value; a present value that cannot be converted also
    yields the zero value and is reported as a fallback.
    """

    COERCER_REGISTRY: dict[str, type[BaseCoercer]] = {
        "integer": IntegerCoercer,
        "float": FloatCoercer,
        "boolean": BooleanCoercer,
        "datetime": DateTimeCoercer,
        "text": TextCoercer,
    }

    def __init__(self, settings: DecoderSettings | None = None):
        """
        Initialize the decoder.

        Args:
            settings: Decoder settings (truthy tokens); defaults when None
        """
        self.settings = settings or DecoderSettings()
        self.coercers: list[BaseCoercer] = []
        self._build_coercers()

    def _build_coercers(self) -> None:
        """Build coercer instances from the field rules."""
        for field_name, rule_type, parameters in FIELD_RULES:
            coercer_class = self.COERCER_REGISTRY.get(rule_type)
            if not coercer_class:
                raise ValueError(f"Unknown rule type: {rule_type}")

            if rule_type == "boolean":
                parameters = {**parameters, "truthy_tokens": self.settings.truthy_tokens}

            self.coercers.append(coercer_class(field_name, parameters))

    def decode(self, raw: Any) -> ConsumptionRecord:
        """
        Decode one raw element.

        Args:
            raw: Parsed JSON element, normally a dict

        Returns:
            The decoded record (never raises for a bad field)
        """
        return self.decode_with_result(raw).record

    def decode_with_result(self, raw: Any) -> DecodeResult:
        """
        Decode one raw element and report which fields fell back.

        Args:
            raw: Parsed JSON element; non-mappings decode as an empty element

        Returns:
            DecodeResult with the record and fallback details
        """
        payload = fold_keys(raw)
        values: dict[str, Any] = {}
        fallbacks: list[str] = []
        absent: list[str] = []

        for coercer in self.coercers:
            field_name = coercer.field_name
            value = payload.get(field_name)

            if value is None:
                values[field_name] = coercer.fallback
                absent.append(field_name)
                continue

            values[field_name], error = coercer.try_coerce(value)
            if error is not None:
                logger.debug(
                    f"Falling back to zero value: {error}",
                    extra={"field_name": field_name, "rule_type": coercer.rule_type},
                )
                fallbacks.append(field_name)

        return DecodeResult(
            record=ConsumptionRecord(**values),
            fallbacks_applied=fallbacks,
            absent_fields=absent,
        )

    def decode_batch(self, raws: Iterable[Any], source: str = "memory") -> list[ConsumptionRecord]:
        """
        Decode a sequence of raw elements, preserving input order.

        Args:
            raws: Parsed JSON elements
            source: Label for logs and metrics (e.g. "http", "file")

        Returns:
            One record per input element
        """
        records: list[ConsumptionRecord] = []
        fallback_counts: Counter[tuple[str, str]] = Counter()
        absent_counts: Counter[str] = Counter()
        rule_types = {coercer.field_name: coercer.rule_type for coercer in self.coercers}

        for raw in raws:
            result = self.decode_with_result(raw)
            records.append(result.record)
            for field_name in result.fallbacks_applied:
                fallback_counts[(field_name, rule_types[field_name])] += 1
            absent_counts.update(result.absent_fields)

        record_decoded_batch(source, len(records), dict(fallback_counts))

        total_fallbacks = sum(fallback_counts.values())
        logger.info(
            f"Decoded {len(records)} records ({total_fallbacks} field fallbacks)",
            extra={"source": source, "records": len(records), "fallbacks": total_fallbacks},
        )
        if total_fallbacks:
            logger.warning(
                "Some fields could not be coerced and were zeroed",
                extra={"fallbacks_by_field": {f"{k[0]}:{k[1]}": v for k, v in fallback_counts.items()}},
            )
        if absent_counts:
            logger.debug("Fields missing or null in the source", extra={"absent_by_field": dict(absent_counts)})

        return records

    def get_field_summary(self) -> dict[str, Any]:
        """
        Get summary of configured fields.

        Returns:
            Dictionary with field counts per rule type
        """
        counts: dict[str, int] = {}
        for coercer in self.coercers:
            counts[coercer.rule_type] = counts.get(coercer.rule_type, 0) + 1
        return {
            "total_fields": len(self.coercers),
            "fields_by_type": counts,
            "truthy_tokens": sorted(self.settings.truthy_tokens),
        }
