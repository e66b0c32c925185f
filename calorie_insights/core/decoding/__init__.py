"""
Raw JSON element decoding.
"""

from .record_decoder import FIELD_RULES, RecordDecoder, fold_keys

__all__ = [
    "FIELD_RULES",
    "RecordDecoder",
    "fold_keys",
]
