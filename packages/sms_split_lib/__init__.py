"""Public API for splitting long SMS messages into concatenated parts."""

from __future__ import annotations

from .sms import (
    DEFAULT_BUDGET,
    Encoding,
    MessageAnalysis,
    MessagePart,
    SegmentBudget,
    UnsupportedEncodingError,
    analyse_message,
    character_width,
    choose_encoding,
    count_units,
    split_into_parts,
)

__all__ = [
    "Encoding",
    "UnsupportedEncodingError",
    "SegmentBudget",
    "DEFAULT_BUDGET",
    "MessagePart",
    "MessageAnalysis",
    "character_width",
    "choose_encoding",
    "count_units",
    "split_into_parts",
    "analyse_message",
]
