"""SMS segmentation under GSM 7-bit and Unicode encodings."""

from __future__ import annotations

from .budget import (
    CONCAT_HEADER_OCTETS,
    DEFAULT_BUDGET,
    MAX_CHARACTER_WIDTH,
    TRANSPORT_OCTETS,
    SegmentBudget,
)
from .encoding import Encoding, UnsupportedEncodingError, choose_encoding
from .segmenter import MessageAnalysis, MessagePart, analyse_message, split_into_parts
from .width import character_width, count_units, iter_characters, utf16_width

__all__ = [
    "Encoding",
    "UnsupportedEncodingError",
    "choose_encoding",
    "SegmentBudget",
    "DEFAULT_BUDGET",
    "TRANSPORT_OCTETS",
    "CONCAT_HEADER_OCTETS",
    "MAX_CHARACTER_WIDTH",
    "iter_characters",
    "utf16_width",
    "character_width",
    "count_units",
    "MessagePart",
    "MessageAnalysis",
    "split_into_parts",
    "analyse_message",
]
