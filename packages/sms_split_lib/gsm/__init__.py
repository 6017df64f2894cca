"""GSM-related helpers for SMS segmentation."""

from __future__ import annotations

from .gsm7 import (
    GSM7_BASIC_SET,
    GSM7_BASIC_TABLE,
    GSM7_ESCAPED_CHARACTERS,
    gsm7_width,
    is_gsm7_text,
)

__all__ = [
    "GSM7_BASIC_TABLE",
    "GSM7_BASIC_SET",
    "GSM7_ESCAPED_CHARACTERS",
    "gsm7_width",
    "is_gsm7_text",
]
