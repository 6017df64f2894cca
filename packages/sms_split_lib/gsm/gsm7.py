"""GSM 03.38 7-bit alphabet tables and per-character unit widths."""

from __future__ import annotations

GSM7_BASIC_TABLE = (
    "@£$¥èéùìòÇ\nØø\rÅåΔ_ΦΓΛΩΠΨΣΘΞ"
    "\x1bÆæßÉ !\"#¤%&'()*+,-./0123456789:;<=>?¡"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÑÜ§¿abcdefghijklmnopqrstuvwxyzäöñüà"
)

# Symbols sent as ESC + code, costing two septets each.
GSM7_ESCAPED_CHARACTERS = frozenset("|^€{}[]~\\")

GSM7_BASIC_SET = frozenset(GSM7_BASIC_TABLE) - {"\x1b"}


def gsm7_width(char: str) -> int:
    """Return the number of septets *char* occupies in the GSM alphabet."""

    return 2 if char in GSM7_ESCAPED_CHARACTERS else 1


def is_gsm7_text(text: str) -> bool:
    """Return True when every character of *text* has a GSM 7-bit code."""

    for char in text:
        if char not in GSM7_BASIC_SET and char not in GSM7_ESCAPED_CHARACTERS:
            return False
    return True


__all__ = [
    "GSM7_BASIC_TABLE",
    "GSM7_BASIC_SET",
    "GSM7_ESCAPED_CHARACTERS",
    "gsm7_width",
    "is_gsm7_text",
]
