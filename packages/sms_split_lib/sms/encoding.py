"""Character encodings an SMS can be segmented under."""

from __future__ import annotations

from enum import Enum
from typing import Union

from ..gsm import is_gsm7_text


class UnsupportedEncodingError(ValueError):
    """Raised when a caller names an encoding outside GSM and Unicode."""


class Encoding(str, Enum):
    GSM = "gsm7"
    UNICODE = "ucs2"

    @property
    def bits_per_unit(self) -> int:
        return _BITS_PER_UNIT[self]

    @classmethod
    def parse(cls, value: Union["Encoding", str]) -> "Encoding":
        if isinstance(value, Encoding):
            return value
        if isinstance(value, str):
            encoding = _ALIASES.get(value.strip().lower())
            if encoding is not None:
                return encoding
        raise UnsupportedEncodingError(f"Unsupported encoding {value!r}")


_BITS_PER_UNIT = {
    Encoding.GSM: 7,
    Encoding.UNICODE: 16,
}

_ALIASES = {
    "gsm": Encoding.GSM,
    "gsm7": Encoding.GSM,
    "7bit": Encoding.GSM,
    "unicode": Encoding.UNICODE,
    "ucs2": Encoding.UNICODE,
    "utf-16": Encoding.UNICODE,
    "utf16": Encoding.UNICODE,
}


def choose_encoding(message: str) -> Encoding:
    """Pick GSM when *message* fits the 7-bit alphabet, Unicode otherwise."""

    return Encoding.GSM if is_gsm7_text(message) else Encoding.UNICODE


__all__ = ["Encoding", "UnsupportedEncodingError", "choose_encoding"]
