"""Logical character iteration and unit widths per encoding."""

from __future__ import annotations

from typing import Callable, Dict, Iterator

from ..gsm import gsm7_width
from .encoding import Encoding, UnsupportedEncodingError


def _is_high_surrogate(char: str) -> bool:
    return "\ud800" <= char <= "\udbff"


def _is_low_surrogate(char: str) -> bool:
    return "\udc00" <= char <= "\udfff"


def iter_characters(message: str) -> Iterator[str]:
    """Yield the logical characters of *message*.

    A high surrogate followed by a low surrogate is yielded as one two code
    point string; an unpaired surrogate is yielded on its own.
    """

    index = 0
    length = len(message)
    while index < length:
        char = message[index]
        if (
            _is_high_surrogate(char)
            and index + 1 < length
            and _is_low_surrogate(message[index + 1])
        ):
            yield message[index : index + 2]
            index += 2
        else:
            yield char
            index += 1


def utf16_width(char: str) -> int:
    """Return the number of UTF-16 code units *char* occupies."""

    return len(char.encode("utf-16-be", "surrogatepass")) // 2


_WIDTHS: Dict[Encoding, Callable[[str], int]] = {
    Encoding.GSM: gsm7_width,
    Encoding.UNICODE: utf16_width,
}


def character_width(char: str, encoding: Encoding) -> int:
    try:
        width = _WIDTHS[encoding]
    except KeyError:
        raise UnsupportedEncodingError(f"Unsupported encoding {encoding!r}") from None
    return width(char)


def count_units(message: str, encoding: Encoding) -> int:
    """Total repertoire or code units needed to send *message*."""

    return sum(character_width(char, encoding) for char in iter_characters(message))


__all__ = ["iter_characters", "utf16_width", "character_width", "count_units"]
