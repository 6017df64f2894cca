"""Split messages into the parts a concatenated SMS is delivered as."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple, Union

from .budget import DEFAULT_BUDGET, SegmentBudget
from .encoding import Encoding, choose_encoding
from .width import character_width, iter_characters

logger = logging.getLogger(__name__)


@dataclass
class MessagePart:
    text: str
    units: int


@dataclass
class MessageAnalysis:
    encoding: Encoding
    units: int
    capacity: int
    parts: List[MessagePart]

    @property
    def is_concatenated(self) -> bool:
        return len(self.parts) > 1

    @property
    def texts(self) -> List[str]:
        return [part.text for part in self.parts]


def split_into_parts(
    message: str,
    encoding: Union[Encoding, str],
    *,
    budget: SegmentBudget = DEFAULT_BUDGET,
) -> List[str]:
    """Return the ordered parts *message* is sent as under *encoding*.

    Joining the parts reproduces *message*. A part boundary never falls inside
    an escaped GSM symbol or a UTF-16 surrogate pair.
    """

    _, segments = _segment(message, Encoding.parse(encoding), budget)
    return [text for text, _ in segments]


def analyse_message(
    message: str,
    encoding: Union[Encoding, str, None] = None,
    *,
    budget: SegmentBudget = DEFAULT_BUDGET,
) -> MessageAnalysis:
    """Segment *message* and report unit usage, choosing an encoding if needed."""

    resolved = (
        choose_encoding(message) if encoding is None else Encoding.parse(encoding)
    )
    capacity, segments = _segment(message, resolved, budget)
    parts = [MessagePart(text=text, units=units) for text, units in segments]
    return MessageAnalysis(
        encoding=resolved,
        units=sum(part.units for part in parts),
        capacity=capacity,
        parts=parts,
    )


def _segment(
    message: str, encoding: Encoding, budget: SegmentBudget
) -> Tuple[int, List[Tuple[str, int]]]:
    if not isinstance(message, str):
        raise TypeError("SMS segmentation expects text input")
    single_capacity = budget.single_part_capacity(encoding)
    if not message:
        return single_capacity, [("", 0)]

    measured = [
        (char, character_width(char, encoding)) for char in iter_characters(message)
    ]
    total = sum(width for _, width in measured)
    if total <= single_capacity:
        return single_capacity, [(message, total)]

    capacity = budget.multi_part_capacity(encoding)
    segments: List[Tuple[str, int]] = []
    current: List[str] = []
    used = 0
    for char, width in measured:
        if used + width > capacity:
            segments.append(("".join(current), used))
            current = []
            used = 0
        current.append(char)
        used += width
    segments.append(("".join(current), used))
    logger.debug(
        "Split %d %s units into %d parts of at most %d units",
        total,
        encoding.value,
        len(segments),
        capacity,
    )
    return capacity, segments


__all__ = ["MessagePart", "MessageAnalysis", "split_into_parts", "analyse_message"]
