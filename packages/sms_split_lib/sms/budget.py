"""Octet budgets and the per-encoding unit capacities derived from them."""

from __future__ import annotations

from dataclasses import dataclass

from .encoding import Encoding

TRANSPORT_OCTETS = 140
CONCAT_HEADER_OCTETS = 6

# Widest logical character in either encoding (escaped symbol, surrogate pair).
MAX_CHARACTER_WIDTH = 2


@dataclass(frozen=True)
class SegmentBudget:
    """User data space of one transport unit.

    ``header_octets`` is reserved in every part once a message needs more
    than one part; a single-part message uses all ``transport_octets``.
    """

    transport_octets: int = TRANSPORT_OCTETS
    header_octets: int = CONCAT_HEADER_OCTETS

    def __post_init__(self) -> None:
        if self.transport_octets <= 0:
            raise ValueError("Transport budget must be positive")
        if not 0 <= self.header_octets < self.transport_octets:
            raise ValueError("Concatenation header must fit inside the transport budget")
        for encoding in Encoding:
            if self.multi_part_capacity(encoding) < MAX_CHARACTER_WIDTH:
                raise ValueError(
                    f"Budget leaves no room for a {encoding.value} character per part"
                )

    def single_part_capacity(self, encoding: Encoding) -> int:
        return self.transport_octets * 8 // encoding.bits_per_unit

    def multi_part_capacity(self, encoding: Encoding) -> int:
        return (self.transport_octets - self.header_octets) * 8 // encoding.bits_per_unit


DEFAULT_BUDGET = SegmentBudget()


__all__ = [
    "TRANSPORT_OCTETS",
    "CONCAT_HEADER_OCTETS",
    "MAX_CHARACTER_WIDTH",
    "SegmentBudget",
    "DEFAULT_BUDGET",
]
