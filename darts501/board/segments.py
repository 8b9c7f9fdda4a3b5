"""
Dartboard segment identifiers and their point values.

A segment identifier names one region of the board:

- ``"Bull"``: inner bull, 50 points
- ``"Outer"``: outer bull, 25 points
- ``<ring><number>`` such as ``"t20"``: ring prefix ``s``/``d``/``t``
  (single/double/treble) followed by the segment number

Parsing is permissive. Unknown ring prefixes count as a single, the number
is read up to the first non-digit, and a suffix without digits is worth 0.
Numbers are not checked against the board, so ``"s99"`` scores 99.
An empty or missing identifier is a miss worth 0.
"""
from dataclasses import dataclass
import re
from typing import Optional

from darts501.core import Ring

BULL = "Bull"
OUTER_BULL = "Outer"

BULL_VALUE = 50
OUTER_BULL_VALUE = 25

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


@dataclass(frozen=True)
class Segment:
    """Parsed form of a segment identifier."""
    identifier: str
    ring: Optional[Ring]  # None for bulls and misses
    number: int  # Segment number (0 for bulls and misses)
    value: int  # Points scored

    @property
    def is_miss(self) -> bool:
        return self.identifier == ""


def _parse_number(text: str) -> int:
    """Read a leading integer, ignoring anything after it (0 if none)."""
    match = _LEADING_INT.match(text)
    if not match:
        return 0
    return int(match.group(1))


def parse_segment(identifier: Optional[str]) -> Segment:
    """
    Parse a segment identifier.

    Args:
        identifier: Segment identifier (None or "" for a miss)

    Returns:
        Segment with ring, number and value
    """
    if not identifier:
        return Segment(identifier="", ring=None, number=0, value=0)

    if identifier == BULL:
        return Segment(identifier=identifier, ring=None, number=0, value=BULL_VALUE)
    if identifier == OUTER_BULL:
        return Segment(identifier=identifier, ring=None, number=0, value=OUTER_BULL_VALUE)

    ring = Ring.from_code(identifier[0])
    number = _parse_number(identifier[1:])

    return Segment(
        identifier=identifier,
        ring=ring,
        number=number,
        value=ring.multiplier * number
    )


def value_of(identifier: Optional[str]) -> int:
    """
    Get the point value of a segment identifier.

    Args:
        identifier: Segment identifier (None or "" for a miss)

    Returns:
        Points scored by a dart in that segment
    """
    return parse_segment(identifier).value
