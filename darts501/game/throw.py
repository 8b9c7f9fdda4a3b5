"""
A single throw: one turn of up to three darts.

Throws are the rows of a player's results table.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from darts501.board import value_of as segment_value
from darts501.core import DARTS_PER_THROW

PLACEHOLDER_INDEX = 0  # Index of the pre-game row
PLACEHOLDER_MARK = "-"


class ThrowAlreadyComplete(RuntimeError):
    """Raised when a dart is added to a throw that already holds three."""


@dataclass
class Throw:
    """
    One turn of up to three darts.

    Slots fill in order one -> two -> three. ``total`` and
    ``current_score`` are derived from the filled slots and recomputed on
    every dart.
    """
    index: int
    one: Optional[str] = None
    two: Optional[str] = None
    three: Optional[str] = None

    total: int = 0  # Sum of the darts thrown so far
    current_score: Optional[int] = None  # Player's score after the latest dart

    @classmethod
    def placeholder(cls, score: int) -> "Throw":
        """Pre-game row: already complete, showing the starting score."""
        return cls(
            index=PLACEHOLDER_INDEX,
            one=PLACEHOLDER_MARK,
            two=PLACEHOLDER_MARK,
            three=PLACEHOLDER_MARK,
            total=0,
            current_score=score
        )

    @property
    def is_placeholder(self) -> bool:
        return self.index == PLACEHOLDER_INDEX

    @property
    def darts(self) -> Tuple[Optional[str], Optional[str], Optional[str]]:
        """Dart slots in throwing order."""
        return (self.one, self.two, self.three)

    @property
    def darts_thrown(self) -> int:
        return sum(1 for dart in self.darts if dart is not None)

    @staticmethod
    def value_of(identifier: Optional[str]) -> int:
        """Point value of a segment identifier (0 for a miss)."""
        return segment_value(identifier)

    def recompute_total(self) -> int:
        """Recompute ``total`` from the filled slots."""
        self.total = sum(
            self.value_of(dart) for dart in self.darts if dart is not None
        )
        return self.total

    def recompute_current_score(self, previous_score: int, identifier: Optional[str]) -> int:
        """
        Recompute the score after a dart.

        Args:
            previous_score: Player's score before the dart
            identifier: Segment hit by the dart

        Returns:
            Updated score (also stored as ``current_score``)
        """
        self.current_score = previous_score - self.value_of(identifier)
        return self.current_score

    def is_complete(self) -> bool:
        """True once the third dart has been recorded."""
        return self.three is not None

    def add_dart(self, identifier: Optional[str], score_before: int) -> int:
        """
        Record the next dart of this throw.

        Args:
            identifier: Segment hit (None or "" records a miss)
            score_before: Player's score before this dart

        Returns:
            Player's score after this dart

        Raises:
            ThrowAlreadyComplete: If all three darts are already recorded
        """
        dart = identifier or ""

        if self.one is None:
            self.one = dart
        elif self.two is None:
            self.two = dart
        elif self.three is None:
            self.three = dart
        else:
            raise ThrowAlreadyComplete(f"Throw {self.index} already has {DARTS_PER_THROW} darts")

        self.recompute_total()
        return self.recompute_current_score(score_before, dart)
