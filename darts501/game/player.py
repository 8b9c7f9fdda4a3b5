"""
Player state and statistics.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from darts501.core import PlayerId, STARTING_SCORE
from .throw import Throw


@dataclass
class Player:
    """Represents a player in the game."""
    id: PlayerId
    current_score: int = STARTING_SCORE

    # Throw history, oldest first; starts with the pre-game row
    throws: List[Throw] = field(default_factory=list)

    def __post_init__(self):
        """Seed the history with the pre-game row."""
        if not self.throws:
            self.throws.append(Throw.placeholder(self.current_score))

    @property
    def current_throw(self) -> Throw:
        """The latest (possibly in-progress) throw."""
        return self.throws[-1]

    def add_dart(self, identifier: Optional[str]) -> int:
        """
        Add a dart to the current throw.

        A new throw is started when the current one is complete.

        Args:
            identifier: Segment hit (None or "" for a miss)

        Returns:
            Updated score
        """
        if self.current_throw.is_complete():
            self.throws.append(Throw(index=len(self.throws)))

        self.current_score = self.current_throw.add_dart(identifier, self.current_score)
        return self.current_score

    @property
    def played_throws(self) -> List[Throw]:
        """Throws excluding the pre-game row."""
        return [t for t in self.throws if not t.is_placeholder]

    @property
    def completed_throws(self) -> List[Throw]:
        return [t for t in self.played_throws if t.is_complete()]

    @property
    def darts_thrown(self) -> int:
        return sum(t.darts_thrown for t in self.played_throws)

    @property
    def points_scored(self) -> int:
        return sum(t.total for t in self.played_throws)

    @property
    def highest_throw(self) -> int:
        """Best total of a completed throw."""
        return max((t.total for t in self.completed_throws), default=0)

    @property
    def average_per_throw(self) -> float:
        """Calculate average score per completed throw (3 darts)."""
        completed = self.completed_throws
        if not completed:
            return 0.0
        return sum(t.total for t in completed) / len(completed)
