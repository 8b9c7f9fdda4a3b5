"""
Core constants and enums shared by the board, game and console modules.
"""
from enum import Enum

STARTING_SCORE = 501  # Every player counts down from here
DARTS_PER_THROW = 3


class PlayerId(Enum):
    """Identity of the two players in a match."""
    ONE = 1
    TWO = 2

    @property
    def other(self) -> "PlayerId":
        """The opponent's id."""
        return PlayerId.TWO if self is PlayerId.ONE else PlayerId.ONE

    @property
    def index(self) -> int:
        """Zero-based position in a game's player tuple."""
        return self.value - 1


class Ring(Enum):
    """Scoring ring of a numbered segment."""
    SINGLE = ("s", 1)
    DOUBLE = ("d", 2)
    TREBLE = ("t", 3)

    def __init__(self, code: str, multiplier: int):
        self.code = code
        self.multiplier = multiplier

    @classmethod
    def from_code(cls, code: str) -> "Ring":
        """
        Look up a ring by its identifier prefix.

        Unknown prefixes count as a single.
        """
        for ring in cls:
            if ring.code == code:
                return ring
        return cls.SINGLE
