"""
Match session: feeds darts into a game and watches for the winner.

Plays the part of the dartboard click handler. Once a player reaches zero the
session locks and ignores further input.
"""
from typing import Optional
import logging

from darts501.core import Config
from darts501.game import Game, Player
from .scoreboard import render_scoreboard

logger = logging.getLogger(__name__)


class MatchSession:
    """One match of 501 between two players."""

    def __init__(self, game: Optional[Game] = None, config: Optional[Config] = None):
        """
        Initialize session.

        Args:
            game: Game to drive (default: a fresh Game)
            config: Display settings (default: Config())
        """
        self.game = game or Game()
        self.config = config or Config()
        self.winner: Optional[Player] = None

    @property
    def finished(self) -> bool:
        """True once a winner has been found."""
        return self.winner is not None

    def register_hit(self, identifier: Optional[str]) -> bool:
        """
        Register one dart.

        Args:
            identifier: Segment hit (None or "" for a miss)

        Returns:
            True if the dart was played, False if the match is over
        """
        if self.finished:
            logger.warning(
                f"Ignoring {identifier or 'miss'}: "
                f"Player {self.winner.id.value} has already won"
            )
            return False

        self.game.add_dart(identifier)

        for player in self.game.players:
            if player.current_score == 0:
                self.winner = player
                logger.info(f"Game finished! Winner: Player {player.id.value}")
                break

        return True

    def render(self) -> str:
        """Render the scoreboard, announcing the winner once known."""
        board = render_scoreboard(self.game, self.config)
        if self.finished:
            board += f"\n\nPlayer {self.winner.id.value} wins!"
        return board
