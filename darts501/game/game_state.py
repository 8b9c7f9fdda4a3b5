"""
Game state management.
"""
from typing import Optional, Tuple
import logging

from darts501.core import PlayerId
from .player import Player

logger = logging.getLogger(__name__)


class Game:
    """
    A single two-player 501 match.

    The game only alternates turns. Detecting a winner is left to the caller,
    which stops feeding darts once a player reaches zero.
    """

    def __init__(self):
        self.players: Tuple[Player, Player] = (
            Player(id=PlayerId.ONE),
            Player(id=PlayerId.TWO),
        )
        self.current_player_id = PlayerId.ONE

    @property
    def current_player(self) -> Player:
        """Player whose turn it is."""
        return self.player(self.current_player_id)

    def player(self, player_id: PlayerId) -> Player:
        """Get a player by id."""
        return self.players[player_id.index]

    def add_dart(self, identifier: Optional[str]) -> int:
        """
        Add a dart for the current player.

        Args:
            identifier: Segment hit (None or "" for a miss)

        Returns:
            The player's updated score
        """
        player = self.current_player
        score = player.add_dart(identifier)

        logger.debug(
            f"Player {player.id.value} hit {identifier or 'miss'}: "
            f"{player.current_throw.total} this throw, {score} left"
        )

        if player.current_throw.is_complete():
            self.switch_players()

        return score

    def switch_players(self) -> None:
        """Hand the turn to the other player."""
        self.current_player_id = self.current_player_id.other
        logger.debug(f"Next player: {self.current_player_id.value}")
