"""
Game module - throws, players, and turn management.
"""
from .throw import Throw, ThrowAlreadyComplete
from .player import Player
from .game_state import Game

__all__ = [
    "Throw",
    "ThrowAlreadyComplete",
    "Player",
    "Game",
]
