"""
Console module - result tables and match session.
"""
from .scoreboard import ThrowRow, throw_rows, render_player_table, render_scoreboard
from .session import MatchSession

__all__ = [
    "ThrowRow",
    "throw_rows",
    "render_player_table",
    "render_scoreboard",
    "MatchSession",
]
