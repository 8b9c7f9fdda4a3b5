"""
Plain-text result tables for a game.
"""
from dataclasses import dataclass
from typing import List, Optional

from darts501.board import parse_segment
from darts501.core import Config
from darts501.game import Game, Player, Throw

HEADERS = ("Throw", "1", "2", "3", "Total", "Score")


@dataclass(frozen=True)
class ThrowRow:
    """Display snapshot of one throw."""
    throw: str
    one: str
    two: str
    three: str
    total: str
    score: str

    @classmethod
    def from_throw(
            cls,
            throw: Throw,
            placeholder: str = "-",
            miss_label: str = "miss"
    ) -> "ThrowRow":
        """
        Build a row from a throw.

        Args:
            throw: Throw to display
            placeholder: Mark used on the pre-game row
            miss_label: Label for a dart that hit nothing

        Returns:
            Row of display strings
        """
        if throw.is_placeholder:
            return cls(
                throw=placeholder,
                one=placeholder,
                two=placeholder,
                three=placeholder,
                total=placeholder,
                score=str(throw.current_score)
            )

        def label(dart: Optional[str]) -> str:
            if dart is None:
                return ""
            return miss_label if parse_segment(dart).is_miss else dart

        return cls(
            throw=str(throw.index),
            one=label(throw.one),
            two=label(throw.two),
            three=label(throw.three),
            total=str(throw.total),
            score=str(throw.current_score)
        )

    def cells(self) -> tuple:
        return (self.throw, self.one, self.two, self.three, self.total, self.score)


def throw_rows(player: Player, config: Optional[Config] = None) -> List[ThrowRow]:
    """Rows for every throw of a player, oldest first."""
    config = config or Config()
    placeholder = config.get("scoreboard", "placeholder", "-")
    miss_label = config.get("scoreboard", "miss_label", "miss")

    return [
        ThrowRow.from_throw(t, placeholder=placeholder, miss_label=miss_label)
        for t in player.throws
    ]


def render_player_table(player: Player, config: Optional[Config] = None) -> str:
    """
    Render one player's results table.

    Args:
        player: Player to render
        config: Scoreboard settings (default: Config())

    Returns:
        Multi-line table followed by a statistics line
    """
    config = config or Config()
    width = int(config.get("scoreboard", "column_width", 6))

    def line(cells) -> str:
        return " | ".join(str(c).rjust(width) for c in cells)

    header = line(HEADERS)
    lines = [
        f"Player {player.id.value}",
        header,
        "-" * len(header),
    ]
    lines.extend(line(row.cells()) for row in throw_rows(player, config))
    lines.append(
        f"Darts: {player.darts_thrown}  Scored: {player.points_scored}  "
        f"Best: {player.highest_throw}  Avg: {player.average_per_throw:.1f}"
    )

    return "\n".join(lines)


def render_scoreboard(game: Game, config: Optional[Config] = None) -> str:
    """Render both players' tables, marking whose turn it is."""
    config = config or Config()

    tables = [render_player_table(player, config) for player in game.players]
    footer = f"Up next: Player {game.current_player.id.value}"

    return "\n\n".join(tables + [footer])
