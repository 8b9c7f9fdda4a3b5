"""
Console scorer for a two-player game of 501.

Darts are given as segment identifiers (t20, d16, s5, Outer, Bull),
either on the command line or one per line on stdin. A blank line is a miss.

Usage:
    python scripts/play.py t20 t20 t20 t19 t19 s3
    python scripts/play.py --stdin < darts.txt
    python scripts/play.py --config config/default_config.yaml --stdin
"""
import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from darts501.core import Config, DEFAULT_CONFIG_PATH
from darts501.console import MatchSession
import logging

logger = logging.getLogger(__name__)


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Score a two-player game of 501 from segment identifiers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py t20 t20 t20          # Player 1 scores 180
  python scripts/play.py --stdin < game.txt   # One identifier per line
        """
    )

    parser.add_argument(
        "darts",
        nargs="*",
        help="Segment identifiers, played in order"
    )

    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read further identifiers from stdin (blank line = miss)"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Config file (default: {DEFAULT_CONFIG_PATH})"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every dart"
    )

    return parser.parse_args()


def read_stdin_darts():
    """Yield identifiers from stdin, skipping comment lines."""
    for line in sys.stdin:
        text = line.strip()
        if text.startswith("#"):
            continue
        yield text


def main():
    """Play darts until they run out or someone wins."""
    args = parse_args()
    config = Config(Path(args.config))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level(),
        format=config.get("logging", "format")
    )

    session = MatchSession(config=config)
    shown = False

    darts = list(args.darts)
    sources = [darts]
    if args.stdin:
        sources.append(read_stdin_darts())

    try:
        for source in sources:
            for dart in source:
                thrower = session.game.current_player_id
                if not session.register_hit(dart):
                    break

                # Show the board after each completed throw
                if session.finished or session.game.current_player_id != thrower:
                    print(session.render())
                    print()
                    shown = True
                else:
                    shown = False

            if session.finished:
                break

    except KeyboardInterrupt:
        print("\nInterrupted by user")

    if not shown:
        print(session.render())


if __name__ == "__main__":
    main()
