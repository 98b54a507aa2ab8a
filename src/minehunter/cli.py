"""
Command line interface for Minehunter.

Usage:
    minehunter [--level {easy,medium,hard}] [--cols N] [--rows N] [--mines N]
"""
import argparse
import sys
from typing import List, Optional

from . import __version__
from .board import DEFAULT_LEVEL, LEVELS, BoardConfig, ConfigurationError
from .game import Game
from .terminal import play, rich_style


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser reporting usage errors with exit status 1."""

    def error(self, message: str) -> None:
        """Print usage and the error, then exit with status 1."""
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = ArgumentParser(
        prog="minehunter",
        description="Hunt down all the mines and uncover remaining fields",
        epilog="To play the game on a 20x15 grid with 35 mines run: "
               "minehunter -c 20 -r 15 -m 35",
    )
    parser.add_argument(
        "-c", "--cols", type=int, help="Set number of columns"
    )
    parser.add_argument(
        "-r", "--rows", type=int, help="Set number of rows"
    )
    parser.add_argument(
        "-l",
        "--level",
        choices=list(LEVELS),
        default=DEFAULT_LEVEL,
        help="Set difficulty level",
    )
    parser.add_argument(
        "-m", "--mines", type=int, help="Set number of mines"
    )
    parser.add_argument(
        "-v", "--version", action="version", version=__version__
    )
    return parser


def resolve_config(args: argparse.Namespace) -> BoardConfig:
    """
    Combine the chosen level with explicit overrides.

    Raises:
        ConfigurationError: If a dimension or mine count is invalid.
    """
    level = LEVELS[args.level]
    return BoardConfig(
        width=level.width if args.cols is None else args.cols,
        height=level.height if args.rows is None else args.rows,
        mine_limit=level.mine_limit if args.mines is None else args.mines,
    )


def main(argv: Optional[List[str]] = None, run=play) -> int:
    """
    Parse arguments and start the game.

    Args:
        argv: Command line arguments, defaults to sys.argv.
        run: Plays a game until the player quits.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    try:
        config = resolve_config(args)
        game = Game(
            config.width,
            config.height,
            config.mine_limit,
            style_fn=rich_style,
        )
    except ConfigurationError as err:
        print(f"Error: {err}")
        return 1

    run(game)
    return 0
