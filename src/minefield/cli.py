"""
Minefield - command-line entry point.

Usage:
    python main.py play [--width W] [--height H] [--min-mines N] [--max-mines N] [--seed S]
    python main.py show [same options]
"""
import argparse
import logging
import random
import sys
from typing import List, Optional

from .board import Board, BoardConfig, DEFAULT_CONFIG
from .console import ConsoleView, run
from .errors import ConfigurationError
from .session import GameSession


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from parsed arguments."""
    min_mines = args.min_mines
    max_mines = args.max_mines if args.max_mines is not None else min_mines
    return BoardConfig(
        width=args.width,
        height=args.height,
        min_mines=min_mines,
        max_mines=max_mines,
    )


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    config = build_config(args)
    rng = random.Random(args.seed)

    def new_board(cfg: BoardConfig) -> Board:
        board = Board(cfg, rng)
        print(f"Board: {cfg.width}x{cfg.height} with {board.mine_count} mines")
        return board

    session = GameSession(
        on_quit=lambda: view.close(),
        config=config,
        board_factory=new_board,
    )
    view = ConsoleView(config.width, config.height, session)
    session.attach(view)
    run(view)
    print(f"Played {session.games_started} game(s). Bye!")


def show(args: argparse.Namespace) -> None:
    """Print the full content of a freshly generated board."""
    config = build_config(args)
    board = Board(config, random.Random(args.seed))
    print(f"{board.mine_count} mines on a {board.width}x{board.height} board")
    print(board.render())


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add board configuration options to a sub-command."""
    parser.add_argument(
        "--width", type=int, default=DEFAULT_CONFIG.width,
        help="Number of columns",
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT_CONFIG.height,
        help="Number of rows",
    )
    parser.add_argument(
        "--min-mines", type=int, default=DEFAULT_CONFIG.min_mines,
        help="Fewest mines to place",
    )
    parser.add_argument(
        "--max-mines", type=int, default=None,
        help="Most mines to place (default: same as --min-mines)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine layout"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - reveal every safe cell without hitting a mine"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)

    show_parser = subparsers.add_parser(
        "show", help="Print a generated board with all cells visible"
    )
    add_board_arguments(show_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "show":
            show(args)
        else:
            parser.print_help()
    except ConfigurationError as error:
        print(f"Invalid board configuration: {error}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
