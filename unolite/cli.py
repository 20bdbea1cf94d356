"""
UNO-Lite CLI - Command-line interface for the engine.

Usage:
    unolite play                         Prompt for players, then play
    unolite play --name Ann --name Bob   Play with the given names
    unolite play --players 3 --seed 7    Three players, fixed shuffle
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from .config import LOG_LEVELS, GameConfig, log_level_from_env


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="UNO-Lite - Terminal card game",
        prog="unolite",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: UNOLITE_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Start a hot-seat game")
    play_parser.add_argument("--players", type=int, help="Number of players")
    play_parser.add_argument(
        "--name", action="append", dest="names", help="Player name (repeat per player)"
    )
    play_parser.add_argument("--seed", type=int, help="Shuffle seed")
    play_parser.add_argument("--hand-size", type=int, help="Cards dealt to each player")

    return parser


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or log_level_from_env()
    if level not in LOG_LEVELS:
        print(f"Error: unknown log level {level!r} (choose from {', '.join(LOG_LEVELS)})")
        sys.exit(1)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Set up a game from flags and prompts, then run it."""
    from .session import GameLoop, setup_game
    from .terminal import TerminalPresenter

    try:
        config = GameConfig.from_env(seed=args.seed, initial_hand_size=args.hand_size)
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}")
        sys.exit(1)

    presenter = TerminalPresenter()
    presenter.welcome()

    try:
        try:
            names = args.names or []
            if not names:
                count = args.players
                if count is None:
                    count = presenter.ask_player_count(config)
                config.check_player_count(count)
                names = presenter.ask_player_names(count)
            state = setup_game(names, config)
        except ValueError as e:
            print(f"Error: {e}")
            sys.exit(1)

        presenter.console.print(
            f"\nGame is ready! Each player has {config.initial_hand_size} cards.\n"
        )
        GameLoop(state, presenter).run()
    except (KeyboardInterrupt, EOFError):
        presenter.console.print("\nGame abandoned.")
        sys.exit(130)


if __name__ == "__main__":
    main()
