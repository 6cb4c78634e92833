"""
Get Off CLI - Command-line interface for the game.

Usage:
    getoff play [--first N] [--last N] [--min-players N] [--max-players N] [--seed N]
    getoff serve-info

`play` runs a hot-seat game in the terminal. Everyone shares the keyboard:
    a or <      previous station
    d or >      next station
    A or <<     first station
    D or >>     last station
    (empty)     Enter: begin / start / get off / next player / play again
    name S TEXT set seat S during setup (empty TEXT clears it)
    new         new game (from the game over screen)
    q           quit
"""

import argparse
import logging
import random
import sys

from .config import get_settings
from .engine_core import Action, ConfigError, GameConfig
from .session import GameLoop, SessionManager, render_text
from .session.game_loop import LEFT, RIGHT, SHIFT_LEFT, SHIFT_RIGHT, ENTER

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    "a": LEFT,
    "<": LEFT,
    "d": RIGHT,
    ">": RIGHT,
    "A": SHIFT_LEFT,
    "<<": SHIFT_LEFT,
    "D": SHIFT_RIGHT,
    ">>": SHIFT_RIGHT,
    "": ENTER,
}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Get Off - guess the secret station",
        prog="getoff",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: GETOFF_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a hot-seat game in the terminal")
    play_parser.add_argument("--first", type=int, default=None, help="First station")
    play_parser.add_argument("--last", type=int, default=None, help="Last station")
    play_parser.add_argument("--min-players", type=int, default=None, help="Minimum players")
    play_parser.add_argument("--max-players", type=int, default=None, help="Maximum players")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for the secret station")

    # Serve info command
    subparsers.add_parser("serve-info", help="Show how to run the HTTP API")

    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    if args.command == "play":
        cmd_play(args, settings.game)
    elif args.command == "serve-info":
        cmd_serve_info()
    else:
        parser.print_help()
        sys.exit(1)


def build_config(args, defaults: GameConfig) -> GameConfig:
    """Command-line values override the environment defaults."""
    return GameConfig(
        first_station=defaults.first_station if args.first is None else args.first,
        last_station=defaults.last_station if args.last is None else args.last,
        min_players=defaults.min_players if args.min_players is None else args.min_players,
        max_players=defaults.max_players if args.max_players is None else args.max_players,
    )


def run_command(loop: GameLoop, line: str) -> bool:
    """
    Handle one line of terminal input.

    Returns False when the player asked to quit.
    """
    command = line.strip()

    if command in ("q", "quit", "exit"):
        return False

    if command == "new":
        loop.session.dispatch(Action.new_game())
        return True

    if command.startswith("name "):
        parts = command.split(maxsplit=2)
        try:
            seat = int(parts[1])
        except ValueError:
            print(f"Not a seat number: {parts[1]}")
            return True
        loop.set_name(seat, parts[2] if len(parts) > 2 else "")
        return True

    key = KEY_COMMANDS.get(command)
    if key is None:
        print(f"Unknown command: {command!r}")
        return True

    loop.press(key)
    return True


def cmd_play(args, defaults: GameConfig):
    """Run a terminal game until the players quit."""
    try:
        config = build_config(args, defaults)
    except ConfigError as e:
        print(f"Error: {e}")
        sys.exit(1)

    manager = SessionManager()
    rng = random.Random(args.seed) if args.seed is not None else None
    session = manager.create_session(config, rng=rng)
    loop = GameLoop(session)
    logger.debug("Terminal game on session %s", session.session_id)

    try:
        while True:
            print()
            print(render_text(session.game_state))
            try:
                line = input("> ")
            except EOFError:
                break
            if not run_command(loop, line):
                break
    except KeyboardInterrupt:
        print()
    finally:
        manager.end_session(session.session_id, reason="user_ended")

    print("Bye!")


def cmd_serve_info():
    """Show how to serve the HTTP API."""
    print("Install a server and run:")
    print("  uvicorn getoff.api.app:create_app --factory")
    print("Configure with GETOFF_FIRST_STATION, GETOFF_LAST_STATION,")
    print("GETOFF_MIN_PLAYERS, GETOFF_MAX_PLAYERS, GETOFF_LOG_LEVEL, ALLOWED_ORIGINS.")


if __name__ == "__main__":
    main()
