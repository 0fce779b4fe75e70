"""
Command-line interface for the Go rules engine.

Usage:
    # Hotseat game on the configured board size
    python -m gorules.cli

    # 13x13 board, ko not enforced
    python -m gorules.cli --size 13 --no-ko

At the prompt:
    b;C;5 / black;C;5    place a black stone at C5
    w;D;4 / white;D;4    place a white stone
    u / undo             undo the last move
    info;C;5             show direct and group liberties at C5
    exit / quit          leave (status 0)
    end                  leave (status 1)
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from .board import COLUMN_LETTERS, coords_to_text
from .commands import Info, Place, parse_command
from .config import AppConfig, load_config
from .errors import GoError
from .gamestate import GameState
from .rendering import render_state

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
END_COMMAND = "end"
HELP_COMMANDS = ("h", "help", "?")

HELP_TEXT = """Commands:
  b;<col>;<row>   place a black stone (also: black;...)
  w;<col>;<row>   place a white stone (also: white;...)
  u / undo        undo the last move
  info;<col>;<row>  show direct and group liberties
  exit / quit     leave the game
  end             leave the game with a failure status"""


@dataclass
class LineResult:
    """Outcome of one line of input."""
    game: GameState
    message: Optional[str] = None
    exit_code: Optional[int] = None
    redraw: bool = False


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="gorules",
        description="Hotseat Go in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_TEXT,
    )

    parser.add_argument(
        "--size", "-s",
        type=int,
        default=None,
        help="Board size (default: from config, 9)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        help="Path to config.yaml file"
    )

    parser.add_argument(
        "--no-ko",
        action="store_true",
        help="Do not reject moves that repeat an earlier position"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output (debug logging)"
    )

    return parser.parse_args(args)


def setup_logging(config: AppConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else config.logging.numeric_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def execute_line(game: GameState, line: str) -> LineResult:
    """
    Execute one line of user input against a game.

    Rules errors are reported in the message and leave the game unchanged.
    """
    lowered = line.strip().lower()

    if not lowered:
        return LineResult(game)
    if lowered in EXIT_COMMANDS:
        return LineResult(game, exit_code=0)
    if lowered == END_COMMAND:
        return LineResult(game, exit_code=1)
    if lowered in HELP_COMMANDS:
        return LineResult(game, message=HELP_TEXT)

    try:
        command = parse_command(line, game.board_size)
        if isinstance(command, Info):
            direct, full = game.liberty_info(command.x, command.y)
            logger.debug(f"Liberties at {coords_to_text(command.x, command.y)}: {direct} direct, {full} true")
            return LineResult(game, message=f"Direct: {direct}, True: {full}")
        new_game = game.apply_command(command)
    except GoError as e:
        logger.debug(f"Rejected input {line!r}: {e}")
        return LineResult(game, message=str(e))

    if isinstance(command, Place):
        logger.debug(f"{command.color.name.capitalize()} played {coords_to_text(command.x, command.y)}")

    return LineResult(new_game, redraw=True)


def run_game(
    game: GameState,
    read_line: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> int:
    """
    Run the interactive loop until the player leaves.

    Args:
        game: Starting game
        read_line: Prompt function (default: input)
        write: Output function (default: print)

    Returns:
        Process exit status
    """
    read_line = read_line or input
    write = write or print

    write(render_state(game.latest))

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            return 0

        result = execute_line(game, line)
        game = result.game

        if result.exit_code is not None:
            return result.exit_code
        if result.message:
            write(result.message)
        if result.redraw:
            write(render_state(game.latest))


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)

    # Load config
    try:
        config = load_config(parsed.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    setup_logging(config, parsed.verbose)

    size = parsed.size if parsed.size is not None else config.board.size
    enforce_ko = config.rules.enforce_ko and not parsed.no_ko

    if size > len(COLUMN_LETTERS):
        print(
            f"Error: Board size must be at most {len(COLUMN_LETTERS)} (columns A-Z), got {size}",
            file=sys.stderr,
        )
        return 1

    try:
        game = GameState.new(size=size, enforce_ko=enforce_ko)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"Starting {size}x{size} game (ko enforced: {enforce_ko})")

    try:
        return run_game(game)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
