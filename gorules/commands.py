"""
Game commands and their text syntax.

Commands:
- Place: put a stone of one color on (x, y)
- Undo: revert the most recent accepted move
- Info: query direct and group liberties at (x, y) (does not change state)

Text syntax (case-insensitive, spaces ignored):
    b;C;5   black;C;5   w;C;5   white;C;5
    u   undo
    i;C;5   in;C;5   info;C;5
"""

from dataclasses import dataclass
from typing import List, Union

from .board import IntersectionState, text_to_coords
from .errors import InvalidMove

COLOR_TOKENS = ("b", "black", "w", "white")
UNDO_TOKENS = ("u", "undo")
INFO_TOKENS = ("i", "in", "info")


@dataclass(frozen=True)
class Place:
    """Place a stone of `color` at (x, y)."""
    x: int
    y: int
    color: IntersectionState

    def __post_init__(self):
        if not self.color.is_stone:
            raise InvalidMove("a placed stone must be black or white")


@dataclass(frozen=True)
class Undo:
    """Undo the most recent move."""


@dataclass(frozen=True)
class Info:
    """Liberty query for (x, y)."""
    x: int
    y: int


Command = Union[Place, Undo, Info]


def _split_params(text: str) -> List[str]:
    return text.replace(" ", "").lower().split(";")


def parse_command(text: str, board_size: int) -> Command:
    """
    Parse a line of user input into a command.

    Args:
        text: Raw input, e.g. "b;C;5", "undo", "info;C;5"
        board_size: Size of the board the command targets

    Returns:
        Place, Undo or Info

    Raises:
        InvalidMove: If the text is not a recognised command
        InvalidPosition: If the coordinate is off the board
    """
    params = _split_params(text)
    head = params[0]

    if head in UNDO_TOKENS and len(params) == 1:
        return Undo()

    if head in COLOR_TOKENS or head in INFO_TOKENS:
        if len(params) != 3:
            raise InvalidMove(f"expected '{head};<column>;<row>'")
        x, y = text_to_coords(params[1], params[2], board_size)
        if head in INFO_TOKENS:
            return Info(x, y)
        return Place(x, y, IntersectionState.from_token(head))

    raise InvalidMove(f"unknown command '{text.strip()}'")
