"""
gorules - Go rules engine

Board connectivity, captures, and undoable move history for hotseat Go.
"""

__version__ = "0.1.0"

from .board import Board, IntersectionState
from .commands import Info, Place, Undo, parse_command
from .errors import GoError, InvalidMove, InvalidPosition, KoViolation, NothingLeftToUndo
from .gamestate import BoardState, GameState

__all__ = [
    "Board",
    "IntersectionState",
    "Place",
    "Undo",
    "Info",
    "parse_command",
    "BoardState",
    "GameState",
    "GoError",
    "InvalidPosition",
    "InvalidMove",
    "NothingLeftToUndo",
    "KoViolation",
]
