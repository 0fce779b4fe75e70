"""
Game state management for the Go rules engine.

Provides:
- BoardState: One snapshot of play (board plus prisoner counts)
- GameState: History of snapshots with move application, undo and ko
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, Coordinate, IntersectionState
from .commands import Command, Info, Place, Undo
from .errors import InvalidMove, KoViolation, NothingLeftToUndo

logger = logging.getLogger(__name__)


# ============================================================================
# Board State
# ============================================================================

@dataclass
class BoardState:
    """
    A snapshot of the game.

    Attributes:
        board: The stones on the board
        captured_by_black: White stones black has taken off the board
        captured_by_white: Black stones white has taken off the board
    """
    board: Board = field(default_factory=Board)
    captured_by_black: int = 0
    captured_by_white: int = 0
    _position_hash: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def new(cls, size: int = 9) -> "BoardState":
        """Empty snapshot for a size x size board."""
        return cls(board=Board(size))

    def prisoners(self, color: IntersectionState) -> int:
        """Number of stones `color` has captured."""
        if color is IntersectionState.BLACK:
            return self.captured_by_black
        if color is IntersectionState.WHITE:
            return self.captured_by_white
        raise ValueError("Empty intersections do not capture")

    def _credit(self, color: IntersectionState, count: int) -> None:
        if color is IntersectionState.BLACK:
            self.captured_by_black += count
        else:
            self.captured_by_white += count

    def position_hash(self) -> str:
        """
        Zobrist hash of the board, computed on first use and then kept.

        A snapshot is not modified once it is in a history, so the stored
        hash stays valid for as long as the snapshot is shared.
        """
        if self._position_hash is None:
            self._position_hash = self.board.position_hash()
        return self._position_hash

    def _remove_if_dead(self, x: int, y: int) -> int:
        """
        Clear the group at (x, y) if it has no liberties.

        Credits the captured stones to the opposing color.

        Returns:
            Number of stones removed
        """
        state = self.board.get_intersection(x, y)
        if state is None or not state.is_stone:
            return 0

        if self.board.find_group_liberties(x, y):
            return 0

        group = self.board.find_group(x, y)
        for gx, gy in group:
            self.board.set_intersection(gx, gy, IntersectionState.EMPTY)

        self._credit(state.opponent, len(group))

        logger.debug(f"Removed {state.name.lower()} group of {len(group)} at ({x}, {y})")
        return len(group)

    def remove_dead_groups(self, last_move: Optional[Coordinate] = None) -> "BoardState":
        """
        Remove every group without liberties and return the updated copy.

        The receiver is left untouched.

        Groups are checked in row-major order. If last_move is given, that
        intersection is checked only after every other group: a stone that
        takes an opponent's last liberty gains liberties from the capture,
        so the opponent must come off first or the capturing move would look
        like suicide.

        Args:
            last_move: Coordinate of the stone just played, if any

        Returns:
            New BoardState with dead groups cleared and prisoners counted
        """
        result = self.copy()

        for x, y in result.board.coordinates():
            if last_move is not None and (x, y) == tuple(last_move):
                continue
            result._remove_if_dead(x, y)

        if last_move is not None:
            result._remove_if_dead(*last_move)

        return result

    def copy(self) -> "BoardState":
        """Create a deep copy of this snapshot."""
        return BoardState(
            board=self.board.copy(),
            captured_by_black=self.captured_by_black,
            captured_by_white=self.captured_by_white,
        )

    def __repr__(self) -> str:
        return (
            f"BoardState(size={self.board.size}, "
            f"stones={len(self.board.stones())}, "
            f"captured_by_black={self.captured_by_black}, "
            f"captured_by_white={self.captured_by_white})"
        )


# ============================================================================
# Game State
# ============================================================================

@dataclass
class GameState:
    """
    History of snapshots; the last one is the current position.

    GameState is used as a value: apply_command returns a new GameState and
    leaves the receiver as it was, including when the command fails.

    Attributes:
        history: Snapshots in play order, never empty
        enforce_ko: Reject moves that recreate any board already in history
    """
    history: List[BoardState] = field(default_factory=lambda: [BoardState()])
    enforce_ko: bool = False

    def __post_init__(self):
        if not self.history:
            raise ValueError("GameState history must contain at least one snapshot")

    @classmethod
    def new(cls, size: int = 9, enforce_ko: bool = False) -> "GameState":
        """Fresh game on an empty size x size board."""
        return cls(history=[BoardState.new(size)], enforce_ko=enforce_ko)

    @property
    def latest(self) -> BoardState:
        """The current snapshot."""
        return self.history[-1]

    @property
    def board_size(self) -> int:
        return self.latest.board.size

    def __len__(self) -> int:
        return len(self.history)

    def repeats_position(self, board: Board, position: Optional[str] = None) -> bool:
        """
        True if `board` equals the board of any snapshot in history.

        Stored snapshot hashes rule out most entries; only hash matches are
        compared cell by cell.

        Args:
            board: Candidate board
            position: Hash of `board`, if already known
        """
        if position is None:
            position = board.position_hash()
        return any(
            entry.position_hash() == position and entry.board == board
            for entry in self.history
        )

    def liberty_info(self, x: int, y: int) -> Tuple[int, int]:
        """
        Liberty counts at (x, y) on the current board.

        Returns:
            (direct liberties, group liberties)

        Raises:
            InvalidPosition: If (x, y) is off the board
        """
        board = self.latest.board
        direct = board.direct_liberties(x, y)
        full = board.find_group_liberties(x, y)
        return len(direct), len(full)

    def apply_command(self, command: Command) -> "GameState":
        """
        Apply a command and return the resulting game state.

        Place copies the current snapshot, writes the stone, removes dead
        groups (the new stone last) and appends the result. Occupied
        intersections are not rejected here. Undo drops the last snapshot.

        Args:
            command: Place or Undo

        Returns:
            New GameState

        Raises:
            InvalidPosition: If a Place targets an off-board coordinate
            NothingLeftToUndo: If Undo is applied to the initial position
            KoViolation: If enforce_ko is set and the move repeats a position
            InvalidMove: If the command does not change game state
        """
        if isinstance(command, Place):
            return self._apply_place(command)
        if isinstance(command, Undo):
            return self._apply_undo()
        if isinstance(command, Info):
            raise InvalidMove("info is a query, not a move")
        raise InvalidMove(f"unsupported command {command!r}")

    def _apply_place(self, command: Place) -> "GameState":
        snapshot = self.latest.copy()
        snapshot.board.set_intersection(command.x, command.y, command.color)
        snapshot = snapshot.remove_dead_groups((command.x, command.y))

        if self.enforce_ko and self.repeats_position(snapshot.board, snapshot.position_hash()):
            logger.debug(f"Rejected {command} as a repeated position")
            raise KoViolation()

        logger.debug(
            f"Placed {command.color.name.lower()} at ({command.x}, {command.y}); "
            f"history length {len(self.history) + 1}"
        )
        return GameState(history=self.history + [snapshot], enforce_ko=self.enforce_ko)

    def _apply_undo(self) -> "GameState":
        if len(self.history) < 2:
            raise NothingLeftToUndo()
        logger.debug(f"Undo; history length {len(self.history) - 1}")
        return GameState(history=self.history[:-1], enforce_ko=self.enforce_ko)
