"""
Board representation for the Go rules engine.

Provides:
- IntersectionState: Empty / Black / White marker for one intersection
- Board: N x N grid with liberty and group (flood fill) queries
- Column letter conversion for the text interface
- Zobrist Hash: Hash of the stones on a board (used by the ko check)
"""

import random
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .errors import InvalidMove, InvalidPosition

# Seed for reproducible Zobrist hash values
ZOBRIST_SEED = 42

# Column letters used by the text interface (I is not skipped)
COLUMN_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# Orthogonal neighbour offsets: up, left, right, down
NEIGHBOUR_OFFSETS = ((0, -1), (-1, 0), (1, 0), (0, 1))

Coordinate = Tuple[int, int]


class IntersectionState(Enum):
    """State of a single intersection."""
    EMPTY = "."
    BLACK = "B"
    WHITE = "W"

    @property
    def is_stone(self) -> bool:
        return self is not IntersectionState.EMPTY

    @property
    def opponent(self) -> "IntersectionState":
        """The opposing stone color. Empty has no opponent."""
        if self is IntersectionState.BLACK:
            return IntersectionState.WHITE
        if self is IntersectionState.WHITE:
            return IntersectionState.BLACK
        raise ValueError("An empty intersection has no opponent")

    @classmethod
    def from_token(cls, token: str) -> "IntersectionState":
        """
        Parse a color token.

        Args:
            token: 'b', 'black', 'w' or 'white' (case-insensitive)

        Returns:
            BLACK or WHITE

        Raises:
            InvalidMove: If the token is not a color
        """
        lowered = token.strip().lower()
        if lowered in ("b", "black"):
            return cls.BLACK
        if lowered in ("w", "white"):
            return cls.WHITE
        raise InvalidMove(f"unknown color '{token}'")


# ============================================================================
# Coordinate Conversion
# ============================================================================

def text_to_coords(column: str, row: str, board_size: int) -> Coordinate:
    """
    Convert a column letter and 1-based row number to (x, y).

    Args:
        column: Column letter (e.g., "C"), case-insensitive
        row: Row number as text, starting at 1
        board_size: Size of the board

    Returns:
        (x, y) tuple, 0-based

    Raises:
        InvalidMove: If the letter or number cannot be parsed
        InvalidPosition: If the coordinate is off the board
    """
    column = column.strip().upper()
    if len(column) != 1 or column not in COLUMN_LETTERS:
        raise InvalidMove(f"invalid column '{column}'")

    try:
        row_number = int(row)
    except ValueError:
        raise InvalidMove(f"invalid row '{row}'")

    x = COLUMN_LETTERS.index(column)
    y = row_number - 1  # Convert 1-based to 0-based

    if not (0 <= x < board_size and 0 <= y < board_size):
        raise InvalidPosition(x, y, board_size)

    return (x, y)


def coords_to_text(x: int, y: int) -> str:
    """
    Convert (x, y) coordinates to the text form used by the interface.

    Args:
        x: Column index (0-based)
        y: Row index (0-based)

    Returns:
        Coordinate string (e.g., "C5")
    """
    return f"{COLUMN_LETTERS[x]}{y + 1}"


# ============================================================================
# Zobrist Hashing
# ============================================================================

class ZobristHasher:
    """
    Zobrist hashing for Go board positions.

    Each (color, x, y) gets a random 64-bit value; a position hashes to the
    XOR of the values of its stones. Equal boards always hash equal, so the
    hash is a fast pre-filter before comparing boards cell by cell.
    """

    def __init__(self, max_board_size: int = 19, seed: int = ZOBRIST_SEED):
        """
        Initialize Zobrist hash tables.

        Args:
            max_board_size: Maximum board size to support
            seed: Random seed for reproducible hash values
        """
        self.max_size = max_board_size
        self.rng = random.Random(seed)

        # Hash tables: [color][x][y] -> 64-bit hash value
        # color: 0 = Black, 1 = White
        self.stone_hash: List[List[List[int]]] = [
            [[self._random_hash() for _ in range(max_board_size)]
             for _ in range(max_board_size)]
            for _ in range(2)
        ]

    def _random_hash(self) -> int:
        """Generate a random 64-bit hash value."""
        return self.rng.getrandbits(64)

    def compute_hash(self, stones: Dict[Coordinate, IntersectionState]) -> str:
        """
        Compute Zobrist hash for a set of stones.

        Args:
            stones: Dictionary of {(x, y): BLACK or WHITE}

        Returns:
            Hex string representation of the hash
        """
        h = 0
        for (x, y), state in stones.items():
            color_idx = 0 if state is IntersectionState.BLACK else 1
            h ^= self.stone_hash[color_idx][x][y]
        return format(h, '016x')


# Global Zobrist hasher instance
_zobrist_hasher: Optional[ZobristHasher] = None


def get_zobrist_hasher(board_size: int = 19) -> ZobristHasher:
    """Get or create the global Zobrist hasher, large enough for board_size."""
    global _zobrist_hasher
    if _zobrist_hasher is None or _zobrist_hasher.max_size < board_size:
        _zobrist_hasher = ZobristHasher(max_board_size=max(board_size, 19))
    return _zobrist_hasher


# ============================================================================
# Board
# ============================================================================

class Board:
    """
    A square Go board.

    Cells are stored as a list of rows, so data[y][x] is the intersection at
    column x, row y. The size is fixed at construction.

    set_intersection is a raw write: it checks bounds and nothing else.
    Occupancy, suicide and ko are the caller's business.
    """

    def __init__(self, size: int = 9):
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")
        self._data: List[List[IntersectionState]] = [
            [IntersectionState.EMPTY for _ in range(size)] for _ in range(size)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, top row first.

        Each character is 'B', 'W' or '.' (case-insensitive), e.g.:

            Board.from_rows([
                ".B.",
                "BWB",
                ".B.",
            ])

        Raises:
            ValueError: If the rows do not form a square or contain other characters
        """
        size = len(rows)
        board = cls(size)
        for y, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {size}")
            for x, char in enumerate(row.upper()):
                try:
                    board._data[y][x] = IntersectionState(char)
                except ValueError:
                    raise ValueError(f"Invalid cell '{char}' at ({x}, {y})")
        return board

    @property
    def size(self) -> int:
        """Board dimension N."""
        return len(self._data)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check_bounds(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise InvalidPosition(x, y, self.size)

    def get_intersection(self, x: int, y: int) -> Optional[IntersectionState]:
        """Return the state at (x, y), or None if it is off the board."""
        if not self.in_bounds(x, y):
            return None
        return self._data[y][x]

    def set_intersection(self, x: int, y: int, state: IntersectionState) -> None:
        """
        Write a state to (x, y) without applying any rules.

        Raises:
            InvalidPosition: If (x, y) is off the board
        """
        self._check_bounds(x, y)
        self._data[y][x] = state

    def coordinates(self) -> Iterator[Coordinate]:
        """Yield every coordinate in row-major order (all x of row 0 first)."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def neighbours(self, x: int, y: int) -> List[Coordinate]:
        """On-board orthogonal neighbours of (x, y)."""
        result = []
        for dx, dy in NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def direct_liberties(self, x: int, y: int) -> Set[Coordinate]:
        """
        Return the direct liberties of an intersection.

        Direct liberties are the empty intersections immediately above,
        below, left and right of (x, y). An interior point has at most 4,
        an edge point at most 3 and a corner at most 2.

        Raises:
            InvalidPosition: If (x, y) is off the board
        """
        self._check_bounds(x, y)
        return {
            (nx, ny) for nx, ny in self.neighbours(x, y)
            if self._data[ny][nx] is IntersectionState.EMPTY
        }

    def find_group(self, x: int, y: int) -> Set[Coordinate]:
        """
        Find every intersection connected to (x, y) with the same state.

        Works for empty intersections as well, returning the open region
        around (x, y).

        The search is an iterative breadth-first expansion: each pass looks
        at the neighbours of every frontier cell, queues unseen cells of the
        same state as the next frontier, and settles the scanned cells.

        Raises:
            InvalidPosition: If (x, y) is off the board
        """
        self._check_bounds(x, y)
        target = self._data[y][x]

        settled: Set[Coordinate] = set()
        frontier: Set[Coordinate] = {(x, y)}

        while frontier:
            next_frontier: Set[Coordinate] = set()
            for cx, cy in frontier:
                for nx, ny in self.neighbours(cx, cy):
                    point = (nx, ny)
                    if point in settled or point in frontier or point in next_frontier:
                        continue
                    if self._data[ny][nx] is target:
                        next_frontier.add(point)
            settled |= frontier
            frontier = next_frontier

        return settled

    def find_group_liberties(self, x: int, y: int) -> Set[Coordinate]:
        """
        Return the liberties shared by the group containing (x, y).

        Connected stones of one color live or die together, so the group's
        liberties are the union of the direct liberties of all its stones.

        Raises:
            InvalidPosition: If (x, y) is off the board
        """
        liberties: Set[Coordinate] = set()
        for gx, gy in self.find_group(x, y):
            liberties |= self.direct_liberties(gx, gy)
        return liberties

    def stones(self) -> Dict[Coordinate, IntersectionState]:
        """Dictionary of occupied intersections {(x, y): state}."""
        return {
            (x, y): self._data[y][x]
            for x, y in self.coordinates()
            if self._data[y][x].is_stone
        }

    def rows(self) -> List[List[IntersectionState]]:
        """Copy of the cell data as a list of rows."""
        return [list(row) for row in self._data]

    def position_hash(self) -> str:
        """Zobrist hash of the stones on this board."""
        return get_zobrist_hasher(self.size).compute_hash(self.stones())

    def copy(self) -> "Board":
        """Create a deep copy of this board."""
        board = Board.__new__(Board)
        board._data = self.rows()
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Board(size={self.size}, stones={len(self.stones())})"

    def __str__(self) -> str:
        return "\n".join(
            "".join(state.value for state in row) for row in self._data
        )
