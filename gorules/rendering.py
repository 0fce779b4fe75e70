"""
Text rendering of boards for the terminal interface.
"""

from typing import List

from .board import COLUMN_LETTERS, Board, IntersectionState
from .gamestate import BoardState

BLACK_STONE = "●"
WHITE_STONE = "○"

BOX_TL_CORNER = "┌"
BOX_TR_CORNER = "┐"
BOX_BL_CORNER = "└"
BOX_BR_CORNER = "┘"
BOX_LEFT_EDGE = "├"
BOX_RIGHT_EDGE = "┤"
BOX_TOP_EDGE = "┬"
BOX_BOTTOM_EDGE = "┴"
BOX_INTERSECTION = "┼"

# Drawn between columns so the grid looks square in a terminal
BOX_LINE = "─"


def _empty_glyph(x: int, y: int, size: int) -> str:
    last = size - 1
    if size == 1:
        return BOX_INTERSECTION
    if y == 0:
        if x == 0:
            return BOX_TL_CORNER
        return BOX_TR_CORNER if x == last else BOX_TOP_EDGE
    if y == last:
        if x == 0:
            return BOX_BL_CORNER
        return BOX_BR_CORNER if x == last else BOX_BOTTOM_EDGE
    if x == 0:
        return BOX_LEFT_EDGE
    return BOX_RIGHT_EDGE if x == last else BOX_INTERSECTION


def render_board(board: Board) -> str:
    """
    Render a board as text.

    Column letters run along the top, row numbers (1-based) down the right.
    """
    size = board.size
    lines: List[str] = [" ".join(COLUMN_LETTERS[x] for x in range(min(size, len(COLUMN_LETTERS))))]

    for y in range(size):
        cells = []
        for x in range(size):
            state = board.get_intersection(x, y)
            if state is IntersectionState.BLACK:
                cells.append(BLACK_STONE)
            elif state is IntersectionState.WHITE:
                cells.append(WHITE_STONE)
            else:
                cells.append(_empty_glyph(x, y, size))
        lines.append(f"{BOX_LINE.join(cells)} {y + 1}")

    return "\n".join(lines)


def render_state(state: BoardState) -> str:
    """Render a snapshot: the board followed by prisoner counts."""
    return "\n".join([
        render_board(state.board),
        f"B: {state.prisoners(IntersectionState.BLACK)}",
        f"W: {state.prisoners(IntersectionState.WHITE)}",
    ])
