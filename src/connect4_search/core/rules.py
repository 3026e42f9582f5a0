from __future__ import annotations
from typing import TYPE_CHECKING, List, Tuple

from connect4_search.config import CONNECT_N
from connect4_search.types import Outcome

if TYPE_CHECKING:
    from connect4_search.core.board import Board

Coord = Tuple[int, int]  # (row, col)

# horizontal, vertical, diagonal down-right, diagonal up-right
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


def _run(board: Board, row: int, col: int, dr: int, dc: int) -> List[Coord]:
    """Same-player cells extending from (row, col) in one direction, excluding it."""
    g = board.grid
    p = g[row][col]
    out: List[Coord] = []
    r, c = row + dr, col + dc
    while 0 <= r < board.rows and 0 <= c < board.cols and g[r][c] == p:
        out.append((r, c))
        r += dr
        c += dc
    return out


def winning_line(board: Board, row: int, col: int) -> List[Coord]:
    """
    The run of CONNECT_N or more through (row, col), ordered end to end.
    Empty if the cell is empty or no direction reaches CONNECT_N.
    """
    if board.grid[row][col] is None:
        return []

    for dr, dc in DIRECTIONS:
        back = _run(board, row, col, -dr, -dc)
        fwd = _run(board, row, col, dr, dc)
        if 1 + len(back) + len(fwd) >= CONNECT_N:
            return list(reversed(back)) + [(row, col)] + fwd

    return []


def check_outcome(board: Board, last_row: int, last_col: int) -> Outcome:
    """
    Outcome after a stone was placed at (last_row, last_col).
    Only the four axes through that cell are examined, never the whole board.
    """
    p = board.grid[last_row][last_col]
    if p is not None and winning_line(board, last_row, last_col):
        return p
    if board.move_count == board.rows * board.cols:
        return "draw"
    return None
