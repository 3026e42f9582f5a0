from __future__ import annotations
from typing import Tuple

from connect4_search.config import ROWS, COLS
from connect4_search.core.board import Board, IllegalMove
from connect4_search.types import Move


def apply_move(board: Board, move: Move) -> Tuple[Board, bool]:
    """
    Return (new_board, True) with the move applied, or (board, False) untouched
    when the column is out of range, full, or the game is already decided.
    """
    try:
        return board.play(move), True
    except IllegalMove:
        return board, False


def reset(rows: int = ROWS, cols: int = COLS) -> Board:
    return Board(rows, cols)
