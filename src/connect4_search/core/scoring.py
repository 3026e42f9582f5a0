from __future__ import annotations

from connect4_search.config import WIN_SCORE
from connect4_search.core.board import Board
from connect4_search.types import Player


def evaluate(board: Board, player: Player) -> int:
    """
    Terminal-only evaluation from `player`'s point of view.

    A board that is still running scores 0 exactly like a draw, so every
    non-winning line looks the same at the depth cutoff.
    """
    w = board.outcome
    if w == player:
        return WIN_SCORE
    if w is None or w == "draw":
        return 0
    return -WIN_SCORE
