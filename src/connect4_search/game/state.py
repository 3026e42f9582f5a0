from __future__ import annotations
from dataclasses import dataclass

from connect4_search.core.board import Board
from connect4_search.types import Player


@dataclass(slots=True)
class GameState:
    board: Board
    last_status: str = "Player X starts."

    @property
    def current(self) -> Player:
        return self.board.current
