# src/connect4_search/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List

from connect4_search.config import ROWS, COLS
from connect4_search.types import Cell, Move, Outcome, Player
from connect4_search.core.rules import check_outcome, winning_line


class IllegalMove(ValueError):
    """Column out of range, column full, or game already decided."""


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


@dataclass(slots=True)
class Board:
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)
    current: Player = "X"
    outcome: Outcome = None
    move_count: int = 0

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Board dimensions must be positive.")
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
            self.move_count = 0
            return
        if len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Grid does not match a {self.rows}x{self.cols} board.")

        # Keep move_count and outcome consistent with the stones actually on the grid.
        self.move_count = sum(1 for row in self.grid for cell in row if cell is not None)
        if self.outcome is None:
            self.outcome = self._scan_outcome()

    def _scan_outcome(self) -> Outcome:
        """Full-board check, only used when a board is built from a given grid."""
        for r in range(self.rows):
            for c in range(self.cols):
                p = self.grid[r][c]
                if p is not None and winning_line(self, r, c):
                    return p
        if self.move_count == self.rows * self.cols:
            return "draw"
        return None

    @classmethod
    def from_moves(cls, moves: Iterable[int], rows: int = ROWS, cols: int = COLS) -> "Board":
        """
        Replay a column sequence from the empty board, X moving first.
        Raises IllegalMove on the first move that cannot be played.
        """
        b = cls(rows, cols)
        for m in moves:
            b.drop(Move(int(m)))
        return b

    def copy(self) -> "Board":
        # Skips __post_init__: the source board is already consistent.
        b = Board.__new__(Board)
        b.rows = self.rows
        b.cols = self.cols
        b.grid = [row[:] for row in self.grid]
        b.current = self.current
        b.outcome = self.outcome
        b.move_count = self.move_count
        return b

    def valid_moves(self) -> List[Move]:
        if self.outcome is not None:
            return []
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return self.move_count == self.rows * self.cols

    def is_playable(self, col: int) -> bool:
        return self.outcome is None and 0 <= col < self.cols and self.grid[0][col] is None

    def drop(self, col: Move) -> int:
        """
        Place a stone for the side to move, in place. Returns the row it landed on.
        Only call this on a board nobody else holds; use play() otherwise.
        """
        c = int(col)
        if self.outcome is not None:
            raise IllegalMove("Game is already over.")
        if c < 0 or c >= self.cols:
            raise IllegalMove("Column out of range.")
        if self.grid[0][c] is not None:
            raise IllegalMove("Column is full.")

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = self.current
                self.move_count += 1
                self.outcome = check_outcome(self, r, c)
                if self.outcome is None:
                    self.current = other(self.current)
                return r

        raise IllegalMove("Column is full.")

    def play(self, col: Move) -> "Board":
        b = self.copy()
        b.drop(col)
        return b
