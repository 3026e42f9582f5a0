import os

# Plots are written to files during tests, never shown.
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from connect4_search.core.board import Board


@pytest.fixture
def o_wins_in_col_2() -> Board:
    """O (to move) has three stacked in column 2; X has nothing."""
    return Board.from_moves([0, 2, 0, 2, 1, 2, 4])


@pytest.fixture
def x_must_block_col_2() -> Board:
    """X to move; O threatens four in column 2."""
    return Board.from_moves([0, 2, 0, 2, 1, 2])


@pytest.fixture
def single_column_left() -> Board:
    """4x4, only column 3 open, O to move and (0, 3) completes O's diagonal."""
    grid = [
        ["X", "O", "X", None],
        ["X", "O", "O", "X"],
        ["O", "O", "X", "X"],
        ["O", "X", "X", "O"],
    ]
    return Board(rows=4, cols=4, grid=grid, current="O")
