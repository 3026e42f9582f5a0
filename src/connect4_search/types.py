# src/connect4_search/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Player = Literal["X", "O"]
Cell = Optional[Player]
Outcome = Optional[Literal["X", "O", "draw"]]  # None while the game is running
Move = NewType("Move", int)   # column index 0..cols-1
