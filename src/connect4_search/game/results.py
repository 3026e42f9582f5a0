from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from connect4_search.types import Move, Outcome

Coord = Tuple[int, int]


@dataclass(slots=True)
class GameResult:
    outcome: Outcome
    moves: List[Move] = field(default_factory=list)
    winning_line: List[Coord] = field(default_factory=list)

    @property
    def winner(self) -> str | None:
        if self.outcome in ("X", "O"):
            return self.outcome
        return None
