from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from connect4_search.ai.pick import make_strategy
from connect4_search.ai.search import best_move
from connect4_search.config import DEFAULT_ALGORITHM, DEFAULT_DEPTH
from connect4_search.evaluation import EvaluationRecord
from connect4_search.game.state import GameState
from connect4_search.types import Move


@dataclass(slots=True)
class SearchAgent:
    name: str = "Search AI"
    algorithm: str = DEFAULT_ALGORITHM
    depth: int = DEFAULT_DEPTH
    on_record: Optional[Callable[[EvaluationRecord], None]] = None

    # Stats
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Move:
        strategy = make_strategy(self.algorithm)
        result = best_move(strategy, state.board, self.depth, on_record=self.on_record)

        self.last_info = {
            "algorithm": strategy.name,
            "depth": self.depth,
            "nodes": result.nodes,
            "cutoffs": result.cutoffs,
            "eval": result.score,
            "move_col": int(result.column) + 1,
            "time_ms": max(1, int(result.time_ms)),
        }
        return result.column
