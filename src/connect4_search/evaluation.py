# src/connect4_search/evaluation.py

from __future__ import annotations

import csv
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, List, Optional

from connect4_search.config import LARGE_BOARD_MIN, SMALL_BOARD_MAX


@dataclass(frozen=True)
class EvaluationRecord:
    algorithm: str
    depth: int
    nodes: int
    time_ms: float
    outcome: str  # "X" | "O" | "draw" | "none", after the chosen move
    board_size: str
    rows: int
    cols: int
    column: int
    score: float

    def as_row(self) -> Dict[str, object]:
        return asdict(self)


FIELDNAMES = [f.name for f in fields(EvaluationRecord)]


def board_size_label(rows: int, cols: int) -> str:
    if rows <= SMALL_BOARD_MAX or cols <= SMALL_BOARD_MAX:
        return "small"
    if rows >= LARGE_BOARD_MIN or cols >= LARGE_BOARD_MIN:
        return "large"
    return "default"


class EvaluationLog:
    """
    Collects one record per top-level search. Pass `log` as a driver's
    on_record callback; persistence happens only through to_csv().
    """

    def __init__(self, echo: bool = False) -> None:
        self.echo = echo
        self._entries: List[EvaluationRecord] = []

    def log(self, record: EvaluationRecord) -> None:
        self._entries.append(record)
        if self.echo:
            print(f"Evaluation logged: {record.as_row()}")

    __call__ = log

    def entries(self) -> List[EvaluationRecord]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def to_csv(self, path: str | Path) -> Optional[Path]:
        if not self._entries:
            return None

        out_path = Path(path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=FIELDNAMES)
            w.writeheader()
            for rec in self._entries:
                w.writerow(rec.as_row())
        return out_path
