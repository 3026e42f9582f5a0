from __future__ import annotations

import argparse
import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from connect4_search.ai.pick import STRATEGIES, make_strategy
from connect4_search.ai.random_agent import RandomAgent
from connect4_search.ai.search_agent import SearchAgent
from connect4_search.config import COLS, RESULTS_DIR, ROWS
from connect4_search.evaluation import EvaluationLog, EvaluationRecord
from connect4_search.game.controller import play_game

Size = Tuple[int, int]


@dataclass
class Agg:
    games: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0

    searches: int = 0
    nodes: int = 0
    time_ms: float = 0.0


@dataclass
class Collector:
    """Forwards records to the log and tallies them for the summary table."""
    log: EvaluationLog
    agg: Agg = field(default_factory=Agg)

    def __call__(self, record: EvaluationRecord) -> None:
        self.log.log(record)
        self.agg.searches += 1
        self.agg.nodes += record.nodes
        self.agg.time_ms += record.time_ms


def parse_sizes(raw: str) -> List[Size]:
    """'6x7,4x5' -> [(6, 7), (4, 5)]"""
    sizes: List[Size] = []
    for part in raw.split(","):
        part = part.strip().lower()
        if not part:
            continue
        r, _, c = part.partition("x")
        if not r.isdigit() or not c.isdigit():
            raise ValueError(f"Bad board size {part!r}, expected ROWSxCOLS.")
        sizes.append((int(r), int(c)))
    return sizes


def run_benchmark(
    algorithms: Sequence[str],
    depths: Sequence[int],
    sizes: Sequence[Size],
    games: int = 2,
    seed: int = 1234,
    log: EvaluationLog | None = None,
) -> Dict[Tuple[str, int, Size], Agg]:
    """
    Play each (algorithm, depth, size) configuration against a seeded random
    opponent, alternating colours. Every search lands in `log`.
    """
    log = log if log is not None else EvaluationLog()
    rng = random.Random(seed)
    table: Dict[Tuple[str, int, Size], Agg] = {}

    for size in sizes:
        rows, cols = size
        for algo in algorithms:
            name = make_strategy(algo).name
            for depth in depths:
                collector = Collector(log)
                for g in range(games):
                    ai = SearchAgent(name=f"{name} d{depth}", algorithm=name, depth=depth, on_record=collector)
                    opp = RandomAgent(seed=rng.randrange(1 << 30))
                    ai_side = "X" if g % 2 == 0 else "O"
                    agent_x, agent_o = (ai, opp) if ai_side == "X" else (opp, ai)

                    result = play_game(agent_x, agent_o, rows=rows, cols=cols)

                    a = collector.agg
                    a.games += 1
                    if result.outcome == "draw":
                        a.draws += 1
                    elif result.outcome == ai_side:
                        a.wins += 1
                    else:
                        a.losses += 1

                table[(name, depth, size)] = collector.agg

    return table


def print_table(table: Dict[Tuple[str, int, Size], Agg]) -> None:
    print("\n=== BENCHMARK RESULTS ===")
    print(f"{'algorithm':<16}{'depth':>6}{'board':>8}{'W-D-L':>10}{'searches':>10}{'avg nodes':>12}{'avg ms':>10}")
    for (name, depth, (rows, cols)), a in table.items():
        avg_nodes = a.nodes / a.searches if a.searches else 0.0
        avg_ms = a.time_ms / a.searches if a.searches else 0.0
        wdl = f"{a.wins}-{a.draws}-{a.losses}"
        print(
            f"{name:<16}{depth:>6}{f'{rows}x{cols}':>8}{wdl:>10}"
            f"{a.searches:>10}{avg_nodes:>12.1f}{avg_ms:>10.2f}"
        )


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Benchmark the Connect-4 search algorithms against a random opponent.")
    ap.add_argument("--algorithms", type=str, default=",".join(STRATEGIES), help="Comma-separated algorithm names")
    ap.add_argument("--depths", type=str, default="1,2,3,4", help="Comma-separated search depths")
    ap.add_argument("--sizes", type=str, default=f"{ROWS}x{COLS}", help="Comma-separated board sizes, e.g. 6x7,4x5")
    ap.add_argument("--games", type=int, default=2, help="Games per configuration (colours alternate)")
    ap.add_argument("--seed", type=int, default=1234, help="Seed for the random opponents")
    ap.add_argument("--results-dir", type=str, default=RESULTS_DIR, help="Where evaluation_log_*.csv is written")
    ap.add_argument("--no-csv", action="store_true", help="Skip the CSV export")
    ap.add_argument("--echo", action="store_true", help="Print every evaluation record as it is logged")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    try:
        algorithms = [a for a in (s.strip() for s in args.algorithms.split(",")) if a]
        for a in algorithms:
            make_strategy(a)
        depths = [int(d) for d in args.depths.split(",") if d.strip()]
        sizes = parse_sizes(args.sizes)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    log = EvaluationLog(echo=args.echo)

    start = time.perf_counter()
    table = run_benchmark(algorithms, depths, sizes, games=args.games, seed=args.seed, log=log)
    elapsed = time.perf_counter() - start

    print_table(table)
    print(f"\nSearches logged: {len(log)}  Total runtime: {elapsed:.2f}s")

    if not args.no_csv:
        ts = time.strftime("%Y%m%d_%H%M%S")
        out_path = log.to_csv(Path(args.results_dir) / f"evaluation_log_{ts}.csv")
        if out_path is not None:
            print(f"Saved evaluation log to: {out_path.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
