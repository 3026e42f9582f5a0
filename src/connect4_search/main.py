from __future__ import annotations

import argparse
import sys

from connect4_search.ai.pick import STRATEGIES, search
from connect4_search.ai.search import NoLegalMoves
from connect4_search.config import COLS, DEFAULT_ALGORITHM, DEFAULT_DEPTH, ROWS
from connect4_search.core.board import Board, IllegalMove


def parse_moves(raw: str) -> list[int]:
    """'4,4,5' (1-based columns, as shown to players) -> [3, 3, 4]"""
    out: list[int] = []
    for part in raw.split(","):
        s = part.strip()
        if not s:
            continue
        if not s.isdigit():
            raise ValueError(f"Invalid column {s!r}. Enter numbers separated by commas.")
        out.append(int(s) - 1)
    return out


def build_move_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="connect4_search move", description="Ask the engine for its move on a position.")
    ap.add_argument("--moves", type=str, default="", help="Columns played so far, 1-based and comma-separated")
    ap.add_argument("--algorithm", type=str, default=DEFAULT_ALGORITHM, help=f"One of: {', '.join(STRATEGIES)}")
    ap.add_argument("--depth", type=int, default=DEFAULT_DEPTH, help="Search depth in plies")
    ap.add_argument("--rows", type=int, default=ROWS)
    ap.add_argument("--cols", type=int, default=COLS)
    return ap


def move_main(argv: list[str]) -> int:
    args = build_move_parser().parse_args(argv)

    try:
        board = Board.from_moves(parse_moves(args.moves), rows=args.rows, cols=args.cols)
        result = search(args.algorithm, board, args.depth)
    except (IllegalMove, NoLegalMoves) as e:
        print(f"Error: {e}")
        return 2
    except ValueError as e:
        print(f"Invalid input: {e}")
        return 2

    print(
        f"Player {board.current} -> column {int(result.column) + 1} | "
        f"nodes={result.nodes} | cut={result.cutoffs} | "
        f"eval={result.score} | {result.time_ms:.1f}ms"
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    cmd = argv[0].lower() if argv else ""
    rest = argv[1:]

    if cmd == "move":
        return move_main(rest)

    if cmd in {"bench", "benchmark"}:
        from connect4_search.scripts.benchmark import main as bench_main

        return bench_main(rest)

    print("Usage:")
    print("  python -m connect4_search.main move [--moves 4,4,5] [--algorithm alphabeta] [--depth 4]")
    print("  python -m connect4_search.main bench [--algorithms ...] [--depths 1,2,3] [--sizes 6x7]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
