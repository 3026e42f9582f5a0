from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_records import LoadSpec, load_latest_from_dir, load_records
from ..metrics.summarize import SummaryConfig, filter_rows, numeric_summary, pruning_ratio, summarize_runs
from ..plots.chart import plot_histograms, plot_nodes_by_depth, plot_time_by_depth


DEFAULT_NUMERIC_PLOTS = [
    "nodes",
    "time_ms",
    "score",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze Connect-4 search evaluation logs.")
    ap.add_argument("--csv", type=str, default=None, help="Path to an evaluation CSV. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory containing evaluation_log_*.csv")
    ap.add_argument("--pattern", type=str, default="evaluation_log_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")

    ap.add_argument("--board-size", type=str, default=None, help="Only keep one board size label (small/default/large)")
    ap.add_argument("--min-searches", type=int, default=0, help="Hide configurations with fewer searches")

    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    ap.add_argument("--no-hists", action="store_true", help="Disable histogram generation")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    outdir = Path(args.outdir)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.results_dir), pattern=args.pattern)

    df = load_records(LoadSpec(csv_path=csv_path))

    print(f"\nLoaded: {csv_path}")
    print(f"Rows: {len(df):,}  Cols: {len(df.columns)}")

    cfg = SummaryConfig(board_size=args.board_size, min_searches=args.min_searches)

    table = summarize_runs(df, cfg)
    print("\n=== Per algorithm / depth ===")
    print(table.to_string(index=False))

    filtered = filter_rows(df, cfg)

    ratios = pruning_ratio(filtered)
    if not ratios.empty:
        print("\n=== Alpha-beta vs minimax nodes ===")
        print(ratios.to_string(index=False))

    desc = numeric_summary(filtered)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.no_plots:
        return 0

    plot_nodes_by_depth(filtered, outdir, show=args.show)
    plot_time_by_depth(filtered, outdir, show=args.show)
    if not args.no_hists:
        plot_histograms(filtered, outdir, DEFAULT_NUMERIC_PLOTS, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
