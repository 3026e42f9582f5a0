from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class SummaryConfig:
    board_size: str | None = None   # e.g. "default"; None keeps every size
    min_searches: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def filter_rows(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    out = df.copy()
    if cfg.board_size is not None:
        _require_cols(out, ["board_size"])
        out = out[out["board_size"] == cfg.board_size].copy()
    return out


def summarize_runs(df: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    """One row per (algorithm, depth[, board_size]) with node and timing stats."""
    _require_cols(df, ["algorithm", "depth", "nodes", "time_ms"])

    out = filter_rows(df, cfg)
    keys = ["algorithm", "depth"]
    if "board_size" in out.columns:
        keys.append("board_size")

    if out.empty:
        return pd.DataFrame(columns=keys + ["searches", "mean_nodes", "max_nodes", "mean_ms", "median_ms"])

    g = out.groupby(keys, as_index=False)
    summary = g.agg(
        searches=("nodes", "size"),
        mean_nodes=("nodes", "mean"),
        max_nodes=("nodes", "max"),
        mean_ms=("time_ms", "mean"),
        median_ms=("time_ms", "median"),
    )

    if cfg.min_searches > 0:
        summary = summary[summary["searches"] >= cfg.min_searches]

    return summary.sort_values(keys).reset_index(drop=True)


def pruning_ratio(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean alpha-beta nodes divided by mean minimax nodes, per depth.
    Values below 1 are nodes saved by pruning.
    """
    _require_cols(df, ["algorithm", "depth", "nodes"])

    means = (
        df[df["algorithm"].isin(["minimax", "alphabeta"])]
        .groupby(["depth", "algorithm"])["nodes"]
        .mean()
        .unstack("algorithm")
    )
    if "minimax" not in means.columns or "alphabeta" not in means.columns:
        return pd.DataFrame(columns=["depth", "minimax", "alphabeta", "ratio"])

    means = means.dropna(subset=["minimax", "alphabeta"])
    means["ratio"] = means["alphabeta"] / means["minimax"]
    out = means[["minimax", "alphabeta", "ratio"]].reset_index()
    out.columns.name = None
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T
