from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_metric_by_depth(df: pd.DataFrame, outdir: Path, metric: str, *, log_scale: bool = True, show: bool) -> Path | None:
    """One line per algorithm: mean `metric` against search depth."""
    needed = {"algorithm", "depth", metric}
    if not needed.issubset(df.columns) or not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    means = df.groupby(["algorithm", "depth"])[metric].mean().reset_index()
    if means.empty:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    for algo, part in means.groupby("algorithm"):
        part = part.sort_values("depth")
        plt.plot(part["depth"], part[metric], marker="o", label=str(algo))
    if log_scale and (means[metric] > 0).all():
        plt.yscale("log")
    plt.title(f"mean {metric} vs depth")
    plt.xlabel("depth")
    plt.ylabel(metric)
    plt.legend()

    return _finish(fig, outdir, f"{metric}_by_depth.png", show=show)


def plot_nodes_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    return plot_metric_by_depth(df, outdir, "nodes", show=show)


def plot_time_by_depth(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    return plot_metric_by_depth(df, outdir, "time_ms", show=show)


def plot_histograms(df: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    num_cols = [c for c in cols if c in df.columns and pd.api.types.is_numeric_dtype(df[c])]
    saved: list[Path] = []
    if not num_cols:
        return saved

    if not show:
        _ensure_dir(outdir)

    for c in num_cols:
        fig = plt.figure()
        plt.hist(df[c].dropna(), bins=30)
        plt.title(f"Histogram: {c}")
        plt.xlabel(c)
        plt.ylabel("count")

        out = _finish(fig, outdir, f"hist_{c}.png", show=show)
        if out is not None:
            saved.append(out)

    return saved
