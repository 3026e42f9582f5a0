from .chart import (
    plot_histograms,
    plot_metric_by_depth,
    plot_nodes_by_depth,
    plot_time_by_depth,
)

__all__ = [
    "plot_histograms",
    "plot_metric_by_depth",
    "plot_nodes_by_depth",
    "plot_time_by_depth",
]
