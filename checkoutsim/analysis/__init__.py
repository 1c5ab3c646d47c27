"""Post-run charts."""

from checkoutsim.analysis.plots import plot_line_depth, plot_service_times

__all__ = [
    "plot_line_depth",
    "plot_service_times",
]
