"""Charts for finished runs, rendered with matplotlib's Agg backend."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from checkoutsim.api import SimulationResult

logger = logging.getLogger(__name__)


def plot_line_depth(result: SimulationResult, path: str | Path) -> Path:
    """Step plot of every line's depth and the longest line over the day."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tracker = result.line_depths
    times_h = [t / 60.0 for t in tracker.longest.times()]

    fig, (ax_lines, ax_peak) = plt.subplots(nrows=2, ncols=1, sharex=True, figsize=(10, 7))
    for series in tracker.per_line:
        ax_lines.step(times_h, series.depths(), where="post", label=series.name, linewidth=0.8)
    ax_lines.set_ylabel("customers in line")
    ax_lines.set_title(
        f"{result.config.num_customers} customers, {result.config.num_lines} lines, "
        f"{result.config.expected_checkout_minutes:g} min expected checkout"
    )
    ax_lines.legend(loc="upper right", fontsize="small")
    ax_lines.grid(True)

    ax_peak.step(times_h, tracker.longest.depths(), where="post", color="black")
    ax_peak.axhline(result.summary.peak_line_length, linestyle="--", color="red", label="longest so far")
    ax_peak.set_xlabel("time of day (h)")
    ax_peak.set_ylabel("longest line")
    ax_peak.legend(loc="upper right")
    ax_peak.grid(True)

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info("Saved line depth chart to %s", path)
    return path


def plot_service_times(result: SimulationResult, path: str | Path, bins: int = 30) -> Path:
    """Histogram of service lengths with the mean marked."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    service = [r.service_min for r in result.departures.records]

    fig, ax = plt.subplots(figsize=(10, 4))
    ax.hist(service, bins=bins, color="steelblue", edgecolor="white")
    ax.axvline(result.summary.mean_service.to_minutes(), color="red", linestyle="--", label="mean")
    ax.set_xlabel("service length (min)")
    ax.set_ylabel("customers")
    ax.legend()
    ax.grid(True)

    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info("Saved service time histogram to %s", path)
    return path
