"""Simulation summary generated after a run completes.

SimulationSummary is returned by Simulation.run() and carries the four
headline numbers (mean, longest and shortest service time, longest line)
along with run bookkeeping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checkoutsim.core.temporal import Duration, Instant


@dataclass(frozen=True)
class SimulationSummary:
    mean_service: Duration
    min_service: Duration
    max_service: Duration
    peak_line_length: int
    arrivals: int
    departures: int
    start_time: Instant
    end_time: Instant
    wall_clock_seconds: float = 0.0

    @property
    def events_processed(self) -> int:
        return self.arrivals + self.departures

    def __str__(self) -> str:
        lines = [
            f" Average Service Time: {self.mean_service}",
            f" Longest Service Time: {self.max_service}",
            f"Shortest Service Time: {self.min_service}",
            "",
            f" Longest Queue Length: {self.peak_line_length} customers",
            "",
            f"Events processed: {self.events_processed} "
            f"(arrivals: {self.arrivals}, departures: {self.departures})",
            f"Simulated {self.start_time} - {self.end_time} in {self.wall_clock_seconds:.3f}s (wall)",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mean_service_s": self.mean_service.to_seconds(),
            "min_service_s": self.min_service.to_seconds(),
            "max_service_s": self.max_service.to_seconds(),
            "peak_line_length": self.peak_line_length,
            "arrivals": self.arrivals,
            "departures": self.departures,
            "events_processed": self.events_processed,
            "start_time_s": self.start_time.to_seconds(),
            "end_time_s": self.end_time.to_seconds(),
            "wall_clock_seconds": self.wall_clock_seconds,
        }
