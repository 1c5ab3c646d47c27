"""Run state and the read-only snapshot handed to observers.

SimulationSnapshot captures the engine after each processed event so that
renderers, trackers and tests can inspect it without touching the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from checkoutsim.core.temporal import Instant

if TYPE_CHECKING:
    from checkoutsim.core.event import Event


class RunState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SimulationSnapshot:
    """Immutable view of the checkout lines after one processed event.

    Attributes:
        current_time: Timestamp of the event just processed.
        lines: Customer identities per line, front to back.
        arrivals: Arrival events processed so far.
        departures: Departure events processed so far.
        peak_line_length: Longest line observed so far.
        last_event: The event just processed.
    """
    current_time: Instant
    lines: tuple[tuple[int, ...], ...]
    arrivals: int
    departures: int
    peak_line_length: int
    last_event: Event | None = None

    @property
    def events_processed(self) -> int:
        return self.arrivals + self.departures

    @property
    def line_lengths(self) -> tuple[int, ...]:
        return tuple(len(line) for line in self.lines)

    @property
    def longest_line(self) -> int:
        """Length of the longest line in this snapshot (0 if all are empty)."""
        return max(self.line_lengths, default=0)
