"""Built-in observers that record what happens during a run.

Both collectors are plain callables taking a SimulationSnapshot, so they
can be registered with ``Simulation.add_observer``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import pandas as pd

from checkoutsim.core.state import SimulationSnapshot
from checkoutsim.instrumentation.data import DepthSeries


@dataclass(frozen=True)
class DepartureRecord:
    customer_id: int
    line_index: int
    arrival_min: float
    departure_min: float
    checkout_min: float
    service_min: float
    wait_min: float


class DepartureLog:
    """Keeps one DepartureRecord per customer that leaves a line."""

    def __init__(self) -> None:
        self.records: list[DepartureRecord] = []

    def __call__(self, snapshot: SimulationSnapshot) -> None:
        event = snapshot.last_event
        if event is None or not event.is_departure:
            return
        customer = event.customer
        service = event.time - customer.arrival_time
        self.records.append(DepartureRecord(
            customer_id=customer.customer_id,
            line_index=customer.line_index,
            arrival_min=customer.arrival_time.to_minutes(),
            departure_min=event.time.to_minutes(),
            checkout_min=customer.checkout_duration.to_minutes(),
            service_min=service.to_minutes(),
            wait_min=(service - customer.checkout_duration).to_minutes(),
        ))

    @property
    def count(self) -> int:
        return len(self.records)

    def to_dataframe(self) -> pd.DataFrame:
        columns = list(DepartureRecord.__dataclass_fields__)
        return pd.DataFrame([asdict(r) for r in self.records], columns=columns)


class LineDepthTracker:
    """Samples line depths after every processed event.

    ``longest`` holds the longest line per event; ``per_line[i]`` holds the
    depth of line i per event.
    """

    def __init__(self, num_lines: int) -> None:
        self.longest = DepthSeries("longest_line")
        self.per_line = [DepthSeries(f"line_{i + 1}") for i in range(num_lines)]

    def __call__(self, snapshot: SimulationSnapshot) -> None:
        self.longest.record(snapshot.longest_line, snapshot.current_time)
        for series, length in zip(self.per_line, snapshot.line_lengths, strict=True):
            series.record(length, snapshot.current_time)

    def peak(self) -> int:
        return self.longest.peak()

    def to_dataframe(self) -> pd.DataFrame:
        frame = self.longest.to_dataframe()
        for series in self.per_line:
            frame[series.name] = series.depths()
        return frame
