"""One-call entry point for running a checkout simulation.

    from checkoutsim.api import run

    result = run(SupermarketConfig(num_customers=200, num_lines=4), seed=7)
    print(result.summary)
    frame = result.departures.to_dataframe()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from checkoutsim.core import Observer, Simulation
from checkoutsim.config import SupermarketConfig
from checkoutsim.instrumentation import DepartureLog, LineDepthTracker, SimulationSummary


@dataclass
class SimulationResult:
    config: SupermarketConfig
    seed: int | None
    summary: SimulationSummary
    departures: DepartureLog
    line_depths: LineDepthTracker


def run(
    config: SupermarketConfig | None = None,
    seed: int | None = None,
    *,
    observers: Iterable[Observer] = (),
) -> SimulationResult:
    """Run one simulation to completion and collect its results.

    Args:
        config: Store configuration; defaults to ``SupermarketConfig()``.
        seed: Seed for the run's random generator. Same seed and config
            give identical results.
        observers: Extra snapshot observers, e.g. a renderer.
    """
    if config is None:
        config = SupermarketConfig()

    sim = Simulation(config, seed=seed)
    departures = DepartureLog()
    line_depths = LineDepthTracker(config.num_lines)
    sim.add_observer(departures)
    sim.add_observer(line_depths)
    for observer in observers:
        sim.add_observer(observer)

    summary = sim.run()
    return SimulationResult(
        config=config,
        seed=seed,
        summary=summary,
        departures=departures,
        line_depths=line_depths,
    )
