"""Core simulation engine components."""

from checkoutsim.core.temporal import Duration, Instant
from checkoutsim.core.errors import (
    CheckoutSimError,
    ConfigurationError,
    EmptyEventHeapError,
    InvariantViolation,
    NoDataError,
)
from checkoutsim.core.event import Event, EventKind
from checkoutsim.core.event_heap import EventHeap
from checkoutsim.core.state import RunState, SimulationSnapshot
from checkoutsim.core.simulation import Observer, Simulation

__all__ = [
    "Simulation",
    "Observer",
    "Event",
    "EventKind",
    "EventHeap",
    "Instant",
    "Duration",
    "RunState",
    "SimulationSnapshot",
    "CheckoutSimError",
    "ConfigurationError",
    "EmptyEventHeapError",
    "InvariantViolation",
    "NoDataError",
]
