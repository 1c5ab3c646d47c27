"""Arrival and departure events, the units of work of the checkout simulation.

Each event fires at an ``Instant`` and refers to one ``Customer``. Events
are immutable once built and are discarded after the engine dispatches them.

Sorting uses (time, insertion_order) so that events scheduled for the same
instant are processed first-in first-out. The insertion order is taken from
a process-wide counter at construction time; the engine pushes every event
onto the heap as soon as it is built, so construction order and insertion
order coincide.
"""

from __future__ import annotations

import logging
from enum import Enum
from itertools import count
from typing import TYPE_CHECKING

from checkoutsim.core.temporal import Instant

if TYPE_CHECKING:
    from checkoutsim.entities.customer import Customer

logger = logging.getLogger(__name__)

_global_event_counter = count()


class EventKind(Enum):
    """What happens to the customer when the event fires."""

    ARRIVAL = "arrival"
    DEPARTURE = "departure"


class Event:
    """A timestamped arrival or departure of one customer.

    Attributes:
        time: When the event fires.
        kind: ARRIVAL (customer joins a line) or DEPARTURE (customer leaves
            the front of their line).
        customer: The customer the event is about.
    """

    __slots__ = ("_sort_index", "customer", "kind", "time")

    def __init__(self, time: Instant, kind: EventKind, customer: Customer):
        if not isinstance(time, Instant):
            raise TypeError(f"Event time must be an Instant, got {type(time).__name__}")
        if not isinstance(kind, EventKind):
            raise TypeError(f"Event kind must be an EventKind, got {kind!r}")
        object.__setattr__(self, "time", time)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "customer", customer)
        object.__setattr__(self, "_sort_index", next(_global_event_counter))

    @classmethod
    def arrival(cls, customer: Customer) -> Event:
        """Build the arrival event for a freshly generated customer."""
        return cls(customer.arrival_time, EventKind.ARRIVAL, customer)

    @classmethod
    def departure(cls, time: Instant, customer: Customer) -> Event:
        return cls(time, EventKind.DEPARTURE, customer)

    def __setattr__(self, name, value):
        raise AttributeError(f"Event is immutable; cannot set {name!r}")

    @property
    def sort_index(self) -> int:
        return self._sort_index

    @property
    def is_arrival(self) -> bool:
        return self.kind is EventKind.ARRIVAL

    @property
    def is_departure(self) -> bool:
        return self.kind is EventKind.DEPARTURE

    def __lt__(self, other: Event) -> bool:
        """
        1. Time (Primary)
        2. Insert Order (Secondary - guarantees FIFO for simultaneous events)
        """
        if self.time != other.time:
            return self.time < other.time
        return self._sort_index < other._sort_index

    def __repr__(self) -> str:
        return f"Event({self.time!r}, {self.kind.name}, customer={self.customer})"
