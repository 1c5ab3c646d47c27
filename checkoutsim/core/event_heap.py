"""Time-ordered priority queue of pending simulation events."""

from __future__ import annotations

import heapq
import logging
from typing import Iterable, Union

from checkoutsim.core.errors import EmptyEventHeapError
from checkoutsim.core.event import Event

logger = logging.getLogger(__name__)


class EventHeap:
    def __init__(self, events: Iterable[Event] | None = None):
        """Store Events directly on a binary heap.

        Event implements ordering by (time, insertion order), so there's no
        need to store (time, event) tuples. Only insert and extract-min are
        supported; events are never searched for or removed early.
        """
        self._heap: list[Event] = list(events) if events else []
        heapq.heapify(self._heap)

    def push(self, events: Union[Event, Iterable[Event]]) -> None:
        """Push an Event or an iterable of Events onto the heap."""
        if isinstance(events, Event):
            heapq.heappush(self._heap, events)
            return
        for event in events:
            heapq.heappush(self._heap, event)

    def pop(self) -> Event:
        """Remove and return the earliest event.

        Raises:
            EmptyEventHeapError: If no events remain.
        """
        if not self._heap:
            raise EmptyEventHeapError("cannot extract an event from an empty event heap")
        return heapq.heappop(self._heap)

    def peek(self) -> Event:
        if not self._heap:
            raise EmptyEventHeapError("cannot peek into an empty event heap")
        return self._heap[0]

    def has_events(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
