"""The discrete-event checkout engine.

Simulation owns the event heap, the checkout lines and the running
statistics. It is built fresh for each run: all arrivals are generated and
pushed up front, then events are popped in time order and dispatched until
the heap is empty.

Per processed event the engine:

1. dispatches the event (arrival or departure),
2. folds the longest current line into the statistics,
3. hands a read-only snapshot to every registered observer.

Observers are for presentation and measurement only; nothing they do can
change the computed statistics.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, Sequence

from checkoutsim.components.line_assignment import LineAssignmentPolicy, shortest_line
from checkoutsim.config import SupermarketConfig
from checkoutsim.core.errors import ConfigurationError, InvariantViolation
from checkoutsim.core.event import Event, EventKind
from checkoutsim.core.event_heap import EventHeap
from checkoutsim.core.state import RunState, SimulationSnapshot
from checkoutsim.core.temporal import Instant
from checkoutsim.entities.checkout_line import CheckoutLine
from checkoutsim.entities.customer import Customer
from checkoutsim.instrumentation.statistics import ServiceStatistics
from checkoutsim.instrumentation.summary import SimulationSummary
from checkoutsim.load.generator import arrival_events, generate_customers

logger = logging.getLogger(__name__)

Observer = Callable[[SimulationSnapshot], None]


class Simulation:
    """One run of N parallel FIFO checkout lines fed by a single arrival stream.

    Args:
        config: Validated store configuration. Re-validated here.
        rng: Random generator to draw arrivals and checkout times from.
        seed: Seed for a fresh ``random.Random`` when no rng is given.
        policy: Chooses the line each arriving customer joins.
        customers: A fixed arrival schedule to replay instead of generating
            one. Must hold exactly ``config.num_customers`` fresh customers.
    """

    def __init__(
        self,
        config: SupermarketConfig,
        rng: random.Random | None = None,
        *,
        seed: int | None = None,
        policy: LineAssignmentPolicy = shortest_line,
        customers: Sequence[Customer] | None = None,
    ):
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")
        config.validate()

        self.config = config
        self._rng = rng if rng is not None else random.Random(seed)
        self._policy = policy
        self._observers: list[Observer] = []

        self._state = RunState.NOT_STARTED
        self._lines: tuple[CheckoutLine, ...] = tuple(
            CheckoutLine(i) for i in range(config.num_lines)
        )
        self._pending_departures: list[Event | None] = [None] * config.num_lines
        self._event_heap = EventHeap()
        self._statistics = ServiceStatistics()
        self._last_event: Event | None = None
        self._arrivals = 0
        self._departures = 0

        if customers is None:
            customers = generate_customers(config, self._rng)
        else:
            _check_schedule(config, customers)
        self._event_heap.push(arrival_events(list(customers)))
        self._current_time: Instant = self._event_heap.peek().time
        logger.info(
            "Simulation initialized: %d customers, %d lines, %.2f min expected checkout, %d hours open",
            config.num_customers, config.num_lines,
            config.expected_checkout_minutes, config.hours_open,
        )

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def now(self) -> Instant:
        return self._current_time

    @property
    def lines(self) -> tuple[CheckoutLine, ...]:
        return self._lines

    @property
    def pending_events(self) -> int:
        return self._event_heap.size()

    @property
    def statistics(self) -> ServiceStatistics:
        return self._statistics

    def pending_departures(self) -> int:
        """Number of lines with a departure scheduled but not yet processed."""
        return sum(1 for event in self._pending_departures if event is not None)

    def pending_departure(self, line_index: int) -> Event | None:
        """The departure scheduled for a line's front customer, if any."""
        return self._pending_departures[line_index]

    def snapshot(self) -> SimulationSnapshot:
        return SimulationSnapshot(
            current_time=self._current_time,
            lines=tuple(line.customer_ids() for line in self._lines),
            arrivals=self._arrivals,
            departures=self._departures,
            peak_line_length=self._statistics.peak_line_length,
            last_event=self._last_event,
        )

    def add_observer(self, observer: Observer) -> None:
        """Register a callable to receive a snapshot after every event."""
        self._observers.append(observer)

    # ------------------------------------------------------------------
    # Event loop
    # ------------------------------------------------------------------

    def run(self) -> SimulationSummary:
        """Process every event and return the run's summary.

        Raises:
            RuntimeError: If the simulation was already run.
            InvariantViolation: If event scheduling broke an invariant.
        """
        if self._state is not RunState.NOT_STARTED:
            raise RuntimeError(f"Simulation already {self._state.value}; build a new one to run again")

        self._state = RunState.RUNNING
        start_time = self._current_time
        wall_start = time.monotonic()
        logger.info("Simulation started with %d arrivals queued", self._event_heap.size())

        while self._event_heap.has_events():
            event = self._event_heap.pop()
            if event.time < self._current_time:
                self._fail(
                    f"event at {event.time!r} is earlier than current time {self._current_time!r}"
                )
            self._current_time = event.time
            self._last_event = event

            if event.kind is EventKind.ARRIVAL:
                self._handle_arrival(event)
            else:
                self._handle_departure(event)

            self._statistics.record_line_length(max(line.depth for line in self._lines))
            if self._observers:
                snapshot = self.snapshot()
                for observer in self._observers:
                    observer(snapshot)

        self._state = RunState.COMPLETE
        wall_elapsed = time.monotonic() - wall_start

        service = self._statistics.finalize(self.config.num_customers)
        summary = SimulationSummary(
            mean_service=service.mean_service,
            min_service=service.min_service,
            max_service=service.max_service,
            peak_line_length=service.peak_line_length,
            arrivals=self._arrivals,
            departures=self._departures,
            start_time=start_time,
            end_time=self._current_time,
            wall_clock_seconds=wall_elapsed,
        )
        logger.info(
            "Simulation complete: %d events in %.3fs (wall), mean service %s, peak line %d",
            summary.events_processed, wall_elapsed, summary.mean_service, summary.peak_line_length,
        )
        return summary

    def _handle_arrival(self, event: Event) -> None:
        customer = event.customer
        index = self._policy(self._lines)
        if not 0 <= index < len(self._lines):
            self._fail(f"line assignment policy returned invalid line index {index}")
        line = self._lines[index]

        customer.assign_line(index)
        line.enqueue(customer)
        self._arrivals += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "customer %s joined %s (depth %d)", customer, line.name, line.depth,
                extra={"sim_time": str(event.time)},
            )

        # Customers joining a busy line get their departure scheduled when
        # they reach the front, in _handle_departure.
        if line.depth == 1:
            self._schedule_departure(line, event.time)

    def _handle_departure(self, event: Event) -> None:
        customer = event.customer
        index = customer.line_index
        if index is None:
            self._fail(f"departure for customer {customer} who never joined a line")
        line = self._lines[index]

        if line.is_empty():
            self._fail(f"departure for customer {customer} from empty line {line.name}")
        if line.front() is not customer:
            self._fail(
                f"departure for customer {customer} but {line.front()} is at the front of {line.name}"
            )
        if self._pending_departures[index] is not event:
            self._fail(f"departure for customer {customer} was not the pending departure of {line.name}")

        line.dequeue()
        self._pending_departures[index] = None
        self._departures += 1

        service_length = event.time - customer.arrival_time
        self._statistics.record_service_time(service_length)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "customer %s left %s after %s", customer, line.name, service_length,
                extra={"sim_time": str(event.time)},
            )

        if not line.is_empty():
            self._schedule_departure(line, event.time)

    def _schedule_departure(self, line: CheckoutLine, now: Instant) -> None:
        if self._pending_departures[line.index] is not None:
            self._fail(f"{line.name} already has a pending departure")
        customer = line.front()
        departure = Event.departure(now + customer.checkout_duration, customer)
        self._pending_departures[line.index] = departure
        self._event_heap.push(departure)

    def _fail(self, message: str) -> None:
        logger.error("Invariant violated: %s", message, extra={"sim_time": str(self._current_time)})
        raise InvariantViolation(message)


def _check_schedule(config: SupermarketConfig, customers: Sequence[Customer]) -> None:
    if len(customers) != config.num_customers:
        raise ConfigurationError(
            f"schedule has {len(customers)} customers but num_customers is {config.num_customers}"
        )
    ids = [c.customer_id for c in customers]
    if len(set(ids)) != len(ids):
        raise ConfigurationError("customer identities in a schedule must be unique")
    for customer in customers:
        if customer.line_index is not None:
            raise ConfigurationError(f"customer {customer} is already assigned to a line")
