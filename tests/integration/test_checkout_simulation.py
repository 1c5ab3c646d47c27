"""Integration tests for the checkout simulation engine."""

from __future__ import annotations

import random

import pytest

from checkoutsim import (
    ConfigurationError,
    Duration,
    Event,
    EventKind,
    InvariantViolation,
    RunState,
    Simulation,
    SimulationSnapshot,
    SupermarketConfig,
)


class _Recorder:
    """Observer that checks per-event invariants against the live engine."""

    def __init__(self, sim: Simulation):
        self.sim = sim
        self.snapshots: list[SimulationSnapshot] = []
        self.states: set[RunState] = set()

    def __call__(self, snapshot: SimulationSnapshot) -> None:
        self.snapshots.append(snapshot)
        self.states.add(self.sim.state)
        for line in self.sim.lines:
            pending = self.sim.pending_departure(line.index)
            if line.is_empty():
                assert pending is None
            else:
                # exactly one outstanding departure, for the front customer
                assert pending is not None
                assert pending.customer is line.front()


def _run_recorded(config: SupermarketConfig, seed: int = 1, **kwargs):
    sim = Simulation(config, seed=seed, **kwargs)
    recorder = _Recorder(sim)
    sim.add_observer(recorder)
    summary = sim.run()
    return sim, recorder, summary


CONFIGS = [
    SupermarketConfig(),
    SupermarketConfig(num_customers=50, num_lines=1, expected_checkout_minutes=3.0, hours_open=1),
    SupermarketConfig(num_customers=300, num_lines=8, expected_checkout_minutes=12.0, hours_open=2),
    SupermarketConfig(num_customers=120, num_lines=3, expected_checkout_minutes=2.5, hours_open=24),
]


@pytest.mark.parametrize("config", CONFIGS)
class TestRunProperties:
    def test_every_customer_arrives_and_departs(self, config):
        sim, recorder, summary = _run_recorded(config)
        assert summary.arrivals == config.num_customers
        assert summary.departures == config.num_customers
        assert summary.events_processed == 2 * config.num_customers
        assert len(recorder.snapshots) == 2 * config.num_customers
        assert all(line.is_empty() for line in sim.lines)
        assert sum(line.customers_served for line in sim.lines) == config.num_customers

    def test_time_never_goes_backwards(self, config):
        _, recorder, _ = _run_recorded(config)
        times = [s.current_time for s in recorder.snapshots]
        assert times == sorted(times)

    def test_peak_covers_every_observed_length(self, config):
        _, recorder, summary = _run_recorded(config)
        longest = max(s.longest_line for s in recorder.snapshots)
        assert summary.peak_line_length == longest
        for snapshot in recorder.snapshots:
            assert all(length >= 0 for length in snapshot.line_lengths)
            assert snapshot.peak_line_length >= snapshot.longest_line

    def test_mean_between_min_and_max(self, config):
        _, _, summary = _run_recorded(config)
        assert summary.min_service <= summary.mean_service <= summary.max_service
        assert summary.min_service >= Duration.from_minutes(2)

    def test_at_most_one_pending_departure_per_line(self, config):
        sim, recorder, _ = _run_recorded(config)
        assert sim.pending_departures() == 0
        assert recorder.states == {RunState.RUNNING}

    def test_same_seed_same_statistics(self, config):
        a = Simulation(config, seed=2024).run().to_dict()
        b = Simulation(config, seed=2024).run().to_dict()
        a.pop("wall_clock_seconds")
        b.pop("wall_clock_seconds")
        assert a == b


def test_observers_do_not_change_statistics():
    config = SupermarketConfig(num_customers=200, num_lines=4)
    plain = Simulation(config, seed=9).run()
    _, _, observed = _run_recorded(config, seed=9)
    assert plain.to_dict() | {"wall_clock_seconds": 0} == observed.to_dict() | {"wall_clock_seconds": 0}


def test_rng_instance_equivalent_to_seed():
    config = SupermarketConfig(num_customers=60)
    by_seed = Simulation(config, seed=5).run()
    by_rng = Simulation(config, random.Random(5)).run()
    assert by_seed.mean_service == by_rng.mean_service
    assert by_seed.peak_line_length == by_rng.peak_line_length


def test_state_machine():
    sim = Simulation(SupermarketConfig(num_customers=10), seed=3)
    assert sim.state is RunState.NOT_STARTED
    assert sim.pending_events == 10
    sim.run()
    assert sim.state is RunState.COMPLETE
    assert sim.pending_events == 0


def test_cannot_run_twice():
    sim = Simulation(SupermarketConfig(num_customers=10), seed=3)
    sim.run()
    with pytest.raises(RuntimeError):
        sim.run()


def test_rng_and_seed_are_exclusive():
    with pytest.raises(ValueError):
        Simulation(SupermarketConfig(), random.Random(1), seed=1)


def test_engine_revalidates_config():
    config = SupermarketConfig()
    object.__setattr__(config, "num_lines", 12)
    with pytest.raises(ConfigurationError):
        Simulation(config, seed=1)


class TestScenarios:
    def test_single_customer(self):
        config = SupermarketConfig(
            num_customers=1, num_lines=1, hours_open=1, expected_checkout_minutes=5
        )
        sim, recorder, summary = _run_recorded(config)

        kinds = [s.last_event.kind for s in recorder.snapshots]
        assert kinds == [EventKind.ARRIVAL, EventKind.DEPARTURE]
        assert summary.min_service == summary.max_service == summary.mean_service
        assert summary.peak_line_length == 1

        customer = recorder.snapshots[0].last_event.customer
        assert summary.mean_service == customer.checkout_duration

    def test_simultaneous_arrivals_split_across_lines(self, make_customer):
        config = SupermarketConfig(num_customers=2, num_lines=2)
        customers = [make_customer(1, 30.0, 4.0), make_customer(2, 30.0, 6.0)]
        sim, recorder, summary = _run_recorded(config, customers=customers)

        assert sorted(c.line_index for c in customers) == [0, 1]
        assert customers[0].line_index == 0
        assert recorder.snapshots[1].lines == ((1,), (2,))
        assert summary.peak_line_length == 1

    def test_single_line_departures_are_arrival_plus_checkout(self, make_customer):
        config = SupermarketConfig(num_customers=3, num_lines=1)
        customers = [
            make_customer(1, 0.0, 3.0),
            make_customer(2, 10.0, 4.0),
            make_customer(3, 20.0, 2.5),
        ]
        _, recorder, summary = _run_recorded(config, customers=customers)

        departures = {
            s.last_event.customer.customer_id: s.last_event.time
            for s in recorder.snapshots if s.last_event.kind is EventKind.DEPARTURE
        }
        for customer in customers:
            assert departures[customer.customer_id] == customer.arrival_time + customer.checkout_duration
        assert summary.min_service == Duration.from_minutes(2.5)
        assert summary.max_service == Duration.from_minutes(4.0)
        assert summary.mean_service == Duration.from_minutes(9.5) / 3

    def test_busy_line_chains_departures(self, make_customer):
        config = SupermarketConfig(num_customers=3, num_lines=1)
        customers = [
            make_customer(1, 0.0, 5.0),
            make_customer(2, 1.0, 3.0),
            make_customer(3, 2.0, 2.5),
        ]
        _, recorder, summary = _run_recorded(config, customers=customers)

        departures = [
            (s.last_event.customer.customer_id, s.last_event.time)
            for s in recorder.snapshots if s.last_event.kind is EventKind.DEPARTURE
        ]
        opening = customers[0].arrival_time
        assert departures == [
            (1, opening + Duration.from_minutes(5.0)),
            (2, opening + Duration.from_minutes(8.0)),
            (3, opening + Duration.from_minutes(10.5)),
        ]
        assert summary.peak_line_length == 3
        # waits: 5, 7, 8.5 minutes
        assert summary.max_service == Duration.from_minutes(8.5)
        assert summary.min_service == Duration.from_minutes(5.0)

    def test_shortest_line_balances_load(self, make_customer):
        config = SupermarketConfig(num_customers=6, num_lines=3)
        customers = [make_customer(i, float(i), 30.0) for i in range(1, 7)]
        sim, recorder, _ = _run_recorded(config, customers=customers)
        assert [c.line_index for c in customers] == [0, 1, 2, 0, 1, 2]
        assert recorder.snapshots[5].lines == ((1, 4), (2, 5), (3, 6))

    def test_departure_at_same_instant_as_arrival_processes_fifo(self, make_customer):
        # customer 2 arrives exactly when customer 1 leaves; the departure
        # was scheduled after the arrival event was queued, so arrival goes first
        config = SupermarketConfig(num_customers=2, num_lines=1)
        customers = [make_customer(1, 0.0, 3.0), make_customer(2, 3.0, 3.0)]
        _, recorder, summary = _run_recorded(config, customers=customers)

        kinds = [(s.last_event.kind, s.last_event.customer.customer_id) for s in recorder.snapshots]
        assert kinds == [
            (EventKind.ARRIVAL, 1),
            (EventKind.ARRIVAL, 2),
            (EventKind.DEPARTURE, 1),
            (EventKind.DEPARTURE, 2),
        ]
        assert summary.peak_line_length == 2


class TestFailures:
    def test_bad_policy_index_is_invariant_violation(self):
        sim = Simulation(SupermarketConfig(num_customers=3, num_lines=2), seed=1, policy=lambda lines: 5)
        with pytest.raises(InvariantViolation):
            sim.run()
        assert sim.state is RunState.RUNNING

    def test_schedule_length_must_match(self, make_customer):
        with pytest.raises(ConfigurationError):
            Simulation(SupermarketConfig(num_customers=2), customers=[make_customer(1, 0.0, 3.0)])

    def test_schedule_ids_must_be_unique(self, make_customer):
        with pytest.raises(ConfigurationError):
            Simulation(
                SupermarketConfig(num_customers=2),
                customers=[make_customer(1, 0.0, 3.0), make_customer(1, 1.0, 3.0)],
            )

    def test_schedule_customers_must_be_fresh(self, make_customer):
        customer = make_customer(1, 0.0, 3.0)
        customer.assign_line(0)
        with pytest.raises(ConfigurationError):
            Simulation(SupermarketConfig(num_customers=1), customers=[customer])


class TestCorruptedEventStream:
    """Departures the engine never scheduled must stop the run."""

    def test_departure_from_empty_line(self, make_customer, opening):
        sim = Simulation(
            SupermarketConfig(num_customers=2, num_lines=1),
            customers=[make_customer(1, 0.0, 3.0), make_customer(2, 10.0, 3.0)],
        )
        stray = make_customer(99, 0.0, 3.0)
        stray.assign_line(0)
        sim._event_heap.push(Event.departure(opening + Duration.from_minutes(5), stray))

        with pytest.raises(InvariantViolation, match="empty line"):
            sim.run()
        assert sim.state is RunState.RUNNING
        assert sim.now == opening + Duration.from_minutes(5)

    def test_departure_for_customer_behind_the_front(self, make_customer, opening):
        first = make_customer(1, 0.0, 10.0)
        second = make_customer(2, 1.0, 3.0)
        sim = Simulation(SupermarketConfig(num_customers=2, num_lines=1), customers=[first, second])
        sim._event_heap.push(Event.departure(opening + Duration.from_minutes(5), second))

        with pytest.raises(InvariantViolation, match="at the front"):
            sim.run()
        assert sim.state is RunState.RUNNING

    def test_departure_that_is_not_the_pending_one(self, make_customer, opening):
        first = make_customer(1, 0.0, 10.0)
        sim = Simulation(SupermarketConfig(num_customers=1, num_lines=1), customers=[first])
        sim._event_heap.push(Event.departure(opening + Duration.from_minutes(4), first))

        with pytest.raises(InvariantViolation, match="not the pending departure"):
            sim.run()
        assert sim.state is RunState.RUNNING
        assert sim.pending_departure(0) is not None

    def test_event_earlier_than_clock(self, make_customer, opening):
        customer = make_customer(1, 0.0, 3.0)
        sim = Simulation(SupermarketConfig(num_customers=1, num_lines=1), customers=[customer])
        stray = make_customer(99, 0.0, 3.0)
        stray.assign_line(0)
        sim._event_heap.push(Event.departure(opening - Duration.from_minutes(1), stray))

        with pytest.raises(InvariantViolation, match="earlier than current time"):
            sim.run()
        assert sim.state is RunState.RUNNING
        assert sim.now == opening

    def test_failed_run_cannot_be_restarted(self, make_customer, opening):
        customer = make_customer(1, 0.0, 3.0)
        sim = Simulation(SupermarketConfig(num_customers=1, num_lines=1), customers=[customer])
        sim._event_heap.push(Event.departure(opening + Duration.from_minutes(1), customer))
        with pytest.raises(InvariantViolation):
            sim.run()
        with pytest.raises(RuntimeError):
            sim.run()
