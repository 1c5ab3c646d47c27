"""Pre-simulation generation of customers and their arrival events.

Every customer is created before the first event is processed:

- the arrival instant is a whole number of seconds drawn uniformly from
  the opening window ``[open, open + hours_open)``;
- the checkout duration is ``2 + NegExp(expected - 2)`` minutes, so it is
  never shorter than two minutes and averages ``expected`` minutes.

The random generator is always passed in so runs are reproducible.
"""

from __future__ import annotations

import logging
import math
import random

from checkoutsim.config import MIN_CHECKOUT_MINUTES, SupermarketConfig
from checkoutsim.core.event import Event
from checkoutsim.core.temporal import Duration
from checkoutsim.entities.customer import Customer

logger = logging.getLogger(__name__)


def negative_exponential(mean: float, rng: random.Random) -> float:
    """Sample an exponential variate with the given mean as ``-mean * ln(U)``.

    Args:
        mean: Expected value. Must be > 0.
        rng: Source of uniform draws.

    Raises:
        ValueError: If mean is not positive.
    """
    if mean <= 0:
        raise ValueError(f"mean must be > 0, got {mean}")
    # random() is in [0, 1); ln(0) is undefined so map U onto (0, 1]
    u = 1.0 - rng.random()
    return -mean * math.log(u)


def generate_customers(config: SupermarketConfig, rng: random.Random) -> list[Customer]:
    """Create ``config.num_customers`` customers in identity order.

    Identities start at 1. The returned list is in generation order, not
    arrival order.
    """
    window_seconds = 3600 * config.hours_open
    extra_mean = config.expected_checkout_minutes - MIN_CHECKOUT_MINUTES
    opening = config.opening_time

    customers: list[Customer] = []
    for customer_id in range(1, config.num_customers + 1):
        arrival = opening + Duration.from_seconds(rng.randrange(window_seconds))
        checkout_minutes = MIN_CHECKOUT_MINUTES + negative_exponential(extra_mean, rng)
        customers.append(
            Customer(
                customer_id=customer_id,
                arrival_time=arrival,
                checkout_duration=Duration.from_minutes(checkout_minutes),
            )
        )

    logger.debug("Generated %d customers between %s and %s",
                 len(customers), opening, config.closing_time)
    return customers


def arrival_events(customers: list[Customer]) -> list[Event]:
    """One ARRIVAL event per customer, built in the customers' order."""
    return [Event.arrival(customer) for customer in customers]
