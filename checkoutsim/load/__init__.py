"""Customer and arrival generation."""

from checkoutsim.load.generator import arrival_events, generate_customers, negative_exponential

__all__ = [
    "arrival_events",
    "generate_customers",
    "negative_exponential",
]
