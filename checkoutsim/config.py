"""Validated run configuration for the checkout simulation.

Environment variables read by ``SupermarketConfig.from_env()``:
    CHECKOUTSIM_CUSTOMERS: Number of customers (integer > 0)
    CHECKOUTSIM_LINES: Number of checkout lines (integer 1-8)
    CHECKOUTSIM_CHECKOUT_MINUTES: Expected checkout time in minutes (> 2.0)
    CHECKOUTSIM_HOURS_OPEN: Hours the store is open (integer 1-24)
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

from checkoutsim.core.errors import ConfigurationError
from checkoutsim.core.temporal import Duration, Instant

logger = logging.getLogger(__name__)

MIN_CHECKOUT_MINUTES = 2.0
MAX_LINES = 8
MAX_HOURS_OPEN = 24
OPENING_HOUR = 8


def _require_int(name: str, value, low: int, high: int | None = None) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value < low or (high is not None and value > high):
        bounds = f"between {low} and {high}" if high is not None else f">= {low}"
        raise ConfigurationError(f"{name} must be {bounds}, got {value}")


@dataclass(frozen=True)
class SupermarketConfig:
    num_customers: int = 400
    num_lines: int = 6
    expected_checkout_minutes: float = 6.25
    hours_open: int = 8

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check every field against its allowed range.

        Raises:
            ConfigurationError: On the first out-of-range or malformed value.
        """
        _require_int("num_customers", self.num_customers, 1)
        _require_int("num_lines", self.num_lines, 1, MAX_LINES)
        _require_int("hours_open", self.hours_open, 1, MAX_HOURS_OPEN)
        checkout = self.expected_checkout_minutes
        if isinstance(checkout, bool) or not isinstance(checkout, (int, float)):
            raise ConfigurationError(f"expected_checkout_minutes must be a number, got {checkout!r}")
        if not math.isfinite(checkout) or checkout <= MIN_CHECKOUT_MINUTES:
            raise ConfigurationError(
                f"expected_checkout_minutes must be greater than {MIN_CHECKOUT_MINUTES}, got {checkout}"
            )

    @property
    def opening_time(self) -> Instant:
        return Instant.from_hours(OPENING_HOUR)

    @property
    def closing_time(self) -> Instant:
        return self.opening_time + Duration.from_hours(self.hours_open)

    @classmethod
    def from_env(cls) -> SupermarketConfig:
        """Build a config from CHECKOUTSIM_* environment variables.

        Unset variables fall back to the defaults.

        Raises:
            ConfigurationError: If a variable cannot be parsed or is out of range.
        """
        defaults = cls()
        config = cls(
            num_customers=_env_number("CHECKOUTSIM_CUSTOMERS", int, defaults.num_customers),
            num_lines=_env_number("CHECKOUTSIM_LINES", int, defaults.num_lines),
            expected_checkout_minutes=_env_number(
                "CHECKOUTSIM_CHECKOUT_MINUTES", float, defaults.expected_checkout_minutes
            ),
            hours_open=_env_number("CHECKOUTSIM_HOURS_OPEN", int, defaults.hours_open),
        )
        logger.debug("Loaded configuration from environment: %s", config)
        return config


def _env_number(name: str, parse, default):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return parse(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name}={raw!r} is not a valid {parse.__name__}") from exc
