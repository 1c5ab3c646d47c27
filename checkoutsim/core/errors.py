"""Exceptions raised by checkoutsim.

Configuration problems are caught before any customer is generated.
Invariant violations mean the event scheduling logic itself is broken and
abort the run. ``NoDataError`` reports statistics requested over nothing.
"""


class CheckoutSimError(Exception):
    """Base class for all checkoutsim errors."""


class ConfigurationError(CheckoutSimError, ValueError):
    """A configuration value is malformed or outside its allowed range."""


class InvariantViolation(CheckoutSimError, RuntimeError):
    """The engine's internal state no longer satisfies its invariants."""


class EmptyEventHeapError(InvariantViolation, IndexError):
    """An event was requested from an empty event heap."""


class NoDataError(CheckoutSimError, ValueError):
    """Statistics were finalized without any samples to summarize."""
