"""Simulated time: instants on the store clock and the durations between them.

Both types store an integer number of nanoseconds so that arithmetic is
exact and ordering is total. ``Instant - Instant`` yields a ``Duration``;
``Instant + Duration`` yields an ``Instant``. The clock's epoch is midnight
of the simulated day.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Union

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MINUTE = 60 * _NANOS_PER_SECOND
_NANOS_PER_HOUR = 60 * _NANOS_PER_MINUTE


def _to_nanos(value: Union[int, float], scale: int) -> int:
    if isinstance(value, int):
        return value * scale
    return int(round(value * scale))


@total_ordering
class Duration:
    """A signed span of simulated time."""

    __slots__ = ("nanoseconds",)

    def __init__(self, nanoseconds: int):
        self.nanoseconds = int(nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: Union[int, float]) -> Duration:
        return cls(_to_nanos(seconds, _NANOS_PER_SECOND))

    @classmethod
    def from_minutes(cls, minutes: Union[int, float]) -> Duration:
        return cls(_to_nanos(minutes, _NANOS_PER_MINUTE))

    @classmethod
    def from_hours(cls, hours: Union[int, float]) -> Duration:
        return cls(_to_nanos(hours, _NANOS_PER_HOUR))

    def to_seconds(self) -> float:
        return self.nanoseconds / _NANOS_PER_SECOND

    def to_minutes(self) -> float:
        return self.nanoseconds / _NANOS_PER_MINUTE

    def __add__(self, other):
        if isinstance(other, Duration):
            return Duration(self.nanoseconds + other.nanoseconds)
        if isinstance(other, Instant):
            return Instant(self.nanoseconds + other.nanoseconds)
        return NotImplemented

    def __radd__(self, other):
        # sum() starts from 0
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Duration):
            return Duration(self.nanoseconds - other.nanoseconds)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            if other == 0:
                raise ZeroDivisionError("cannot divide a Duration by zero")
            if isinstance(other, int):
                n, d = self.nanoseconds, other
                if d < 0:
                    n, d = -n, -d
                # Round half up without passing through float.
                return Duration((2 * n + d) // (2 * d))
            return Duration(int(round(self.nanoseconds / other)))
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __hash__(self):
        return hash(("Duration", self.nanoseconds))

    def __repr__(self) -> str:
        return f"Duration({self.to_seconds():.3f}s)"

    def __str__(self) -> str:
        return format_hms(self.nanoseconds)


@total_ordering
class Instant:
    """A point on the simulated clock, measured from midnight."""

    __slots__ = ("nanoseconds",)

    Epoch: Instant

    def __init__(self, nanoseconds: int):
        self.nanoseconds = int(nanoseconds)

    @classmethod
    def from_seconds(cls, seconds: Union[int, float]) -> Instant:
        return cls(_to_nanos(seconds, _NANOS_PER_SECOND))

    @classmethod
    def from_minutes(cls, minutes: Union[int, float]) -> Instant:
        return cls(_to_nanos(minutes, _NANOS_PER_MINUTE))

    @classmethod
    def from_hours(cls, hours: Union[int, float]) -> Instant:
        return cls(_to_nanos(hours, _NANOS_PER_HOUR))

    def to_seconds(self) -> float:
        return self.nanoseconds / _NANOS_PER_SECOND

    def to_minutes(self) -> float:
        return self.nanoseconds / _NANOS_PER_MINUTE

    def __add__(self, other):
        if isinstance(other, Duration):
            return Instant(self.nanoseconds + other.nanoseconds)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Instant):
            return Duration(self.nanoseconds - other.nanoseconds)
        if isinstance(other, Duration):
            return Instant(self.nanoseconds - other.nanoseconds)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __lt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __hash__(self):
        return hash(("Instant", self.nanoseconds))

    def __repr__(self) -> str:
        return f"Instant({format_hms(self.nanoseconds)})"

    def __str__(self) -> str:
        return format_hms(self.nanoseconds)


Instant.Epoch = Instant(0)


def format_hms(nanoseconds: int) -> str:
    """Render a nanosecond count as ``hh:mm:ss`` (truncating sub-seconds)."""
    sign = "-" if nanoseconds < 0 else ""
    total_seconds = abs(nanoseconds) // _NANOS_PER_SECOND
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
