"""Running aggregates over service lengths and line lengths.

ServiceStatistics is folded once per departure (service length) and once
per processed event (line length). ``finalize`` turns the running totals
into a ServiceSummary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from checkoutsim.core.errors import NoDataError
from checkoutsim.core.temporal import Duration


@dataclass(frozen=True)
class ServiceSummary:
    """Final service-time figures for a run."""
    min_service: Duration
    max_service: Duration
    mean_service: Duration
    peak_line_length: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_service_s": self.min_service.to_seconds(),
            "max_service_s": self.max_service.to_seconds(),
            "mean_service_s": self.mean_service.to_seconds(),
            "peak_line_length": self.peak_line_length,
        }


class ServiceStatistics:
    def __init__(self) -> None:
        # None stands in for +infinity / -infinity until the first sample
        self._min: Duration | None = None
        self._max: Duration | None = None
        self._total = Duration(0)
        self.count: int = 0
        self.peak_line_length: int = 0

    @property
    def min_service(self) -> Duration | None:
        return self._min

    @property
    def max_service(self) -> Duration | None:
        return self._max

    @property
    def total_service(self) -> Duration:
        return self._total

    def record_service_time(self, duration: Duration) -> None:
        if self._min is None or duration < self._min:
            self._min = duration
        if self._max is None or duration > self._max:
            self._max = duration
        self._total = self._total + duration
        self.count += 1

    def record_line_length(self, length: int) -> None:
        if length > self.peak_line_length:
            self.peak_line_length = length

    def finalize(self, customer_count: int) -> ServiceSummary:
        """Summarize the samples, averaging over ``customer_count`` customers.

        Raises:
            NoDataError: If customer_count is not positive or nothing was recorded.
        """
        if customer_count <= 0:
            raise NoDataError(f"cannot finalize statistics over {customer_count} customers")
        if self._min is None or self._max is None:
            raise NoDataError("no service times were recorded")
        return ServiceSummary(
            min_service=self._min,
            max_service=self._max,
            mean_service=self._total / customer_count,
            peak_line_length=self.peak_line_length,
        )
