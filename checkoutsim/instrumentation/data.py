"""Step-function series of checkout line depths.

A DepthSeries holds one (time, depth) sample per processed event. Between
two samples the depth is constant, so time-weighted figures (average depth,
minutes spent at or above a depth) treat the series as a step function
that holds each value until the next sample. Times are minutes since
midnight.
"""

from __future__ import annotations

import pandas as pd

from checkoutsim.core.temporal import Instant


class DepthSeries:
    """Depth samples in non-decreasing time order."""

    def __init__(self, name: str = "depth") -> None:
        self.name = name
        self._times: list[float] = []
        self._depths: list[int] = []

    def record(self, depth: int, time: Instant) -> None:
        minutes = time.to_minutes()
        if self._times and minutes < self._times[-1]:
            raise ValueError(
                f"{self.name}: sample at {minutes:.4f} min precedes last sample at {self._times[-1]:.4f} min"
            )
        self._times.append(minutes)
        self._depths.append(depth)

    def times(self) -> list[float]:
        return list(self._times)

    def depths(self) -> list[int]:
        return list(self._depths)

    @property
    def samples(self) -> list[tuple[float, int]]:
        return list(zip(self._times, self._depths))

    def window(self, start_min: float, end_min: float) -> DepthSeries:
        """Samples taken in [start_min, end_min)."""
        result = DepthSeries(self.name)
        for t, depth in zip(self._times, self._depths):
            if start_min <= t < end_min:
                result._times.append(t)
                result._depths.append(depth)
        return result

    def peak(self) -> int:
        return max(self._depths, default=0)

    def sample_mean(self) -> float:
        if not self._depths:
            return 0.0
        return sum(self._depths) / len(self._depths)

    def percentile(self, p: float) -> float:
        """Linearly interpolated percentile of the samples, p in [0, 1]."""
        if not self._depths:
            return 0.0
        p = min(max(p, 0.0), 1.0)
        return float(pd.Series(self._depths, dtype=float).quantile(p))

    def time_weighted_mean(self) -> float:
        """Average depth over the span from first to last sample.

        Each depth is held until the next sample. A series spanning no time
        falls back to the last recorded depth.
        """
        if not self._depths:
            return 0.0
        span = self._times[-1] - self._times[0]
        if span <= 0:
            return float(self._depths[-1])
        return self._held().sum() / span

    def minutes_at_least(self, depth: int) -> float:
        """Total minutes the series spent at ``depth`` customers or more."""
        if len(self._depths) < 2:
            return 0.0
        held = self._durations()
        return float(held[pd.Series(self._depths[:-1]) >= depth].sum())

    def _durations(self) -> pd.Series:
        return pd.Series(self._times).diff().shift(-1).iloc[:-1]

    def _held(self) -> pd.Series:
        return self._durations() * pd.Series(self._depths[:-1], dtype=float)

    def to_dataframe(self) -> pd.DataFrame:
        """Samples as a DataFrame with columns ``time_min`` and ``name``."""
        return pd.DataFrame({"time_min": self._times, self.name: self._depths})

    def __len__(self) -> int:
        return len(self._depths)

    def __bool__(self) -> bool:
        return bool(self._depths)
