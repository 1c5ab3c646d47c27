"""Statistics, collectors and summaries for checkout runs."""

from checkoutsim.instrumentation.collectors import DepartureLog, DepartureRecord, LineDepthTracker
from checkoutsim.instrumentation.data import DepthSeries
from checkoutsim.instrumentation.statistics import ServiceStatistics, ServiceSummary
from checkoutsim.instrumentation.summary import SimulationSummary

__all__ = [
    "DepthSeries",
    "DepartureLog",
    "DepartureRecord",
    "LineDepthTracker",
    "ServiceStatistics",
    "ServiceSummary",
    "SimulationSummary",
]
