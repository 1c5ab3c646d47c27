"""checkoutsim: discrete-event simulation of supermarket checkout lines.

Customers arrive over the store's opening hours, join the shortest of N
checkout lines and are served one at a time from the front. A run reports
the mean, longest and shortest service time and the longest line seen.

    import checkoutsim

    result = checkoutsim.run(checkoutsim.SupermarketConfig(num_lines=4), seed=42)
    print(result.summary)
"""

import logging

# Library default: stay silent unless the application configures logging
logging.getLogger("checkoutsim").addHandler(logging.NullHandler())

# Core must load before config: the engine imports config during core init
from checkoutsim.core import (
    CheckoutSimError,
    ConfigurationError,
    Duration,
    EmptyEventHeapError,
    Event,
    EventHeap,
    EventKind,
    Instant,
    InvariantViolation,
    NoDataError,
    RunState,
    Simulation,
    SimulationSnapshot,
)
from checkoutsim.config import SupermarketConfig
from checkoutsim.components import shortest_line
from checkoutsim.entities import CheckoutLine, Customer
from checkoutsim.instrumentation import (
    DepthSeries,
    DepartureLog,
    LineDepthTracker,
    ServiceStatistics,
    ServiceSummary,
    SimulationSummary,
)
from checkoutsim.load import generate_customers, negative_exponential
from checkoutsim.api import SimulationResult, run
from checkoutsim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)

__version__ = "0.1.0"

__all__ = [
    "CheckoutLine",
    "CheckoutSimError",
    "ConfigurationError",
    "Customer",
    "DepthSeries",
    "DepartureLog",
    "Duration",
    "EmptyEventHeapError",
    "Event",
    "EventHeap",
    "EventKind",
    "Instant",
    "InvariantViolation",
    "LineDepthTracker",
    "NoDataError",
    "RunState",
    "ServiceStatistics",
    "ServiceSummary",
    "Simulation",
    "SimulationResult",
    "SimulationSnapshot",
    "SimulationSummary",
    "SupermarketConfig",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "generate_customers",
    "negative_exponential",
    "run",
    "set_level",
    "set_module_level",
    "shortest_line",
]
