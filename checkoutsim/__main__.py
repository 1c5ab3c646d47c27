"""Command line entry point.

    python -m checkoutsim --customers 400 --lines 6 --checkout-time 6.25 --hours 8 --seed 1
"""

from __future__ import annotations

import argparse
from pathlib import Path

from checkoutsim.api import run
from checkoutsim.config import SupermarketConfig
from checkoutsim.core.errors import ConfigurationError
from checkoutsim.logging_config import configure_from_env, enable_console_logging


def build_parser() -> argparse.ArgumentParser:
    defaults = SupermarketConfig()
    parser = argparse.ArgumentParser(prog="checkoutsim", description="Supermarket checkout line simulation")
    parser.add_argument("--customers", type=int, default=defaults.num_customers,
                        help="number of customers (> 0)")
    parser.add_argument("--lines", type=int, default=defaults.num_lines,
                        help="number of checkout lines (1-8)")
    parser.add_argument("--checkout-time", type=float, default=defaults.expected_checkout_minutes,
                        help="expected checkout time in minutes (> 2)")
    parser.add_argument("--hours", type=int, default=defaults.hours_open,
                        help="hours the store is open (1-24)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--csv", type=Path, default=None, help="write per-customer departures to CSV")
    parser.add_argument("--plot-dir", type=Path, default=None, help="save charts into this directory")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        enable_console_logging(level=args.log_level)
    else:
        configure_from_env()

    try:
        config = SupermarketConfig(
            num_customers=args.customers,
            num_lines=args.lines,
            expected_checkout_minutes=args.checkout_time,
            hours_open=args.hours,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    result = run(config, seed=args.seed)
    print(result.summary)
    longest = result.line_depths.longest
    print(
        f"Longest line averaged {longest.time_weighted_mean():.2f} customers, "
        f"{longest.minutes_at_least(5):.0f} min at 5 or more"
    )

    if args.csv is not None:
        args.csv.parent.mkdir(parents=True, exist_ok=True)
        result.departures.to_dataframe().to_csv(args.csv, index=False)
        print(f"\nDepartures written to {args.csv}")

    if args.plot_dir is not None:
        from checkoutsim.analysis import plot_line_depth, plot_service_times

        plot_line_depth(result, args.plot_dir / "line_depth.png")
        plot_service_times(result, args.plot_dir / "service_times.png")
        print(f"Charts saved to {args.plot_dir}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
