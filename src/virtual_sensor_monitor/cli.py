"""Command line interface for Virtual Sensor Monitor."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Sequence

from . import __version__
from .config import load_monitor_config
from .logging_utils import configure_logging
from .reporting import plot_log, summarize_log
from .sampling import run_monitor

COMMANDS = ("run", "summarize", "plot", "version")


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=Path, help="Path to monitor configuration (YAML or JSON)")
    parser.add_argument("--samples", type=int, help="Number of samples to take (default: 20)")
    parser.add_argument("--interval", type=float, help="Seconds between samples (default: 1.0)")
    parser.add_argument("--output", type=Path, help="CSV log destination (default: sensor_data.csv)")
    parser.add_argument("--seed", type=int, help="Seed for reproducible readings")
    parser.add_argument(
        "--sensor",
        action="append",
        metavar="KIND",
        help="Sensor kind to register (temperature, pressure). Repeat to add several.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vsm",
        description="Sample simulated sensors and log the readings to CSV and the console.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Sample the configured sensors (default command)")
    _add_run_arguments(run)

    summarize = subparsers.add_parser("summarize", help="Summarize a finished sensor log")
    summarize.add_argument("log", type=Path, help="Path to a sensor CSV log")
    summarize.add_argument("--json", action="store_true", help="Emit summary as JSON to stdout")

    plot = subparsers.add_parser("plot", help="Plot a finished sensor log")
    plot.add_argument("log", type=Path, help="Path to a sensor CSV log")
    plot.add_argument("--output", type=Path, help="Optional path for the PNG (default: next to the log)")

    subparsers.add_parser("version", help="Display the installed version")

    return parser


def _run(args: argparse.Namespace) -> None:
    try:
        config = load_monitor_config(args.config).override(
            total_samples=args.samples,
            interval_s=args.interval,
            output=str(args.output) if args.output else None,
            seed=args.seed,
            sensors=args.sensor,
        )
        config.ensure_valid()
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    try:
        run_monitor(config)
    except OSError as exc:
        raise SystemExit(f"Cannot write sensor log {config.output}: {exc}")


def _default_to_run(argv: Sequence[str]) -> list[str]:
    """Insert ``run`` after the global options when no command was given."""

    argv = list(argv)
    idx = 0
    while idx < len(argv):
        if argv[idx] == "--log-level":
            idx += 2
        elif argv[idx] == "--json-logs" or argv[idx].startswith("--log-level="):
            idx += 1
        else:
            break
    if idx < len(argv) and argv[idx] in (*COMMANDS, "-h", "--help"):
        return argv
    return argv[:idx] + ["run"] + argv[idx:]


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(_default_to_run(sys.argv[1:] if argv is None else argv))
    configure_logging(level=args.log_level, json_logs=args.json_logs)

    if args.command == "run":
        _run(args)
    elif args.command == "summarize":
        try:
            summary = summarize_log(args.log)
        except (FileNotFoundError, ValueError) as exc:
            raise SystemExit(str(exc))
        if args.json:
            _print_result(summary, as_json=True)
        else:
            print(f"{summary['rows']} samples from {args.log}")
            for column, stats in summary["stats"].items():
                if stats["mean"] is None:
                    print(f"  {column}: (no readings)")
                    continue
                print(f"  {column}: min={stats['min']:.2f} max={stats['max']:.2f} mean={stats['mean']:.2f}")
    elif args.command == "plot":
        try:
            output = plot_log(args.log, args.output)
        except (FileNotFoundError, ValueError) as exc:
            raise SystemExit(str(exc))
        print(f"Wrote plot to {output}")
    elif args.command == "version":
        print(__version__)


if __name__ == "__main__":
    main()
