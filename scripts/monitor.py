"""CLI wrapper to run the stock sampling session."""

from __future__ import annotations

import argparse
from pathlib import Path

from virtual_sensor_monitor import MonitorConfig, run_monitor


def main() -> None:
    parser = argparse.ArgumentParser(description="Sample simulated temperature and pressure sensors")
    parser.add_argument("--output", type=Path, default=Path("sensor_data.csv"), help="CSV log destination")
    args = parser.parse_args()

    records = run_monitor(MonitorConfig(output=str(args.output)))
    print(f"Wrote {len(records)} samples to {args.output}")


if __name__ == "__main__":
    main()
