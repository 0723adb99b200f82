"""Fixed-count sampling loop writing to a CSV log and the console."""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Sequence, TextIO, Tuple

from .config import MonitorConfig
from .logging_utils import log_event
from .manager import SensorManager, build_manager

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%H:%M:%S"


@dataclass(frozen=True)
class SampleRecord:
    elapsed_s: float
    timestamp: datetime
    readings: Tuple[Tuple[str, float], ...]

    @property
    def values(self) -> List[float]:
        return [value for _, value in self.readings]


def format_header(labels: Sequence[str]) -> str:
    return ",".join(["Time(s)", "Timestamp", *labels])


def format_csv_row(record: SampleRecord) -> str:
    fields = [f"{record.elapsed_s:.2f}", record.timestamp.strftime(TIMESTAMP_FORMAT)]
    fields.extend(f"{value:.2f}" for value in record.values)
    return ",".join(fields)


def format_console_line(record: SampleRecord) -> str:
    parts = [f"[{record.timestamp.strftime(TIMESTAMP_FORMAT)}] "]
    parts.extend(f"{label}: {value:.2f}  " for label, value in record.readings)
    return "".join(parts)


def take_sample(manager: SensorManager, elapsed_s: float, clock: Callable[[], datetime] = datetime.now) -> SampleRecord:
    readings = tuple(manager.read_labeled())
    return SampleRecord(elapsed_s=elapsed_s, timestamp=clock(), readings=readings)


def run_sampling(
    manager: SensorManager,
    config: MonitorConfig,
    *,
    console: TextIO | None = None,
    clock: Callable[[], datetime] = datetime.now,
    sleep: Callable[[float], None] = time.sleep,
) -> List[SampleRecord]:
    """Sample every sensor ``config.total_samples`` times.

    The output file is opened (and truncated) before the first sample so an
    unwritable destination fails at startup with ``OSError``. Elapsed time is
    nominal (``i * interval_s``), and ``sleep`` is called after every sample.
    """

    console = console if console is not None else sys.stdout
    output = Path(config.output)
    records: List[SampleRecord] = []

    with output.open("w", encoding="utf-8", newline="") as logfile:
        logfile.write(format_header(manager.header_labels()) + "\n")
        print(f"Logging sensor data to {output} ...", file=console)
        log_event(
            logger,
            "sampling_started",
            output=str(output),
            total_samples=config.total_samples,
            interval_s=config.interval_s,
            sensors=manager.get_sensor_types(),
        )

        for idx in range(config.total_samples):
            record = take_sample(manager, idx * config.interval_s, clock)
            logfile.write(format_csv_row(record) + "\n")
            logfile.flush()
            print(format_console_line(record), file=console)
            records.append(record)
            sleep(config.interval_s)

    print(f"Data logging complete. File saved as {output}", file=console)
    log_event(logger, "sampling_complete", output=str(output), samples=len(records))
    return records


def run_monitor(
    config: MonitorConfig,
    *,
    console: TextIO | None = None,
    clock: Callable[[], datetime] = datetime.now,
    sleep: Callable[[float], None] = time.sleep,
) -> List[SampleRecord]:
    """Validate ``config``, build its sensors and run the sampling loop."""

    config.ensure_valid()
    manager = build_manager(config.sensors, seed=config.seed)
    return run_sampling(manager, config, console=console, clock=clock, sleep=sleep)
