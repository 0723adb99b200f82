"""Virtual Sensor Monitor core package."""

from importlib import metadata

from .config import MonitorConfig, load_monitor_config
from .manager import SensorManager, build_manager
from .reporting import load_log, plot_log, summarize_log
from .sampling import (
    SampleRecord,
    format_console_line,
    format_csv_row,
    format_header,
    run_monitor,
    run_sampling,
)
from .sensors import PressureSensor, Sensor, TemperatureSensor, build_sensor, build_sensors

try:
    __version__ = metadata.version("virtual-sensor-monitor")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.1.0"

__all__ = [
    "Sensor",
    "TemperatureSensor",
    "PressureSensor",
    "build_sensor",
    "build_sensors",
    "SensorManager",
    "build_manager",
    "MonitorConfig",
    "load_monitor_config",
    "SampleRecord",
    "format_header",
    "format_csv_row",
    "format_console_line",
    "run_sampling",
    "run_monitor",
    "load_log",
    "summarize_log",
    "plot_log",
    "__version__",
]
