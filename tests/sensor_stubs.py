"""Deterministic sensors used by the test suite."""

from __future__ import annotations

from virtual_sensor_monitor.sensors import Sensor


class FixedSensor(Sensor):
    """Returns a constant value and counts its reads."""

    def __init__(self, label: str, value: float, unit: str = "") -> None:
        self.label = label
        self.value = value
        self.unit = unit
        self.reads = 0

    def read_value(self) -> float:
        self.reads += 1
        return self.value

    def get_type(self) -> str:
        return self.label
