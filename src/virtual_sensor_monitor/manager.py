"""Ownership collection over sensors with bulk read and label listing."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Sequence, Tuple

from .sensors import Sensor, build_sensors

logger = logging.getLogger(__name__)


class SensorManager:
    """Owns sensors in registration order.

    Every accessor returns one element per sensor, and index ``i`` always
    refers to the ``i``-th sensor added. Individual sensors are not handed
    back out.
    """

    def __init__(self) -> None:
        self._sensors: List[Sensor] = []

    def __len__(self) -> int:
        return len(self._sensors)

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors.append(sensor)
        logger.debug("Registered sensor %d: %s", len(self._sensors) - 1, sensor.get_type())

    def read_all(self) -> List[float]:
        return [sensor.read_value() for sensor in self._sensors]

    def get_sensor_types(self) -> List[str]:
        return [sensor.get_type() for sensor in self._sensors]

    def read_labeled(self) -> List[Tuple[str, float]]:
        """Read every sensor once, pairing each value with its label."""

        return [(sensor.get_type(), sensor.read_value()) for sensor in self._sensors]

    def header_labels(self) -> List[str]:
        return [sensor.header_label() for sensor in self._sensors]

    def describe(self) -> List[Mapping[str, Any]]:
        return [sensor.describe() for sensor in self._sensors]


def build_manager(kinds: Sequence[str], seed: int | None = None) -> SensorManager:
    """Create a manager holding one sensor per kind, in the given order."""

    manager = SensorManager()
    for sensor in build_sensors(kinds, seed=seed):
        manager.add_sensor(sensor)
    return manager
