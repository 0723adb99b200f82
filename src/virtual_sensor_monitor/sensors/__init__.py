"""Sensor abstractions, including virtual sensors for offline runs."""

from .base import Sensor
from .simulated_sensor import (
    SENSOR_TYPES,
    PressureSensor,
    TemperatureSensor,
    UniformSensor,
    build_sensor,
    build_sensors,
)

__all__ = [
    "Sensor",
    "UniformSensor",
    "TemperatureSensor",
    "PressureSensor",
    "SENSOR_TYPES",
    "build_sensor",
    "build_sensors",
]
