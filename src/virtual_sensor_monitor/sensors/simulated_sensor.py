"""Virtual sensors for running the monitor without hardware."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Type

import numpy as np

from .base import Sensor

SeedLike = int | np.random.SeedSequence | None


@dataclass
class UniformSensor(Sensor):
    """Sensor drawing readings uniformly from ``[low, high)``."""

    low: ClassVar[float] = 0.0
    high: ClassVar[float] = 1.0
    label: ClassVar[str] = "Uniform"

    seed: SeedLike = None
    rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    def read_value(self) -> float:
        value = float(self.rng.uniform(self.low, self.high))
        # uniform() may round up to the open bound
        if value >= self.high:
            value = float(np.nextafter(self.high, self.low))
        return value

    def get_type(self) -> str:
        return self.label

    def describe(self) -> Mapping[str, Any]:
        return {**super().describe(), "low": self.low, "high": self.high}


@dataclass
class TemperatureSensor(UniformSensor):
    low: ClassVar[float] = 20.0
    high: ClassVar[float] = 30.0
    label: ClassVar[str] = "Temperature"
    unit: ClassVar[str] = "C"


@dataclass
class PressureSensor(UniformSensor):
    low: ClassVar[float] = 0.9
    high: ClassVar[float] = 1.1
    label: ClassVar[str] = "Pressure"
    unit: ClassVar[str] = "bar"


SENSOR_TYPES: Dict[str, Type[UniformSensor]] = {
    "temperature": TemperatureSensor,
    "pressure": PressureSensor,
}


def build_sensor(kind: str, seed: SeedLike = None) -> Sensor:
    """Instantiate a sensor by its case-insensitive kind name."""

    try:
        sensor_cls = SENSOR_TYPES[kind.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(SENSOR_TYPES))
        raise ValueError(f"Unknown sensor kind '{kind}' (expected one of: {known})") from None
    return sensor_cls(seed=seed)


def build_sensors(kinds: Iterable[str], seed: int | None = None) -> List[Sensor]:
    """Build several sensors; a seed is split into independent child streams."""

    kinds = list(kinds)
    if seed is None:
        return [build_sensor(kind) for kind in kinds]
    children = np.random.SeedSequence(seed).spawn(len(kinds))
    return [build_sensor(kind, child) for kind, child in zip(kinds, children)]
