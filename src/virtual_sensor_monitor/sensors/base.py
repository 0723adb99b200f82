"""Abstract sensor definitions used by the sensor manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class Sensor(ABC):
    """Base class for pluggable sensors."""

    unit: str = ""

    @abstractmethod
    def read_value(self) -> float:
        """Return one scalar reading."""

    @abstractmethod
    def get_type(self) -> str:
        """Return the human-readable type label."""

    def header_label(self) -> str:
        label = self.get_type()
        return f"{label}({self.unit})" if self.unit else label

    def describe(self) -> Mapping[str, Any]:
        """Return serializable sensor metadata."""

        return {"type": self.get_type(), "unit": self.unit}
