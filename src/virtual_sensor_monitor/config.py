"""Configuration loading and validation for monitor runs."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

from .sensors import SENSOR_TYPES

DEFAULT_OUTPUT_FILE = "sensor_data.csv"
DEFAULT_TOTAL_SAMPLES = 20
DEFAULT_INTERVAL_S = 1.0
DEFAULT_SENSORS = ("temperature", "pressure")


@dataclass
class MonitorConfig:
    """Parameters of a sampling run.

    Defaults reproduce the stock run: twenty samples one second apart from a
    temperature and a pressure sensor, written to ``sensor_data.csv``.
    """

    total_samples: int = DEFAULT_TOTAL_SAMPLES
    interval_s: float = DEFAULT_INTERVAL_S
    output: str = DEFAULT_OUTPUT_FILE
    sensors: List[str] = field(default_factory=lambda: list(DEFAULT_SENSORS))
    seed: int | None = None

    @classmethod
    def from_mapping(cls, cfg: Mapping[str, Any]) -> "MonitorConfig":
        names = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in cfg.items() if k in names}
        if "sensors" in kwargs and isinstance(kwargs["sensors"], str):
            kwargs["sensors"] = [s.strip() for s in kwargs["sensors"].split(",") if s.strip()]
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: str | Path) -> "MonitorConfig":
        raw = Path(path)
        if not raw.exists():
            raise FileNotFoundError(f"Configuration file not found: {raw}")
        text = raw.read_text(encoding="utf-8")
        try:
            cfg = yaml.safe_load(text) if raw.suffix.lower() in {".yml", ".yaml"} else json.loads(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Cannot parse monitor config {raw}: {exc}") from exc
        if cfg is None:
            cfg = {}
        if not isinstance(cfg, Mapping):
            raise ValueError("Monitor config file must contain a mapping/object at the top level")
        return cls.from_mapping(cfg)

    def override(self, **overrides: Any) -> "MonitorConfig":
        """Return a copy with every non-``None`` override applied."""

        data = self.as_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).from_mapping(data)

    def validate(self) -> List[str]:
        errors: List[str] = []
        if isinstance(self.total_samples, bool) or not isinstance(self.total_samples, int):
            errors.append(f"Field 'total_samples' should be of type int (got {type(self.total_samples).__name__})")
        elif self.total_samples < 0:
            errors.append(f"Field 'total_samples' must be >= 0 (got {self.total_samples})")
        if isinstance(self.interval_s, bool) or not isinstance(self.interval_s, (int, float)):
            errors.append(f"Field 'interval_s' should be of type float (got {type(self.interval_s).__name__})")
        elif self.interval_s < 0:
            errors.append(f"Field 'interval_s' must be >= 0 (got {self.interval_s})")
        if not self.output:
            errors.append("Field 'output' must not be empty")
        if not isinstance(self.sensors, (list, tuple)) or not all(isinstance(k, str) for k in self.sensors):
            errors.append(f"Field 'sensors' should be a list of sensor kinds (got {self.sensors!r})")
        elif not self.sensors:
            errors.append("At least one sensor must be configured")
        else:
            for kind in self.sensors:
                if kind.strip().lower() not in SENSOR_TYPES:
                    errors.append(f"Unknown sensor kind '{kind}'")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            errors.append(f"Field 'seed' should be of type int (got {type(self.seed).__name__})")
        return errors

    def ensure_valid(self) -> "MonitorConfig":
        errors = self.validate()
        if errors:
            raise ValueError(errors[0])
        return self

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_monitor_config(path: str | Path | None = None) -> MonitorConfig:
    """Load a config file, or the defaults when no path is given."""

    if path is None:
        return MonitorConfig()
    return MonitorConfig.from_file(path)
