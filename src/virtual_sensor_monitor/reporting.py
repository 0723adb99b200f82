"""Summaries and quick-look plots of finished sensor logs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

logger = logging.getLogger(__name__)

TIME_COLUMN = "Time(s)"
TIMESTAMP_COLUMN = "Timestamp"


def load_log(path: str | Path) -> pd.DataFrame:
    """Load a sensor log written by the sampling loop."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    try:
        df = pd.read_csv(path, dtype={TIMESTAMP_COLUMN: str})
    except pd.errors.EmptyDataError as exc:
        raise ValueError(f"Sensor log {path} is empty") from exc

    missing = [c for c in (TIME_COLUMN, TIMESTAMP_COLUMN) if c not in df.columns]
    if missing:
        raise ValueError(f"Sensor log {path} is missing columns: {', '.join(missing)}")
    return df


def sensor_columns(df: pd.DataFrame) -> List[str]:
    return [str(c) for c in df.columns if c not in (TIME_COLUMN, TIMESTAMP_COLUMN)]


def summarize_log(path: str | Path) -> Dict[str, Any]:
    """Compute per-sensor statistics for a sensor log.

    Returns a JSON-serializable mapping with the row count, the elapsed-time
    span, the first and last wall-clock timestamps, and min/max/mean/std of
    every sensor column.
    """

    df = load_log(path)
    stats: Dict[str, Dict[str, float | None]] = {}
    for column in sensor_columns(df):
        series = pd.to_numeric(df[column], errors="coerce").dropna()
        if series.empty:
            stats[column] = {"min": None, "max": None, "mean": None, "std": None}
            continue
        stats[column] = {
            "min": float(series.min()),
            "max": float(series.max()),
            "mean": float(series.mean()),
            "std": float(series.std(ddof=0)),
        }

    elapsed = pd.to_numeric(df[TIME_COLUMN], errors="coerce").dropna()
    timestamps = df[TIMESTAMP_COLUMN].dropna()
    return {
        "source": str(Path(path)),
        "rows": int(len(df)),
        "sensors": sensor_columns(df),
        "elapsed_s": {
            "start": float(elapsed.iloc[0]) if not elapsed.empty else None,
            "end": float(elapsed.iloc[-1]) if not elapsed.empty else None,
        },
        "timestamps": {
            "first": str(timestamps.iloc[0]) if not timestamps.empty else None,
            "last": str(timestamps.iloc[-1]) if not timestamps.empty else None,
        },
        "stats": stats,
    }


def plot_log(path: str | Path, output_path: str | Path | None = None) -> Path:
    """Render one subplot per sensor column against elapsed time."""

    import matplotlib.pyplot as plt  # imported lazily to avoid heavy startup

    df = load_log(path)
    columns = sensor_columns(df)
    if not columns:
        raise ValueError(f"Sensor log {path} has no sensor columns to plot")

    fig, axes = plt.subplots(len(columns), 1, figsize=(10, 2.5 * len(columns)), sharex=True, squeeze=False)
    for ax, column in zip(axes[:, 0], columns):
        ax.plot(df[TIME_COLUMN], df[column], marker="o", markersize=3, color="#1f77b4")
        ax.set_ylabel(column)
        ax.grid(True, linestyle="--", alpha=0.5)
    axes[-1, 0].set_xlabel(TIME_COLUMN)
    first = df[TIMESTAMP_COLUMN].iloc[0] if len(df) else "--:--:--"
    axes[0, 0].set_title(f"Sensor log {Path(path).name} (start {first})")

    output = Path(output_path) if output_path else Path(path).with_suffix(".png")
    fig.tight_layout()
    fig.savefig(output)
    plt.close(fig)
    logger.info("Wrote plot for %d sensor(s) to %s", len(columns), output)
    return output
