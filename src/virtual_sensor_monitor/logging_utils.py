"""Structured logging helpers.

Setting ``VSM_JSON_LOGS=true`` (or passing ``--json-logs``) drops the level
and logger prefix and emits ``log_event`` payloads as JSON strings.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

JSON_LOGS_ENV = "VSM_JSON_LOGS"


def _json_logs_enabled(json_logs: bool | None) -> bool:
    if json_logs is None:
        return os.getenv(JSON_LOGS_ENV, "false").lower() == "true"
    return json_logs


def configure_logging(level: str = "INFO", json_logs: bool | None = None) -> None:
    """Configure global logging. Respects VSM_JSON_LOGS env override."""

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s" if _json_logs_enabled(json_logs) else "%(levelname)s:%(name)s:%(message)s",
    )


def log_event(logger: logging.Logger, event: str, *, json_logs: bool | None = None, **fields: Any) -> None:
    """Emit a structured log event."""

    payload = {"event": event, **fields}
    if _json_logs_enabled(json_logs):
        logger.info(json.dumps(payload))
    else:
        logger.info(payload)
