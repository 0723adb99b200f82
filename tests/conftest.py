from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

import pytest


@pytest.fixture
def fake_clock() -> Callable[[], datetime]:
    """Wall clock that advances one second per call, starting at 12:00:00."""

    start = datetime(2024, 1, 1, 12, 0, 0)
    ticks = iter(range(10_000))

    def clock() -> datetime:
        return start + timedelta(seconds=next(ticks))

    return clock
