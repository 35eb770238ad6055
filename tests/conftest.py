from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

import numpy as np
import pytest

from tsparams import Deterministic, SingleTimeSeries

T0 = datetime(2024, 1, 1)
HOUR = timedelta(hours=1)


def _make_single(
    name: str = "load",
    n: int = 24,
    resolution: timedelta = HOUR,
    start: datetime = T0,
) -> SingleTimeSeries:
    """Regularly spaced plain series with values 0..n-1."""
    return SingleTimeSeries.from_values(name, np.arange(n, dtype=float), start, resolution)


def _make_forecast(
    name: str = "load",
    count: int = 3,
    horizon: int = 4,
    interval: timedelta = HOUR,
    resolution: timedelta = HOUR,
    start: datetime = T0,
) -> Deterministic:
    """Deterministic forecast with ``count`` equally long windows."""
    data = {
        start + interval * i: np.arange(horizon, dtype=float) + i
        for i in range(count)
    }
    return Deterministic(name=name, data=data, resolution=resolution)


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def make_single() -> Callable[..., SingleTimeSeries]:
    return _make_single


@pytest.fixture
def make_forecast() -> Callable[..., Deterministic]:
    return _make_forecast
