"""Time utilities for forecast issuance schedules."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timedelta

from tsparams.core.errors import EMalformedInput
from tsparams.core.types import UNINITIALIZED_PERIOD


def get_initial_times(
    initial_timestamp: datetime,
    count: int,
    interval: timedelta,
) -> Iterator[datetime]:
    """Lazily yield the issuance timestamps of a forecast.

    Args:
        initial_timestamp: First issuance
        count: Number of issuances
        interval: Spacing between issuances (zero for a single issuance)

    Raises:
        EMalformedInput: If count is negative, or interval is zero while
            more than one issuance is requested.
    """
    if count < 0:
        raise EMalformedInput(
            f"count must be non-negative, got {count}",
            context={"count": count},
        )
    if interval == UNINITIALIZED_PERIOD and count > 1:
        raise EMalformedInput(
            f"a zero interval allows a single issuance, got count={count}",
            context={"count": count, "interval": str(interval)},
        )
    return _initial_times(initial_timestamp, count, interval)


def _initial_times(
    initial_timestamp: datetime,
    count: int,
    interval: timedelta,
) -> Iterator[datetime]:
    for i in range(count):
        yield initial_timestamp + interval * i


def get_total_period(
    initial_timestamp: datetime,
    count: int,
    interval: timedelta,
    horizon: int,
    resolution: timedelta,
) -> timedelta:
    """Return the span covered by all issuances of a forecast.

    The span runs from the first issuance to the end of the last sample
    period of the last issuance. ``initial_timestamp`` does not change the
    result; it is accepted so callers can pass a full schedule.
    """
    return interval * (count - 1) + resolution * horizon


def compute_forecast_count(
    initial_timestamp: datetime,
    resolution: timedelta,
    length: int,
    horizon: int,
    interval: timedelta,
) -> int:
    """Number of issuances that fit in a series of the given shape.

    The last issuance is the latest one whose horizon still fits in the
    series, snapped back onto the interval grid anchored at
    ``initial_timestamp``. A zero interval always yields 1.

    Examples:
        >>> from datetime import datetime, timedelta
        >>> compute_forecast_count(
        ...     datetime(2024, 1, 1), timedelta(hours=1), 25, 3, timedelta(hours=2)
        ... )
        12
    """
    if interval == UNINITIALIZED_PERIOD:
        return 1

    if resolution <= UNINITIALIZED_PERIOD:
        raise EMalformedInput(
            f"resolution must be positive, got {resolution}",
            context={"resolution": str(resolution)},
        )
    if interval < UNINITIALIZED_PERIOD:
        raise EMalformedInput(
            f"interval must not be negative, got {interval}",
            context={"interval": str(interval)},
        )
    if horizon < 1:
        raise EMalformedInput(
            f"horizon must be at least 1, got {horizon}",
            context={"horizon": horizon},
        )
    if length < horizon:
        raise EMalformedInput(
            f"series length {length} is shorter than horizon {horizon}",
            context={"length": length, "horizon": horizon},
        )

    last_timestamp = initial_timestamp + resolution * (length - 1)
    last_initial_time = last_timestamp - resolution * (horizon - 1)

    # Snap to the interval grid.
    diff = (last_initial_time - initial_timestamp) % interval
    if diff != UNINITIALIZED_PERIOD:
        last_initial_time -= diff

    return int((last_initial_time - initial_timestamp) // interval) + 1


__all__ = [
    "get_initial_times",
    "get_total_period",
    "compute_forecast_count",
]
