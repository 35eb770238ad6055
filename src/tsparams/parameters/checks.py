"""Consistency checks run when a series is added to a registry.

The first series adopted by a registry fixes its resolution; the first
forecast fixes its forecast schedule. Every later series must agree with
both, otherwise ``EConflictingInputs`` is raised and nothing is added.
"""

from __future__ import annotations

import logging

from tsparams.core.config import DEFAULT_CONFIG, CheckConfig
from tsparams.core.errors import EConflictingInputs, EMalformedInput
from tsparams.parameters.time_series import TimeSeriesParameters
from tsparams.series import Forecast, SingleTimeSeries, TimeSeriesData

logger = logging.getLogger(__name__)


def check_add_time_series(
    params: TimeSeriesParameters,
    other: TimeSeriesData | TimeSeriesParameters,
    config: CheckConfig | None = None,
) -> None:
    """Check that a series fits a registry and adopt its parameters if first.

    Args:
        params: Registry parameters, updated in place
        other: A series, or parameters already derived from one
        config: Check settings (defaults to ``CheckConfig.strict()``)

    Raises:
        EMalformedInput: If a series fails its own shape checks.
        EConflictingInputs: If the series disagrees with ``params``.
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(other, TimeSeriesParameters):
        check_time_series_lengths(other, config)
        other = TimeSeriesParameters.from_time_series(other)

    target = params.model_copy(deep=True) if config.transactional else params
    _adopt(target, other)
    _check_time_series(target, other, config)

    if target is not params:
        params.resolution = target.resolution
        params.forecast_params.adopt(target.forecast_params)


def _adopt(params: TimeSeriesParameters, other: TimeSeriesParameters) -> None:
    if params.is_uninitialized():
        # First time series added.
        params.resolution = other.resolution
        logger.debug("Adopted resolution %s", other.resolution)

    if (
        not other.forecast_params.is_uninitialized()
        and params.forecast_params.is_uninitialized()
    ):
        params.forecast_params.adopt(other.forecast_params)
        logger.debug(
            "Adopted forecast parameters: horizon=%s initial_timestamp=%s interval=%s count=%s",
            other.forecast_horizon,
            other.forecast_initial_timestamp,
            other.forecast_interval,
            other.forecast_window_count,
        )


def _check_time_series(
    params: TimeSeriesParameters,
    other: TimeSeriesParameters,
    config: CheckConfig,
) -> None:
    if other.resolution != params.resolution:
        raise EConflictingInputs(
            f"time series resolution {other.resolution} does not match "
            f"registry resolution {params.resolution}",
            context={
                "resolution": str(other.resolution),
                "expected": str(params.resolution),
            },
        )
    _check_forecast_params(params, other, config)


def _check_forecast_params(
    ts_params: TimeSeriesParameters,
    ts_other: TimeSeriesParameters,
    config: CheckConfig,
) -> None:
    params = ts_params.forecast_params
    other = ts_other.forecast_params
    if other.is_uninitialized() and not config.match_forecast_status:
        # Plain series only need a matching resolution.
        return
    if params.is_uninitialized() != other.is_uninitialized():
        raise EConflictingInputs(
            f"forecast parameter mismatch: time series has forecast parameters="
            f"{not other.is_uninitialized()}, registry has forecast parameters="
            f"{not params.is_uninitialized()}",
            context={
                "has_forecast": not other.is_uninitialized(),
                "expected": not params.is_uninitialized(),
            },
        )
    if params.is_uninitialized():
        return

    fields = ["count", "horizon", "initial_timestamp"]
    if config.compare_interval:
        fields.append("interval")
    for name in fields:
        value = getattr(other, name)
        expected = getattr(params, name)
        if value != expected:
            raise EConflictingInputs(
                f"forecast {name} {value} does not match registry {name} {expected}",
                context={"field": name, name: str(value), "expected": str(expected)},
            )


def check_time_series_lengths(
    ts: TimeSeriesData,
    config: CheckConfig | None = None,
) -> None:
    """Validate the shape of a single series before it is checked.

    Every forecast window is inspected.

    Raises:
        EMalformedInput: If a plain series is too short or a forecast
            horizon is too small.
        EConflictingInputs: If stored and declared length, resolution or
            window length disagree.
        TypeError: If ``ts`` is not a supported series type.
    """
    config = config or DEFAULT_CONFIG
    if isinstance(ts, SingleTimeSeries):
        _check_single_time_series(ts, config)
    elif isinstance(ts, Forecast):
        _check_forecast(ts, config)
    else:
        raise TypeError(f"unsupported time series type: {type(ts).__name__}")


def _check_single_time_series(ts: SingleTimeSeries, config: CheckConfig) -> None:
    data = ts.data
    if len(data) < config.min_length:
        raise EMalformedInput(
            f"data array length must be at least {config.min_length}: {len(data)}",
            context={"name": ts.name, "length": len(data)},
        )
    if len(data) != ts.length:
        raise EConflictingInputs(
            f"length mismatch: data has {len(data)} points, series declares {ts.length}",
            context={"name": ts.name, "length": len(data), "expected": ts.length},
        )

    timestamps = data.index
    difft = timestamps[1] - timestamps[0]
    if difft != ts.resolution:
        raise EConflictingInputs(
            f"resolution mismatch: data spacing {difft}, series declares {ts.resolution}",
            context={
                "name": ts.name,
                "resolution": str(difft),
                "expected": str(ts.resolution),
            },
        )


def _check_forecast(ts: Forecast, config: CheckConfig) -> None:
    horizon = ts.horizon
    if horizon < config.min_horizon:
        raise EMalformedInput(
            f"horizon must be at least {config.min_horizon}: {horizon}",
            context={"name": ts.name, "horizon": horizon},
        )
    for window in ts.iterate_windows():
        if window.shape[0] != horizon:
            raise EConflictingInputs(
                f"length mismatch: window has {window.shape[0]} points, horizon is {horizon}",
                context={
                    "name": ts.name,
                    "window_start": str(window.index[0]) if len(window) else None,
                    "length": window.shape[0],
                    "expected": horizon,
                },
            )


__all__ = ["check_add_time_series", "check_time_series_lengths"]
