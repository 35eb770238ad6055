"""Tests for check_add_time_series and check_time_series_lengths."""

from __future__ import annotations

from datetime import datetime, timedelta

import numpy as np
import pandas as pd
import pytest

from tsparams import (
    CheckConfig,
    Deterministic,
    DeterministicSingleTimeSeries,
    EConflictingInputs,
    EMalformedInput,
    SingleTimeSeries,
    TimeSeriesParameters,
    check_add_time_series,
    check_time_series_lengths,
)

T0 = datetime(2024, 1, 1)
HOUR = timedelta(hours=1)


@pytest.fixture
def params() -> TimeSeriesParameters:
    return TimeSeriesParameters()


class TestSingleTimeSeriesLengths:
    """Shape checks on plain series."""

    def test_valid(self, make_single) -> None:
        check_time_series_lengths(make_single())

    def test_too_short(self, make_single) -> None:
        with pytest.raises(EMalformedInput, match="at least 2"):
            check_time_series_lengths(make_single(n=1))

    def test_min_length_from_config(self, make_single) -> None:
        with pytest.raises(EMalformedInput, match="at least 5"):
            check_time_series_lengths(make_single(n=4), CheckConfig(min_length=5))

    def test_declared_length_mismatch(self, make_single) -> None:
        ts = make_single(n=10)
        bad = SingleTimeSeries(name=ts.name, data=ts.data, resolution=ts.resolution, length=11)
        with pytest.raises(EConflictingInputs, match="length mismatch") as exc_info:
            check_time_series_lengths(bad)
        assert exc_info.value.context["length"] == 10
        assert exc_info.value.context["expected"] == 11

    def test_declared_resolution_mismatch(self, make_single) -> None:
        ts = make_single(n=10)
        bad = SingleTimeSeries(
            name=ts.name, data=ts.data, resolution=2 * HOUR, length=len(ts.data)
        )
        with pytest.raises(EConflictingInputs, match="resolution mismatch"):
            check_time_series_lengths(bad)

    def test_unsupported_type(self) -> None:
        with pytest.raises(TypeError):
            check_time_series_lengths(pd.Series([1.0, 2.0]))  # type: ignore[arg-type]


class TestForecastLengths:
    """Shape checks on forecasts."""

    def test_valid(self, make_forecast) -> None:
        check_time_series_lengths(make_forecast())

    def test_horizon_too_small(self, make_forecast) -> None:
        with pytest.raises(EMalformedInput, match="horizon must be at least 2"):
            check_time_series_lengths(make_forecast(horizon=1))

    def test_every_window_checked(self) -> None:
        """Only the last window is short."""
        data = {T0 + HOUR * i: np.ones(4) for i in range(5)}
        data[T0 + HOUR * 4] = np.ones(3)
        forecast = Deterministic(name="load", data=data, resolution=HOUR)
        with pytest.raises(EConflictingInputs, match="length mismatch") as exc_info:
            check_time_series_lengths(forecast)
        assert exc_info.value.context["length"] == 3
        assert exc_info.value.context["expected"] == 4

    def test_single_time_series_view_with_gap(self) -> None:
        """A missing timestamp shortens the window that spans it."""
        index = pd.date_range(T0, periods=12, freq="h").delete(7)
        ts = SingleTimeSeries(
            name="load",
            data=pd.Series(np.arange(11, dtype=float), index=index),
            resolution=HOUR,
            length=11,
        )
        view = DeterministicSingleTimeSeries.from_single_time_series(ts, 4, 4 * HOUR)
        with pytest.raises(EConflictingInputs, match="length mismatch"):
            check_time_series_lengths(view)


class TestCheckAddPlain:
    """Registry behaviour with plain series."""

    def test_first_series_adopts_resolution(self, params, make_single) -> None:
        check_add_time_series(params, make_single(resolution=HOUR))
        assert params.resolution == HOUR
        assert params.forecast_params.is_uninitialized()

    def test_same_series_twice(self, params, make_single) -> None:
        ts = make_single()
        check_add_time_series(params, ts)
        check_add_time_series(params, ts)
        assert params.resolution == HOUR

    def test_shared_resolution(self, params, make_single) -> None:
        check_add_time_series(params, make_single(name="a"))
        check_add_time_series(params, make_single(name="b", n=48))
        assert params.resolution == HOUR

    def test_different_resolution_rejected(self, params, make_single) -> None:
        check_add_time_series(params, make_single(name="a"))
        check_add_time_series(params, make_single(name="b"))
        with pytest.raises(EConflictingInputs) as exc_info:
            check_add_time_series(params, make_single(name="c", resolution=timedelta(minutes=30)))
        message = str(exc_info.value)
        assert "0:30:00" in message
        assert "1:00:00" in message
        assert params.resolution == HOUR

    def test_malformed_series_leaves_params_untouched(self, params, make_single) -> None:
        with pytest.raises(EMalformedInput):
            check_add_time_series(params, make_single(n=1))
        assert params.is_uninitialized()


class TestCheckAddForecast:
    """Registry behaviour with forecasts."""

    def test_first_forecast_adopts_everything(self, params, make_forecast) -> None:
        check_add_time_series(params, make_forecast(count=3, horizon=4, interval=2 * HOUR))
        assert params.resolution == HOUR
        assert params.forecast_window_count == 3
        assert params.forecast_horizon == 4
        assert params.forecast_interval == 2 * HOUR
        assert params.forecast_initial_timestamp == T0

    def test_same_forecast_twice(self, params, make_forecast) -> None:
        forecast = make_forecast()
        check_add_time_series(params, forecast)
        check_add_time_series(params, forecast)

    def test_plain_then_forecast(self, params, make_single, make_forecast) -> None:
        check_add_time_series(params, make_single())
        assert params.forecast_params.is_uninitialized()
        check_add_time_series(params, make_forecast())
        assert not params.forecast_params.is_uninitialized()

    def test_plain_after_forecast_matching_resolution(
        self, params, make_single, make_forecast
    ) -> None:
        check_add_time_series(params, make_forecast())
        check_add_time_series(params, make_single())
        assert params.forecast_window_count == 3

    def test_plain_after_forecast_different_resolution(
        self, params, make_single, make_forecast
    ) -> None:
        check_add_time_series(params, make_forecast())
        with pytest.raises(EConflictingInputs, match="resolution"):
            check_add_time_series(params, make_single(resolution=timedelta(minutes=15)))

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"count": 4}, "count"),
            ({"horizon": 5}, "horizon"),
            ({"start": T0 + HOUR}, "initial_timestamp"),
            ({"interval": 2 * HOUR}, "interval"),
        ],
    )
    def test_forecast_field_mismatch(self, params, make_forecast, overrides, field) -> None:
        check_add_time_series(params, make_forecast())
        with pytest.raises(EConflictingInputs) as exc_info:
            check_add_time_series(params, make_forecast(name="other", **overrides))
        assert exc_info.value.context["field"] == field
        assert f"forecast {field}" in exc_info.value.message

    def test_count_message_names_both_values(self, params, make_forecast) -> None:
        check_add_time_series(params, make_forecast(count=3))
        with pytest.raises(EConflictingInputs, match="forecast count 5 does not match registry count 3"):
            check_add_time_series(params, make_forecast(count=5))

    def test_bad_window_rejected_before_mutation(self, params) -> None:
        data = {T0: np.ones(4), T0 + HOUR: np.ones(2)}
        forecast = Deterministic(name="load", data=data, resolution=HOUR)
        with pytest.raises(EConflictingInputs):
            check_add_time_series(params, forecast)
        assert params.is_uninitialized()
        assert params.forecast_params.is_uninitialized()

    def test_accepts_parameters(self, params) -> None:
        other = TimeSeriesParameters.from_shape(T0, HOUR, 25, 3, 2 * HOUR)
        check_add_time_series(params, other)
        assert params == other
        assert params.forecast_params is not other.forecast_params


class TestTransactionalAdoption:
    """Partial adoption when a check fails after adopting."""

    def test_strict_leaves_params_unchanged(self, params, make_single, make_forecast) -> None:
        check_add_time_series(params, make_single())
        with pytest.raises(EConflictingInputs, match="resolution"):
            check_add_time_series(params, make_forecast(resolution=timedelta(minutes=30)))
        assert params.resolution == HOUR
        assert params.forecast_params.is_uninitialized()

    def test_compat_keeps_partial_adoption(self, params, make_single, make_forecast) -> None:
        config = CheckConfig.compat()
        check_add_time_series(params, make_single(), config)
        with pytest.raises(EConflictingInputs, match="resolution"):
            check_add_time_series(
                params, make_forecast(resolution=timedelta(minutes=30)), config
            )
        assert params.resolution == HOUR
        assert not params.forecast_params.is_uninitialized()
        assert params.forecast_window_count == 3


class TestCompatConfig:
    def test_interval_not_compared(self, params, make_forecast) -> None:
        config = CheckConfig.compat()
        check_add_time_series(params, make_forecast(interval=HOUR), config)
        check_add_time_series(params, make_forecast(interval=2 * HOUR), config)
        assert params.forecast_interval == HOUR

    def test_plain_after_forecast_rejected(self, params, make_single, make_forecast) -> None:
        config = CheckConfig.compat()
        check_add_time_series(params, make_forecast(), config)
        with pytest.raises(EConflictingInputs, match="forecast parameter mismatch"):
            check_add_time_series(params, make_single(), config)

    def test_plain_before_forecast_allowed(self, params, make_single, make_forecast) -> None:
        config = CheckConfig.compat()
        check_add_time_series(params, make_single(), config)
        check_add_time_series(params, make_forecast(), config)
        assert params.forecast_window_count == 3
