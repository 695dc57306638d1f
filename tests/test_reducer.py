"""Unit tests for the midday forecast reduction."""

from datetime import date, datetime, time

from skycast.weather import ForecastReducer, reduce_forecast
from skycast.weather.formatting import transform_forecast_response
from skycast.weather.views import OpenWeatherForecastResponse
from tests.conftest import build_forecast_payload


def _points(payload):
    return transform_forecast_response(OpenWeatherForecastResponse.model_validate(payload))


class TestReduceForecast:
    def test_one_midday_sample_per_day(self):
        points = _points(build_forecast_payload(days=5))

        daily = reduce_forecast(points)

        assert len(points) == 40
        assert len(daily) == 5
        assert all(p.timestamp.time() == time(12, 0) for p in daily)
        assert [p.timestamp.date() for p in daily] == [
            date(2024, 5, d) for d in range(1, 6)
        ]

    def test_is_idempotent(self):
        daily = reduce_forecast(_points(build_forecast_payload(days=5)))

        assert reduce_forecast(daily) == daily

    def test_preserves_chronological_order_for_unsorted_input(self, point_factory):
        points = [
            point_factory("2024-05-03 12:00:00"),
            point_factory("2024-05-01 12:00:00"),
            point_factory("2024-05-02 12:00:00"),
        ]

        daily = reduce_forecast(points)

        assert [p.timestamp.day for p in daily] == [1, 2, 3]

    def test_days_without_midday_are_skipped(self, point_factory):
        points = [
            point_factory("2024-05-01 09:00:00"),
            point_factory("2024-05-01 15:00:00"),
            point_factory("2024-05-02 12:00:00"),
            point_factory("2024-05-03 12:30:00"),
        ]

        daily = reduce_forecast(points)

        assert daily == [points[2]]

    def test_does_not_average(self, point_factory):
        points = [
            point_factory("2024-05-01 09:00:00", temperature=0.0),
            point_factory("2024-05-01 12:00:00", temperature=20.0),
            point_factory("2024-05-01 15:00:00", temperature=40.0),
        ]

        assert reduce_forecast(points)[0].temperature_c == 20.0

    def test_duplicate_midday_keeps_first(self, point_factory):
        first = point_factory("2024-05-01 12:00:00", temperature=1.0)
        second = point_factory("2024-05-01 12:00:00", temperature=2.0)

        assert reduce_forecast([first, second]) == [first]

    def test_empty_series(self):
        assert reduce_forecast([]) == []

    def test_reducer_object_delegates(self, point_factory):
        points = [point_factory("2024-05-01 12:00:00")]

        assert ForecastReducer().reduce(points) == points

    def test_partial_first_day(self):
        payload = build_forecast_payload(days=5)
        # provider series usually starts mid-day
        payload["list"] = [
            e for e in payload["list"]
            if datetime.fromisoformat(e["dt_txt"]) >= datetime(2024, 5, 1, 15)
        ]

        daily = reduce_forecast(_points(payload))

        assert len(daily) == 4
        assert daily[0].timestamp == datetime(2024, 5, 2, 12)
