from datetime import date, time

from skycast.weather.views import DailyForecast, ForecastPoint

MIDDAY = time(12, 0, 0)


def is_midday(point: ForecastPoint) -> bool:
    """True when the sample sits exactly on 12:00:00."""
    return point.timestamp.time() == MIDDAY


def reduce_forecast(points: list[ForecastPoint]) -> DailyForecast:
    """
    Collapse a 3-hourly forecast series to one midday sample per calendar date.

    Dates without a 12:00:00 sample are skipped; nothing is interpolated or
    averaged. Output is ascending by timestamp, and reducing an already
    reduced series returns it unchanged.
    """
    seen_dates: set[date] = set()
    daily: DailyForecast = []

    for point in sorted(points, key=lambda p: p.timestamp):
        if not is_midday(point):
            continue
        day = point.timestamp.date()
        if day in seen_dates:
            continue
        seen_dates.add(day)
        daily.append(point)

    return daily


class ForecastReducer:
    """Object form of reduce_forecast, for callers that inject collaborators."""

    def reduce(self, points: list[ForecastPoint]) -> DailyForecast:
        return reduce_forecast(points)
