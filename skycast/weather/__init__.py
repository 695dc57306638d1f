"""Weather module for fetching, reducing and formatting weather data."""

from .client import WeatherClient
from .reducer import ForecastReducer, reduce_forecast
from .views import CurrentConditions, DailyForecast, ForecastPoint

__all__ = [
    "CurrentConditions",
    "DailyForecast",
    "ForecastPoint",
    "ForecastReducer",
    "WeatherClient",
    "reduce_forecast",
]
