from skycast.config import AppConfig, WeatherEnv, load_config
from skycast.controller import QueryController, create_controller
from skycast.errors import WeatherErrorKind, WeatherQueryError
from skycast.events import EventBus, QueryEvent
from skycast.location import ByCoordinates, ByName, LocationQuery, LocationResolver
from skycast.report import format_weather_report
from skycast.state import QueryPhase, QueryState
from skycast.weather import (
    CurrentConditions,
    ForecastPoint,
    ForecastReducer,
    WeatherClient,
    reduce_forecast,
)

__all__ = [
    "AppConfig",
    "ByCoordinates",
    "ByName",
    "CurrentConditions",
    "EventBus",
    "ForecastPoint",
    "ForecastReducer",
    "LocationQuery",
    "LocationResolver",
    "QueryController",
    "QueryEvent",
    "QueryPhase",
    "QueryState",
    "WeatherClient",
    "WeatherEnv",
    "WeatherErrorKind",
    "WeatherQueryError",
    "create_controller",
    "format_weather_report",
    "load_config",
    "reduce_forecast",
]
