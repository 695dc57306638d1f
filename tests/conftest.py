"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from skycast.controller import QueryController
from skycast.weather import WeatherClient
from skycast.weather.views import CurrentConditions, ForecastPoint


def build_forecast_payload(
    days: int = 5, start: date = date(2024, 5, 1), step_hours: int = 3
) -> dict:
    """Forecast endpoint payload with samples every `step_hours` across `days` days."""
    entries = []
    moment = datetime.combine(start, datetime.min.time())
    end = moment + timedelta(days=days)
    while moment < end:
        entries.append(
            {
                "dt": int(moment.timestamp()),
                "dt_txt": moment.strftime("%Y-%m-%d %H:%M:%S"),
                "main": {
                    "temp": 10.0 + moment.hour / 2,
                    "feels_like": 9.0,
                    "temp_min": 8.4,
                    "temp_max": 16.6,
                    "humidity": 70,
                    "pressure": 1010,
                },
                "weather": [
                    {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
                ],
                "wind": {"speed": 2.5},
            }
        )
        moment += timedelta(hours=step_hours)

    return {"cod": "200", "message": 0, "cnt": len(entries), "list": entries}


def make_response(payload, status: int = 200) -> MagicMock:
    response = MagicMock()
    response.status = status
    if isinstance(payload, BaseException):
        response.json = AsyncMock(side_effect=payload)
    else:
        response.json = AsyncMock(return_value=payload)
    return response


def make_session(*responses) -> MagicMock:
    """
    Fake aiohttp session; each `get` consumes the next item.

    Items are payloads, MagicMock responses, or exceptions raised by `get`.
    """
    side_effects = []
    for item in responses:
        if isinstance(item, BaseException):
            side_effects.append(item)
            continue
        response = item if isinstance(item, MagicMock) else make_response(item)
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        context.__aexit__ = AsyncMock(return_value=False)
        side_effects.append(context)

    session = MagicMock()
    session.get = MagicMock(side_effect=side_effects)
    return session


@pytest.fixture
def paris_current_payload() -> dict:
    return {
        "cod": 200,
        "name": "Paris",
        "sys": {"country": "FR"},
        "main": {"temp": 15.2, "feels_like": 14.8, "humidity": 60, "pressure": 1012},
        "weather": [{"description": "clear sky", "icon": "01d"}],
        "wind": {"speed": 3.0},
    }


@pytest.fixture
def forecast_payload() -> dict:
    return build_forecast_payload()


@pytest.fixture
def not_found_payload() -> dict:
    return {"cod": "404", "message": "city not found"}


@pytest.fixture
def current_conditions() -> CurrentConditions:
    return CurrentConditions(
        location_name="Paris",
        country_code="FR",
        observed_temperature_c=15,
        feels_like_c=15,
        humidity_pct=60,
        wind_speed_kmh=11,
        pressure_hpa=1012,
        condition_summary="clear sky",
        condition_icon="01d",
    )


@pytest.fixture
def point_factory():
    """Factory for creating forecast points."""

    def create_point(timestamp: str, temperature: float = 12.0, **kwargs) -> ForecastPoint:
        defaults = {
            "timestamp": datetime.fromisoformat(timestamp),
            "temperature_c": temperature,
            "min_c": temperature - 2,
            "max_c": temperature + 2,
            "condition_main": "Clouds",
            "condition_icon": "03d",
        }
        return ForecastPoint(**{**defaults, **kwargs})

    return create_point


@pytest.fixture
def session_client():
    """Factory for a real WeatherClient on top of a fake session."""

    def create_client(*responses, api_key: str | None = "test-key"):
        session = make_session(*responses)
        return WeatherClient(api_key=api_key, session=session), session

    return create_client


@pytest.fixture
def recorded_states():
    return []


@pytest.fixture
def controller_factory(recorded_states):
    """Factory for a QueryController whose published states are recorded."""

    def create_controller(client, **kwargs) -> QueryController:
        controller = QueryController(weather_client=client, **kwargs)
        controller.subscribe(recorded_states.append)
        return controller

    return create_controller
