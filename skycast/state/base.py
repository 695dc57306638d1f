"""
Query state published to renderers - phase enum and immutable state value
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from skycast.errors import WeatherErrorKind
from skycast.location.views import LocationQuery
from skycast.weather.views import CurrentConditions, ForecastPoint


class QueryPhase(Enum):
    """Enum for the phases of a weather query"""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


class QueryState(BaseModel):
    """Snapshot of the query lifecycle. Replaced, never mutated, on each transition."""

    model_config = ConfigDict(frozen=True)

    phase: QueryPhase = QueryPhase.IDLE
    query: LocationQuery | None = None
    current: CurrentConditions | None = None
    forecast: list[ForecastPoint] | None = None
    error_kind: WeatherErrorKind | None = None
    error_message: str | None = None

    @model_validator(mode="after")
    def _check_phase_fields(self) -> QueryState:
        has_weather = self.current is not None or self.forecast is not None
        match self.phase:
            case QueryPhase.SUCCESS:
                if self.current is None or self.forecast is None:
                    raise ValueError("Success requires both current and forecast")
                if self.error_message is not None:
                    raise ValueError("Success must not carry an error message")
            case QueryPhase.ERROR:
                if not self.error_message:
                    raise ValueError("Error requires an error message")
                if has_weather:
                    raise ValueError("Error must not carry weather data")
            case _:
                if has_weather or self.error_message is not None:
                    raise ValueError(f"{self.phase} must not carry results")
        return self

    @classmethod
    def idle(cls) -> QueryState:
        return cls()

    @classmethod
    def loading(cls, query: LocationQuery | None = None) -> QueryState:
        return cls(phase=QueryPhase.LOADING, query=query)

    @classmethod
    def success(
        cls,
        query: LocationQuery,
        current: CurrentConditions,
        forecast: list[ForecastPoint],
    ) -> QueryState:
        return cls(
            phase=QueryPhase.SUCCESS, query=query, current=current, forecast=forecast
        )

    @classmethod
    def error(
        cls,
        kind: WeatherErrorKind,
        message: str,
        query: LocationQuery | None = None,
    ) -> QueryState:
        return cls(
            phase=QueryPhase.ERROR, query=query, error_kind=kind, error_message=message
        )

    @property
    def is_loading(self) -> bool:
        return self.phase is QueryPhase.LOADING
