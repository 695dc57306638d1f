"""Tests for the published query state."""

import pytest
from pydantic import ValidationError

from skycast.errors import WeatherErrorKind
from skycast.location import ByName
from skycast.state import QueryPhase, QueryState


class TestQueryState:
    def test_starts_idle_and_empty(self):
        state = QueryState.idle()

        assert state.phase is QueryPhase.IDLE
        assert state.current is None
        assert state.forecast is None
        assert state.error_message is None

    def test_success_requires_current_and_forecast(self, current_conditions):
        with pytest.raises(ValidationError):
            QueryState(phase=QueryPhase.SUCCESS, current=current_conditions)

    def test_success_with_empty_forecast_is_valid(self, current_conditions):
        state = QueryState.success(ByName(city="Paris"), current_conditions, [])

        assert state.forecast == []

    def test_error_cannot_carry_weather(self, current_conditions):
        with pytest.raises(ValidationError):
            QueryState(
                phase=QueryPhase.ERROR,
                current=current_conditions,
                error_kind=WeatherErrorKind.NETWORK_ERROR,
                error_message="Unable to fetch weather data.",
            )

    def test_error_requires_message(self):
        with pytest.raises(ValidationError):
            QueryState(phase=QueryPhase.ERROR, error_kind=WeatherErrorKind.NOT_FOUND)

    def test_loading_carries_nothing(self, current_conditions):
        with pytest.raises(ValidationError):
            QueryState(phase=QueryPhase.LOADING, current=current_conditions)

        assert QueryState.loading().is_loading

    def test_is_immutable(self):
        state = QueryState.idle()

        with pytest.raises(ValidationError):
            state.phase = QueryPhase.LOADING
