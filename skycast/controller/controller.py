"""
Event-driven controller for the weather query state machine
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from skycast.errors import (
    MissingCredentialError,
    WeatherErrorKind,
    WeatherQueryError,
)
from skycast.events import EventBus, QueryEvent
from skycast.location import LocationQuery, LocationResolver
from skycast.shared.logging_mixin import LoggingMixin
from skycast.state import QueryPhase, QueryState
from skycast.weather import ForecastReducer

if TYPE_CHECKING:
    from skycast.location import PositionProvider
    from skycast.weather import WeatherClient


ERROR_MESSAGES: dict[WeatherErrorKind, str] = {
    WeatherErrorKind.INVALID_INPUT: "Please enter a city name.",
    WeatherErrorKind.MISSING_CREDENTIAL: "Weather service API key is missing.",
    WeatherErrorKind.POSITIONING_UNAVAILABLE: "Geolocation is not supported on this device.",
    WeatherErrorKind.POSITIONING_DENIED: "Location access was denied.",
    WeatherErrorKind.POSITIONING_TIMEOUT: "Timed out while determining your location.",
    WeatherErrorKind.NETWORK_ERROR: "Unable to fetch weather data.",
    WeatherErrorKind.NOT_FOUND: "City not found.",
    WeatherErrorKind.MALFORMED_RESPONSE: "Received an unexpected response from the weather service.",
    WeatherErrorKind.PROVIDER_ERROR: "The weather service rejected the request.",
}


class QueryController(LoggingMixin):
    """
    Owns the single QueryState and drives Idle -> Loading -> Success | Error.

    Only one query runs at a time: a trigger that arrives while Loading is
    rejected and the current state is returned unchanged. Renderers observe
    the state through subscribe() and never mutate it.
    """

    def __init__(
        self,
        weather_client: WeatherClient,
        resolver: LocationResolver | None = None,
        reducer: ForecastReducer | None = None,
        position_provider: PositionProvider | None = None,
        event_bus: EventBus | None = None,
    ):
        self._client = weather_client
        self._resolver = resolver or LocationResolver()
        self._reducer = reducer or ForecastReducer()
        self._position_provider = position_provider
        self.event_bus = event_bus or EventBus()

        self._state = QueryState.idle()

    @property
    def state(self) -> QueryState:
        return self._state

    @property
    def is_busy(self) -> bool:
        """True while a query is in flight; triggers should be disabled."""
        return self._state.phase is QueryPhase.LOADING

    def subscribe(self, callback: Callable) -> None:
        """Register a renderer for every published QueryState."""
        self.event_bus.subscribe(QueryEvent.STATE_CHANGED, callback)

    def unsubscribe(self, callback: Callable) -> None:
        self.event_bus.unsubscribe(QueryEvent.STATE_CHANGED, callback)

    async def search_city(self, city: str) -> QueryState:
        async def resolve() -> LocationQuery:
            return self._resolver.resolve(city)

        return await self._run(resolve)

    async def search_coordinates(self, lat: float, lon: float) -> QueryState:
        async def resolve() -> LocationQuery:
            return self._resolver.resolve((lat, lon))

        return await self._run(resolve)

    async def search_current_location(self) -> QueryState:
        async def resolve() -> LocationQuery:
            self._require_credential()
            return await self._resolver.locate(self._position_provider)

        return await self._run(resolve)

    async def run_query(self, query: LocationQuery) -> QueryState:
        async def resolve() -> LocationQuery:
            return self._resolver.resolve(query)

        return await self._run(resolve)

    async def reset(self) -> QueryState:
        if self.is_busy:
            self.logger.warning("Cannot reset while a query is in flight")
            return self._state

        return await self._transition_to(QueryState.idle(), QueryEvent.QUERY_RESET)

    async def _run(self, resolve: Callable[[], Awaitable[LocationQuery]]) -> QueryState:
        if self.is_busy:
            self.logger.warning("Query already in flight, ignoring new trigger")
            return self._state

        await self._transition_to(QueryState.loading(), QueryEvent.QUERY_STARTED)

        query: LocationQuery | None = None
        try:
            query = await resolve()
            self._require_credential()

            current = await self._client.fetch_current(query)
            series = await self._client.fetch_forecast_series(query)
            forecast = self._reducer.reduce(series)
        except WeatherQueryError as e:
            self.logger.warning("Query failed (%s): %s", e.kind, e.detail or e)
            return await self._fail(e.kind, ERROR_MESSAGES[e.kind], query)
        except Exception:
            self.logger.exception("Unexpected error while running query")
            kind = WeatherErrorKind.NETWORK_ERROR
            return await self._fail(kind, ERROR_MESSAGES[kind], query)

        self.logger.info(
            "Query for %s succeeded with %d forecast day(s)",
            query.describe(),
            len(forecast),
        )
        return await self._transition_to(
            QueryState.success(query, current, forecast), QueryEvent.QUERY_SUCCEEDED
        )

    def _require_credential(self) -> None:
        if not self._client.has_credential:
            raise MissingCredentialError("No API key configured")

    async def _fail(
        self, kind: WeatherErrorKind, message: str, query: LocationQuery | None
    ) -> QueryState:
        return await self._transition_to(
            QueryState.error(kind, message, query), QueryEvent.QUERY_FAILED
        )

    async def _transition_to(self, new_state: QueryState, event: QueryEvent) -> QueryState:
        self.logger.info(
            "Transitioning from %s to %s", self._state.phase, new_state.phase
        )
        self._state = new_state

        await self.event_bus.publish_async(event, new_state)
        await self.event_bus.publish_async(QueryEvent.STATE_CHANGED, new_state)
        # a subscriber may already have started the next query
        return self._state
