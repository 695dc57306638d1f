import asyncio
from typing import Any

import aiohttp
from pydantic import BaseModel, ValidationError

from skycast.config import ProviderSettings
from skycast.errors import (
    MalformedResponseError,
    MissingCredentialError,
    NetworkError,
    NotFoundError,
    ProviderError,
)
from skycast.location.views import LocationQuery
from skycast.shared.logging_mixin import LoggingMixin
from skycast.weather.formatting import (
    transform_current_response,
    transform_forecast_response,
)
from skycast.weather.views import (
    CurrentConditions,
    ForecastPoint,
    OpenWeatherCurrentResponse,
    OpenWeatherForecastResponse,
)

_SUCCESS_CODE = "200"
_NOT_FOUND_CODE = "404"


class WeatherClient(LoggingMixin):
    """
    Client for the OpenWeather current-weather and 5-day/3-hour forecast endpoints.

    Success is read from the payload's top-level `cod` field, not from the
    HTTP status. Every failure is raised as a classified WeatherQueryError.
    """

    def __init__(
        self,
        api_key: str | None,
        settings: ProviderSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self._api_key = api_key
        self._settings = settings or ProviderSettings()
        self._session = session

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key)

    async def fetch_current(self, query: LocationQuery) -> CurrentConditions:
        data = await self._request(self._settings.current_url, query)
        api_response = self._parse(OpenWeatherCurrentResponse, data, "current weather")
        return transform_current_response(api_response)

    async def fetch_forecast_series(self, query: LocationQuery) -> list[ForecastPoint]:
        data = await self._request(self._settings.forecast_url, query)
        api_response = self._parse(OpenWeatherForecastResponse, data, "forecast")
        return transform_forecast_response(api_response)

    async def _request(self, url: str, query: LocationQuery) -> dict[str, Any]:
        if not self._api_key:
            raise MissingCredentialError("No API key configured for the weather provider")

        params = {
            **query.to_params(),
            "appid": self._api_key,
            "units": self._settings.units,
        }
        self.logger.debug("GET %s for %s", url, query.describe())

        try:
            if self._session is not None:
                data = await self._get_json(self._session, url, params)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._get_json(session, url, params)
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        self._check_status(data, query)
        return data

    async def _get_json(
        self, session: aiohttp.ClientSession, url: str, params: dict[str, str]
    ) -> Any:
        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        async with session.get(url, params=params, timeout=timeout) as response:
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise MalformedResponseError(
                    f"Response from {url} (HTTP {response.status}) is not JSON"
                ) from e

    def _check_status(self, data: Any, query: LocationQuery) -> None:
        if not isinstance(data, dict) or "cod" not in data:
            raise MalformedResponseError("Response has no status code field")

        status = str(data["cod"])
        if status == _SUCCESS_CODE:
            return
        if status == _NOT_FOUND_CODE:
            raise NotFoundError(f"Provider has no location for {query.describe()!r}")

        self.logger.warning(
            "Provider rejected request with status %s: %s", status, data.get("message")
        )
        raise ProviderError(status, str(data.get("message") or ""))

    def _parse(self, model: type[BaseModel], data: dict[str, Any], what: str) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected {what} payload: {e.error_count()} validation error(s)"
            ) from e
