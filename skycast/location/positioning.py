import asyncio
from typing import Protocol

import aiohttp
from pydantic import ValidationError

from skycast.config import PositioningSettings
from skycast.errors import (
    PositioningDeniedError,
    PositioningTimeoutError,
    PositioningUnavailableError,
)
from skycast.location.views import ByCoordinates, IpLocation
from skycast.shared.logging_mixin import LoggingMixin

_DENIED_STATUSES = {401, 403, 429}


class PositionProvider(Protocol):
    """Host capability that reports the device position."""

    async def current_position(self) -> ByCoordinates: ...


class IpApiPositionProvider(LoggingMixin):
    """Determines current position via IP geolocation (ipapi.co)."""

    def __init__(
        self,
        settings: PositioningSettings | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self._settings = settings or PositioningSettings()
        self._session = session

    async def current_position(self) -> ByCoordinates:
        timeout = aiohttp.ClientTimeout(total=self._settings.timeout_seconds)
        try:
            if self._session is not None:
                data = await self._fetch(self._session, timeout)
            else:
                async with aiohttp.ClientSession() as session:
                    data = await self._fetch(session, timeout)
        except asyncio.TimeoutError as e:
            raise PositioningTimeoutError("IP geolocation timed out") from e
        except aiohttp.ClientError as e:
            raise PositioningUnavailableError(f"IP geolocation failed: {e}") from e

        if not isinstance(data, dict):
            raise PositioningUnavailableError("IP geolocation returned no object")

        if data.get("error"):
            raise PositioningDeniedError(
                f"IP geolocation refused: {data.get('reason', 'unknown reason')}"
            )

        try:
            location = IpLocation.model_validate(data)
        except ValidationError as e:
            raise PositioningUnavailableError(
                "IP geolocation returned no coordinates"
            ) from e

        try:
            position = location.to_query()
        except ValidationError as e:
            raise PositioningUnavailableError(
                "IP geolocation returned invalid coordinates: "
                f"{location.latitude}, {location.longitude}"
            ) from e

        self.logger.info(
            "Resolved position via IP: %s (%s)", location.city, location.country
        )
        return position

    async def _fetch(
        self, session: aiohttp.ClientSession, timeout: aiohttp.ClientTimeout
    ) -> object:
        async with session.get(self._settings.url, timeout=timeout) as response:
            if response.status in _DENIED_STATUSES:
                raise PositioningDeniedError(
                    f"IP geolocation refused with status {response.status}"
                )
            if response.status != 200:
                raise PositioningUnavailableError(
                    f"IP geolocation failed with status {response.status}"
                )
            try:
                return await response.json(content_type=None)
            except ValueError as e:
                raise PositioningUnavailableError(
                    "IP geolocation returned invalid JSON"
                ) from e
