from pydantic import ValidationError

from skycast.errors import (
    InvalidInputError,
    PositioningUnavailableError,
    WeatherQueryError,
)
from skycast.location.positioning import PositionProvider
from skycast.location.views import ByCoordinates, ByName, LocationQuery
from skycast.shared.logging_mixin import LoggingMixin


class LocationResolver(LoggingMixin):
    """Turns a city name, a coordinate pair or the device position into a LocationQuery"""

    def resolve(
        self, value: str | tuple[float, float] | LocationQuery
    ) -> LocationQuery:
        if isinstance(value, (ByName, ByCoordinates)):
            return value

        if isinstance(value, str):
            if not value.strip():
                raise InvalidInputError("City name is empty")
            return ByName(city=value)

        if isinstance(value, tuple) and len(value) == 2:
            lat, lon = value
            try:
                return ByCoordinates(lat=lat, lon=lon)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid coordinates: {lat}, {lon}") from e

        raise InvalidInputError(f"Unsupported location input: {value!r}")

    async def locate(self, provider: PositionProvider | None) -> ByCoordinates:
        """Ask the host positioning capability for the device coordinates."""
        if provider is None:
            raise PositioningUnavailableError("No positioning capability available")

        try:
            position = await provider.current_position()
        except WeatherQueryError:
            raise
        except ValidationError as e:
            raise PositioningUnavailableError(
                "Positioning returned invalid coordinates"
            ) from e

        self.logger.debug("Device position resolved to %s", position.describe())
        return position
