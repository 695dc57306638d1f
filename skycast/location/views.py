from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ByName(BaseModel):
    """Location given as free-text city name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    city: str

    @field_validator("city")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("City name must not be empty")
        return value

    def to_params(self) -> dict[str, str]:
        return {"q": self.city.strip()}

    def describe(self) -> str:
        return self.city.strip()


class ByCoordinates(BaseModel):
    """Location given as geographic coordinates in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["coordinates"] = "coordinates"
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)

    def to_params(self) -> dict[str, str]:
        return {"lat": str(self.lat), "lon": str(self.lon)}

    def describe(self) -> str:
        return f"{self.lat:.4f}, {self.lon:.4f}"


LocationQuery = ByName | ByCoordinates


# =============================================================================
# API Response Models (ipapi.co)
# =============================================================================


class IpLocation(BaseModel):
    """Pydantic model for IP geolocation data."""

    city: str | None = None
    region: str | None = None
    country: str | None = None
    latitude: float
    longitude: float

    def to_query(self) -> ByCoordinates:
        return ByCoordinates(lat=self.latitude, lon=self.longitude)
