from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ICON_URL_TEMPLATE = "https://openweathermap.org/img/wn/{icon}@{scale}x.png"

# =============================================================================
# API Response Models (OpenWeather API Mappings)
# =============================================================================


class OpenWeatherCondition(BaseModel):
    """Entry of the `weather` array."""

    main: str = ""
    description: str = ""
    icon: str = ""


class OpenWeatherMain(BaseModel):
    temp: float
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    humidity: float
    pressure: float


class OpenWeatherWind(BaseModel):
    speed: float = 0.0


class OpenWeatherSys(BaseModel):
    country: str = ""


class OpenWeatherCurrentResponse(BaseModel):
    """Direct mapping to the current weather endpoint response."""

    name: str
    sys: OpenWeatherSys = Field(default_factory=OpenWeatherSys)
    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = Field(min_length=1)
    wind: OpenWeatherWind = Field(default_factory=OpenWeatherWind)


class OpenWeatherForecastEntry(BaseModel):
    """One 3-hour sample of the forecast endpoint."""

    dt_txt: datetime
    main: OpenWeatherMain
    weather: list[OpenWeatherCondition] = Field(min_length=1)

    @field_validator("dt_txt", mode="before")
    @classmethod
    def _parse_provider_timestamp(cls, value: Any) -> Any:
        # "2024-05-01 12:00:00", no offset
        if isinstance(value, str):
            return datetime.fromisoformat(value.strip())
        return value


class OpenWeatherForecastResponse(BaseModel):
    """Direct mapping to the 5-day/3-hour forecast endpoint response."""

    entries: list[OpenWeatherForecastEntry] = Field(alias="list")


# =============================================================================
# Domain Models (Business Logic)
# =============================================================================


class CurrentConditions(BaseModel):
    """Current weather snapshot, rounded the way it is displayed."""

    model_config = ConfigDict(frozen=True)

    location_name: str
    country_code: str
    observed_temperature_c: int
    feels_like_c: int
    humidity_pct: int
    wind_speed_kmh: int
    pressure_hpa: int
    condition_summary: str
    condition_icon: str

    @property
    def icon_url(self) -> str:
        return ICON_URL_TEMPLATE.format(icon=self.condition_icon, scale=4)


class ForecastPoint(BaseModel):
    """Single forecast sample."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    temperature_c: float
    min_c: float
    max_c: float
    condition_main: str
    condition_icon: str

    @property
    def icon_url(self) -> str:
        return ICON_URL_TEMPLATE.format(icon=self.condition_icon, scale=2)


DailyForecast = list[ForecastPoint]
