from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class WeatherEnv(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openweather_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("openweather_api_key", "weather_api_key"),
    )
    skycast_log_level: str = "WARNING"

    @field_validator("openweather_api_key")
    @classmethod
    def _blank_key_is_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
