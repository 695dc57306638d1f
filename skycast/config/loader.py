from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator


class ProviderSettings(BaseModel):
    """Endpoints and request options for the weather provider"""

    base_url: str = "https://api.openweathermap.org/data/2.5"
    current_path: str = "weather"
    forecast_path: str = "forecast"
    units: str = "metric"
    timeout_seconds: float = Field(10.0, gt=0.0)

    @field_validator("units")
    @classmethod
    def _metric_only(cls, value: str) -> str:
        unit = value.strip().lower()
        if unit != "metric":
            raise ValueError(f"Unsupported unit system: {value!r} (only 'metric')")
        return unit

    @property
    def current_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.current_path.lstrip('/')}"

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.forecast_path.lstrip('/')}"


class PositioningSettings(BaseModel):
    """IP based positioning used when the user asks for their own location"""

    enabled: bool = True
    url: str = "https://ipapi.co/json/"
    timeout_seconds: float = Field(5.0, gt=0.0)


class AppConfig(BaseModel):
    """Main application configuration"""

    provider: ProviderSettings = Field(default_factory=ProviderSettings)
    positioning: PositioningSettings = Field(default_factory=PositioningSettings)


def load_config(path: str | Path) -> AppConfig:
    """
    Load and validate hierarchical YAML config.

    Raises:
        FileNotFoundError: if the file does not exist
        RuntimeError: for YAML syntax errors or validation errors
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise RuntimeError(f"Invalid YAML in {p}: {e}") from e

    try:
        return AppConfig.model_validate(raw)
    except ValidationError as e:
        raise RuntimeError(f"Invalid config values in {p}:\n{e}") from e
