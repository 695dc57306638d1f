from .env import WeatherEnv
from .loader import (
    AppConfig,
    PositioningSettings,
    ProviderSettings,
    load_config,
)

__all__ = [
    "AppConfig",
    "PositioningSettings",
    "ProviderSettings",
    "WeatherEnv",
    "load_config",
]
