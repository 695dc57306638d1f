import math

from skycast.weather.views import (
    CurrentConditions,
    ForecastPoint,
    OpenWeatherCurrentResponse,
    OpenWeatherForecastResponse,
)

_MS_TO_KMH = 3.6


def round_half_up(value: float) -> int:
    """Round halves toward +inf: 14.5 -> 15, -2.5 -> -2."""
    return math.floor(value + 0.5)


# =============================================================================
# Transformation Functions
# =============================================================================


def transform_current_response(
    api_current: OpenWeatherCurrentResponse,
) -> CurrentConditions:
    """Transform API current weather to domain model."""
    main = api_current.main
    condition = api_current.weather[0]
    feels_like = main.feels_like if main.feels_like is not None else main.temp

    return CurrentConditions(
        location_name=api_current.name,
        country_code=api_current.sys.country,
        observed_temperature_c=round_half_up(main.temp),
        feels_like_c=round_half_up(feels_like),
        humidity_pct=round_half_up(main.humidity),
        wind_speed_kmh=round_half_up(api_current.wind.speed * _MS_TO_KMH),
        pressure_hpa=round_half_up(main.pressure),
        condition_summary=condition.description,
        condition_icon=condition.icon,
    )


def transform_forecast_response(
    api_forecast: OpenWeatherForecastResponse,
) -> list[ForecastPoint]:
    """Transform API forecast samples to domain models, one per entry."""
    points = []
    for entry in api_forecast.entries:
        main = entry.main
        condition = entry.weather[0]
        points.append(
            ForecastPoint(
                timestamp=entry.dt_txt,
                temperature_c=main.temp,
                min_c=main.temp_min if main.temp_min is not None else main.temp,
                max_c=main.temp_max if main.temp_max is not None else main.temp,
                condition_main=condition.main,
                condition_icon=condition.icon,
            )
        )
    return points
