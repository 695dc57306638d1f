from datetime import datetime
from textwrap import dedent

from skycast.state.base import QueryPhase, QueryState
from skycast.weather.formatting import round_half_up
from skycast.weather.views import CurrentConditions, ForecastPoint

# =============================================================================
# Report Formatting Functions
# =============================================================================


def format_weather_report(state: QueryState, today: datetime | None = None) -> str:
    """Format a query state into a readable report."""
    match state.phase:
        case QueryPhase.IDLE:
            return "Enter a city name or use your current location."
        case QueryPhase.LOADING:
            return "Loading weather data..."
        case QueryPhase.ERROR:
            return f"Error: {state.error_message}"

    report = _format_current_section(state.current, today or datetime.now())
    if state.forecast:
        report += _format_forecast_section(state.forecast)
    return report


def _format_long_date(day: datetime) -> str:
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


def _format_current_section(current: CurrentConditions, today: datetime) -> str:
    return dedent(
        f"""
        {current.location_name}, {current.country_code}
        {_format_long_date(today)}
        {current.condition_summary.capitalize()}  {current.observed_temperature_c}°C

           Feels Like: {current.feels_like_c}°C
           Humidity:   {current.humidity_pct}%
           Wind:       {current.wind_speed_kmh} km/h
           Pressure:   {current.pressure_hpa} hPa
        """
    ).strip()


def _format_forecast_line(point: ForecastPoint) -> str:
    return (
        f"   {point.timestamp:%a} {point.timestamp:%b} {point.timestamp.day:>2}: "
        f"{round_half_up(point.temperature_c)}°C ({point.condition_main}) • "
        f"Min {round_half_up(point.min_c)}°C • Max {round_half_up(point.max_c)}°C"
    )


def _format_forecast_section(forecast: list[ForecastPoint]) -> str:
    section = f"\n\n{len(forecast)}-Day Forecast:"
    for point in forecast:
        section += f"\n{_format_forecast_line(point)}"
    return section
