"""Output formatters for current and hourly weather."""

from datetime import datetime

from skycast.ingest.time_filter import local_time, upcoming_hours
from skycast.models.weather import FormattedLine, HourlyEntry, WeatherSnapshot
from skycast.reporting.conditions import classify

DEFAULT_RAIN_THRESHOLD = 50.0


def format_current(snapshot: WeatherSnapshot) -> str:
    """One-line summary, e.g. 'Casablanca, Morocco: 22°C, Partly cloudy ⛅'."""
    location = snapshot.location
    condition = snapshot.current.condition.text.strip()
    return (
        f"{location.name}, {location.country}: "
        f"{snapshot.current.temp_c:.0f}°C, {condition} {classify(condition)}"
    )


def format_hour(hour: HourlyEntry) -> str:
    condition = hour.condition.text.strip()
    return (
        f"{local_time(hour.time_epoch):%H:%M} - {hour.temp_c:.0f}°C, "
        f"{hour.chance_of_rain:.0f}%, {condition} {classify(condition)}"
    )


def format_hourly(
    snapshot: WeatherSnapshot, now: datetime | None = None
) -> list[str]:
    """Lines for the remaining hours of the first forecast day."""
    return [format_hour(h) for h in upcoming_hours(snapshot, now)]


def hourly_lines(
    snapshot: WeatherSnapshot,
    now: datetime | None = None,
    rain_threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> list[FormattedLine]:
    """Like format_hourly, with each line flagged when rain is likely."""
    return [
        FormattedLine(format_hour(h), highlight=h.chance_of_rain >= rain_threshold)
        for h in upcoming_hours(snapshot, now)
    ]
