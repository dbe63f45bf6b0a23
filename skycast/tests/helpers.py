"""Snapshot builders shared by the test modules."""

from datetime import UTC, datetime

from skycast.models.weather import WeatherSnapshot

# 2025-10-18 10:00:00 UTC, the middle hour of the Casablanca fixture.
REFERENCE_EPOCH = 1760781600
REFERENCE_NOW = datetime.fromtimestamp(REFERENCE_EPOCH, UTC)


def make_snapshot(hours: list[dict] | None = None, **overrides) -> WeatherSnapshot:
    """Build a snapshot from plain dicts, the way the API would send it."""
    data = {
        "location": {"name": "Casablanca", "country": "Morocco"},
        "current": {"temp_c": 22.0, "condition": {"text": "Partly cloudy"}},
        "forecast": {"forecastday": [{"hour": hours or []}]},
    }
    data.update(overrides)
    return WeatherSnapshot.model_validate(data)


def make_hour(
    epoch: int, temp_c: float = 15.0, text: str = "Sunny", rain: float = 0
) -> dict:
    return {
        "time_epoch": epoch,
        "temp_c": temp_c,
        "condition": {"text": text, "icon": ""},
        "chance_of_rain": rain,
    }
