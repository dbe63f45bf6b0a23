"""Drop forecast hours that are already in the past."""

from datetime import UTC, datetime, tzinfo

from skycast.models.common import utc_now
from skycast.models.weather import HourlyEntry, WeatherSnapshot


def local_time(epoch: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch seconds to an aware datetime in ``tz`` (local zone by default)."""
    return datetime.fromtimestamp(epoch, UTC).astimezone(tz)


def is_upcoming(epoch: int, now: datetime) -> bool:
    """True unless the instant is strictly before ``now``.

    Naive ``now`` values are taken as local time.
    """
    if now.tzinfo is None:
        now = now.astimezone()
    return local_time(epoch) >= now


def upcoming_hours(
    snapshot: WeatherSnapshot, now: datetime | None = None
) -> list[HourlyEntry]:
    """First-day hours at or after ``now``, in API order."""
    if now is None:
        now = utc_now()
    return [h for h in snapshot.hours if is_upcoming(h.time_epoch, now)]
