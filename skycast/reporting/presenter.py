"""Write formatted forecast lines to a text sink, highlighting rainy hours."""

from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from rich.console import Console
from rich.text import Text

from skycast.ingest.time_filter import upcoming_hours
from skycast.models.common import utc_now
from skycast.models.weather import FormattedLine, WeatherSnapshot
from skycast.reporting.formatters import (
    DEFAULT_RAIN_THRESHOLD,
    format_current,
    hourly_lines,
)

HIGHLIGHT_STYLE = "red"


def make_console(sink: TextIO, color: bool | None = None) -> Console:
    """Console bound to ``sink``.

    ``color=None`` colors only when the sink is a terminal.
    """
    return Console(
        file=sink,
        force_terminal=color,
        color_system=None if color is False else ("standard" if color else "auto"),
        no_color=False if color else None,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def write_lines(
    sink: TextIO, lines: Iterable[FormattedLine], color: bool | None = None
) -> None:
    """One line each; highlighted lines are printed in red."""
    console = make_console(sink, color)
    for line in lines:
        style = HIGHLIGHT_STYLE if line.highlight else ""
        console.print(Text(line.text, style=style))


def present(
    sink: TextIO,
    lines: list[str],
    snapshot: WeatherSnapshot,
    now: datetime | None = None,
    color: bool | None = None,
    rain_threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> None:
    """Write hourly ``lines`` one per line.

    Lines are matched index-by-index to the snapshot's upcoming hours using
    the same ``now`` the formatter used; a line whose hour has a chance of
    rain at or above ``rain_threshold`` is printed in red.
    """
    if not snapshot.forecast.forecastday:
        return
    if now is None:
        now = utc_now()

    write_lines(
        sink,
        (
            FormattedLine(line, highlight=hour.chance_of_rain >= rain_threshold)
            for line, hour in zip(lines, upcoming_hours(snapshot, now))
        ),
        color,
    )


def present_report(
    sink: TextIO,
    snapshot: WeatherSnapshot,
    now: datetime | None = None,
    color: bool | None = None,
    rain_threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> None:
    """Current conditions, a blank line, then the hourly forecast."""
    if now is None:
        now = utc_now()
    sink.write(format_current(snapshot) + "\n\n")
    write_lines(sink, hourly_lines(snapshot, now, rain_threshold), color)
