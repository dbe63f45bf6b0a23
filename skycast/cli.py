"""CLI entry point: print current weather and today's remaining hours."""

import argparse
import logging
import os
import sys

from skycast.config.defaults import CONFIG_ENV_VAR
from skycast.config.loader import load_config
from skycast.config.schema import ColorMode
from skycast.ingest.errors import WeatherError
from skycast.ingest.weather_client import WeatherClient
from skycast.models.common import utc_now
from skycast.reporting.presenter import present_report

logger = logging.getLogger(__name__)

_COLOR = {ColorMode.AUTO: None, ColorMode.ALWAYS: True, ColorMode.NEVER: False}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="skycast",
        description="Current weather and hourly forecast for a city",
    )
    parser.add_argument(
        "city", nargs="?", default=None, help="City name (default from config)"
    )
    parser.add_argument(
        "--config",
        default=os.environ.get(CONFIG_ENV_VAR),
        help="Config YAML path",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Never highlight rainy hours"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="More log output"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=[logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    city = args.city or config.display.default_city
    color = False if args.no_color else _COLOR[config.display.color]

    logger.info("Fetching forecast for %s", city)
    client = WeatherClient(
        config.api.api_key,
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
    )
    with client:
        try:
            snapshot = client.fetch(city)
        except WeatherError as e:
            print(f"Error: {e}")
            return 1

    present_report(
        sys.stdout,
        snapshot,
        now=utc_now(),
        color=color,
        rain_threshold=config.display.rain_highlight_threshold,
    )
    return 0


def run() -> None:
    sys.exit(main())
