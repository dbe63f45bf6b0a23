"""HTTP service: current weather for a city as JSON."""

import logging
import os
from collections.abc import Iterator
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.responses import PlainTextResponse

from skycast.config.defaults import CONFIG_ENV_VAR
from skycast.config.loader import load_config
from skycast.config.schema import SkycastConfig
from skycast.ingest.errors import WeatherError
from skycast.ingest.weather_client import WeatherClient
from skycast.reporting.formatters import format_current

logger = logging.getLogger(__name__)

app = FastAPI(title="skycast", version="0.1.0")


@lru_cache(maxsize=1)
def get_config() -> SkycastConfig:
    return load_config(os.environ.get(CONFIG_ENV_VAR))


def get_weather_client(
    config: SkycastConfig = Depends(get_config),
) -> Iterator[WeatherClient]:
    client = WeatherClient(
        config.api.api_key,
        base_url=config.api.base_url,
        timeout=config.api.timeout_seconds,
    )
    try:
        yield client
    finally:
        client.close()


@app.get("/weather")
def get_weather(
    city: str | None = None,
    config: SkycastConfig = Depends(get_config),
    client: WeatherClient = Depends(get_weather_client),
):
    """Current conditions line for ``city`` (configured default if omitted)."""
    city = city or config.display.default_city
    try:
        snapshot = client.fetch(city)
    except WeatherError as e:
        logger.warning("Weather lookup failed for city=%s: %s", city, e)
        return PlainTextResponse(f"Error fetching weather: {e}", status_code=500)
    return {"weather": format_current(snapshot)}


@app.get("/health")
def get_health():
    return {"status": "ok"}


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = get_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
