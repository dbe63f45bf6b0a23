"""WeatherAPI.com forecast client. One request, one attempt."""

import logging

import httpx
from pydantic import ValidationError

from skycast.ingest.errors import (
    APIStatusError,
    DecodeError,
    NetworkError,
    ResponseReadError,
)
from skycast.models.weather import ForecastQuery, WeatherSnapshot

logger = logging.getLogger(__name__)

WEATHERAPI_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_TIMEOUT = 10.0


class WeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = WEATHERAPI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = http_client is None
        self.http = http_client or httpx.Client(timeout=timeout)

    def fetch(self, city: str) -> WeatherSnapshot:
        """Fetch today's forecast for a city.

        Raises NetworkError, APIStatusError, ResponseReadError or
        DecodeError; never returns a partial snapshot.
        """
        url = f"{self.base_url}/forecast.json"
        query = ForecastQuery(city=city, api_key=self.api_key)
        request = self.http.build_request(
            "GET", url, params=query.params(), timeout=self.timeout
        )

        try:
            resp = self.http.send(request, stream=True)
        except httpx.RequestError as e:
            logger.error("Weather API request failed for city=%s: %s", city, e)
            raise NetworkError(f"failed to fetch weather data: {e}") from e

        try:
            if resp.status_code != 200:
                logger.error(
                    "Weather API returned %d for city=%s", resp.status_code, city
                )
                raise APIStatusError(resp.status_code, city)
            try:
                body = resp.read()
            except (httpx.RequestError, httpx.StreamError) as e:
                logger.error(
                    "Failed reading weather response for city=%s: %s", city, e
                )
                raise ResponseReadError(f"failed to read response body: {e}") from e
        finally:
            resp.close()

        try:
            snapshot = WeatherSnapshot.model_validate_json(body)
        except ValidationError as e:
            logger.error("Weather API sent an undecodable body for city=%s", city)
            raise DecodeError(f"failed to parse weather data: {e}") from e

        logger.debug(
            "Fetched %s, %s with %d hourly entries",
            snapshot.location.name, snapshot.location.country, len(snapshot.hours),
        )
        return snapshot

    def close(self) -> None:
        if self._owns_client:
            self.http.close()

    def __enter__(self) -> "WeatherClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
