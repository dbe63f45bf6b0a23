"""Error kinds raised by the weather client.

Every error is terminal for the request that raised it; nothing retries.
"""


class WeatherError(Exception):
    """Base class for all weather fetch failures."""


class NetworkError(WeatherError):
    """Transport-level failure: DNS, connection refused, timeout."""


class APIStatusError(WeatherError):
    def __init__(self, status_code: int, city: str):
        self.status_code = status_code
        self.city = city
        super().__init__(f"API returned status {status_code} for city {city}")


class ResponseReadError(WeatherError, OSError):
    """The response body could not be read."""


class DecodeError(WeatherError):
    """The body was not valid JSON or did not match the forecast schema."""
