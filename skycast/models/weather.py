"""WeatherAPI.com forecast response models.

Upstream fields that are absent decode to zero values; fields with the
wrong type are rejected.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

_FROZEN = ConfigDict(frozen=True, extra="ignore")


@dataclass(frozen=True)
class ForecastQuery:
    city: str
    api_key: str

    def params(self) -> dict[str, str]:
        return {
            "key": self.api_key,
            "q": self.city,
            "days": "1",
            "aqi": "no",
            "alerts": "no",
        }


class Condition(BaseModel):
    model_config = _FROZEN

    text: str = ""
    icon: str = ""


class Location(BaseModel):
    model_config = _FROZEN

    name: str = ""
    country: str = ""


class CurrentConditions(BaseModel):
    model_config = _FROZEN

    temp_c: float = 0.0
    condition: Condition = Condition()


class HourlyEntry(BaseModel):
    model_config = _FROZEN

    time_epoch: int = 0
    temp_c: float = 0.0
    condition: Condition = Condition()
    chance_of_rain: float = 0.0


class ForecastDay(BaseModel):
    model_config = _FROZEN

    hour: tuple[HourlyEntry, ...] = ()


class Forecast(BaseModel):
    model_config = _FROZEN

    forecastday: tuple[ForecastDay, ...] = ()


class WeatherSnapshot(BaseModel):
    model_config = _FROZEN

    location: Location = Location()
    current: CurrentConditions = CurrentConditions()
    forecast: Forecast = Forecast()

    @property
    def hours(self) -> tuple[HourlyEntry, ...]:
        """Hourly entries of the first forecast day, in API order."""
        if not self.forecast.forecastday:
            return ()
        return self.forecast.forecastday[0].hour


@dataclass(frozen=True)
class FormattedLine:
    text: str
    highlight: bool = False
