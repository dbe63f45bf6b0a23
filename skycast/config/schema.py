"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from skycast.config.defaults import DEFAULT_CITY


class ColorMode(StrEnum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.weatherapi.com/v1"
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_city: str = Field(default=DEFAULT_CITY, min_length=1)
    rain_highlight_threshold: float = Field(default=50.0, ge=0.0, le=100.0)
    color: ColorMode = ColorMode.AUTO


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class SkycastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    server: ServerConfig = ServerConfig()
