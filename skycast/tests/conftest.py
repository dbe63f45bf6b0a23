"""Shared test fixtures."""

import json
from datetime import datetime
from pathlib import Path

import pytest
import yaml

from helpers import REFERENCE_NOW
from skycast.models.weather import WeatherSnapshot

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def casablanca_payload() -> dict:
    with open(FIXTURE_DIR / "weatherapi_forecast_casablanca.json") as f:
        return json.load(f)


@pytest.fixture
def casablanca(casablanca_payload: dict) -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(casablanca_payload)


@pytest.fixture
def reference_now() -> datetime:
    return REFERENCE_NOW


@pytest.fixture(autouse=True)
def _no_ambient_env(monkeypatch):
    """Keep the caller's shell settings out of config-dependent tests."""
    for var in ("WEATHER_API_KEY", "SKYCAST_CONFIG", "NO_COLOR", "FORCE_COLOR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {
            "base_url": "https://test-weather.example.com/v1",
            "api_key": "file-key",
        },
        "display": {"default_city": "Oran", "color": "never"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
