"""YAML config loader with environment overrides."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from skycast.config.defaults import API_KEY_ENV_VAR, DEMO_API_KEY
from skycast.config.schema import SkycastConfig

logger = logging.getLogger(__name__)


def load_config(
    path: str | Path | None = None, env: dict[str, str] | None = None
) -> SkycastConfig:
    """Load and validate config from an optional YAML file.

    WEATHER_API_KEY in the environment overrides the file. If no key is
    configured anywhere, the demo key is used.
    """
    if env is None:
        env = dict(os.environ)

    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    config = SkycastConfig(**raw)

    api_key = env.get(API_KEY_ENV_VAR) or config.api.api_key
    if not api_key:
        logger.warning(
            "%s not set, falling back to the demo API key", API_KEY_ENV_VAR
        )
        api_key = DEMO_API_KEY

    return config.model_copy(
        update={"api": config.api.model_copy(update={"api_key": api_key})}
    )

