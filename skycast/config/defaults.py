"""Fallback values used when nothing else is configured."""

API_KEY_ENV_VAR = "WEATHER_API_KEY"
CONFIG_ENV_VAR = "SKYCAST_CONFIG"

# Demonstration key only; set WEATHER_API_KEY for real use.
DEMO_API_KEY = "94474d04349f43008d395834240102"

DEFAULT_CITY = "Algiers"
