"""Weather condition -> emoji glyph mapping."""

from types import MappingProxyType

from skycast.models.common import Glyph

SUN = "\u2600\ufe0f"
CLOUD = "\u2601\ufe0f"
CLOUD_WITH_RAIN = "\U0001f327\ufe0f"
SUN_BEHIND_CLOUD = "\u26c5"

DEFAULT_GLYPH: Glyph = CLOUD

CONDITION_GLYPHS: MappingProxyType[str, Glyph] = MappingProxyType({
    "Clear": SUN,
    "Sunny": SUN,
    "Patchy rain": CLOUD_WITH_RAIN,
    "Partly cloudy": SUN_BEHIND_CLOUD,
    "Cloudy": CLOUD,
    "Patchy rain nearby": CLOUD_WITH_RAIN,
    "Rainy": CLOUD_WITH_RAIN,
})


def is_known_condition(condition_text: str) -> bool:
    return condition_text.strip() in CONDITION_GLYPHS


def classify(condition_text: str) -> Glyph:
    """Return the glyph for a condition label.

    Lookup is exact and case-sensitive after trimming whitespace; unknown
    labels get the plain cloud.
    """
    condition_text = condition_text.strip()
    if is_known_condition(condition_text):
        return CONDITION_GLYPHS[condition_text]
    return DEFAULT_GLYPH
