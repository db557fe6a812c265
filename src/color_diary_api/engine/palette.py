"""The fixed mood palette and nearest-color classification."""

from typing import NamedTuple

from color_diary_api.core.exceptions import NotFoundError
from color_diary_api.engine.colors import color_distance
from color_diary_api.engine.insights import color_analysis_text, color_suggestions
from color_diary_api.schemas.color import ColorAnalysis, PaletteEntry, RGBColor, Warmth

# Order matters: classification and frequency ties resolve to the earlier entry.
PALETTE: tuple[PaletteEntry, ...] = (
    PaletteEntry(key="red", hex="#FF3B30", mood="energy", intensity=9, warmth=Warmth.WARM),
    PaletteEntry(key="blue", hex="#007AFF", mood="calmness", intensity=4, warmth=Warmth.COOL),
    PaletteEntry(key="yellow", hex="#FFCC00", mood="happiness", intensity=8, warmth=Warmth.WARM),
    PaletteEntry(key="green", hex="#34C759", mood="balance", intensity=5, warmth=Warmth.NEUTRAL),
    PaletteEntry(key="purple", hex="#AF52DE", mood="creativity", intensity=7, warmth=Warmth.COOL),
    PaletteEntry(key="orange", hex="#FF9500", mood="enthusiasm", intensity=8, warmth=Warmth.WARM),
    PaletteEntry(key="pink", hex="#FF2D92", mood="love", intensity=6, warmth=Warmth.WARM),
    PaletteEntry(key="black", hex="#000000", mood="power", intensity=3, warmth=Warmth.NEUTRAL),
    PaletteEntry(key="white", hex="#FFFFFF", mood="purity", intensity=2, warmth=Warmth.NEUTRAL),
    PaletteEntry(key="gray", hex="#8E8E93", mood="neutral", intensity=3, warmth=Warmth.NEUTRAL),
)

PALETTE_KEYS: tuple[str, ...] = tuple(entry.key for entry in PALETTE)
_PALETTE_BY_KEY = {entry.key: entry for entry in PALETTE}
_PALETTE_INDEX = {key: index for index, key in enumerate(PALETTE_KEYS)}


class ColorDescription(NamedTuple):
    analysis: str
    suggestions: list[str]


def get_palette_entry(key: str) -> PaletteEntry:
    """Look up a palette color by key."""
    try:
        return _PALETTE_BY_KEY[key]
    except KeyError:
        raise NotFoundError("Palette color", key) from None


def palette_index(key: str) -> int:
    """Position of a key in the palette enumeration order."""
    return _PALETTE_INDEX[key]


def classify(color: RGBColor) -> PaletteEntry:
    """Nearest palette entry by Euclidean RGB distance.

    ``min`` keeps the first of equally distant entries, so ties follow
    palette order. There is no distance cutoff.
    """
    return min(PALETTE, key=lambda entry: color_distance(color, entry.hex))


def classify_hex(value: str) -> PaletteEntry:
    """Parse and classify; raises ParseError instead of guessing a fallback."""
    return classify(RGBColor.from_hex(value))


def mood_score(color: RGBColor) -> int:
    """Intensity of the nearest palette color, stored with each entry."""
    return classify(color).intensity


def describe(entry: PaletteEntry) -> ColorDescription:
    return ColorDescription(color_analysis_text(entry), color_suggestions(entry))


def analyze_color(color: RGBColor) -> ColorAnalysis:
    """Classify a color and attach its templated analysis."""
    entry = classify(color)
    description = describe(entry)
    return ColorAnalysis(
        color_key=entry.key,
        mood=entry.mood,
        intensity=entry.intensity,
        warmth=entry.warmth,
        hex=color.hex,
        analysis=description.analysis,
        suggestions=description.suggestions,
    )
