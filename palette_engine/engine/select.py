"""Dominant-colour selection and the diversity filter.

Histogram bins become ExtractedColours ranked by frequency. The top 2*K form
a working pool; a greedy pass keeps colours that differ from everything
already accepted by more than MIN_HUE_GAP degrees of hue or MIN_LIGHTNESS_GAP
points of lightness. If that leaves fewer than K, the rest is filled from the
pool in frequency order so tightly clustered images still get K colours.
"""

from collections.abc import Sequence

from palette_engine.core.colour import colour_name, hue_distance, rgb_to_hex, rgb_to_hsl
from palette_engine.core.config import DEFAULT_COUNT
from palette_engine.core.errors import ConfigurationError
from palette_engine.core.types import ExtractedColour, Histogram

MIN_HUE_GAP = 30.0
MIN_LIGHTNESS_GAP = 20.0
POOL_FACTOR = 2


def make_colour(rgb: tuple[int, int, int], frequency: float) -> ExtractedColour:
    h, s, lightness = rgb_to_hsl(*rgb)
    return ExtractedColour(
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        hsl=(h, s, lightness),
        frequency=frequency,
        name=colour_name(h, s, lightness),
    )


def histogram_to_colours(histogram: Histogram) -> list[ExtractedColour]:
    """One colour per bin, in histogram order. Represented by the bin's mean pixel."""
    if histogram.is_empty():
        return []
    return [make_colour(b.mean_rgb, b.count / histogram.total) for b in histogram.bins.values()]


def by_frequency(colours: Sequence[ExtractedColour]) -> list[ExtractedColour]:
    """Descending frequency. sorted() is stable, so ties keep their input order."""
    return sorted(colours, key=lambda c: -c.frequency)


def is_distinct(a: ExtractedColour, b: ExtractedColour) -> bool:
    return hue_distance(a.hue, b.hue) > MIN_HUE_GAP or abs(a.lightness - b.lightness) > MIN_LIGHTNESS_GAP


def ensure_diversity(pool: Sequence[ExtractedColour], count: int) -> list[ExtractedColour]:
    if not pool:
        return []

    diverse = [pool[0]]
    for colour in pool[1:]:
        if len(diverse) >= count:
            break
        if all(is_distinct(colour, existing) for existing in diverse):
            diverse.append(colour)

    # Frequency-only fill when the pool is too tightly clustered
    for colour in pool:
        if len(diverse) >= count:
            break
        if not any(colour is existing for existing in diverse):
            diverse.append(colour)

    return diverse


def select_dominant(histogram: Histogram, count: int = DEFAULT_COUNT) -> list[ExtractedColour]:
    """Top `count` diverse colours, sorted by descending frequency. Empty histogram gives []."""
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise ConfigurationError(f'count must be a positive integer, got {count!r}')

    ranked = by_frequency(histogram_to_colours(histogram))
    pool = ranked[: count * POOL_FACTOR]
    chosen = {id(c) for c in ensure_diversity(pool, count)}
    # pool order is already frequency order with first-encountered tie-breaks
    return [c for c in pool if id(c) in chosen]
