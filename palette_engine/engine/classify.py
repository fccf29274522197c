"""Harmony, brightness and saturation descriptors for a colour set.

Fixed categorical thresholds, no randomness: the same set always yields the
same labels.
"""

from collections.abc import Sequence

from palette_engine.core.colour import hue_distance
from palette_engine.core.types import Brightness, ExtractedColour, Harmony, Saturation

HARMONY_SAMPLE = 5


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def classify_harmony(colours: Sequence[ExtractedColour]) -> Harmony:
    if len(colours) < 2:
        return 'monochromatic'

    hues = [c.hue for c in colours[:HARMONY_SAMPLE]]
    diffs = [hue_distance(h, hues[0]) for h in hues[1:]]
    avg = _mean(diffs)

    if avg < 30:
        return 'monochromatic'
    if 150 <= avg <= 210:
        return 'complementary'
    if 30 <= avg <= 60:
        return 'analogous'
    if any(110 <= d <= 130 for d in diffs):
        return 'triadic'
    return 'custom'


def classify_brightness(colours: Sequence[ExtractedColour]) -> Brightness:
    if not colours:
        return 'mixed'
    avg = _mean([c.lightness for c in colours])
    if avg < 35:
        return 'dark'
    if avg > 65:
        return 'light'
    return 'mixed'


def classify_saturation(colours: Sequence[ExtractedColour]) -> Saturation:
    if not colours:
        return 'mixed'
    avg = _mean([c.saturation for c in colours])
    if avg > 60:
        return 'vibrant'
    if avg < 30:
        return 'muted'
    return 'mixed'


def classify(colours: Sequence[ExtractedColour]) -> tuple[Harmony, Brightness, Saturation]:
    return classify_harmony(colours), classify_brightness(colours), classify_saturation(colours)
