"""Merge per-image dominant colours into one consolidated set.

Colours are clustered in input order: a colour joins the first cluster whose
representative is within 20 degrees of hue and 20 points of saturation,
otherwise it opens a new cluster. A cluster keeps its first-seen colour as
representative and the mean frequency of its members.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace

from palette_engine.core.colour import hue_distance
from palette_engine.core.config import DEFAULT_COUNT
from palette_engine.core.types import ColourExtractionResult, ExtractedColour
from palette_engine.engine.select import by_frequency
from palette_engine.engine.synthesize import build_result, default_result

MERGE_HUE = 20.0
MERGE_SATURATION = 20.0


@dataclass
class _Cluster:
    representative: ExtractedColour
    mean_frequency: float
    count: int = 1

    def matches(self, colour: ExtractedColour) -> bool:
        rep = self.representative
        return (
            hue_distance(colour.hue, rep.hue) < MERGE_HUE
            and abs(colour.saturation - rep.saturation) < MERGE_SATURATION
        )

    def fold(self, colour: ExtractedColour) -> None:
        self.mean_frequency = (self.mean_frequency * self.count + colour.frequency) / (self.count + 1)
        self.count += 1


def aggregate(per_image: Sequence[Sequence[ExtractedColour]]) -> list[ExtractedColour]:
    clusters: list[_Cluster] = []
    for colours in per_image:
        for colour in colours:
            target = next((c for c in clusters if c.matches(colour)), None)
            if target is None:
                clusters.append(_Cluster(representative=colour, mean_frequency=colour.frequency))
            else:
                target.fold(colour)

    merged = [replace(c.representative, frequency=c.mean_frequency) for c in clusters]
    return by_frequency(merged)


def merge_results(
    per_image: Sequence[Sequence[ExtractedColour]], count: int = DEFAULT_COUNT
) -> ColourExtractionResult:
    """Aggregate, keep the top `count`, then classify and synthesize once."""
    merged = aggregate(per_image)
    if not merged:
        return default_result()
    return build_result(merged[:count])
