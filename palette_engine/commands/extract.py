"""Extract dominant colours and a semantic palette from one or more images.

One image: quantize, select the diverse top-K colours, then classify and
synthesize the palette. Several images: each is processed on a bounded
worker pool, their dominant colours are merged by hue/saturation clustering,
and the merged set is classified and synthesized once.

Images that cannot be read are reported and skipped. If none can be read,
the default palette is returned (harmony=custom).

Example:
    palette-engine extract hero.png
    palette-engine extract shots/*.png --json --workers 8 --timeout 30
    palette-engine extract hero.png --bucket-size 8 --count 6
"""

from palette_engine.core.config import EngineConfig
from palette_engine.core.types import Command, Report
from palette_engine.engine.extractor import ColourExtractor

command = Command(
    name='extract',
    help='Dominant colours, harmony and a semantic palette for one or more images.',
)


def extract_into(report: Report, paths: list[str], config: EngineConfig) -> None:
    """Run the batch and record per-source outcomes plus the final result."""
    extractor = ColourExtractor.from_config(config)
    outcome = extractor.extract_batch(paths)
    for source in outcome.sources:
        report.record_outcome(source)
    report.result = outcome.result


@command.run
def run(paths: list[str], report: Report, args) -> None:
    extract_into(report, paths, args.config)
