"""Show the quantized colour histogram of each image.

Pixels are floored into bucket-size cells after dropping near-black and
near-white noise (channel mean < 10 or > 245). Lists the most populated
cells with their mean colour, pixel count and share of retained pixels.
Useful for choosing a bucket size.

Example:
    palette-engine histogram hero.png --bucket-size 32 --count 12
"""

from palette_engine.core.colour import rgb_to_hex
from palette_engine.core.errors import DecodeFailure
from palette_engine.core.types import Command, Report, SourceOutcome
from palette_engine.engine.extractor import ColourExtractor

command = Command(
    name='histogram',
    help='Quantized colour cells per image, with pixel counts and percentages.',
)


@command.run
def run(paths: list[str], report: Report, args) -> None:
    extractor = ColourExtractor.from_config(args.config)
    for path in paths:
        try:
            hist = extractor.histogram(path)
        except DecodeFailure as e:
            report.record_outcome(SourceOutcome(name=path, error=e.reason))
            continue

        report.ok_count += 1
        top = sorted(hist.bins.values(), key=lambda b: -b.count)[: extractor.count]
        report.add(
            path,
            'histogram',
            {
                'total': hist.total,
                'bins': len(hist),
                'top': [
                    {
                        'hex': rgb_to_hex(*b.mean_rgb),
                        'count': b.count,
                        'pct': round(b.count / hist.total * 100, 1),
                    }
                    for b in top
                ],
            },
        )
