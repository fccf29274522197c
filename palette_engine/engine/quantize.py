"""Quantizer: bucket pixels into coarse RGB cells and count them.

Each channel is floored to a multiple of the bucket size B. Pixels whose raw
channel mean is below 10 or above 245 are dropped as near-black/near-white
noise before counting; the retained count is the frequency denominator.
"""

import numpy as np

from palette_engine.core.config import DEFAULT_BUCKET_SIZE
from palette_engine.core.errors import ConfigurationError
from palette_engine.core.types import Histogram, HistogramBin, PixelBuffer

NEAR_BLACK = 10
NEAR_WHITE = 245


def retained_mask(pixels: np.ndarray) -> np.ndarray:
    """Boolean mask of pixels whose channel mean lies in [NEAR_BLACK, NEAR_WHITE]."""
    # compare channel sums against 3x the thresholds to stay in integers
    sums = pixels.sum(axis=1)
    return (sums >= 3 * NEAR_BLACK) & (sums <= 3 * NEAR_WHITE)


def quantize(buffer: PixelBuffer, bucket_size: int = DEFAULT_BUCKET_SIZE) -> Histogram:
    """Build the cell histogram for one image, bins in first-encountered order."""
    if isinstance(bucket_size, bool) or not isinstance(bucket_size, int) or bucket_size <= 0:
        raise ConfigurationError(f'bucket_size must be a positive integer, got {bucket_size!r}')

    pixels = buffer.rgb_pixels()
    kept = pixels[retained_mask(pixels)] if len(pixels) else pixels
    if len(kept) == 0:
        return Histogram()

    keys = (kept // bucket_size) * bucket_size
    unique, first, inverse, counts = np.unique(
        keys, axis=0, return_index=True, return_inverse=True, return_counts=True
    )
    inverse = inverse.reshape(-1)

    sums = np.zeros((len(unique), 3), dtype=np.int64)
    np.add.at(sums, inverse, kept)

    bins: dict[tuple[int, int, int], HistogramBin] = {}
    for i in np.argsort(first, kind='stable'):
        key = (int(unique[i][0]), int(unique[i][1]), int(unique[i][2]))
        bins[key] = HistogramBin(
            count=int(counts[i]),
            r_sum=int(sums[i][0]),
            g_sum=int(sums[i][1]),
            b_sum=int(sums[i][2]),
        )

    return Histogram(bins=bins, total=int(len(kept)))
