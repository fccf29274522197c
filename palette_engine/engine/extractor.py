"""ColourExtractor: the engine's entry point.

Holds only an immutable EngineConfig; every call builds fresh value records,
so one instance can be shared freely across threads and calls.

    extractor = ColourExtractor(bucket_size=16)
    result = extractor.extract('hero.png')
    merged = extractor.extract_many(['a.png', 'b.png'], timeout=10)
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from palette_engine.core.config import (
    DEFAULT_BUCKET_SIZE,
    DEFAULT_COUNT,
    EngineConfig,
    require_positive_int,
    require_timeout,
)
from palette_engine.core.errors import DecodeFailure
from palette_engine.core.imaging import ImageSource, load_pixels
from palette_engine.core.types import ColourExtractionResult, ExtractedColour, Histogram
from palette_engine.engine.batch import BatchOutcome, run_batch
from palette_engine.engine.quantize import quantize
from palette_engine.engine.select import select_dominant
from palette_engine.engine.synthesize import build_result, default_result


class ColourExtractor:
    def __init__(
        self,
        bucket_size: int = DEFAULT_BUCKET_SIZE,
        count: int = DEFAULT_COUNT,
        config: EngineConfig | None = None,
    ):
        """A full `config` takes precedence over bucket_size and count."""
        self._config = config if config is not None else EngineConfig(bucket_size=bucket_size, count=count)

    @classmethod
    def from_config(cls, config: EngineConfig) -> ColourExtractor:
        return cls(config=config)

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def bucket_size(self) -> int:
        return self._config.bucket_size

    @property
    def count(self) -> int:
        return self._config.count

    def histogram(self, source: ImageSource) -> Histogram:
        return quantize(load_pixels(source), self.bucket_size)

    def dominant_colours(self, source: ImageSource) -> list[ExtractedColour]:
        """Decode, quantize and select. Raises DecodeFailure for unreadable sources."""
        return select_dominant(self.histogram(source), self.count)

    def extract(self, source: ImageSource) -> ColourExtractionResult:
        """Full single-image result. An image with no usable pixels gets the default result."""
        return build_result(self.dominant_colours(source))

    def extract_safe(self, source: ImageSource) -> ColourExtractionResult:
        """Like extract(), but a DecodeFailure degrades to the default result."""
        try:
            return self.extract(source)
        except DecodeFailure as e:
            print(f'palette-engine: {e}', file=sys.stderr)
            return default_result()

    def extract_batch(
        self,
        sources: Sequence[ImageSource],
        max_workers: int | None = None,
        timeout: float | None = None,
        log: bool = True,
    ) -> BatchOutcome:
        """Result plus per-source outcomes. Worker count and timeout default to the config.

        Raises ConfigurationError for a non-positive worker count or a negative timeout.
        """
        if max_workers is None:
            max_workers = self._config.max_workers
        if timeout is None:
            timeout = self._config.timeout
        require_positive_int('max_workers', max_workers)
        require_timeout(timeout)
        return run_batch(sources, self, max_workers=max_workers, timeout=timeout, log=log)

    def extract_many(
        self,
        sources: Sequence[ImageSource],
        max_workers: int | None = None,
        timeout: float | None = None,
    ) -> ColourExtractionResult:
        return self.extract_batch(sources, max_workers=max_workers, timeout=timeout).result
