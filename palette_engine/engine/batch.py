"""Run decode -> quantize -> select over many images with a bounded worker pool.

Per-image work is independent, so it runs on a ThreadPoolExecutor capped at
max_workers to bound peak memory. A source that fails to decode contributes
no colours and is reported on stderr; it never aborts the batch. With a
timeout, jobs still pending at the deadline are cancelled and the merge runs
over whatever succeeded. The merge always consumes successes in input order,
not completion order, so results do not depend on thread scheduling.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import TYPE_CHECKING

from palette_engine.core.config import DEFAULT_MAX_WORKERS, require_positive_int, require_timeout
from palette_engine.core.errors import DecodeFailure
from palette_engine.core.imaging import ImageSource, describe
from palette_engine.core.types import ColourExtractionResult, SourceOutcome
from palette_engine.engine.aggregate import merge_results
from palette_engine.engine.synthesize import build_result, default_result

if TYPE_CHECKING:
    from palette_engine.engine.extractor import ColourExtractor

CANCELLED = 'cancelled'


@dataclass(frozen=True)
class BatchOutcome:
    result: ColourExtractionResult
    sources: tuple[SourceOutcome, ...] = ()

    @property
    def succeeded(self) -> list[SourceOutcome]:
        return [s for s in self.sources if s.ok]

    @property
    def failed(self) -> list[SourceOutcome]:
        return [s for s in self.sources if not s.ok]


def _log_failure(outcome: SourceOutcome) -> None:
    print(f'palette-engine: {outcome.name}: {outcome.error}', file=sys.stderr)


def collect(
    sources: Sequence[ImageSource],
    extractor: ColourExtractor,
    max_workers: int = DEFAULT_MAX_WORKERS,
    timeout: float | None = None,
) -> list[SourceOutcome]:
    """Per-source outcomes, in input order."""
    require_positive_int('max_workers', max_workers)
    require_timeout(timeout)
    if not sources:
        return []

    labels = [describe(s) for s in sources]
    pool = ThreadPoolExecutor(max_workers=min(max_workers, len(sources)))
    try:
        futures = [pool.submit(extractor.dominant_colours, s) for s in sources]
        done, pending = wait(futures, timeout=timeout)
        for fut in pending:
            fut.cancel()
    finally:
        # jobs already running cannot be interrupted; their results are dropped
        pool.shutdown(wait=False, cancel_futures=True)

    outcomes = []
    for label, fut in zip(labels, futures):
        if fut not in done:
            outcomes.append(SourceOutcome(name=label, error=CANCELLED))
            continue
        try:
            colours = fut.result()
        except DecodeFailure as e:
            outcomes.append(SourceOutcome(name=label, error=e.reason))
            continue
        outcomes.append(SourceOutcome(name=label, colours=tuple(colours)))
    return outcomes


def run_batch(
    sources: Sequence[ImageSource],
    extractor: ColourExtractor,
    max_workers: int = DEFAULT_MAX_WORKERS,
    timeout: float | None = None,
    log: bool = True,
) -> BatchOutcome:
    """Extract every source and reduce to one result.

    One source goes straight to classification; several go through the
    aggregator first. No successes at all gives the default result.
    """
    outcomes = collect(sources, extractor, max_workers=max_workers, timeout=timeout)
    if log:
        for outcome in outcomes:
            if not outcome.ok:
                _log_failure(outcome)

    ok = [o.colours for o in outcomes if o.ok]
    if not ok:
        result = default_result()
    elif len(outcomes) == 1:
        result = build_result(ok[0])
    else:
        result = merge_results(ok, count=extractor.count)
    return BatchOutcome(result=result, sources=tuple(outcomes))
