"""Tests for palette_engine.core.report — text, JSON and CSS output."""

import json

import numpy as np
from palette_engine.core.report import format_css, format_json, format_text
from palette_engine.core.types import Report, SourceOutcome
from palette_engine.engine.extractor import ColourExtractor
from palette_engine.engine.synthesize import default_result


def _blue_report() -> Report:
    result = ColourExtractor().extract(np.full((100, 100, 3), (0, 0, 255), dtype=np.uint8))
    report = Report(command='extract', bucket_size=16, result=result)
    report.record_outcome(SourceOutcome(name='blue.png', colours=result.dominant_colors))
    report.record_outcome(SourceOutcome(name='broken.png', error='cannot identify image'))
    return report


class TestFormatText:
    def test_contains_sources_and_summary(self) -> None:
        text = format_text(_blue_report())
        assert 'palette-engine: extract (2 sources, bucket 16)' in text
        assert '── blue.png' in text
        assert 'error: cannot identify image' in text
        assert 'harmony: monochromatic' in text
        assert 'OK 1/2 sources  FAIL 1/2 sources' in text

    def test_lists_palette_roles(self) -> None:
        text = format_text(_blue_report())
        assert 'primary         #0000FF' in text
        assert 'textSecondary' in text

    def test_default_result_is_labelled(self) -> None:
        text = format_text(Report(command='extract', result=default_result()))
        assert 'dominant: (none, default palette)' in text


class TestFormatJson:
    def test_structure(self) -> None:
        parsed = json.loads(format_json(_blue_report()))
        assert parsed['summary'] == {'total': 2, 'ok': 1, 'fail': 1}
        assert parsed['sources'][0] == {'name': 'blue.png', 'colours': ['#0000FF']}
        result = parsed['result']
        assert result['colorHarmony'] == 'monochromatic'
        assert result['palette']['primary'] == '#0000FF'
        assert set(result['palette']) >= {'textSecondary', 'additionalColors', 'success', 'warning', 'error'}
        assert result['dominantColors'][0]['rgb'] == {'r': 0, 'g': 0, 'b': 255}
        assert result['dominantColors'][0]['frequency'] == 1.0

    def test_no_result(self) -> None:
        assert json.loads(format_json(Report(command='histogram')))['result'] is None


class TestFormatCss:
    def test_custom_properties(self) -> None:
        css = format_css(_blue_report().result)  # type: ignore[arg-type]
        assert css.startswith(':root {')
        assert '  --color-primary: #0000FF;' in css
        assert '  --color-text-secondary:' in css
        assert '  --color-success: #22C55E;' in css
        assert 'harmony: monochromatic' in css

    def test_additional_colours_are_numbered(self) -> None:
        bands = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0), (255, 0, 255)]
        arr = np.concatenate([np.full((20, 100, 3), rgb, dtype=np.uint8) for rgb in bands])
        result = ColourExtractor().extract(arr)
        css = format_css(result, prefix='brand')
        assert '--brand-additional-1:' in css
        assert '--brand-primary:' in css
