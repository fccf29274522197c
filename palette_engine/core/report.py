"""Report builder — text, JSON and CSS output for palette-engine results."""

import json
import re
from typing import Any

from palette_engine.core.types import ColourExtractionResult, ColourPalette, Report

_ROLE_WIDTH = 16


def _kebab(name: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '-', name).lower()


def _format_palette(palette: ColourPalette) -> list[str]:
    lines = ['palette:']
    for role, value in palette.to_dict().items():
        if role == 'additionalColors':
            if value:
                lines.append(f'  {role:<{_ROLE_WIDTH}}{" ".join(value)}')
            continue
        lines.append(f'  {role:<{_ROLE_WIDTH}}{value}')
    return lines


def format_result_text(result: ColourExtractionResult) -> list[str]:
    lines = []
    if result.dominant_colors:
        parts = [f'{c.hex} {c.frequency * 100:.1f}% {c.name}' for c in result.dominant_colors]
        lines.append(f'dominant: {", ".join(parts)}')
    else:
        lines.append('dominant: (none, default palette)')
    lines.append(
        f'harmony: {result.colour_harmony}  brightness: {result.brightness}  saturation: {result.saturation}'
    )
    lines.extend(_format_palette(result.palette))
    return lines


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    total = report.ok_count + report.fail_count
    noun = 'source' if len(report.sources) == 1 else 'sources'
    lines = [f'palette-engine: {report.command} ({len(report.sources)} {noun}, bucket {report.bucket_size})', '']

    for name, data in report.sources.items():
        lines.append(f'── {name}')
        for key, value in data.items():
            if key == 'colours':
                lines.append(f'  colours: {", ".join(value) if value else "(no usable pixels)"}')
            elif key == 'histogram':
                lines.append(f'  retained: {value["total"]} px in {value["bins"]} cells')
                for b in value['top']:
                    lines.append(f'    {b["hex"]}  {b["count"]:>6}  {b["pct"]:5.1f}%')
            elif key == 'error':
                lines.append(f'  error: {value}')
            else:
                lines.append(f'  {key}: {value}')
        lines.append('')

    if report.result is not None:
        lines.extend(format_result_text(report.result))
        lines.append('')

    if total > 0:
        lines.append(f'OK {report.ok_count}/{total} sources  FAIL {report.fail_count}/{total} sources')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON. The result uses design-token keys (dominantColors, textSecondary, ...)."""
    obj: dict[str, Any] = {
        'command': report.command,
        'bucketSize': report.bucket_size,
        'sources': [{'name': name, **data} for name, data in report.sources.items()],
        'result': report.result.to_dict() if report.result is not None else None,
        'summary': {
            'total': report.ok_count + report.fail_count,
            'ok': report.ok_count,
            'fail': report.fail_count,
        },
    }
    return json.dumps(obj, indent=2)


def format_css(result: ColourExtractionResult, prefix: str = 'color') -> str:
    """Render the palette as CSS custom properties on :root."""
    lines = [':root {']
    for role, value in result.palette.to_dict().items():
        if role == 'additionalColors':
            for i, hex_value in enumerate(value, start=1):
                lines.append(f'  --{prefix}-additional-{i}: {hex_value};')
            continue
        lines.append(f'  --{prefix}-{_kebab(role)}: {value};')
    lines.append('}')
    lines.append(
        f'/* harmony: {result.colour_harmony}; brightness: {result.brightness}; saturation: {result.saturation} */'
    )
    return '\n'.join(lines)
