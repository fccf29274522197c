"""Shared types for palette-engine: pixel buffers, histograms, colour records, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

import numpy as np

from palette_engine.core.colour import HSL, RGB
from palette_engine.core.errors import DecodeFailure

Harmony = Literal['complementary', 'analogous', 'triadic', 'monochromatic', 'custom']
Brightness = Literal['light', 'dark', 'mixed']
Saturation = Literal['vibrant', 'muted', 'mixed']


@dataclass(frozen=True, eq=False)
class PixelBuffer:
    """Decoded image: row-major uint8 samples of shape (height, width, channels).

    Caller-owned and read-only to the engine. Alpha (channel 4) is ignored.
    """

    width: int
    height: int
    channels: int
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.channels not in (3, 4):
            raise DecodeFailure('buffer', f'expected 3 or 4 channels, got {self.channels}')
        if self.data.shape != (self.height, self.width, self.channels):
            raise DecodeFailure(
                'buffer',
                f'data shape {self.data.shape} does not match {self.height}x{self.width}x{self.channels}',
            )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> PixelBuffer:
        """Wrap an (h, w, 3|4) array. Values are clipped into uint8."""
        if arr.ndim != 3:
            raise DecodeFailure('buffer', f'expected a 3-d array, got {arr.ndim} dimensions')
        if arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)
        h, w, c = arr.shape
        return cls(width=w, height=h, channels=c, data=arr)

    def rgb_pixels(self) -> np.ndarray:
        """Flattened (N, 3) int array in row-major order, alpha dropped."""
        return self.data[:, :, :3].reshape(-1, 3).astype(np.int64)


@dataclass
class HistogramBin:
    """Pixels that fell into one quantized cell. Sums give the bin's mean colour."""

    count: int
    r_sum: int
    g_sum: int
    b_sum: int

    @property
    def mean_rgb(self) -> RGB:
        n = max(self.count, 1)
        return (
            int(round(self.r_sum / n)),
            int(round(self.g_sum / n)),
            int(round(self.b_sum / n)),
        )


@dataclass
class Histogram:
    """Quantized cell key -> bin, in first-encountered order. `total` counts retained pixels."""

    bins: dict[RGB, HistogramBin] = field(default_factory=dict)
    total: int = 0

    @property
    def counts(self) -> dict[RGB, int]:
        return {key: b.count for key, b in self.bins.items()}

    def is_empty(self) -> bool:
        return self.total == 0

    def __len__(self) -> int:
        return len(self.bins)


@dataclass(frozen=True)
class ExtractedColour:
    """One dominant colour. `frequency` is its share of retained pixels."""

    hex: str
    rgb: RGB
    hsl: HSL
    frequency: float
    name: str = ''

    @property
    def hue(self) -> float:
        return self.hsl[0]

    @property
    def saturation(self) -> float:
        return self.hsl[1]

    @property
    def lightness(self) -> float:
        return self.hsl[2]

    def to_dict(self) -> dict[str, Any]:
        r, g, b = self.rgb
        h, s, lightness = self.hsl
        return {
            'hex': self.hex,
            'rgb': {'r': r, 'g': g, 'b': b},
            'hsl': {'h': h, 's': s, 'l': lightness},
            'frequency': self.frequency,
            'name': self.name,
        }


@dataclass(frozen=True)
class ColourPalette:
    """Semantic colour roles, all as '#RRGGBB' hex strings."""

    primary: str
    secondary: str
    accent: str
    background: str
    surface: str
    text: str
    text_secondary: str
    success: str
    warning: str
    error: str
    additional_colors: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Design-token form, keyed the way stylesheets consume it."""
        return {
            'primary': self.primary,
            'secondary': self.secondary,
            'accent': self.accent,
            'background': self.background,
            'surface': self.surface,
            'text': self.text,
            'textSecondary': self.text_secondary,
            'success': self.success,
            'warning': self.warning,
            'error': self.error,
            'additionalColors': list(self.additional_colors),
        }


@dataclass(frozen=True)
class ColourExtractionResult:
    dominant_colors: tuple[ExtractedColour, ...]
    palette: ColourPalette
    colour_harmony: Harmony
    brightness: Brightness
    saturation: Saturation

    def to_dict(self) -> dict[str, Any]:
        return {
            'dominantColors': [c.to_dict() for c in self.dominant_colors],
            'palette': self.palette.to_dict(),
            'colorHarmony': self.colour_harmony,
            'brightness': self.brightness,
            'saturation': self.saturation,
        }


@dataclass(frozen=True)
class SourceOutcome:
    """Per-image result of decode -> quantize -> select. Failed sources carry no colours."""

    name: str
    colours: tuple[ExtractedColour, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='extract', help='Extract a palette')

        @command.run
        def run(paths, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, paths: list[str], report: Report, args: Any) -> None:
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(paths, report, args)


@dataclass
class Report:
    """Accumulates per-source data and the final result for text/JSON/CSS output."""

    command: str = ''
    bucket_size: int = 16
    sources: dict[str, dict[str, Any]] = field(default_factory=dict)
    result: ColourExtractionResult | None = None
    ok_count: int = 0
    fail_count: int = 0

    def add(self, source: str, key: str, data: Any) -> None:
        """Attach data under `key` for a source."""
        if source not in self.sources:
            self.sources[source] = {}
        self.sources[source][key] = data

    def record_outcome(self, outcome: SourceOutcome) -> None:
        if outcome.ok:
            self.ok_count += 1
            self.add(outcome.name, 'colours', [c.hex for c in outcome.colours])
        else:
            self.fail_count += 1
            self.add(outcome.name, 'error', outcome.error)
