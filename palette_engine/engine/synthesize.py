"""Assign semantic palette roles from a diversity-filtered colour set.

primary / secondary / accent come from the set. Background, surface and text
roles are either fixed dark-theme constants or, for light sets, tints of the
primary hue with text picked by primary's WCAG luminance. Status colours are
product constants and never derived from images.
"""

from collections.abc import Sequence

from palette_engine.core.colour import hsl_to_hex, hue_distance, relative_luminance
from palette_engine.core.types import ColourExtractionResult, ColourPalette, ExtractedColour
from palette_engine.engine.classify import classify

SUCCESS = '#22C55E'
WARNING = '#F59E0B'
ERROR = '#EF4444'

DARK_BACKGROUND = '#0F172A'
DARK_SURFACE = '#1E293B'

# (text, textSecondary)
DARK_TEXT = ('#0F172A', '#64748B')
LIGHT_TEXT = ('#F1F5F9', '#94A3B8')

DARK_THEME_LIGHTNESS = 50.0
LUMINANCE_SPLIT = 0.5
TINT_SATURATION = 0.2
BACKGROUND_LIGHTNESS = 98.0
SURFACE_LIGHTNESS = 95.0
ACCENT_MIN_SATURATION = 50.0
MAX_ADDITIONAL = 5

DEFAULT_PALETTE = ColourPalette(
    primary='#6366F1',
    secondary='#8B5CF6',
    accent='#14B8A6',
    background='#FFFFFF',
    surface='#F8FAFC',
    text='#0F172A',
    text_secondary='#64748B',
    success=SUCCESS,
    warning=WARNING,
    error=ERROR,
)


def default_result() -> ColourExtractionResult:
    """Result used when there is no usable signal at all."""
    return ColourExtractionResult(
        dominant_colors=(),
        palette=DEFAULT_PALETTE,
        colour_harmony='custom',
        brightness='mixed',
        saturation='mixed',
    )


def _is_harmonic(d: float) -> bool:
    # analogous or complementary
    return 30 <= d <= 60 or 150 <= d <= 210


def _others(colours: Sequence[ExtractedColour], *exclude: ExtractedColour) -> list[ExtractedColour]:
    return [c for c in colours if not any(c is e for e in exclude)]


def pick_primary(colours: Sequence[ExtractedColour]) -> ExtractedColour:
    """Most saturated colour; higher frequency wins ties, then input order."""
    return sorted(colours, key=lambda c: (-c.saturation, -c.frequency))[0]


def pick_secondary(colours: Sequence[ExtractedColour], primary: ExtractedColour) -> ExtractedColour:
    rest = _others(colours, primary)
    for colour in rest:
        if _is_harmonic(hue_distance(colour.hue, primary.hue)):
            return colour
    # second-most-frequent overall, which may be primary itself
    return colours[1] if len(colours) > 1 else primary


def pick_accent(
    colours: Sequence[ExtractedColour], primary: ExtractedColour, secondary: ExtractedColour
) -> ExtractedColour:
    rest = _others(colours, primary, secondary)
    for colour in rest:
        if colour.saturation > ACCENT_MIN_SATURATION:
            return colour
    return colours[2] if len(colours) > 2 else secondary


def surface_roles(colours: Sequence[ExtractedColour], primary: ExtractedColour) -> tuple[str, str, str, str]:
    """(background, surface, text, textSecondary) for the set's overall lightness."""
    avg_lightness = sum(c.lightness for c in colours) / len(colours)
    if avg_lightness < DARK_THEME_LIGHTNESS:
        return DARK_BACKGROUND, DARK_SURFACE, LIGHT_TEXT[0], LIGHT_TEXT[1]

    tint = primary.saturation * TINT_SATURATION
    background = hsl_to_hex(primary.hue, tint, BACKGROUND_LIGHTNESS)
    surface = hsl_to_hex(primary.hue, tint, SURFACE_LIGHTNESS)
    text, text_secondary = DARK_TEXT if relative_luminance(*primary.rgb) > LUMINANCE_SPLIT else LIGHT_TEXT
    return background, surface, text, text_secondary


def synthesize_palette(colours: Sequence[ExtractedColour]) -> ColourPalette:
    if not colours:
        return DEFAULT_PALETTE

    primary = pick_primary(colours)
    secondary = pick_secondary(colours, primary)
    accent = pick_accent(colours, primary, secondary)
    background, surface, text, text_secondary = surface_roles(colours, primary)
    additional = _others(colours, primary, secondary, accent)[:MAX_ADDITIONAL]

    return ColourPalette(
        primary=primary.hex,
        secondary=secondary.hex,
        accent=accent.hex,
        background=background,
        surface=surface,
        text=text,
        text_secondary=text_secondary,
        success=SUCCESS,
        warning=WARNING,
        error=ERROR,
        additional_colors=tuple(c.hex for c in additional),
    )


def build_result(colours: Sequence[ExtractedColour]) -> ColourExtractionResult:
    """Classify and synthesize a non-empty set; an empty set gets the default result."""
    if not colours:
        return default_result()
    harmony, brightness, saturation = classify(colours)
    return ColourExtractionResult(
        dominant_colors=tuple(colours),
        palette=synthesize_palette(colours),
        colour_harmony=harmony,
        brightness=brightness,
        saturation=saturation,
    )
