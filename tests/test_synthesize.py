"""Tests for palette_engine.engine.synthesize — semantic roles and defaults."""

import pytest
from palette_engine.core.colour import hex_to_rgb, hsl_to_hex, rgb_to_hsl
from palette_engine.core.types import ExtractedColour
from palette_engine.engine.select import make_colour
from palette_engine.engine.synthesize import (
    DARK_BACKGROUND,
    DARK_SURFACE,
    DARK_TEXT,
    DEFAULT_PALETTE,
    ERROR,
    LIGHT_TEXT,
    SUCCESS,
    WARNING,
    build_result,
    default_result,
    synthesize_palette,
)


def _c(hex_str: str, h: float, s: float = 80.0, lightness: float = 50.0, f: float = 0.1) -> ExtractedColour:
    return ExtractedColour(hex=hex_str, rgb=hex_to_rgb(hex_str), hsl=(h, s, lightness), frequency=f)


class TestDefaults:
    def test_empty_set_gives_default_palette(self) -> None:
        assert synthesize_palette([]) == DEFAULT_PALETTE

    def test_default_result(self) -> None:
        result = default_result()
        assert result.dominant_colors == ()
        assert result.palette == DEFAULT_PALETTE
        assert result.colour_harmony == 'custom'
        assert result.brightness == 'mixed'
        assert result.saturation == 'mixed'

    def test_build_result_on_empty_is_default(self) -> None:
        assert build_result([]) == default_result()


class TestPrimary:
    def test_most_saturated_wins(self) -> None:
        colours = [_c('#111111', 0, s=40, f=0.5), _c('#222222', 200, s=90, f=0.3)]
        assert synthesize_palette(colours).primary == '#222222'

    def test_saturation_tie_goes_to_frequency(self) -> None:
        colours = [_c('#111111', 0, s=90, f=0.2), _c('#222222', 200, s=90, f=0.3)]
        assert synthesize_palette(colours).primary == '#222222'

    def test_primary_is_drawn_from_set(self) -> None:
        colours = [make_colour((51, 102, 204), 0.5), make_colour((200, 150, 100), 0.3)]
        assert synthesize_palette(colours).primary in {c.hex for c in colours}


class TestSecondaryAndAccent:
    def test_analogous_secondary_preferred(self) -> None:
        primary = _c('#000001', 200, s=95, f=0.2)
        near = _c('#000002', 210, s=60, f=0.5)
        analogous = _c('#000003', 245, s=60, f=0.1)
        assert synthesize_palette([near, primary, analogous]).secondary == '#000003'

    def test_complementary_secondary(self) -> None:
        primary = _c('#000001', 0, s=95, f=0.5)
        comp = _c('#000002', 170, s=40, f=0.2)
        assert synthesize_palette([primary, _c('#000003', 100, f=0.3), comp]).secondary == '#000002'

    def test_secondary_falls_back_to_second_most_frequent(self) -> None:
        primary = _c('#000001', 0, s=95, f=0.2)
        a = _c('#000002', 100, s=40, f=0.5)
        b = _c('#000003', 110, s=40, f=0.3)
        assert synthesize_palette([a, b, primary]).secondary == '#000003'

    def test_secondary_fallback_can_repeat_primary(self) -> None:
        a = _c('#000001', 100, s=40, f=0.5)
        primary = _c('#000002', 0, s=95, f=0.3)
        b = _c('#000003', 110, s=40, f=0.2)
        assert synthesize_palette([a, primary, b]).secondary == '#000002'

    def test_accent_is_first_vibrant_remaining(self) -> None:
        primary = _c('#000001', 0, s=95, f=0.4)
        secondary = _c('#000002', 45, s=40, f=0.3)
        dull = _c('#000003', 100, s=20, f=0.2)
        vivid = _c('#000004', 270, s=70, f=0.1)
        palette = synthesize_palette([primary, secondary, dull, vivid])
        assert palette.accent == '#000004'
        assert palette.additional_colors == ('#000003',)

    def test_accent_falls_back_to_third_most_frequent(self) -> None:
        primary = _c('#000001', 0, s=95, f=0.4)
        secondary = _c('#000002', 45, s=40, f=0.3)
        dull = _c('#000003', 100, s=20, f=0.2)
        duller = _c('#000004', 270, s=10, f=0.1)
        assert synthesize_palette([primary, secondary, dull, duller]).accent == '#000003'

    def test_accent_fallback_skips_past_late_secondary(self) -> None:
        primary = _c('#00000A', 0, s=95, f=0.4)
        b = _c('#00000B', 90, s=20, f=0.3)
        c = _c('#00000C', 100, s=20, f=0.2)
        comp = _c('#00000D', 180, s=20, f=0.1)
        palette = synthesize_palette([primary, b, c, comp])
        assert palette.secondary == '#00000D'
        assert palette.accent == '#00000C'

    def test_single_colour_fills_every_role(self) -> None:
        palette = synthesize_palette([make_colour((0, 0, 255), 1.0)])
        assert palette.primary == palette.secondary == palette.accent == '#0000FF'
        assert palette.additional_colors == ()


class TestThemes:
    def test_dark_set_uses_fixed_dark_roles(self) -> None:
        colours = [_c('#000001', 0, lightness=20), _c('#000002', 180, lightness=30)]
        palette = synthesize_palette(colours)
        assert palette.background == DARK_BACKGROUND
        assert palette.surface == DARK_SURFACE
        assert (palette.text, palette.text_secondary) == LIGHT_TEXT

    def test_light_set_tints_primary_hue(self) -> None:
        yellow = make_colour((255, 255, 0), 0.5)
        pale = make_colour((220, 230, 250), 0.5)
        palette = synthesize_palette([yellow, pale])
        assert palette.primary == '#FFFF00'
        assert palette.background == hsl_to_hex(60.0, 20.0, 98.0)
        assert palette.surface == hsl_to_hex(60.0, 20.0, 95.0)
        assert rgb_to_hsl(*hex_to_rgb(palette.background))[2] == pytest.approx(98.0, abs=0.5)

    def test_bright_primary_gets_dark_text(self) -> None:
        palette = synthesize_palette([make_colour((255, 255, 0), 0.5), make_colour((220, 230, 250), 0.5)])
        assert (palette.text, palette.text_secondary) == DARK_TEXT

    def test_dim_primary_gets_light_text(self) -> None:
        palette = synthesize_palette([make_colour((0, 0, 255), 0.5), make_colour((230, 230, 250), 0.5)])
        assert palette.primary == '#0000FF'
        assert (palette.text, palette.text_secondary) == LIGHT_TEXT


class TestStatusAndOverflow:
    def test_status_colours_are_constants(self) -> None:
        palette = synthesize_palette([make_colour((0, 200, 0), 1.0)])
        assert (palette.success, palette.warning, palette.error) == (SUCCESS, WARNING, ERROR)
        assert (SUCCESS, WARNING, ERROR) == ('#22C55E', '#F59E0B', '#EF4444')

    def test_additional_capped_at_five(self) -> None:
        colours = [_c(f'#0000{i:02X}', i * 36, s=90 - i, f=0.1 - i * 0.001) for i in range(10)]
        palette = synthesize_palette(colours)
        used = {palette.primary, palette.secondary, palette.accent}
        assert len(palette.additional_colors) == 5
        assert not used & set(palette.additional_colors)


class TestBuildResult:
    def test_single_blue(self) -> None:
        result = build_result([make_colour((0, 0, 255), 1.0)])
        assert result.colour_harmony == 'monochromatic'
        assert result.palette.primary == '#0000FF'
        assert result.saturation == 'vibrant'
        assert [c.hex for c in result.dominant_colors] == ['#0000FF']
