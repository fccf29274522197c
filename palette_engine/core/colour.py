"""Colour-space maths: hex/RGB/HSL conversion, WCAG luminance, hue distance, names.

Pure functions, no state. HSL uses the CSS convention: h in degrees 0..360,
s and l as percentages 0..100.
"""

import colorsys

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]


def hex_to_rgb(hex_str: str) -> RGB:
    """Parse '#rrggbb', 'rrggbb' or '#rgb'. Returns (0, 0, 0) for anything invalid."""
    h = hex_str.strip().lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        return (0, 0, 0)
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        return (0, 0, 0)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02X}{g:02X}{b:02X}'


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """RGB (0..255) to HSL (degrees, percent, percent), rounded to 2 decimals."""
    h, lightness, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    return (round(h * 360.0, 2) % 360.0, round(s * 100.0, 2), round(lightness * 100.0, 2))


def hsl_to_rgb(h: float, s: float, lightness: float) -> RGB:
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, lightness / 100.0, s / 100.0)
    return (_channel(r), _channel(g), _channel(b))


def hsl_to_hex(h: float, s: float, lightness: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, lightness))


def _channel(v: float) -> int:
    return max(0, min(255, int(round(v * 255.0))))


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hues in degrees, 0..180."""
    d = abs(h1 - h2) % 360.0
    return min(d, 360.0 - d)


def _linearise(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    """WCAG 2.x relative luminance, 0.0 (black) .. 1.0 (white)."""
    return 0.2126 * _linearise(r) + 0.7152 * _linearise(g) + 0.0722 * _linearise(b)


def colour_name(h: float, s: float, lightness: float) -> str:
    """Coarse hue + lightness label, e.g. 'blue', 'gray', 'white'."""
    if s < 10:
        if lightness < 20:
            return 'black'
        if lightness > 80:
            return 'white'
        return 'gray'

    if h < 15 or h >= 345:
        return 'red'
    if h < 45:
        return 'orange'
    if h < 75:
        return 'yellow'
    if h < 150:
        return 'green'
    if h < 210:
        return 'cyan'
    if h < 270:
        return 'blue'
    if h < 315:
        return 'purple'
    return 'pink'
