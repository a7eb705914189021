"""Scalar interpolation and color helpers shared by the simulation modules."""
import colorsys
from typing import Tuple

# Color type: RGB tuple (0-255)
Color = Tuple[int, int, int]


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp x into [lo, hi]."""
    return max(lo, min(hi, x))


def clamp01(v: float) -> float:
    """Clamp v into [0, 1]."""
    return min(1.0, max(0.0, v))


def smoothstep(t: float) -> float:
    """Hermite fade t*t*(3-2t).

    Callers pass t in [0, 1]; no clamping is applied.
    """
    return t * t * (3 - 2 * t)


def smoothstep_edges(edge0: float, edge1: float, x: float) -> float:
    """GLSL-style smoothstep with edges, clamped to [0, 1]."""
    t = clamp01((x - edge0) / (edge1 - edge0))
    return smoothstep(t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease-in/ease-out for t in [0, 1]."""
    if t < 0.5:
        return 2 * t * t
    return -1 + (4 - 2 * t) * t


def hsl_to_rgb(h: float, s: float, l: float) -> Color:
    """Convert HSL components in [0, 1] to an RGB tuple.

    Args:
        h: Hue (wraps around 1.0)
        s: Saturation
        l: Lightness

    Returns:
        RGB tuple with components 0-255
    """
    r, g, b = colorsys.hls_to_rgb(h % 1.0, clamp01(l), clamp01(s))
    return (round(r * 255), round(g * 255), round(b * 255))


def hex_to_rgb(hex_color: int) -> Color:
    """Convert hex color (0xRRGGBB) to RGB tuple."""
    return ((hex_color >> 16) & 0xFF, (hex_color >> 8) & 0xFF, hex_color & 0xFF)


def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Convert RGB to hex color."""
    return (r << 16) | (g << 8) | b


def color_to_css(color: Color) -> str:
    """Convert RGB tuple to CSS color string."""
    return f"#{color[0]:02x}{color[1]:02x}{color[2]:02x}"


def css_to_rgb(css: str) -> Color:
    """Parse a '#rrggbb' CSS color into an RGB tuple.

    Raises:
        ValueError: If the string is not a 6-digit hex color
    """
    value = css.strip().lstrip('#')
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb color, got {css!r}")
    return hex_to_rgb(int(value, 16))
