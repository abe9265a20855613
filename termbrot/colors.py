"""Mapping of escape results to ASCII glyphs and 24-bit colors."""

import math
from typing import Tuple


# Density ramp from lightest (space) to heaviest. Points that escape quickly
# get light characters, slow escapers get heavy ones.
RAMP = " .-=+*#%@X"

# Points that never escaped within the iteration cap
INSIDE_CHAR = "*"
INSIDE_COLOR = (0, 0, 0)

SATURATION = 0.8
LIGHTNESS = 0.5
# Hue cycles this many times over the iteration range
HUE_CYCLES = 3


def iteration_to_char(n: int, max_iter: int) -> str:
    if n == max_iter:
        return INSIDE_CHAR
    return RAMP[math.floor(n / max_iter * (len(RAMP) - 1))]


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """Convert hue (degrees, 0-360), saturation and lightness to 0-255 RGB."""
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        round((r + m) * 255),
        round((g + m) * 255),
        round((b + m) * 255),
    )


def smooth_iteration(n: int, zx: float, zy: float) -> float:
    """Continuous escape-time estimate, falling back to `n` on overflow."""
    try:
        nu = n + 1 - math.log2(math.log2(zx * zx + zy * zy))
    except ValueError:
        return float(n)
    if not math.isfinite(nu):
        return float(n)
    return nu


def iteration_to_color(n: int, max_iter: int, zx: float, zy: float) -> Tuple[int, int, int]:
    """Smooth HSL coloring of an escape result; black for interior points."""
    if n == max_iter:
        return INSIDE_COLOR
    nu = smooth_iteration(n, zx, zy)
    hue = (nu * 360 / max_iter * HUE_CYCLES) % 360
    return hsl_to_rgb(hue, SATURATION, LIGHTNESS)
