"""HSL to RGB conversion.

Hue is in degrees, saturation and lightness in percent. Hue is divided by
360 with no modulo wrap, so callers should pass a hue in [0, 360].
The result is always a valid Colour: channels are rounded half away from
zero and clamped into [0, 255], so the conversion never fails.
"""

import math

from shade_finder.core.types import Colour


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves away from zero (127.5 -> 128)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _to_channel(fraction: float) -> int:
    # extreme inputs can overflow to inf or nan
    if math.isnan(fraction):
        return 0
    return round_half_up(min(1.0, max(0.0, fraction)) * 255)


def hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Colour:  # noqa: E741
    h /= 360
    s /= 100
    l /= 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = hue_to_channel(p, q, h + 1 / 3)
        g = hue_to_channel(p, q, h)
        b = hue_to_channel(p, q, h - 1 / 3)

    return Colour(_to_channel(r), _to_channel(g), _to_channel(b))
