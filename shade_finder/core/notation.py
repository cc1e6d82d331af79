"""Regex-based parser for colour notations.

Accepts exactly three forms, picked by prefix:

    #RGB / #RRGGBB          hex digits, any case
    rgb(R, G, B)            decimal integers, 0-255
    hsl(H, S%, L%)          decimal integers, % optional; H 0-360, S and L 0-100

Out-of-range numerals are rejected rather than clamped. Prefixes are
lowercase only.
"""

import re

from shade_finder.core.convert import hsl_to_rgb
from shade_finder.core.types import (
    Colour,
    InvalidHexFormat,
    InvalidHslFormat,
    InvalidRgbFormat,
    UnrecognizedNotation,
)

_HEX_RE = re.compile(r'#((?:[0-9A-Fa-f]{3}){1,2})', re.ASCII)
_RGB_RE = re.compile(r'rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)', re.ASCII)
_HSL_RE = re.compile(r'hsl\(\s*(\d+)\s*,\s*(\d+)%?\s*,\s*(\d+)%?\s*\)', re.ASCII)


def detect_notation(text: str) -> str | None:
    """Return 'hex', 'rgb' or 'hsl' from the prefix alone, or None."""
    if text.startswith('#'):
        return 'hex'
    if text.startswith('rgb'):
        return 'rgb'
    if text.startswith('hsl'):
        return 'hsl'
    return None


def hex_to_rgb(value: str) -> Colour:
    """Decode a trusted 3- or 6-digit hex string, with or without '#'."""
    digits = value.lstrip('#')
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return Colour(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def parse(text: str) -> Colour:
    """Parse a colour string. Raises a ParseError subclass on bad input."""
    text = text.strip()
    notation = detect_notation(text)
    if notation == 'hex':
        return _parse_hex(text)
    if notation == 'rgb':
        return _parse_rgb(text)
    if notation == 'hsl':
        return _parse_hsl(text)
    raise UnrecognizedNotation(text)


def _parse_hex(text: str) -> Colour:
    m = _HEX_RE.fullmatch(text)
    if not m:
        raise InvalidHexFormat(text)
    return hex_to_rgb(m.group(1))


def _parse_rgb(text: str) -> Colour:
    m = _RGB_RE.fullmatch(text)
    if not m:
        raise InvalidRgbFormat(text)
    channels = [int(v) for v in m.groups()]
    for value in channels:
        if value > 255:
            raise InvalidRgbFormat(text, f'channel {value} is above 255')
    r, g, b = channels
    return Colour(r, g, b)


def _parse_hsl(text: str) -> Colour:
    m = _HSL_RE.fullmatch(text)
    if not m:
        raise InvalidHslFormat(text)
    h, s, l = (int(v) for v in m.groups())  # noqa: E741
    if h > 360:
        raise InvalidHslFormat(text, f'hue {h} is above 360')
    if s > 100:
        raise InvalidHslFormat(text, f'saturation {s} is above 100')
    if l > 100:
        raise InvalidHslFormat(text, f'lightness {l} is above 100')
    return hsl_to_rgb(h, s, l)
