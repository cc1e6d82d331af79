"""shade-finder — nearest reference-palette colour for hex, rgb() and hsl() input."""

from shade_finder.core.matcher import match
from shade_finder.core.notation import parse
from shade_finder.core.palette import Palette, PaletteEntry, find_closest
from shade_finder.core.types import (
    Colour,
    InvalidHexFormat,
    InvalidHslFormat,
    InvalidRgbFormat,
    MatchResult,
    ParseError,
    UnrecognizedNotation,
)

__all__ = [
    'Colour',
    'InvalidHexFormat',
    'InvalidHslFormat',
    'InvalidRgbFormat',
    'MatchResult',
    'Palette',
    'PaletteEntry',
    'ParseError',
    'UnrecognizedNotation',
    'find_closest',
    'match',
    'parse',
]
