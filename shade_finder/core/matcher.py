"""Text in, palette match out: parse() followed by find_closest()."""

from shade_finder.core.notation import parse
from shade_finder.core.palette import Palette, find_closest
from shade_finder.core.types import MatchResult


def match(text: str, palette: Palette) -> MatchResult:
    """Find the palette entry closest to a colour string.

    Raises a ParseError subclass before any matching if `text` is not a
    hex, rgb() or hsl() colour.
    """
    return find_closest(parse(text), palette)
