"""Shared types for shade-finder: Colour, MatchResult and the parse errors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Colour:
    """An RGB colour. Every channel is an int in [0, 255]."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'Channel {name} must be an int, got {value!r}')
            if not 0 <= value <= 255:
                raise ValueError(f'Channel {name} out of range 0-255: {value}')

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'


@dataclass(frozen=True)
class MatchResult:
    """Winning palette entry for a query colour."""

    code: str
    hex: str  # literal hex from the palette dataset, never re-encoded
    distance: float = 0.0


class ParseError(ValueError):
    """Input text could not be read as a colour.

    Subclasses name the notation that was attempted. `str(err)` is the
    user-facing message.
    """

    notation: str | None = None
    usage = 'Unrecognized color format. Use HEX, RGB, or HSL.'

    def __init__(self, text: str, detail: str | None = None):
        self.text = text
        self.detail = detail
        message = self.usage if detail is None else f'{self.usage} ({detail})'
        super().__init__(message)


class UnrecognizedNotation(ParseError):
    pass


class InvalidHexFormat(ParseError):
    notation = 'hex'
    usage = 'Invalid HEX format. Use the format #RGB or #RRGGBB.'


class InvalidRgbFormat(ParseError):
    notation = 'rgb'
    usage = 'Invalid RGB format. Use the format rgb(R, G, B).'


class InvalidHslFormat(ParseError):
    notation = 'hsl'
    usage = 'Invalid HSL format. Use the format hsl(H, S%, L%).'
