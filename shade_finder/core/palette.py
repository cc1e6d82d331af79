"""Reference palettes and nearest-colour search.

A Palette is an immutable, ordered value built from a dataset of the shape

    {'black': '#000000', 'slate': {'50': '#f8fafc', ...}, ...}

Search is a plain linear scan using unweighted RGB Euclidean distance.
Entries are compared with strict less-than, so on a tie the entry that
comes first in palette order wins. `find_closest_many` does the same search
for a batch with numpy and keeps that tie-break (argmin returns the first
minimum).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field

import numpy as np

from shade_finder.core.notation import hex_to_rgb
from shade_finder.core.types import Colour, MatchResult

DEFAULT_SHADE = 'DEFAULT'

RGB = Colour | tuple[int, int, int]


@dataclass(frozen=True)
class PaletteEntry:
    """One reference swatch. `rgb` is decoded from `hex` when the entry is built."""

    family: str
    shade: str | None
    hex: str
    rgb: Colour = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'rgb', hex_to_rgb(self.hex))

    @property
    def code(self) -> str:
        if self.shade is None or self.shade == DEFAULT_SHADE:
            return self.family
        return f'{self.family}-{self.shade}'


@dataclass(frozen=True)
class Palette:
    """A named, ordered, non-empty tuple of swatches."""

    name: str
    entries: tuple[PaletteEntry, ...]
    help: str = ''

    def __post_init__(self) -> None:
        # own a tuple copy; a caller keeping the original list cannot change it
        object.__setattr__(self, 'entries', tuple(self.entries))
        if not self.entries:
            raise ValueError(f'Palette {self.name!r} has no entries')

    @classmethod
    def from_mapping(cls, name: str, colours: Mapping[str, str | Mapping[str, str]], help: str = '') -> Palette:
        """Flatten `family -> hex` / `family -> {shade -> hex}` in iteration order."""
        entries = []
        for family, shades in colours.items():
            if isinstance(shades, str):
                entries.append(PaletteEntry(family=family, shade=None, hex=shades))
            else:
                for shade, hex_value in shades.items():
                    entries.append(PaletteEntry(family=family, shade=shade, hex=hex_value))
        return cls(name=name, entries=tuple(entries), help=help)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    def lookup(self, code: str) -> PaletteEntry | None:
        for entry in self.entries:
            if entry.code == code:
                return entry
        return None


def _channels(rgb: RGB) -> tuple[int, int, int]:
    return rgb.as_tuple() if isinstance(rgb, Colour) else (int(rgb[0]), int(rgb[1]), int(rgb[2]))


def rgb_distance(a: RGB, b: RGB) -> float:
    """Euclidean distance in RGB space. Plain ints, so no uint8 wraparound."""
    r1, g1, b1 = _channels(a)
    r2, g2, b2 = _channels(b)
    return math.sqrt((r1 - r2) ** 2 + (g1 - g2) ** 2 + (b1 - b2) ** 2)


def find_closest(target: RGB, palette: Palette) -> MatchResult:
    """Nearest palette entry to `target`. First entry wins on ties."""
    best = palette.entries[0]
    best_dist = math.inf
    for entry in palette:
        dist = rgb_distance(target, entry.rgb)
        if dist < best_dist:
            best_dist = dist
            best = entry
    return MatchResult(code=best.code, hex=best.hex, distance=best_dist)


def _palette_array(palette: Palette) -> np.ndarray:
    return np.array([e.rgb.as_tuple() for e in palette], dtype=np.int64)


def find_closest_many(targets: Sequence[RGB] | Iterable[RGB], palette: Palette) -> list[MatchResult]:
    """Batch version of find_closest. Same results, element-wise."""
    queries = np.array([_channels(t) for t in targets], dtype=np.int64).reshape(-1, 3)
    if len(queries) == 0:
        return []
    refs = _palette_array(palette)
    # (n_queries, n_entries) squared distances; int64 so no overflow
    diff = queries[:, None, :] - refs[None, :, :]
    sq = (diff * diff).sum(axis=2)
    best = sq.argmin(axis=1)

    results = []
    for i, idx in enumerate(best):
        entry = palette.entries[int(idx)]
        results.append(MatchResult(code=entry.code, hex=entry.hex, distance=math.sqrt(int(sq[i, idx]))))
    return results


def resolve(code: str, palette: Palette) -> str | None:
    """Canonical hex for a palette code, or None if the palette has no such code."""
    entry = palette.lookup(code)
    return entry.hex if entry else None
