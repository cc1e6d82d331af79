"""Tests for shade_finder.core.palette — palette shape, distance and nearest search."""

import dataclasses

import pytest
from shade_finder.core.palette import (
    Palette,
    PaletteEntry,
    find_closest,
    find_closest_many,
    resolve,
    rgb_distance,
)
from shade_finder.core.types import Colour, MatchResult
from shade_finder.palettes.tailwind import TAILWIND_COLOURS
from shade_finder.palettes.tailwind import palette as tailwind


def _palette(colours, name='test'):
    return Palette.from_mapping(name, colours)


class TestColour:
    def test_valid(self):
        assert Colour(0, 128, 255).as_tuple() == (0, 128, 255)

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            Colour(256, 0, 0)
        with pytest.raises(ValueError):
            Colour(0, -1, 0)

    def test_non_int_rejected(self):
        with pytest.raises(ValueError):
            Colour(1.0, 0, 0)
        with pytest.raises(ValueError):
            Colour(True, 0, 0)

    def test_immutable(self):
        c = Colour(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 5

    def test_hex(self):
        assert Colour(37, 99, 235).hex == '#2563eb'


class TestPaletteEntry:
    def test_code_with_shade(self):
        assert PaletteEntry('blue', '600', '#2563eb').code == 'blue-600'

    def test_code_without_shade(self):
        assert PaletteEntry('white', None, '#ffffff').code == 'white'

    def test_default_shade_is_bare_family(self):
        assert PaletteEntry('brand', 'DEFAULT', '#123456').code == 'brand'

    def test_rgb_decoded(self):
        assert PaletteEntry('blue', '600', '#2563eb').rgb == Colour(37, 99, 235)


class TestPaletteFromMapping:
    def test_flattens_in_order(self):
        pal = _palette({'a': '#000000', 'b': {'DEFAULT': '#111111', '500': '#222222'}, 'c': '#333333'})
        assert [e.code for e in pal] == ['a', 'b', 'b-500', 'c']
        assert len(pal) == 4

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            _palette({})

    def test_family_with_no_shades_rejected_when_alone(self):
        with pytest.raises(ValueError):
            _palette({'a': {}})

    def test_lookup(self):
        pal = _palette({'a': '#000000', 'b': {'500': '#222222'}})
        assert pal.lookup('b-500').hex == '#222222'
        assert pal.lookup('b') is None

    def test_caller_list_is_copied(self):
        entries = [PaletteEntry('a', None, '#000000')]
        pal = Palette('x', entries)
        entries.append(PaletteEntry('b', None, '#ffffff'))
        entries.clear()
        assert len(pal) == 1
        assert isinstance(pal.entries, tuple)
        assert find_closest(Colour(255, 255, 255), pal).code == 'a'

    def test_immutable(self):
        pal = _palette({'a': '#000000'})
        with pytest.raises(dataclasses.FrozenInstanceError):
            pal.entries = ()


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self):
        d = rgb_distance((0, 0, 0), (255, 255, 255))
        assert d > 441  # sqrt(3 * 255^2) ≈ 441.7

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)

    def test_accepts_colour(self):
        assert rgb_distance(Colour(0, 0, 0), (3, 4, 0)) == 5.0

    def test_uses_int_not_uint8(self):
        """(0 - 200) must not wrap, even for numpy uint8 channels."""
        import numpy as np

        px = np.array([0, 0, 0], dtype=np.uint8)
        d = rgb_distance(tuple(px), (200, 200, 200))
        assert d > 300


class TestFindClosest:
    def test_exact_white(self):
        result = find_closest(Colour(255, 255, 255), tailwind)
        assert result == MatchResult(code='white', hex='#ffffff', distance=0.0)

    def test_exact_black(self):
        result = find_closest(Colour(0, 0, 0), tailwind)
        assert result.code == 'black'
        assert result.distance == 0.0

    def test_every_entry_matches_itself(self):
        seen_hex = set()
        for entry in tailwind:
            result = find_closest(entry.rgb, tailwind)
            assert result.distance == 0.0
            if entry.hex not in seen_hex:
                assert result.code == entry.code
            seen_hex.add(entry.hex)

    def test_duplicate_hex_first_in_order_wins(self):
        # zinc-50 and neutral-50 are both #fafafa; zinc is listed first
        assert TAILWIND_COLOURS['zinc']['50'] == TAILWIND_COLOURS['neutral']['50']
        assert find_closest(Colour(250, 250, 250), tailwind).code == 'zinc-50'

    def test_equal_distance_first_in_order_wins(self):
        # (250, 251, 253) is sqrt(6) from both slate-50 and gray-50
        result = find_closest((250, 251, 253), tailwind)
        assert result.code == 'slate-50'
        assert result.distance < 5

    def test_tie_break_follows_palette_order(self):
        forward = _palette({'a': '#000000', 'b': '#000000'})
        backward = _palette({'b': '#000000', 'a': '#000000'})
        assert find_closest(Colour(0, 0, 0), forward).code == 'a'
        assert find_closest(Colour(0, 0, 0), backward).code == 'b'

    def test_tie_at_nonzero_distance(self):
        pal = _palette({'dark': '#000000', 'light': '#141414'})
        assert find_closest(Colour(10, 10, 10), pal).code == 'dark'

    def test_reports_dataset_hex_verbatim(self):
        pal = _palette({'shout': '#ABCDEF'})
        assert find_closest(Colour(0, 0, 0), pal).hex == '#ABCDEF'

    def test_distance_decides_not_family(self):
        pal = _palette({'red': {'500': '#ef4444'}, 'orange': {'500': '#f97316'}})
        assert find_closest(Colour(255, 0, 0), pal).code == 'red-500'


class TestFindClosestMany:
    def test_matches_scalar_search(self):
        targets = [
            Colour(255, 0, 0),
            Colour(250, 251, 253),
            Colour(250, 250, 250),
            Colour(17, 24, 39),
            (128, 1, 128),
            (0, 0, 0),
        ]
        batch = find_closest_many(targets, tailwind)
        assert batch == [find_closest(t, tailwind) for t in targets]

    def test_empty(self):
        assert find_closest_many([], tailwind) == []

    def test_tie_break(self):
        pal = _palette({'a': '#000000', 'b': '#000000'})
        assert [r.code for r in find_closest_many([(0, 0, 0)], pal)] == ['a']


class TestResolve:
    def test_white(self):
        assert resolve('white', tailwind) == '#ffffff'

    def test_slate50(self):
        assert resolve('slate-50', tailwind) == '#f8fafc'

    def test_blue600(self):
        assert resolve('blue-600', tailwind) == '#2563eb'

    def test_unknown_returns_none(self):
        assert resolve('doesNotExist', tailwind) is None


class TestTailwindPalette:
    def test_has_white_and_black(self):
        codes = [e.code for e in tailwind]
        assert 'white' in codes
        assert 'black' in codes

    def test_has_slate_range(self):
        codes = [e.code for e in tailwind]
        for n in [50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950]:
            assert f'slate-{n}' in codes

    def test_size(self):
        assert len(tailwind) == 2 + 22 * 11

    def test_codes_unique(self):
        codes = [e.code for e in tailwind]
        assert len(codes) == len(set(codes))

    def test_values_are_hex(self):
        for entry in tailwind:
            assert entry.hex.startswith('#'), f'{entry.code} value {entry.hex} missing #'
            assert len(entry.hex) == 7, f'{entry.code} value {entry.hex} not 7 chars'
