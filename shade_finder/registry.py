"""Palette lookup by name.

Imports every module under shade_finder/palettes/ and keeps the ones that
define a `palette` object. Palettes are built once, at import, and never
change, so every caller gets the same objects.
"""

import importlib
import pkgutil

import shade_finder.palettes
from shade_finder.core.palette import Palette

DEFAULT_PALETTE = 'tailwind'

_registry: dict[str, Palette] = {}


def discover() -> dict[str, Palette]:
    """Import all palette modules and return the name -> Palette map."""
    if not _registry:
        for info in pkgutil.iter_modules(shade_finder.palettes.__path__):
            if info.name.startswith('_'):
                continue
            module = importlib.import_module(f'shade_finder.palettes.{info.name}')
            palette = getattr(module, 'palette', None)
            if isinstance(palette, Palette):
                _registry[palette.name] = palette
    return _registry


def get(name: str) -> Palette:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown palette: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_palettes() -> dict[str, Palette]:
    return discover()
