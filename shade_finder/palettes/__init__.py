"""Built-in reference palettes.

Every module here that defines a module-level `palette`
(a shade_finder.core.palette.Palette) is registered under its name by
shade_finder.registry.discover().
"""
