"""shade_finder.core — Foundation layer.

Contains the colour types, notation parser, HSL converter, palette matcher,
environment loading and report builder. This module has NO dependencies on
shade_finder.palettes or shade_finder.registry.
Only stdlib and numpy are allowed here.
"""
