"""Loader for ARC ASCII bathymetry grids in spherical-earth coordinates.

Modules:
- arcbathy.coords: geodetic <-> spherical-earth conversions
- arcbathy.errors: format errors raised while parsing
- arcbathy.io.arc_ascii / config: reading grids and loader configuration
- arcbathy.core.axes / grid / assemble: axes, interpolation grid, final product
- arcbathy.viz.maps: plotting helpers without side effects (no plt.show inside)
"""
