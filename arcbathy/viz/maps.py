from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import LinearSegmentedColormap, Normalize

from arcbathy.core.assemble import BathymetryGrid


def make_depth_cmap(vmin: float, vmax: float, land_color: str = 'saddlebrown'):
    """Colormap for positive-down depths: land (depth <= 0) in land_color, water in Blues."""
    span = max(vmax - vmin, 1e-12)
    zero_frac = float(np.clip(-vmin / span, 0.0, 1.0))
    cb = plt.cm.Blues
    light, dark = cb(0.2), cb(1.0)
    if zero_frac == 0.0:
        cdict = [(0.0, light), (1.0, dark)]
    elif zero_frac == 1.0:
        cdict = [(0.0, land_color), (1.0, land_color)]
    else:
        cdict = [
            (0.0, land_color),
            (zero_frac, land_color),
            (zero_frac, light),
            (1.0, dark),
        ]
    cmap = LinearSegmentedColormap.from_list('depth', cdict)
    cmap.set_bad('white')
    return cmap, Normalize(vmin=vmin, vmax=vmax)


def plot_bathymetry(grid: BathymetryGrid, title: str = "", cmap=None):
    """Depth map on geographic axes; NODATA cells are left blank."""
    depth = grid.depth
    valid = depth.compressed()
    vmin, vmax = (float(valid.min()), float(valid.max())) if valid.size else (0.0, 1.0)
    norm = None
    if cmap is None:
        cmap, norm = make_depth_cmap(vmin, vmax)

    half = 0.5 * grid.header.cellsize
    min_lon, min_lat, max_lon, max_lat = grid.bounds
    extent = (min_lon - half, max_lon + half, min_lat - half, max_lat + half)

    fig, ax = plt.subplots()
    im = ax.imshow(depth, origin='lower', extent=extent, cmap=cmap, norm=norm,
                   interpolation='nearest')
    cbar = fig.colorbar(im, ax=ax)
    cbar.set_label('Depth (m)')
    ax.set_title(title)
    ax.set_xlabel('Longitude')
    ax.set_ylabel('Latitude')
    return fig, ax
