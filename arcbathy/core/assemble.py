from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np

from arcbathy.coords import depth_from_radial, radial_from_depth, to_colatitude
from arcbathy.core.axes import AxisSet
from arcbathy.core.grid import DataGrid
from arcbathy.io.header import ArcHeader


@dataclass(frozen=True)
class BathymetryGrid:
    """Bathymetry stored in spherical-earth coordinates.

    The interpolation grid has axes (colatitude, longitude) in radians and
    holds radial distances: earth_radius - depth, or -depth when
    earth_radius is 0. Missing (NODATA) cells stay masked.
    """
    header: ArcHeader
    axes: AxisSet                # geodetic axes, degrees
    earth_radius: float
    grid: DataGrid
    source_path: Optional[Path] = None

    @property
    def shape(self) -> Tuple[int, int]:
        """(latitudes, longitudes)"""
        return self.grid.shape

    @property
    def latitudes(self) -> np.ndarray:
        return self.axes.latitudes

    @property
    def longitudes(self) -> np.ndarray:
        return self.axes.longitudes

    @property
    def colatitudes(self) -> np.ndarray:
        return self.grid.axis(0)

    @property
    def longitudes_rad(self) -> np.ndarray:
        return self.grid.axis(1)

    @property
    def radial(self) -> np.ma.MaskedArray:
        return self.grid.values

    @property
    def depth(self) -> np.ma.MaskedArray:
        """Depths (positive down) recovered from the radial values."""
        r = self.grid.values
        return np.ma.MaskedArray(depth_from_radial(r.data, self.earth_radius),
                                 mask=np.ma.getmaskarray(r))

    @property
    def valid_mask(self) -> np.ndarray:
        return ~self.grid.missing_mask

    @property
    def valid_ratio(self) -> float:
        return float(np.count_nonzero(self.valid_mask)) / self.valid_mask.size

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """(min_lon, min_lat, max_lon, max_lat) of the cell centers."""
        lon, lat = self.longitudes, self.latitudes
        return float(lon[0]), float(lat[0]), float(lon[-1]), float(lat[-1])

    def radius_at(self, colatitude, longitude):
        """Interpolated radial distance at colatitude/longitude (radians)."""
        return self.grid.value_at(colatitude, longitude)

    def depth_at(self, latitude, longitude):
        """Interpolated depth at latitude/longitude (degrees)."""
        rho = self.grid.value_at(to_colatitude(latitude), np.radians(longitude))
        d = depth_from_radial(rho, self.earth_radius)
        return float(d) if np.ndim(d) == 0 else d

    def get_statistics(self) -> Dict[str, float]:
        """Statistics of the valid depths; empty when no cell is valid."""
        valid = self.depth.compressed()
        if valid.size == 0:
            return {}
        return {
            "min": float(np.min(valid)),
            "max": float(np.max(valid)),
            "mean": float(np.mean(valid)),
            "std": float(np.std(valid)),
            "median": float(np.median(valid)),
            "count": int(valid.size),
            "valid_ratio": self.valid_ratio,
        }


def assemble(axes: AxisSet,
             matrix: np.ma.MaskedArray,
             header: ArcHeader,
             earth_radius: float,
             *,
             method: str = "linear",
             missing: str = "nan",
             edge_limit: bool = True,
             source_path: Optional[Path] = None) -> BathymetryGrid:
    """Convert axes and depths to spherical-earth form and freeze them.

    Only unmasked depths go through the depth -> radial conversion; masked
    cells keep their marker.
    """
    if matrix.shape != header.shape:
        raise ValueError(f"matrix shape {matrix.shape} does not match header {header.shape}")
    if (axes.latitudes.size, axes.longitudes.size) != header.shape:
        raise ValueError("axis lengths do not match the header dimensions")

    colatitudes = to_colatitude(axes.latitudes)
    longitudes = np.radians(axes.longitudes)

    mask = np.ma.getmaskarray(matrix)
    radial = np.full(matrix.shape, np.nan)
    radial[~mask] = radial_from_depth(np.ma.getdata(matrix)[~mask], earth_radius)

    grid = DataGrid((colatitudes, longitudes),
                    np.ma.MaskedArray(radial, mask=mask),
                    method=method, missing=missing, edge_limit=edge_limit)
    return BathymetryGrid(header=header, axes=axes, earth_radius=float(earth_radius),
                          grid=grid, source_path=source_path)
