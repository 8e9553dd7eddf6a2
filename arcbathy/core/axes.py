from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from arcbathy.io.header import ArcHeader


@dataclass(frozen=True)
class AxisSet:
    longitudes: np.ndarray  # (ncols,) degrees, ascending
    latitudes: np.ndarray   # (nrows,) degrees, ascending, south first


def _regular_axis(start: float, step: float, count: int) -> np.ndarray:
    axis = start + step * np.arange(count, dtype=np.float64)
    axis.setflags(write=False)
    return axis


def build_axes(header: ArcHeader) -> AxisSet:
    """Cell-center axes from the header: origin + i * cellsize."""
    return AxisSet(
        longitudes=_regular_axis(header.xll_center, header.cellsize, header.ncols),
        latitudes=_regular_axis(header.yll_center, header.cellsize, header.nrows),
    )
