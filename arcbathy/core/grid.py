from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.interpolate import RegularGridInterpolator
from scipy.ndimage import distance_transform_edt

METHODS = ("nearest", "linear", "slinear", "cubic")
SPLINE_METHODS = ("slinear", "cubic")
MISSING_POLICIES = ("nan", "nearest")


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def _check_axis(axis: np.ndarray, length: int, dim: int) -> np.ndarray:
    if axis.ndim != 1:
        raise ValueError(f"axis {dim} must be 1-D, got shape {axis.shape}")
    if axis.size != length:
        raise ValueError(f"axis {dim} has {axis.size} points but values have {length} along it")
    if not np.all(np.isfinite(axis)):
        raise ValueError(f"axis {dim} contains non-finite coordinates")
    step = np.diff(axis)
    if step.size and not (np.all(step > 0) or np.all(step < 0)):
        raise ValueError(f"axis {dim} must be strictly monotonic")
    return axis


def fill_nearest(data: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """Replace masked cells with the value of the nearest unmasked cell.

    Distances are measured in index space. If every cell is masked the
    data is returned unchanged.
    """
    if not mask.any() or mask.all():
        return data.copy()
    idx = distance_transform_edt(mask, return_distances=False, return_indices=True)
    return data[tuple(idx)]


class DataGrid:
    """Regular N-D grid of values with a query interface.

    Wraps scipy's RegularGridInterpolator. Axes may be ascending or
    descending; values may be a masked array, masked (or non-finite) cells
    being treated as missing according to ``missing``:

    - "nan": queries whose linear stencil touches a missing cell yield NaN
    - "nearest": missing cells take the value of the nearest valid cell

    With ``edge_limit`` queries outside the axes are clamped to the grid
    edge; otherwise they yield NaN.
    """

    def __init__(self, axes: Sequence[np.ndarray], values, *,
                 method: str = "linear",
                 missing: str = "nan",
                 edge_limit: bool = True):
        if method not in METHODS:
            raise ValueError(f"method must be one of {METHODS}, got {method!r}")
        if missing not in MISSING_POLICIES:
            raise ValueError(f"missing must be one of {MISSING_POLICIES}, got {missing!r}")

        vals = np.ma.asarray(values, dtype=np.float64)
        if len(axes) != vals.ndim:
            raise ValueError(f"{len(axes)} axes given for {vals.ndim}-D values")
        self._axes = tuple(
            _readonly(_check_axis(np.array(a, dtype=np.float64), n, d))
            for d, (a, n) in enumerate(zip(axes, vals.shape))
        )

        mask = np.ma.getmaskarray(vals) | ~np.isfinite(vals.filled(np.nan))
        data = np.where(mask, np.nan, vals.filled(np.nan))
        self._data = _readonly(data)
        self._mask = _readonly(mask)
        self._method = method
        self._missing = missing
        self._edge_limit = bool(edge_limit)

        # Spline solvers need a finite table; with the "nan" policy the
        # filled cells are hidden again by a linear guard over the mask.
        spline = method in SPLINE_METHODS
        table = fill_nearest(data, mask) if (missing == "nearest" or spline) else data.copy()
        guard = mask.astype(np.float64) if (spline and missing == "nan" and mask.any()) else None
        self._build_interpolator(table, guard)

    def _build_interpolator(self, table: np.ndarray, guard: np.ndarray | None) -> None:
        # Interpolate over ascending axes only; length-1 axes are constant
        # along their dimension and are left out of the interpolator.
        sorted_axes = []
        for d, axis in enumerate(self._axes):
            if axis.size > 1 and axis[0] > axis[-1]:
                axis = axis[::-1]
                table = np.flip(table, axis=d)
                if guard is not None:
                    guard = np.flip(guard, axis=d)
            sorted_axes.append(axis)
        self._sorted_axes = tuple(sorted_axes)
        self._live = tuple(d for d, a in enumerate(sorted_axes) if a.size > 1)
        self._guard = None

        if not self._live or not np.isfinite(table).any():
            self._interp = None
            self._constant = float(table.reshape(-1)[0])
            return
        live_axes = [sorted_axes[d] for d in self._live]
        live_shape = [a.size for a in live_axes]
        self._interp = RegularGridInterpolator(
            live_axes,
            table.reshape(live_shape),
            method=self._method,
            bounds_error=False,
            fill_value=np.nan,
        )
        if guard is not None:
            self._guard = RegularGridInterpolator(
                live_axes, guard.reshape(live_shape), method="linear",
                bounds_error=False, fill_value=np.nan,
            )

    @property
    def method(self) -> str:
        return self._method

    @property
    def missing(self) -> str:
        return self._missing

    @property
    def edge_limit(self) -> bool:
        return self._edge_limit

    @property
    def ndim(self) -> int:
        return len(self._axes)

    @property
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    @property
    def axes(self) -> tuple[np.ndarray, ...]:
        return self._axes

    def axis(self, dim: int) -> np.ndarray:
        return self._axes[dim]

    @property
    def values(self) -> np.ma.MaskedArray:
        """Stored values; missing cells are masked."""
        return np.ma.MaskedArray(self._data, mask=self._mask, copy=False)

    @property
    def missing_mask(self) -> np.ndarray:
        return self._mask

    def value_at(self, *coords):
        """Interpolated value at the given coordinates, one per axis.

        Coordinates broadcast against each other; scalar input gives a float.
        """
        if len(coords) != self.ndim:
            raise ValueError(f"expected {self.ndim} coordinates, got {len(coords)}")
        arrays = np.broadcast_arrays(*[np.asarray(c, dtype=np.float64) for c in coords])
        shape = arrays[0].shape
        pts = [a.reshape(-1) for a in arrays]

        outside = np.zeros(pts[0].shape, dtype=bool)
        for d, axis in enumerate(self._sorted_axes):
            lo, hi = axis[0], axis[-1]
            if self.edge_limit:
                pts[d] = np.clip(pts[d], lo, hi)
            else:
                outside |= (pts[d] < lo) | (pts[d] > hi)

        if self._interp is None:
            out = np.full(pts[0].shape, self._constant)
        else:
            live = np.column_stack([pts[d] for d in self._live])
            out = self._interp(live)
            if self._guard is not None:
                out = np.where(self._guard(live) > 0, np.nan, out)
        out = np.where(outside, np.nan, out).reshape(shape)
        return float(out) if out.ndim == 0 else out
