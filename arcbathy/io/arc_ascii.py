"""Read bathymetry from ASCII files with an ARC header.

Example of the layout (GEODAS Coastal Relief Model export)::

    NCOLS   601
    NROWS  1201
    XLLCENTER  -80.25000
    YLLCENTER  26.00000
    CELLSIZE 0.00083333
    NODATA_VALUE  999999
         6.0      6.0      6.0      6.0      6.0      ...

Rows run from the northernmost latitude to the southernmost; columns run
west to east. Depths are positive down, in meters. Each value is the mean
depth over the CELLSIZE x CELLSIZE cell centered on its coordinates.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import numpy as np

from arcbathy.core.assemble import BathymetryGrid, assemble
from arcbathy.core.axes import build_axes
from arcbathy.errors import FormatError
from arcbathy.io.config import BathyConfig
from arcbathy.io.header import ArcHeader, parse_header

logger = logging.getLogger(__name__)

NODATA_RTOL = 1e-6


def nodata_mask(raw: np.ndarray, nodata_value: float) -> np.ndarray:
    """Cells matching the sentinel, with a tolerance for printed round-off."""
    if np.isnan(nodata_value):
        return np.isnan(raw)
    if np.isinf(nodata_value):
        return raw == nodata_value
    tol = NODATA_RTOL * max(1.0, abs(nodata_value))
    return np.abs(raw - nodata_value) <= tol


def read_depth_matrix(stream: TextIO, header: ArcHeader) -> np.ma.MaskedArray:
    """Read the data block following the header.

    Returns a (nrows, ncols) masked array with row 0 the southernmost row,
    so it lines up with ascending latitude. NODATA cells are masked and
    hold NaN underneath.
    """
    tokens = stream.read().split()
    if len(tokens) != header.size:
        raise FormatError(
            f"token count mismatch: expected {header.ncols}x{header.nrows}={header.size} "
            f"values, found {len(tokens)}"
        )
    try:
        raw = np.asarray(tokens, dtype=np.float64)
    except ValueError:
        bad = next((t for t in tokens if not _is_number(t)), None)
        raise FormatError(f"not numeric: data token {bad!r}") from None

    # file order is north to south
    raw = raw.reshape(header.shape)[::-1]
    mask = nodata_mask(raw, header.nodata_value)
    data = np.where(mask, np.nan, raw)
    return np.ma.MaskedArray(data, mask=mask)


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def _open_checked(path: str | Path) -> Path:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Bathymetry file not found: {p}")
    if not p.is_file():
        raise IOError(f"Not a regular file: {p}")
    return p


def read_arc_ascii(path: str | Path) -> tuple[ArcHeader, np.ma.MaskedArray]:
    """Header and south-first depth matrix of an ARC ASCII file, unconverted."""
    p = _open_checked(path)
    with open(p, "r", encoding="utf-8") as f:
        try:
            header = parse_header(f)
            matrix = read_depth_matrix(f, header)
        except UnicodeDecodeError as exc:
            raise FormatError(f"not a text grid: {p}: {exc}") from exc
    return header, matrix


def load_arc_bathy(path: str | Path,
                   earth_radius: float,
                   *,
                   method: str = "linear",
                   missing: str = "nan",
                   edge_limit: bool = True) -> BathymetryGrid:
    """Load a whole ARC ASCII bathymetry file as a BathymetryGrid.

    earth_radius is the local radius of curvature in meters; use 0 to keep
    depths relative to the ocean surface (radial = -depth). The remaining
    keywords configure the interpolation grid.
    """
    logger.info("Loading ARC ASCII bathymetry: %s", path)
    header, matrix = read_arc_ascii(path)
    axes = build_axes(header)
    p = Path(path)

    n_missing = int(np.count_nonzero(np.ma.getmaskarray(matrix)))
    if n_missing == header.size:
        logger.warning("%s: every cell equals NODATA_VALUE %g", p, header.nodata_value)
    else:
        logger.debug("%s: %d of %d cells are NODATA", p, n_missing, header.size)

    grid = assemble(axes, matrix, header, earth_radius,
                    method=method, missing=missing, edge_limit=edge_limit,
                    source_path=p)
    logger.info("Loaded %dx%d bathymetry grid from %s", header.nrows, header.ncols, p)
    return grid


def load_from_config(cfg: BathyConfig) -> BathymetryGrid:
    return load_arc_bathy(cfg.bath_path, cfg.earth_radius,
                          method=cfg.method, missing=cfg.missing,
                          edge_limit=cfg.edge_limit)
