from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TextIO

from arcbathy.errors import FormatError

# Conventional order of the six header lines.
HEADER_KEYS = ("ncols", "nrows", "xllcenter", "yllcenter", "cellsize", "nodata_value")

# ESRI corner variant; converted to cell centers after parsing.
_CORNER_KEYS = {"xllcorner": "xllcenter", "yllcorner": "yllcenter"}


@dataclass(frozen=True)
class ArcHeader:
    ncols: int
    nrows: int
    xll_center: float  # longitude of column 0 cell center (deg)
    yll_center: float  # latitude of the southern row cell center (deg)
    cellsize: float
    nodata_value: float

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols) of the depth matrix."""
        return self.nrows, self.ncols

    @property
    def size(self) -> int:
        return self.nrows * self.ncols


def _to_number(key: str, text: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise FormatError(f"not numeric: {key.upper()} value {text!r}") from None


def _to_count(key: str, text: str) -> int:
    value = _to_number(key, text)
    if not math.isfinite(value) or not value.is_integer():
        raise FormatError(f"not an integer: {key.upper()} value {text!r}")
    if value < 1:
        raise FormatError(f"{key.upper()} must be >= 1, got {text!r}")
    return int(value)


def _normalized_keys(lines: list[list[str]]) -> list[str]:
    keys = [parts[0].lower() if parts else "" for parts in lines]
    return [_CORNER_KEYS.get(k, k) for k in keys]


def _check_keys_present(keys: list[str], complete: bool) -> None:
    # On a short header only keys followed by a later key count as missing.
    for pos, expected in enumerate(HEADER_KEYS):
        if expected in keys:
            continue
        if complete or any(k in keys for k in HEADER_KEYS[pos + 1:]):
            raise FormatError(f"missing key: {expected.upper()}")


def parse_header(stream: TextIO) -> ArcHeader:
    """Read the six header lines of an ARC ASCII grid from stream.

    Keys are matched case-insensitively and must appear in the conventional
    order. XLLCORNER/YLLCORNER are accepted and shifted by half a cell.
    Raises FormatError for missing, misplaced or non-numeric entries and
    IOError if the stream ends inside the header.
    """
    lines: list[list[str]] = []
    for i in range(len(HEADER_KEYS)):
        line = stream.readline()
        if not line:
            _check_keys_present(_normalized_keys(lines), complete=False)
            raise IOError(f"unexpected end of file in header (line {i + 1} of {len(HEADER_KEYS)})")
        lines.append(line.split())

    raw_keys = [parts[0].lower() if parts else "" for parts in lines]
    keys = _normalized_keys(lines)
    _check_keys_present(keys, complete=True)
    for i, (expected, key) in enumerate(zip(HEADER_KEYS, keys)):
        if key != expected:
            raise FormatError(
                f"header line {i + 1}: expected {expected.upper()}, found {raw_keys[i].upper()!r}"
            )
        if len(lines[i]) != 2:
            raise FormatError(f"header line {i + 1}: expected 'KEY value', found {' '.join(lines[i])!r}")

    values = dict(zip(keys, (parts[1] for parts in lines)))
    ncols = _to_count("ncols", values["ncols"])
    nrows = _to_count("nrows", values["nrows"])
    cellsize = _to_number("cellsize", values["cellsize"])
    if not (math.isfinite(cellsize) and cellsize > 0):
        raise FormatError(f"CELLSIZE must be > 0, got {values['cellsize']!r}")

    x0 = _to_number("xllcenter", values["xllcenter"])
    y0 = _to_number("yllcenter", values["yllcenter"])
    if not (math.isfinite(x0) and math.isfinite(y0)):
        raise FormatError("lower-left coordinates must be finite")
    if raw_keys[2] == "xllcorner":
        x0 += 0.5 * cellsize
    if raw_keys[3] == "yllcorner":
        y0 += 0.5 * cellsize

    return ArcHeader(
        ncols=ncols,
        nrows=nrows,
        xll_center=x0,
        yll_center=y0,
        cellsize=cellsize,
        nodata_value=_to_number("nodata_value", values["nodata_value"]),
    )
