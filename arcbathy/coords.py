from __future__ import annotations

import math

import numpy as np

MEAN_EARTH_RADIUS = 6_371_000.0  # meters


def _check_radius(earth_radius: float) -> float:
    r = float(earth_radius)
    if not math.isfinite(r) or r < 0:
        raise ValueError(f"earth_radius must be finite and >= 0, got {earth_radius!r}")
    return r


def to_colatitude(latitude_deg):
    """Latitude in degrees -> colatitude in radians (0 at the north pole)."""
    return np.radians(90.0 - np.asarray(latitude_deg, dtype=float))


def to_latitude(colatitude_rad):
    return 90.0 - np.degrees(np.asarray(colatitude_rad, dtype=float))


def radial_from_depth(depth, earth_radius: float):
    """Depth (positive down, meters) -> radial distance.

    With earth_radius == 0 the result is -depth, i.e. relative to a flat
    ocean surface at zero.
    """
    r = _check_radius(earth_radius)
    d = np.asarray(depth, dtype=float)
    return r - d if r > 0 else -d


def depth_from_radial(radial, earth_radius: float):
    r = _check_radius(earth_radius)
    rho = np.asarray(radial, dtype=float)
    return r - rho if r > 0 else -rho


def to_spherical(latitude_deg, longitude_deg, depth, earth_radius: float):
    """Convert geodetic (lat, lon, depth) to (colatitude, longitude, radial).

    Angles come back in radians. Accepts scalars or numpy arrays; array
    inputs must broadcast against each other.
    """
    colatitude = to_colatitude(latitude_deg)
    longitude = np.radians(np.asarray(longitude_deg, dtype=float))
    radial = radial_from_depth(depth, earth_radius)
    return colatitude, longitude, radial


def to_geodetic(colatitude_rad, longitude_rad, radial, earth_radius: float):
    """Inverse of to_spherical: returns (latitude_deg, longitude_deg, depth)."""
    latitude = to_latitude(colatitude_rad)
    longitude = np.degrees(np.asarray(longitude_rad, dtype=float))
    depth = depth_from_radial(radial, earth_radius)
    return latitude, longitude, depth
