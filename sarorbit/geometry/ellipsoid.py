# -*- coding: utf-8 -*-
"""
Ellipsoid Model - Reference surface, local radius and geodetic conversions.

Implements conversions between geodetic (latitude, longitude, height) and
Earth-centered Cartesian coordinates for an arbitrary ellipsoid of
revolution given by its equatorial radius and flattening, plus the local
ellipsoid radius used by the orbit height/velocity solver and the ground
point elevation correction.

Dependencies
------------
numpy - Vectorized trigonometry

License
-------
MIT License
Copyright (c) 2024 geoint.org

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from dataclasses import dataclass
from typing import Tuple

# Third-party
import numpy as np

# sarorbit internal
from sarorbit.utils.constants import WGS84_A, WGS84_B


# ===================================================================
# Local radius
# ===================================================================

def geodetic_radius(latitude: np.ndarray, ra: float, rc: float) -> np.ndarray:
    """
    Radius of the ellipsoid at a given latitude.

    ``re = 1 / sqrt(cos²(lat)/ra² + sin²(lat)/rc²)``. No distinction is made
    between geocentric and geodetic latitude.

    Parameters
    ----------
    latitude : np.ndarray
        Latitude in radians.
    ra : float
        Equatorial radius in meters (> 0).
    rc : float
        Polar radius in meters (> 0).

    Returns
    -------
    np.ndarray
        Ellipsoid radius in meters.
    """
    latitude = np.asarray(latitude, dtype=np.float64)
    ct = np.cos(latitude)
    st = np.sin(latitude)
    return 1.0 / np.sqrt((ct * ct) / (ra * ra) + (st * st) / (rc * rc))


# ===================================================================
# Geodetic <-> Cartesian
# ===================================================================

def plh2xyz(
    lat: np.ndarray,
    lon: np.ndarray,
    height: np.ndarray,
    ra: float,
    flattening: float
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert geodetic coordinates to Earth-centered Cartesian.

    Parameters
    ----------
    lat : np.ndarray
        Geodetic latitude in degrees.
    lon : np.ndarray
        Longitude in degrees.
    height : np.ndarray
        Height above the ellipsoid in meters.
    ra : float
        Equatorial radius in meters.
    flattening : float
        Flattening ``(ra - rc) / ra``.

    Returns
    -------
    x, y, z : np.ndarray
        Cartesian coordinates in meters.
    """
    lat_rad = np.radians(np.asarray(lat, dtype=np.float64))
    lon_rad = np.radians(np.asarray(lon, dtype=np.float64))
    height = np.asarray(height, dtype=np.float64)

    e2 = flattening * (2.0 - flattening)
    sin_lat = np.sin(lat_rad)
    cos_lat = np.cos(lat_rad)

    # Prime vertical radius of curvature
    N = ra / np.sqrt(1.0 - e2 * sin_lat * sin_lat)

    x = (N + height) * cos_lat * np.cos(lon_rad)
    y = (N + height) * cos_lat * np.sin(lon_rad)
    z = (N * (1.0 - e2) + height) * sin_lat

    return x, y, z


def xyz2plh(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    ra: float,
    flattening: float,
    tol: float = 1e-14,
    max_iter: int = 20
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Convert Earth-centered Cartesian coordinates to geodetic.

    Fixed-point iteration on latitude, ``lat = atan2(z + e²·N·sin(lat), p)``,
    started from the Bowring initial guess. The height formula used is valid
    at the poles.

    Parameters
    ----------
    x, y, z : np.ndarray
        Cartesian coordinates in meters.
    ra : float
        Equatorial radius in meters.
    flattening : float
        Flattening ``(ra - rc) / ra``.
    tol : float
        Latitude convergence threshold in radians.
    max_iter : int
        Maximum number of iterations.

    Returns
    -------
    lat : np.ndarray
        Geodetic latitude in degrees.
    lon : np.ndarray
        Longitude in degrees.
    height : np.ndarray
        Height above the ellipsoid in meters.
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    z = np.asarray(z, dtype=np.float64)

    e2 = flattening * (2.0 - flattening)
    p = np.sqrt(x * x + y * y)
    lon = np.arctan2(y, x)

    lat = np.arctan2(z, p * (1.0 - e2))
    for _ in range(max_iter):
        sin_lat = np.sin(lat)
        N = ra / np.sqrt(1.0 - e2 * sin_lat * sin_lat)
        lat_new = np.arctan2(z + e2 * N * sin_lat, p)
        converged = np.all(np.abs(lat_new - lat) < tol)
        lat = lat_new
        if converged:
            break

    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    N = ra / np.sqrt(1.0 - e2 * sin_lat * sin_lat)
    height = p * cos_lat + (z + e2 * N * sin_lat) * sin_lat - N

    return np.degrees(lat), np.degrees(lon), height


# ===================================================================
# Ellipsoid model
# ===================================================================

@dataclass(frozen=True)
class EllipsoidModel:
    """
    Reference ellipsoid of revolution.

    Attributes
    ----------
    equatorial_radius : float
        Semi-major axis ``ra`` in meters.
    polar_radius : float
        Semi-minor axis ``rc`` in meters.
    """
    equatorial_radius: float
    polar_radius: float

    def __post_init__(self) -> None:
        if self.equatorial_radius <= 0 or self.polar_radius <= 0:
            raise ValueError(
                f"Ellipsoid semi-axes must be positive, got ra={self.equatorial_radius}, "
                f"rc={self.polar_radius}"
            )

    @property
    def flattening(self) -> float:
        """Flattening ``(ra - rc) / ra``."""
        return (self.equatorial_radius - self.polar_radius) / self.equatorial_radius

    @property
    def eccentricity_squared(self) -> float:
        """First eccentricity squared ``f (2 - f)``."""
        f = self.flattening
        return f * (2.0 - f)

    def radius_at(self, latitude: np.ndarray) -> np.ndarray:
        """Local radius at latitude (radians). See :func:`geodetic_radius`."""
        return geodetic_radius(latitude, self.equatorial_radius, self.polar_radius)

    def to_cartesian(self, lat, lon, height):
        """Geodetic (degrees, meters) to Cartesian. See :func:`plh2xyz`."""
        return plh2xyz(lat, lon, height, self.equatorial_radius, self.flattening)

    def to_geodetic(self, x, y, z):
        """Cartesian to geodetic (degrees, meters). See :func:`xyz2plh`."""
        return xyz2plh(x, y, z, self.equatorial_radius, self.flattening)


WGS84 = EllipsoidModel(WGS84_A, WGS84_B)

__all__ = [
    "geodetic_radius",
    "plh2xyz",
    "xyz2plh",
    "EllipsoidModel",
    "WGS84",
]
