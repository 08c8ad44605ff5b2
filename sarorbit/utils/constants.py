# -*- coding: utf-8 -*-
"""
Physical Constants - Physical, geodetic and legacy processing constants.

Provides commonly used constants including:
- Speed of light (exact SI value and the legacy value used for range
  pixel spacing)
- WGS-84 ellipsoid parameters
- Sensor identity codes and their empirical pixel biases

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

from enum import IntEnum
from typing import Dict, Tuple

# ===================================================================
# Physical Constants
# ===================================================================

#: Speed of light in vacuum (meters per second)
#: Exact value as defined by SI units
SPEED_OF_LIGHT = 299792458.0  # m/s

#: Speed of light used for slant range pixel spacing (meters per second).
#: The empirical sensor biases below were calibrated with this value.
SOL = 299792456.0  # m/s

#: Seconds in one day; PRM clock fields are expressed in days
SECONDS_PER_DAY = 86400.0

# ===================================================================
# WGS-84 Ellipsoid Parameters
# ===================================================================

#: WGS-84 semi-major axis (equatorial radius) in meters
WGS84_A = 6378137.0  # m

#: WGS-84 semi-minor axis (polar radius) in meters
WGS84_B = 6356752.314245  # m

#: WGS-84 flattening (f = (a-b)/a)
WGS84_F = (WGS84_A - WGS84_B) / WGS84_A  # ~1/298.257223563

#: WGS-84 first eccentricity squared (e² = (a²-b²)/a²)
WGS84_E2 = (WGS84_A**2 - WGS84_B**2) / WGS84_A**2  # ~0.00669437999014

# ===================================================================
# Orbit Geometry Constants
# ===================================================================

#: Number of samples used by each Hermite interpolation window
HERMITE_POINTS = 6

#: Guard samples added on each side of the dense geolocation orbit table
ORBIT_PAD_SAMPLES = 8000

#: Golden-section search stopping width, in table index units
SEARCH_TOLERANCE = 3

#: Golden-section ratios
GOLDEN_R = 0.61803399
GOLDEN_C = 0.382

#: Semi-axes and earth radius must all exceed this value before the
#: ground point elevation is rebased onto the local ellipsoid radius.
ELLIPSOID_SANITY_RADIUS = 6350000.0  # m

# ===================================================================
# Sensors
# ===================================================================

class Sensor(IntEnum):
    """Spacecraft identity codes (PRM ``SC_identity``)."""
    ERS1 = 1
    ERS2 = 2
    RADARSAT = 3
    ENVISAT = 4
    ALOS = 5


#: Empirical (range, azimuth) pixel corrections per sensor, from corner
#: reflector analysis. Sensors not listed are uncorrected.
SENSOR_PIXEL_BIAS: Dict[int, Tuple[float, float]] = {
    Sensor.ENVISAT: (8.4, 4.0),
}


def sensor_pixel_bias(sc_identity: int) -> Tuple[float, float]:
    """
    Look up the empirical pixel bias for a spacecraft.

    Parameters
    ----------
    sc_identity : int
        PRM ``SC_identity`` code.

    Returns
    -------
    tuple of float
        (range_bias, azimuth_bias) in pixels; (0.0, 0.0) for sensors
        without a calibrated correction.

    Examples
    --------
    >>> sensor_pixel_bias(4)
    (8.4, 4.0)
    >>> sensor_pixel_bias(5)
    (0.0, 0.0)
    """
    return SENSOR_PIXEL_BIAS.get(int(sc_identity), (0.0, 0.0))


def range_pixel_size(range_sampling_rate: float) -> float:
    """
    Slant range pixel spacing in meters.

    Parameters
    ----------
    range_sampling_rate : float
        Range sampling rate in Hz.

    Returns
    -------
    float
        ``0.5 * SOL / range_sampling_rate``.
    """
    return 0.5 * SOL / range_sampling_rate


__all__ = [
    'SPEED_OF_LIGHT',
    'SOL',
    'SECONDS_PER_DAY',
    'WGS84_A',
    'WGS84_B',
    'WGS84_F',
    'WGS84_E2',
    'HERMITE_POINTS',
    'ORBIT_PAD_SAMPLES',
    'SEARCH_TOLERANCE',
    'GOLDEN_R',
    'GOLDEN_C',
    'ELLIPSOID_SANITY_RADIUS',
    'Sensor',
    'SENSOR_PIXEL_BIAS',
    'sensor_pixel_bias',
    'range_pixel_size',
]
