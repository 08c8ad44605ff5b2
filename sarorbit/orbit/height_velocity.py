# -*- coding: utf-8 -*-
"""
Height and Velocity - Spacecraft height, local earth radius and velocity.

For an epoch pair the solver interpolates the orbit at the window center,
places a target on the ellipsoid at the scene near range, broadside to the
flight direction, and fits a quadratic to the range history of that target
over a short window. The curvature of the range history gives the
effective (ground) velocity used by SAR focusing and the slope gives the
range rate.

:func:`update_orbit_geometry` runs the solver at the start, the end and
across the whole acquisition, and fills the PRM orbit geometry fields.

Dependencies
------------
numpy - Vector geometry

License
-------
MIT License
Copyright (c) 2024 geoint.org

Created
-------
2026-10-19
"""

# Standard library
import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

# Third-party
import numpy as np

# sarorbit internal
from sarorbit.geometry.ellipsoid import EllipsoidModel
from sarorbit.geometry.vectors import cross, distance, unit_vector, vector_length
from sarorbit.io.prm import PRM
from sarorbit.orbit.fitting import fit_quadratic
from sarorbit.orbit.interpolation import OrbitInterpolator
from sarorbit.orbit.state_vectors import OrbitTable
from sarorbit.utils.config import ProcessingConfig, DEFAULT_CONFIG
from sarorbit.utils.constants import SECONDS_PER_DAY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeightVelocity:
    """
    Orbit geometry at one epoch pair.

    Attributes
    ----------
    height : float
        Spacecraft radius minus local earth radius (m).
    earth_radius : float
        Ellipsoid radius below the spacecraft (m).
    ground_velocity : float
        Effective velocity from the range-history curvature (m/s).
    total_velocity : float
        Spacecraft speed (m/s).
    range_rate : float
        Linear coefficient of the range history (m/s).
    orbit_direction : str
        ``'A'`` when the z velocity is positive, else ``'D'``.
    center_time : float
        Epoch at which the geometry was evaluated (s).
    """
    height: float
    earth_radius: float
    ground_velocity: float
    total_velocity: float
    range_rate: float
    orbit_direction: str
    center_time: float


def compute_height_velocity(
    interpolator: OrbitInterpolator,
    ellipsoid: EllipsoidModel,
    t1: float,
    t2: float,
    near_range: float,
    prf: float,
    config: Optional[ProcessingConfig] = None
) -> HeightVelocity:
    """
    Compute height, earth radius and velocity centered on ``(t1 + t2) / 2``.

    Parameters
    ----------
    interpolator : OrbitInterpolator
        Orbit to sample.
    ellipsoid : EllipsoidModel
        Reference ellipsoid.
    t1, t2 : float
        Epoch pair (s); the geometry is evaluated at their midpoint.
    near_range : float
        Slant range to the target (m).
    prf : float
        Pulse repetition frequency (Hz); sets the range-history spacing.
    config : ProcessingConfig, optional
        Velocity baseline and fit window settings.

    Returns
    -------
    HeightVelocity

    Raises
    ------
    ValueError
        If ``prf`` or ``near_range`` is not positive.
    """
    config = config or DEFAULT_CONFIG
    if prf <= 0:
        raise ValueError(f"prf must be > 0, got {prf}")
    if near_range <= 0:
        raise ValueError(f"near_range must be > 0, got {near_range}")

    ro = near_range
    baseline = config.velocity_baseline

    t0 = 0.5 * (t1 + t2)
    ps = interpolator.position(t0)
    p1 = interpolator.position(t0 - baseline)
    p2 = interpolator.position(t0 + baseline)

    rs = float(vector_length(ps))

    # Central difference velocity
    vel = (p2 - p1) / (2.0 * baseline)
    vs = float(vector_length(vel))
    orbit_direction = 'A' if vel[2] > 0 else 'D'

    # Latitude of the spacecraft and ellipsoid radius below it
    rlat = math.asin(ps[2] / rs)
    re = float(ellipsoid.radius_at(rlat))
    height = rs - re

    # Unit vector orthogonal to the radial and velocity directions
    a = unit_vector(ps)
    b = unit_vector(vel)
    c = cross(a, b)

    # Look angle from the law of cosines
    ct = (rs * rs + ro * ro - re * re) / (2.0 * rs * ro)
    if abs(ct) > 1.0:
        logger.warning(
            "Near range %.1f m cannot reach the ellipsoid from radius %.1f m; "
            "clamping look angle", ro, rs,
        )
        ct = max(-1.0, min(1.0, ct))
    st = math.sin(math.acos(ct))

    # Target on the ellipsoid along the line of sight
    target = ps + ro * (-st * c - ct * a)

    # Range history of the target over the fit window
    nt = config.fit_samples
    dt = config.fit_spacing_pulses / prf
    offsets = dt * (np.arange(nt) - nt // 2)
    grid = interpolator.build(t0 + offsets[0], dt, nt)
    rng = distance(grid.positions, target) - ro

    coef = fit_quadratic(offsets, rng)
    range_rate = float(coef[1])
    if coef[2] < 0:
        logger.warning("Negative range curvature %.6e at %.6f", coef[2], t0)
        ground_velocity = float('nan')
    else:
        ground_velocity = math.sqrt(2.0 * ro * coef[2])

    if config.verbose:
        logger.debug(
            "t0 %.6f height %.3f re %.3f vg %.3f vtot %.3f rdot %.6f %s",
            t0, height, re, ground_velocity, vs, range_rate, orbit_direction,
        )

    return HeightVelocity(
        height=height,
        earth_radius=re,
        ground_velocity=ground_velocity,
        total_velocity=vs,
        range_rate=range_rate,
        orbit_direction=orbit_direction,
        center_time=t0,
    )


def acquisition_window(prm: PRM) -> Tuple[float, float]:
    """
    Start and stop epochs of the valid azimuth lines.

    ``t1 = 86400 * clock_start + (nrows - num_valid_az) / (2 * prf)`` and
    ``t2 = t1 + num_patches * num_valid_az / prf``.
    """
    prm.validate_geometry()
    t1 = SECONDS_PER_DAY * prm.clock_start + (prm.nrows - prm.num_valid_az) / (2.0 * prm.prf)
    t2 = t1 + prm.num_patches * prm.num_valid_az / prm.prf
    return t1, t2


def scene_seconds(prm: PRM) -> Tuple[float, float]:
    """
    Start and end epochs corrected for azimuth shift and stretch.

    The PRF is rescaled by ``1 / (1 + a_stretch_a)`` and the start moved by
    ``(ashift + sub_int_a)`` lines.
    """
    prm.validate_geometry()
    prf_master = prm.prf / (1.0 + prm.a_stretch_a)
    m = prm.nrows - prm.num_valid_az
    start = (
        SECONDS_PER_DAY * prm.clock_start
        + (prm.ashift + prm.sub_int_a) / prf_master
        + m / (2.0 * prf_master)
    )
    end = start + prm.num_patches * prm.num_valid_az / prf_master
    return start, end


def update_orbit_geometry(
    prm: PRM,
    orbit: OrbitTable,
    config: Optional[ProcessingConfig] = None
) -> PRM:
    """
    Fill velocity, earth radius, heights and orbit direction of a PRM.

    The center earth radius is used unless the PRM already holds a positive
    ``earth_radius``; all three heights are rebased onto the radius in use.

    Parameters
    ----------
    prm : PRM
        Acquisition parameters (not modified).
    orbit : OrbitTable
        Orbit covering the acquisition.
    config : ProcessingConfig, optional

    Returns
    -------
    PRM
        Copy with ``vel``, ``earth_radius``, ``ht``, ``ht_start``, ``ht_end``
        and ``orbdir`` set.
    """
    config = config or DEFAULT_CONFIG
    t1, t2 = acquisition_window(prm)
    interpolator = OrbitInterpolator(orbit, config)
    ellipsoid = prm.ellipsoid

    start = compute_height_velocity(interpolator, ellipsoid, t1, t1, prm.near_range, prm.prf, config)
    end = compute_height_velocity(interpolator, ellipsoid, t2, t2, prm.near_range, prm.prf, config)
    center = compute_height_velocity(interpolator, ellipsoid, t1, t2, prm.near_range, prm.prf, config)

    logger.debug(
        "start: height %.3f re %.3f vg %.3f", start.height, start.earth_radius, start.ground_velocity
    )
    logger.debug(
        "center: height %.3f re %.3f vg %.3f", center.height, center.earth_radius, center.ground_velocity
    )
    logger.debug(
        "end: height %.3f re %.3f vg %.3f", end.height, end.earth_radius, end.ground_velocity
    )

    re = prm.earth_radius if prm.earth_radius > 0 else center.earth_radius

    return prm.replace(
        vel=center.ground_velocity,
        earth_radius=re,
        ht=center.height + center.earth_radius - re,
        ht_start=start.height + start.earth_radius - re,
        ht_end=end.height + end.earth_radius - re,
        orbdir=center.orbit_direction,
    )


__all__ = [
    "HeightVelocity",
    "compute_height_velocity",
    "acquisition_window",
    "scene_seconds",
    "update_orbit_geometry",
]
