# -*- coding: utf-8 -*-
"""
Orbit - State vector tables, interpolation and height/velocity estimation.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from sarorbit.orbit.state_vectors import OrbitStateVector, OrbitTable

from sarorbit.orbit.interpolation import (
    InterpolationStatus,
    InterpolatedState,
    OrbitPositionTable,
    OrbitInterpolator,
    worst_status,
)

from sarorbit.orbit.fitting import polyfit, fit_quadratic

from sarorbit.orbit.height_velocity import (
    HeightVelocity,
    compute_height_velocity,
    acquisition_window,
    scene_seconds,
    update_orbit_geometry,
)

__all__ = [
    "OrbitStateVector",
    "OrbitTable",
    "InterpolationStatus",
    "InterpolatedState",
    "OrbitPositionTable",
    "OrbitInterpolator",
    "worst_status",
    "polyfit",
    "fit_quadratic",
    "HeightVelocity",
    "compute_height_velocity",
    "acquisition_window",
    "scene_seconds",
    "update_orbit_geometry",
]
