# -*- coding: utf-8 -*-
"""
Geometry - Vector helpers and reference ellipsoid conversions.

Provides:
- Cross products, norms and distances of Cartesian vectors
- Geodetic <-> Earth-centered Cartesian conversion for any ellipsoid
- Local ellipsoid radius at a latitude

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from sarorbit.geometry.vectors import (
    cross,
    vector_length,
    unit_vector,
    distance,
)

from sarorbit.geometry.ellipsoid import (
    geodetic_radius,
    plh2xyz,
    xyz2plh,
    EllipsoidModel,
    WGS84,
)

__all__ = [
    "cross",
    "vector_length",
    "unit_vector",
    "distance",
    "geodetic_radius",
    "plh2xyz",
    "xyz2plh",
    "EllipsoidModel",
    "WGS84",
]
