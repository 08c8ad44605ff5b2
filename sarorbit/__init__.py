# -*- coding: utf-8 -*-
"""
sarorbit - SAR orbit geometry and ground-to-radar geolocation.

NumPy/SciPy tools for satellite SAR acquisitions: orbit state vector
interpolation, spacecraft height and effective velocity estimation, and
mapping of ground coordinates to range/azimuth pixels of a focused image.

Modules
-------
geometry : Vector helpers and reference ellipsoid conversions
orbit : Orbit tables, Hermite interpolation, height/velocity solver
geolocation : Ground-to-sensor (lon/lat/elevation to range/azimuth) mapping
io : PRM and LED text formats, ground point input, output sinks
utils : Constants, configuration and logging setup

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

__version__ = "0.1.0"

from sarorbit import utils, geometry, orbit, geolocation, io

__all__ = ["geometry", "orbit", "geolocation", "io", "utils", "__version__"]
