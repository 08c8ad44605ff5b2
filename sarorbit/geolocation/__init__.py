# -*- coding: utf-8 -*-
"""
Geolocation - Ground coordinates to radar range/azimuth pixels.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from sarorbit.geolocation.golden_section import golden_section_search
from sarorbit.geolocation.llt2rat import (
    SensorCoordinate,
    PixelBounds,
    Geolocator,
    geolocate,
)

__all__ = [
    "golden_section_search",
    "SensorCoordinate",
    "PixelBounds",
    "Geolocator",
    "geolocate",
]
