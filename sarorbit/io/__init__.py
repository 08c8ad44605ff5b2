# -*- coding: utf-8 -*-
"""
SAR I/O - Text formats used around the orbit geometry tools.

Provides readers and writers for PRM parameter files and LED orbit files,
a reader for free-form ground point streams, and record sinks for
geolocation output (ASCII, float32, float64).

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from sarorbit.io.prm import (
    PRM,
    PRM_KEYS,
    ORBIT_GEOMETRY_KEYS,
    parse_prm,
    read_prm,
    write_prm,
    get_prm_value,
)
from sarorbit.io.led import parse_led, read_led, write_led
from sarorbit.io.points import read_ground_points
from sarorbit.io.sinks import OutputFormat, AsciiSink, BinarySink, open_sink

__all__ = [
    "PRM",
    "PRM_KEYS",
    "ORBIT_GEOMETRY_KEYS",
    "parse_prm",
    "read_prm",
    "write_prm",
    "get_prm_value",
    "parse_led",
    "read_led",
    "write_led",
    "read_ground_points",
    "OutputFormat",
    "AsciiSink",
    "BinarySink",
    "open_sink",
]
