# -*- coding: utf-8 -*-
"""
Utilities - Constants, processing configuration and logging setup.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from sarorbit.utils.constants import (
    SPEED_OF_LIGHT,
    SOL,
    SECONDS_PER_DAY,
    WGS84_A,
    WGS84_B,
    WGS84_F,
    WGS84_E2,
    Sensor,
    SENSOR_PIXEL_BIAS,
    sensor_pixel_bias,
    range_pixel_size,
)

from sarorbit.utils.config import ProcessingConfig, DEFAULT_CONFIG

from sarorbit.utils.logging_config import configure_logging, get_logger

__all__ = [
    "SPEED_OF_LIGHT",
    "SOL",
    "SECONDS_PER_DAY",
    "WGS84_A",
    "WGS84_B",
    "WGS84_F",
    "WGS84_E2",
    "Sensor",
    "SENSOR_PIXEL_BIAS",
    "sensor_pixel_bias",
    "range_pixel_size",
    "ProcessingConfig",
    "DEFAULT_CONFIG",
    "configure_logging",
    "get_logger",
]
