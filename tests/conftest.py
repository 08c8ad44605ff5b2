# -*- coding: utf-8 -*-
"""
Shared synthetic acquisition for orbit and geolocation tests.

A circular polar orbit in the x-z plane over a spherical earth. The
spacecraft crosses the equator (ascending) at the center of the
acquisition window, so a ground point placed broadside at that instant has
a known azimuth pixel, and its slant range sets the range pixel.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import math

import numpy as np
import pytest

from sarorbit.geometry.ellipsoid import EllipsoidModel
from sarorbit.io.prm import PRM
from sarorbit.orbit.state_vectors import OrbitTable
from sarorbit.utils.constants import range_pixel_size

EARTH_RADIUS = 6371000.0
ALTITUDE = 700000.0
ORBIT_RADIUS = EARTH_RADIUS + ALTITUDE
ORBIT_SPEED = math.sqrt(3.986004418e14 / ORBIT_RADIUS)
ANGULAR_RATE = ORBIT_SPEED / ORBIT_RADIUS

DAY = 100
PRF = 1700.0
NROWS = 2000
NUM_VALID_AZ = 1800
NUM_PATCHES = 10
NUM_RNG_BINS = 5000
NEAR_RANGE = 850000.0
RNG_SAMP_RATE = 19.2e6

ORBIT_START = 86400.0 * DAY
ORBIT_SPACING = 10.0
ORBIT_SAMPLES = 60

CLOCK_START = DAY + 200.0 / 86400.0
T1 = 86400.0 * CLOCK_START + (NROWS - NUM_VALID_AZ) / (2.0 * PRF)
T2 = T1 + NUM_PATCHES * NUM_VALID_AZ / PRF
T_CENTER = 0.5 * (T1 + T2)
CENTER_AZIMUTH = NUM_PATCHES * NUM_VALID_AZ / 2.0


def circular_state(t, t_ref=T_CENTER, descending=False):
    """Position and velocity of the synthetic orbit at epochs ``t``."""
    t = np.asarray(t, dtype=np.float64)
    theta = ANGULAR_RATE * (t - t_ref)
    sign = -1.0 if descending else 1.0
    pos = ORBIT_RADIUS * np.stack(
        [np.cos(theta), np.zeros_like(theta), sign * np.sin(theta)], axis=-1)
    vel = ORBIT_SPEED * np.stack(
        [-np.sin(theta), np.zeros_like(theta), sign * np.cos(theta)], axis=-1)
    return pos, vel


def make_orbit(descending=False):
    times = ORBIT_START + ORBIT_SPACING * np.arange(ORBIT_SAMPLES)
    pos, vel = circular_state(times, descending=descending)
    return OrbitTable(ORBIT_START, ORBIT_SPACING, pos, vel)


def broadside_point(slant_range, time=T_CENTER, radius=EARTH_RADIUS):
    """
    (lon, lat) of the ground point at ``slant_range`` broadside to the
    spacecraft at ``time``, on a sphere of ``radius``.
    """
    ct = (ORBIT_RADIUS ** 2 + slant_range ** 2 - radius ** 2) / (2.0 * ORBIT_RADIUS * slant_range)
    st = math.sqrt(1.0 - ct * ct)
    # Equator crossing frame: radial x, along-track z, cross-track y
    x = ORBIT_RADIUS - slant_range * ct
    y = slant_range * st
    theta = ANGULAR_RATE * (time - T_CENTER)
    xr = x * math.cos(theta)
    zr = x * math.sin(theta)
    lon = math.degrees(math.atan2(y, xr))
    lat = math.degrees(math.atan2(zr, math.hypot(xr, y)))
    return lon, lat


def make_prm(**changes):
    prm = PRM(
        led_file='scene.LED',
        sc_identity=5,
        clock_start=CLOCK_START,
        nrows=NROWS,
        num_valid_az=NUM_VALID_AZ,
        num_patches=NUM_PATCHES,
        num_rng_bins=NUM_RNG_BINS,
        prf=PRF,
        near_range=NEAR_RANGE,
        rng_samp_rate=RNG_SAMP_RATE,
        ra=EARTH_RADIUS,
        rc=EARTH_RADIUS,
        earth_radius=EARTH_RADIUS,
        wavelength=0.236,
    )
    return prm.replace(**changes)


PRM_TEXT = f"""\
num_valid_az            = {NUM_VALID_AZ}
nrows                   = {NROWS}
num_patches             = {NUM_PATCHES}
num_rng_bins            = {NUM_RNG_BINS}
SC_identity             = 5
led_file                = scene.LED
clock_start             = {CLOCK_START!r}
PRF                     = {PRF!r}
near_range              = {NEAR_RANGE!r}
rng_samp_rate           = {RNG_SAMP_RATE!r}
equatorial_radius       = {EARTH_RADIUS!r}
polar_radius            = {EARTH_RADIUS!r}
earth_radius            = {EARTH_RADIUS!r}
radar_wavelength        = 0.236
fd1                     = 0.0
input_file              = scene.raw
"""


@pytest.fixture
def orbit():
    return make_orbit()


@pytest.fixture
def sphere():
    return EllipsoidModel(EARTH_RADIUS, EARTH_RADIUS)


@pytest.fixture
def prm():
    return make_prm()


@pytest.fixture
def dr():
    return range_pixel_size(RNG_SAMP_RATE)
