# -*- coding: utf-8 -*-
"""
Ground-to-Sensor Geolocation - Map lon/lat/elevation to range/azimuth pixels.

For each ground point the closest approach of the orbit is found by a
golden-section search over a dense orbit position grid sampled every two
pulses. The slant range and time of closest approach are then converted to
range and azimuth pixel coordinates of the focused SLC, corrected for image
shifts, empirical sensor biases and a non-zero Doppler centroid.

Points that fall outside the scene (with a small margin) are dropped from
the output.

Dependencies
------------
numpy - Target positions and orbit grid distances

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
from typing import Iterable, Iterator, Optional, Tuple

# Third-party
import numpy as np

# sarorbit internal
from sarorbit.exceptions import PRMError
from sarorbit.geolocation.golden_section import golden_section_search
from sarorbit.io.prm import PRM
from sarorbit.orbit.height_velocity import acquisition_window
from sarorbit.orbit.interpolation import OrbitInterpolator, OrbitPositionTable
from sarorbit.orbit.state_vectors import OrbitTable
from sarorbit.utils.config import ProcessingConfig, DEFAULT_CONFIG
from sarorbit.utils.constants import GOLDEN_C, sensor_pixel_bias

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SensorCoordinate:
    """
    Radar coordinates of one ground point.

    Attributes
    ----------
    range_pixel : float
        Slant range pixel (column).
    azimuth_pixel : float
        Azimuth pixel (row).
    elevation : float
        Input elevation rebased to the local ellipsoid radius (m).
    longitude : float
        Longitude in degrees, in ``(-180, 180]``.
    latitude : float
        Latitude in degrees.
    """
    range_pixel: float
    azimuth_pixel: float
    elevation: float
    longitude: float
    latitude: float

    def as_record(self) -> Tuple[float, float, float, float, float]:
        """Values in output record order."""
        return (self.range_pixel, self.azimuth_pixel, self.elevation,
                self.longitude, self.latitude)


@dataclass(frozen=True)
class PixelBounds:
    """Accepted pixel window (inclusive)."""
    range_min: float
    range_max: float
    azimuth_min: float
    azimuth_max: float

    def contains(self, range_pixel: float, azimuth_pixel: float) -> bool:
        return (self.range_min <= range_pixel <= self.range_max
                and self.azimuth_min <= azimuth_pixel <= self.azimuth_max)


class Geolocator:
    """
    Ground-to-sensor geolocation for one acquisition.

    Setup builds the padded orbit position grid once; queries only read
    it, so one instance may serve any number of point streams.

    Parameters
    ----------
    prm : PRM
        Acquisition parameters. ``SC_vel`` and ``radar_wavelength`` must be
        set when ``fd1`` is non-zero.
    orbit : OrbitTable
        Orbit covering the acquisition.
    config : ProcessingConfig, optional
        Interpolation, padding and search settings.

    Raises
    ------
    PRMError
        If the PRM timing or sampling fields are unusable.

    Examples
    --------
    >>> geo = Geolocator(prm, orbit)
    >>> for coord in geo.geolocate([(-116.5, 33.2, 120.0)]):
    ...     print(coord.range_pixel, coord.azimuth_pixel)
    """

    def __init__(
        self,
        prm: PRM,
        orbit: OrbitTable,
        config: Optional[ProcessingConfig] = None
    ):
        self.prm = prm
        self.config = config or DEFAULT_CONFIG

        if prm.rng_samp_rate <= 0:
            raise PRMError(f"rng_samp_rate must be > 0, got {prm.rng_samp_rate}")
        if prm.fd1 != 0 and (prm.vel <= 0 or prm.wavelength <= 0):
            raise PRMError(
                "Doppler correction needs SC_vel and radar_wavelength > 0 when fd1 is set"
            )

        self.ellipsoid = prm.ellipsoid
        self.t1, self.t2 = acquisition_window(prm)
        self.range_pixel_size = prm.range_pixel_size
        self.bounds = PixelBounds(
            range_min=-10.0,
            range_max=prm.num_rng_bins + 10.0,
            azimuth_min=-20.0,
            azimuth_max=prm.num_patches * prm.num_valid_az + 20.0,
        )
        self.range_bias, self.azimuth_bias = sensor_pixel_bias(prm.sc_identity)

        # Orbit sampled every other pulse, padded on both sides
        self.time_step = 2.0 / prm.prf
        nrec = int((self.t2 - self.t1) / self.time_step)
        npad = self.config.npad
        interpolator = OrbitInterpolator(orbit, self.config)
        self.positions: OrbitPositionTable = interpolator.build(
            self.t1 - npad * self.time_step, self.time_step, nrec + 2 * npad,
        )

        logger.debug(
            "Geolocator: t1 %.6f t2 %.6f, %d grid epochs, dr %.6f m",
            self.t1, self.t2, len(self.positions), self.range_pixel_size,
        )

    def _elevation_offset(self, latitude: float) -> float:
        prm = self.prm
        threshold = self.config.ellipsoid_sanity_radius
        if prm.rc > threshold and prm.ra > threshold and prm.earth_radius > threshold:
            local = float(self.ellipsoid.radius_at(math.radians(latitude)))
            return local - prm.earth_radius
        return 0.0

    def closest_approach(self, target: np.ndarray) -> Tuple[float, float]:
        """
        Slant range (m) and epoch (s) of closest approach to a Cartesian point.
        """
        last = len(self.positions) - 1
        middle = int(last * GOLDEN_C)
        index, rng = golden_section_search(
            lambda i: self.positions.distance(i, target),
            0, last, middle, self.config.search_tolerance,
        )
        return rng, float(self.positions.times[index])

    def geolocate_point(
        self,
        longitude: float,
        latitude: float,
        elevation: float
    ) -> Optional[SensorCoordinate]:
        """
        Radar coordinates of one ground point.

        Parameters
        ----------
        longitude, latitude : float
            Degrees.
        elevation : float
            Height above the ellipsoid (m).

        Returns
        -------
        SensorCoordinate or None
            ``None`` if the point falls outside the scene bounds.
        """
        prm = self.prm
        target = np.array(self.ellipsoid.to_cartesian(latitude, longitude, elevation),
                          dtype=np.float64)
        out_longitude = longitude - 360.0 if longitude > 180.0 else longitude
        out_elevation = elevation + self._elevation_offset(latitude)

        rng, tm = self.closest_approach(target)

        dr = self.range_pixel_size
        range_pixel = (rng - prm.near_range) / dr - (prm.rshift + prm.sub_int_r) + prm.chirp_ext
        azimuth_pixel = prm.prf * (tm - self.t1) - (prm.ashift + prm.sub_int_a)

        range_pixel += self.range_bias
        azimuth_pixel += self.azimuth_bias

        if prm.fd1 != 0.0:
            rdd = prm.vel * prm.vel / rng
            daa = -0.5 * prm.wavelength * prm.fd1 / rdd
            range_pixel += 0.5 * rdd * daa * daa / dr
            azimuth_pixel += prm.prf * daa

        if not self.bounds.contains(range_pixel, azimuth_pixel):
            return None

        return SensorCoordinate(
            range_pixel=float(range_pixel),
            azimuth_pixel=float(azimuth_pixel),
            elevation=float(out_elevation),
            longitude=float(out_longitude),
            latitude=float(latitude),
        )

    def geolocate(
        self,
        points: Iterable[Tuple[float, float, float]]
    ) -> Iterator[SensorCoordinate]:
        """
        Lazily geolocate ``(lon, lat, elev)`` triples, keeping input order.

        Off-scene points are skipped.
        """
        emitted = 0
        dropped = 0
        for longitude, latitude, elevation in points:
            coord = self.geolocate_point(longitude, latitude, elevation)
            if coord is None:
                dropped += 1
                continue
            emitted += 1
            yield coord
        logger.debug("Geolocated %d points, %d outside the scene", emitted, dropped)


def geolocate(
    prm: PRM,
    orbit: OrbitTable,
    points: Iterable[Tuple[float, float, float]],
    config: Optional[ProcessingConfig] = None
) -> Iterator[SensorCoordinate]:
    """Convenience wrapper: build a :class:`Geolocator` and geolocate ``points``."""
    return Geolocator(prm, orbit, config).geolocate(points)


__all__ = ["SensorCoordinate", "PixelBounds", "Geolocator", "geolocate"]
