# -*- coding: utf-8 -*-
"""
PRM Parameter Files - Read and write ``name = value`` acquisition records.

A PRM file describes one SAR scene: sensor timing, geometry and calibration
constants. Only the fields used by the orbit geometry code are typed; every
other entry is kept verbatim and written back in its original order.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
import dataclasses
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, TextIO, Tuple

# sarorbit internal
from sarorbit.exceptions import PRMError
from sarorbit.geometry.ellipsoid import EllipsoidModel
from sarorbit.utils.constants import WGS84_A, WGS84_B, SECONDS_PER_DAY, range_pixel_size


# PRM key -> (attribute, type)
PRM_KEYS: Dict[str, Tuple[str, type]] = {
    'led_file': ('led_file', str),
    'SC_identity': ('sc_identity', int),
    'clock_start': ('clock_start', float),
    'nrows': ('nrows', int),
    'num_valid_az': ('num_valid_az', int),
    'num_patches': ('num_patches', int),
    'num_rng_bins': ('num_rng_bins', int),
    'PRF': ('prf', float),
    'near_range': ('near_range', float),
    'rng_samp_rate': ('rng_samp_rate', float),
    'equatorial_radius': ('ra', float),
    'polar_radius': ('rc', float),
    'earth_radius': ('earth_radius', float),
    'SC_vel': ('vel', float),
    'SC_height': ('ht', float),
    'SC_height_start': ('ht_start', float),
    'SC_height_end': ('ht_end', float),
    'orbdir': ('orbdir', str),
    'radar_wavelength': ('wavelength', float),
    'fd1': ('fd1', float),
    'fdd1': ('fdd1', float),
    'fddd1': ('fddd1', float),
    'rshift': ('rshift', int),
    'ashift': ('ashift', int),
    'sub_int_r': ('sub_int_r', float),
    'sub_int_a': ('sub_int_a', float),
    'stretch_a': ('stretch_a', float),
    'a_stretch_a': ('a_stretch_a', float),
    'chirp_ext': ('chirp_ext', int),
}

# Keys filled by the orbit geometry solver, written even if absent on input
ORBIT_GEOMETRY_KEYS = (
    'SC_vel', 'earth_radius', 'SC_height', 'SC_height_start', 'SC_height_end', 'orbdir',
)


@dataclass(frozen=True)
class PRM:
    """
    Acquisition parameters of one SAR scene.

    Instances are immutable; use :meth:`replace` for an updated copy.

    Attributes
    ----------
    led_file : str
        Orbit (LED) file name.
    sc_identity : int
        Spacecraft code, see :class:`sarorbit.utils.constants.Sensor`.
    clock_start : float
        Start of the raw data, day of year with fraction.
    nrows, num_valid_az, num_patches : int
        Azimuth processing block layout.
    num_rng_bins : int
        Number of range samples.
    prf : float
        Pulse repetition frequency (Hz).
    near_range : float
        Slant range to the first range sample (m).
    rng_samp_rate : float
        Range sampling rate (Hz).
    ra, rc : float
        Equatorial and polar radius of the reference ellipsoid (m).
    earth_radius : float
        Local earth radius (m); a positive value on input overrides the
        computed one.
    vel, ht, ht_start, ht_end : float
        Effective velocity (m/s) and spacecraft heights (m).
    orbdir : str
        ``'A'`` (ascending) or ``'D'`` (descending).
    wavelength : float
        Radar wavelength (m).
    fd1, fdd1, fddd1 : float
        Doppler centroid polynomial.
    rshift, ashift : int
        Integer range/azimuth shifts (pixels).
    sub_int_r, sub_int_a : float
        Fractional range/azimuth shifts (pixels).
    stretch_a, a_stretch_a : float
        Azimuth stretch coefficients.
    chirp_ext : int
        Chirp extension (range pixels).
    extra : dict
        Entries without a typed field, in file order.
    """
    led_file: str = ''
    sc_identity: int = 0
    clock_start: float = 0.0
    nrows: int = 0
    num_valid_az: int = 0
    num_patches: int = 0
    num_rng_bins: int = 0
    prf: float = 0.0
    near_range: float = 0.0
    rng_samp_rate: float = 0.0
    ra: float = WGS84_A
    rc: float = WGS84_B
    earth_radius: float = 0.0
    vel: float = 0.0
    ht: float = 0.0
    ht_start: float = 0.0
    ht_end: float = 0.0
    orbdir: str = ''
    wavelength: float = 0.0
    fd1: float = 0.0
    fdd1: float = 0.0
    fddd1: float = 0.0
    rshift: int = 0
    ashift: int = 0
    sub_int_r: float = 0.0
    sub_int_a: float = 0.0
    stretch_a: float = 0.0
    a_stretch_a: float = 0.0
    chirp_ext: int = 0
    extra: Dict[str, str] = field(default_factory=dict)
    keys: List[str] = field(default_factory=list, repr=False)

    @property
    def ellipsoid(self) -> EllipsoidModel:
        """Reference ellipsoid from ``ra``/``rc``."""
        return EllipsoidModel(self.ra, self.rc)

    @property
    def range_pixel_size(self) -> float:
        """Slant range pixel spacing (m)."""
        return range_pixel_size(self.rng_samp_rate)

    @property
    def clock_start_seconds(self) -> float:
        """``clock_start`` in seconds."""
        return SECONDS_PER_DAY * self.clock_start

    def validate_geometry(self) -> None:
        """
        Check the fields needed for orbit geometry.

        Raises
        ------
        PRMError
            If PRF is not positive, ``num_valid_az`` exceeds ``nrows``, or
            block counts are negative.
        """
        if self.prf <= 0:
            raise PRMError(f"PRF must be > 0, got {self.prf}")
        if self.num_valid_az > self.nrows:
            raise PRMError(
                f"num_valid_az ({self.num_valid_az}) exceeds nrows ({self.nrows})"
            )
        if self.num_valid_az < 0 or self.num_patches < 0:
            raise PRMError("num_valid_az and num_patches must be >= 0")

    def replace(self, **changes) -> 'PRM':
        """Copy with some fields changed (key order is kept)."""
        return dataclasses.replace(self, extra=dict(self.extra), keys=list(self.keys), **changes)

    def get(self, name: str) -> str:
        """
        Value of a PRM entry, formatted as it would be written.

        Raises
        ------
        PRMError
            If the entry is unknown.
        """
        if name in PRM_KEYS:
            attr, _ = PRM_KEYS[name]
            return _format_value(getattr(self, attr))
        if name in self.extra:
            return self.extra[name]
        raise PRMError(f"PRM has no entry {name!r}")


def _format_value(value) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _convert(name: str, value: str, kind: type):
    try:
        if kind is int:
            return int(float(value))
        return kind(value)
    except ValueError as exc:
        raise PRMError(f"Malformed value for {name}: {value!r}") from exc


def parse_prm(lines: Iterable[str]) -> PRM:
    """
    Parse PRM text lines.

    Lines without ``=`` are ignored. When a name repeats, the last value
    wins.

    Raises
    ------
    PRMError
        If a typed field holds a malformed value.
    """
    typed = {}
    extra = {}
    keys = []
    for line in lines:
        if '=' not in line:
            continue
        name, _, value = line.partition('=')
        name = name.strip()
        tokens = value.split()
        if not name or not tokens:
            continue
        value = tokens[0]

        if name not in keys:
            keys.append(name)
        if name in PRM_KEYS:
            attr, kind = PRM_KEYS[name]
            typed[attr] = _convert(name, value, kind)
        else:
            extra[name] = value
    return PRM(extra=extra, keys=keys, **typed)


def read_prm(path: str) -> PRM:
    """
    Read a PRM file.

    Raises
    ------
    PRMError
        If the file cannot be opened or holds malformed values.
    """
    try:
        with open(path, 'r') as f:
            return parse_prm(f)
    except OSError as exc:
        raise PRMError(f"couldn't open {path}: {exc.strerror}") from exc


def write_prm(prm: PRM, stream: TextIO, include: Iterable[str] = ORBIT_GEOMETRY_KEYS) -> None:
    """
    Write a PRM record.

    Entries are written in the order they were read; keys in ``include``
    that were not read are appended.
    """
    keys = list(prm.keys)
    keys.extend(k for k in include if k not in keys)
    for name in keys:
        stream.write(f"{name:<24s} = {prm.get(name)}\n")


def get_prm_value(path: str, name: str) -> str:
    """Read one entry from a PRM file, as text."""
    prm = read_prm(path)
    if name not in prm.keys:
        raise PRMError(f"{name} not found in {path}")
    return prm.get(name)


__all__ = [
    "PRM",
    "PRM_KEYS",
    "ORBIT_GEOMETRY_KEYS",
    "parse_prm",
    "read_prm",
    "write_prm",
    "get_prm_value",
]
