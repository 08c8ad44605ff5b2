# -*- coding: utf-8 -*-
"""
Processing Configuration - Explicit context passed to each component.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from dataclasses import dataclass

from sarorbit.utils.constants import (
    HERMITE_POINTS,
    ORBIT_PAD_SAMPLES,
    SEARCH_TOLERANCE,
    ELLIPSOID_SANITY_RADIUS,
)


@dataclass(frozen=True)
class ProcessingConfig:
    """
    Tunables for orbit interpolation, height/velocity and geolocation.

    Attributes
    ----------
    verbose : bool
        Emit per-step diagnostics at DEBUG level.
    hermite_points : int
        Samples per Hermite interpolation window.
    npad : int
        Guard samples on each side of the dense geolocation orbit table.
    search_tolerance : int
        Golden-section stopping width in table index units.
    ellipsoid_sanity_radius : float
        Threshold (m) that ``ra``, ``rc`` and ``RE`` must all exceed before
        ground elevations are rebased to the local ellipsoid radius.
    velocity_baseline : float
        Half-width (s) of the central difference used for the velocity.
    fit_samples : int
        Number of range-history samples for the quadratic fit.
    fit_spacing_pulses : float
        Range-history sample spacing, in pulses (spacing = value / PRF).
    """
    verbose: bool = False
    hermite_points: int = HERMITE_POINTS
    npad: int = ORBIT_PAD_SAMPLES
    search_tolerance: int = SEARCH_TOLERANCE
    ellipsoid_sanity_radius: float = ELLIPSOID_SANITY_RADIUS
    velocity_baseline: float = 2.0
    fit_samples: int = 100
    fit_spacing_pulses: float = 200.0

    def __post_init__(self) -> None:
        if self.hermite_points < 2:
            raise ValueError(f"hermite_points must be >= 2, got {self.hermite_points}")
        if self.npad < 0:
            raise ValueError(f"npad must be >= 0, got {self.npad}")
        if self.search_tolerance < 1:
            raise ValueError(
                f"search_tolerance must be >= 1, got {self.search_tolerance}"
            )
        if self.fit_samples < 3:
            raise ValueError(f"fit_samples must be >= 3, got {self.fit_samples}")
        if self.velocity_baseline <= 0:
            raise ValueError(
                f"velocity_baseline must be > 0, got {self.velocity_baseline}"
            )


DEFAULT_CONFIG = ProcessingConfig()

__all__ = ["ProcessingConfig", "DEFAULT_CONFIG"]
