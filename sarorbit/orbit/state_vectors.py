# -*- coding: utf-8 -*-
"""
Orbit State Vectors - Time-tagged position/velocity samples.

Provides the immutable state vector record and the regularly sampled
orbit table consumed by the interpolator.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

# Standard library
from dataclasses import dataclass, field
from typing import Sequence

# Third-party
import numpy as np

# sarorbit internal
from sarorbit.utils.constants import HERMITE_POINTS


@dataclass(frozen=True, eq=False)
class OrbitStateVector:
    """
    Individual state vector.

    Attributes
    ----------
    time : float
        Epoch in seconds on a continuous clock (86400 * day + seconds).
    position : np.ndarray
        Position [x, y, z] in meters, Earth-centered frame.
    velocity : np.ndarray
        Velocity [vx, vy, vz] in m/s.
    """
    time: float
    position: np.ndarray
    velocity: np.ndarray

    def __post_init__(self):
        position = np.asarray(self.position, dtype=np.float64)
        velocity = np.asarray(self.velocity, dtype=np.float64)
        if position.shape != (3,):
            raise ValueError(f"position must have shape (3,), got {position.shape}")
        if velocity.shape != (3,):
            raise ValueError(f"velocity must have shape (3,), got {velocity.shape}")
        object.__setattr__(self, 'time', float(self.time))
        object.__setattr__(self, 'position', position)
        object.__setattr__(self, 'velocity', velocity)


@dataclass(frozen=True, eq=False)
class OrbitTable:
    """
    Regularly sampled orbit: sample ``k`` is at ``start_time + k * spacing``.

    Attributes
    ----------
    start_time : float
        Epoch of the first sample (s).
    spacing : float
        Sampling interval (s), > 0.
    positions : np.ndarray
        Positions, shape (N, 3), meters.
    velocities : np.ndarray
        Velocities, shape (N, 3), m/s.
    """
    start_time: float
    spacing: float
    positions: np.ndarray
    velocities: np.ndarray
    times: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        positions = np.array(self.positions, dtype=np.float64)
        velocities = np.array(self.velocities, dtype=np.float64)
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"positions must have shape (N, 3), got {positions.shape}")
        if velocities.shape != positions.shape:
            raise ValueError(
                f"velocities shape {velocities.shape} != positions shape {positions.shape}"
            )
        if self.spacing <= 0:
            raise ValueError(f"spacing must be > 0, got {self.spacing}")
        if positions.shape[0] < HERMITE_POINTS:
            raise ValueError(
                f"Orbit table needs at least {HERMITE_POINTS} samples, got {positions.shape[0]}"
            )
        positions.setflags(write=False)
        velocities.setflags(write=False)
        times = float(self.start_time) + np.arange(positions.shape[0]) * float(self.spacing)
        times.setflags(write=False)
        object.__setattr__(self, 'start_time', float(self.start_time))
        object.__setattr__(self, 'spacing', float(self.spacing))
        object.__setattr__(self, 'positions', positions)
        object.__setattr__(self, 'velocities', velocities)
        object.__setattr__(self, 'times', times)

    @classmethod
    def from_state_vectors(cls, state_vectors: Sequence[OrbitStateVector]) -> 'OrbitTable':
        """
        Build a table from uniformly spaced state vectors.

        The spacing is taken from the first two samples; later samples must
        follow it to within 1 ms.

        Raises
        ------
        ValueError
            If there are too few samples or times are not strictly
            increasing and uniform.
        """
        if len(state_vectors) < 2:
            raise ValueError("At least two state vectors are required")
        times = np.array([sv.time for sv in state_vectors])
        steps = np.diff(times)
        if np.any(steps <= 0):
            raise ValueError("State vector times must be strictly increasing")
        spacing = float(steps[0])
        if np.any(np.abs(steps - spacing) > 1e-3):
            raise ValueError("State vectors must be uniformly spaced")
        return cls(
            start_time=float(times[0]),
            spacing=spacing,
            positions=np.stack([sv.position for sv in state_vectors]),
            velocities=np.stack([sv.velocity for sv in state_vectors]),
        )

    def __len__(self) -> int:
        return self.positions.shape[0]

    @property
    def end_time(self) -> float:
        """Epoch of the last sample (s)."""
        return float(self.times[-1])

    def contains(self, time: float) -> bool:
        """True if ``time`` lies within the sampled interval."""
        return self.start_time <= time <= self.end_time

    def state_vector(self, k: int) -> OrbitStateVector:
        """Return sample ``k`` as an :class:`OrbitStateVector`."""
        return OrbitStateVector(self.times[k], self.positions[k], self.velocities[k])


__all__ = ["OrbitStateVector", "OrbitTable"]
