# -*- coding: utf-8 -*-
"""
Orbit Interpolation - Local Hermite interpolation of state vectors.

Positions between orbit samples are estimated with a local Hermite
polynomial through the nearest ``n`` samples (default 6) that honours both
the sampled positions and the sampled velocities. Because every window that
contains a sample reproduces its position and velocity exactly, and the
window only changes at sample epochs, the interpolated trajectory is C¹.

Two ways of querying share the same numerical kernel:

- :meth:`OrbitInterpolator.interpolate` evaluates one epoch with fresh
  scratch arrays (setup and geometry calls, few in number).
- :meth:`OrbitInterpolator.build` evaluates a whole regular time grid once
  and returns an :class:`OrbitPositionTable` that is then indexed many
  times (geolocation).

Queries never fail: epochs outside the table are extrapolated from the
edge window and flagged ``OUT_OF_RANGE``.

Dependencies
------------
numpy - Vectorized Lagrange/Hermite basis evaluation

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
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# Third-party
import numpy as np

# sarorbit internal
from sarorbit.orbit.state_vectors import OrbitTable
from sarorbit.utils.config import ProcessingConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

# Batch evaluation is chunked to bound the (chunk, n, n) scratch arrays
_CHUNK = 65536


class InterpolationStatus(str, Enum):
    """Quality flag of an interpolated orbit position."""
    OK = "ok"
    OFF_CENTER = "off_center"
    OUT_OF_RANGE = "out_of_range"


_SEVERITY = {
    InterpolationStatus.OK: 0,
    InterpolationStatus.OFF_CENTER: 1,
    InterpolationStatus.OUT_OF_RANGE: 2,
}


def worst_status(*statuses: InterpolationStatus) -> InterpolationStatus:
    """Return the most severe of the given statuses."""
    return max(statuses, key=_SEVERITY.__getitem__, default=InterpolationStatus.OK)


@dataclass(frozen=True, eq=False)
class InterpolatedState:
    """
    Interpolated orbit state at one epoch.

    Attributes
    ----------
    time : float
        Query epoch (s).
    position : np.ndarray
        Position, shape (3,), meters.
    velocity : np.ndarray
        Velocity (time derivative of the interpolant), shape (3,), m/s.
    status : InterpolationStatus
        Quality flag.
    """
    time: float
    position: np.ndarray
    velocity: np.ndarray
    status: InterpolationStatus


@dataclass(frozen=True, eq=False)
class OrbitPositionTable:
    """
    Orbit positions pre-evaluated on a regular time grid.

    Attributes
    ----------
    times : np.ndarray
        Grid epochs, shape (M,).
    positions : np.ndarray
        Positions, shape (M, 3), contiguous float64.
    status : InterpolationStatus
        Worst status over the grid.
    n_off_center : int
        Number of grid epochs interpolated with a skewed window.
    n_out_of_range : int
        Number of grid epochs extrapolated beyond the orbit table.
    """
    times: np.ndarray
    positions: np.ndarray
    status: InterpolationStatus
    n_off_center: int = 0
    n_out_of_range: int = 0

    def __len__(self) -> int:
        return self.times.shape[0]

    def distance(self, index: int, target: np.ndarray) -> float:
        """Distance (m) from grid position ``index`` to ``target``."""
        d = self.positions[index] - target
        return float(np.sqrt(d[0] * d[0] + d[1] * d[1] + d[2] * d[2]))


# ===================================================================
# Numerical kernel
# ===================================================================

def hermite_weights(
    xw: np.ndarray,
    xp: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Hermite basis for a batch of interpolation windows.

    For window abscissae ``x_i`` and Lagrange basis ``L_i``, the Hermite
    interpolant is ``sum_i (y_i (1 - 2 (x - x_i) s_i) + y'_i (x - x_i)) L_i²``
    with ``s_i = sum_{j != i} 1 / (x_i - x_j)``.

    Parameters
    ----------
    xw : np.ndarray
        Window abscissae, shape (M, n), distinct within each row.
    xp : np.ndarray
        Evaluation points, shape (M,).

    Returns
    -------
    L : np.ndarray
        Lagrange basis values, shape (M, n).
    dL : np.ndarray
        Lagrange basis derivatives, shape (M, n).
    s : np.ndarray
        ``s_i`` sums, shape (M, n).
    dx : np.ndarray
        ``xp - x_i``, shape (M, n).
    """
    n = xw.shape[1]
    eye = np.eye(n, dtype=bool)

    # diff[m, i, j] = x_i - x_j
    diff = xw[:, :, np.newaxis] - xw[:, np.newaxis, :]
    diff_safe = np.where(eye, 1.0, diff)
    inv = np.where(eye, 0.0, 1.0 / diff_safe)

    dx = xp[:, np.newaxis] - xw
    # ratio[m, i, j] = (xp - x_j) / (x_i - x_j), unity on the diagonal
    ratio = np.where(eye, 1.0, dx[:, np.newaxis, :] / diff_safe)

    L = np.prod(ratio, axis=2)
    s = np.sum(inv, axis=2)

    # Product rule without dividing by (xp - x_k), which vanishes at nodes
    dL = np.zeros_like(L)
    for k in range(n):
        partial = ratio.copy()
        partial[:, :, k] = 1.0
        dL += inv[:, :, k] * np.prod(partial, axis=2)

    return L, dL, s, dx


def hermite_evaluate(
    xw: np.ndarray,
    yw: np.ndarray,
    zw: np.ndarray,
    xp: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate Hermite interpolants and their derivatives.

    Parameters
    ----------
    xw : np.ndarray
        Window abscissae, shape (M, n).
    yw : np.ndarray
        Values at the window abscissae, shape (M, n, D).
    zw : np.ndarray
        Derivatives at the window abscissae, shape (M, n, D).
    xp : np.ndarray
        Evaluation points, shape (M,).

    Returns
    -------
    value : np.ndarray
        Interpolated values, shape (M, D).
    derivative : np.ndarray
        Interpolated derivatives, shape (M, D).
    """
    L, dL, s, dx = hermite_weights(xw, xp)

    f0 = 1.0 - 2.0 * dx * s
    basis = L * L
    dbasis = 2.0 * L * dL

    term = yw * f0[..., np.newaxis] + zw * dx[..., np.newaxis]
    value = np.sum(term * basis[..., np.newaxis], axis=1)

    dterm = yw * (-2.0 * s)[..., np.newaxis] + zw
    derivative = np.sum(
        dterm * basis[..., np.newaxis] + term * dbasis[..., np.newaxis],
        axis=1,
    )
    return value, derivative


# ===================================================================
# Interpolator
# ===================================================================

class OrbitInterpolator:
    """
    Hermite interpolator over an :class:`OrbitTable`.

    Parameters
    ----------
    orbit : OrbitTable
        Regularly sampled state vectors.
    config : ProcessingConfig, optional
        Supplies ``hermite_points`` (window size).

    Examples
    --------
    >>> interp = OrbitInterpolator(orbit)
    >>> state = interp.interpolate(orbit.start_time + 12.5)
    >>> grid = interp.build(orbit.start_time, 0.001, 20000)
    """

    def __init__(self, orbit: OrbitTable, config: Optional[ProcessingConfig] = None):
        self._orbit = orbit
        self._config = config or DEFAULT_CONFIG
        self._n = self._config.hermite_points
        if len(orbit) < self._n:
            raise ValueError(
                f"Orbit table has {len(orbit)} samples, Hermite window needs {self._n}"
            )

    @property
    def orbit(self) -> OrbitTable:
        """The underlying orbit table."""
        return self._orbit

    def _windows(self, t: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Window start index and status codes for query epochs.

        The window starts ``n // 2`` samples before the first sample at or
        after the query and is clamped to the table.
        """
        times = self._orbit.times
        nmax = times.shape[0]

        i = np.searchsorted(times, t, side='left')
        i0 = i - self._n // 2
        off_center = (i0 < 0) | (i0 > nmax - self._n)
        i0 = np.clip(i0, 0, nmax - self._n)
        out_of_range = (t < times[0]) | (t > times[-1])
        return i0, off_center, out_of_range

    def _evaluate(self, t: np.ndarray, i0: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        idx = i0[:, np.newaxis] + np.arange(self._n)[np.newaxis, :]
        xw = self._orbit.times[idx]
        yw = self._orbit.positions[idx]
        zw = self._orbit.velocities[idx]
        return hermite_evaluate(xw, yw, zw, t)

    def interpolate(self, time: float) -> InterpolatedState:
        """
        Interpolate position and velocity at one epoch.

        Parameters
        ----------
        time : float
            Query epoch (s).

        Returns
        -------
        InterpolatedState
            Never raises for finite input; epochs outside the orbit table are
            extrapolated and flagged ``OUT_OF_RANGE``.
        """
        t = np.array([float(time)])
        i0, off_center, out_of_range = self._windows(t)
        position, velocity = self._evaluate(t, i0)

        if out_of_range[0]:
            status = InterpolationStatus.OUT_OF_RANGE
            logger.warning(
                "Interpolation time %.6f outside orbit table [%.6f, %.6f]; extrapolating",
                time, self._orbit.start_time, self._orbit.end_time,
            )
        elif off_center[0]:
            status = InterpolationStatus.OFF_CENTER
            logger.debug("Interpolation at %.6f not in center interval", time)
        else:
            status = InterpolationStatus.OK

        return InterpolatedState(float(time), position[0], velocity[0], status)

    def position(self, time: float) -> np.ndarray:
        """Interpolated position (m) at one epoch."""
        return self.interpolate(time).position

    def build(self, start: float, step: float, count: int) -> OrbitPositionTable:
        """
        Pre-evaluate positions on the grid ``start + k * step``.

        Parameters
        ----------
        start : float
            First grid epoch (s).
        step : float
            Grid spacing (s), > 0.
        count : int
            Number of grid epochs, > 0.

        Returns
        -------
        OrbitPositionTable
        """
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step}")
        if count <= 0:
            raise ValueError(f"count must be > 0, got {count}")

        times = start + np.arange(count) * step
        positions = np.empty((count, 3), dtype=np.float64)
        n_off = 0
        n_out = 0

        for lo in range(0, count, _CHUNK):
            t = times[lo:lo + _CHUNK]
            i0, off_center, out_of_range = self._windows(t)
            positions[lo:lo + t.shape[0]], _ = self._evaluate(t, i0)
            n_out += int(np.count_nonzero(out_of_range))
            n_off += int(np.count_nonzero(off_center & ~out_of_range))

        if n_out:
            status = InterpolationStatus.OUT_OF_RANGE
            logger.warning(
                "%d of %d grid epochs outside orbit table [%.6f, %.6f]; extrapolated",
                n_out, count, self._orbit.start_time, self._orbit.end_time,
            )
        elif n_off:
            status = InterpolationStatus.OFF_CENTER
        else:
            status = InterpolationStatus.OK

        if self._config.verbose:
            logger.debug(
                "Built orbit position grid: %d epochs from %.6f step %.6f (%s)",
                count, start, step, status.value,
            )

        positions.setflags(write=False)
        times.setflags(write=False)
        return OrbitPositionTable(times, positions, status, n_off, n_out)


__all__ = [
    "InterpolationStatus",
    "InterpolatedState",
    "OrbitPositionTable",
    "OrbitInterpolator",
    "hermite_weights",
    "hermite_evaluate",
    "worst_status",
]
