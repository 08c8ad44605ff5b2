# -*- coding: utf-8 -*-
"""
Polynomial Fitting - Least-squares polynomials through sampled histories.

Used to estimate the range rate and range curvature of a short, regularly
sampled range-versus-time window.

Dependencies
------------
numpy - Design matrix assembly
scipy.linalg - Symmetric positive definite solve of the normal equations

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import numpy as np
from scipy import linalg

from sarorbit.exceptions import DegenerateFitError


def polyfit(t: np.ndarray, r: np.ndarray, degree: int) -> np.ndarray:
    """
    Fit ``r ≈ sum_k c_k t**k`` by the normal equations.

    Parameters
    ----------
    t : np.ndarray
        Abscissae, shape (n,).
    r : np.ndarray
        Ordinates, shape (n,).
    degree : int
        Polynomial degree (>= 0).

    Returns
    -------
    np.ndarray
        Coefficients ``[c0, c1, ..., c_degree]`` (lowest order first).

    Raises
    ------
    ValueError
        If ``degree`` is negative.
    DegenerateFitError
        If ``t`` and ``r`` differ in length, there are fewer distinct
        abscissae than coefficients, or the normal matrix is singular.

    Notes
    -----
    The system is solved in ``s = (t - center) / half_span`` and the
    coefficients are mapped back to ``t``, so large time offsets do not
    degrade the fit.
    """
    t = np.asarray(t, dtype=np.float64).ravel()
    r = np.asarray(r, dtype=np.float64).ravel()
    if t.shape != r.shape:
        raise DegenerateFitError(f"t length {t.size} != r length {r.size}")
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")

    ncoef = degree + 1
    if t.size < ncoef or np.unique(t).size < ncoef:
        raise DegenerateFitError(
            f"Need at least {ncoef} distinct samples for a degree {degree} fit, "
            f"got {np.unique(t).size}"
        )

    # Centre and scale the abscissae so the normal matrix stays well
    # conditioned at epoch-sized times
    t_min, t_max = t.min(), t.max()
    center = 0.5 * (t_min + t_max)
    half_span = 0.5 * (t_max - t_min)
    if half_span == 0.0:
        half_span = 1.0
    s = (t - center) / half_span

    # Vandermonde design matrix, lowest power first
    A = np.vander(s, ncoef, increasing=True)
    normal = A.T @ A
    rhs = A.T @ r

    try:
        b = linalg.solve(normal, rhs, assume_a='pos')
    except linalg.LinAlgError as exc:
        raise DegenerateFitError(f"Singular normal matrix: {exc}") from exc

    # Substitute s = (t - center) / half_span back by Horner's rule
    step = np.array([-center / half_span, 1.0 / half_span])
    coef = b[-1:].copy()
    for bk in b[-2::-1]:
        coef = np.convolve(coef, step)
        coef[0] += bk
    return coef


def fit_quadratic(t: np.ndarray, r: np.ndarray) -> np.ndarray:
    """
    Least-squares quadratic ``r ≈ c0 + c1 t + c2 t²``.

    Parameters
    ----------
    t : np.ndarray
        Sample times, shape (n,), n >= 3 with at least 3 distinct values.
    r : np.ndarray
        Sample values, shape (n,).

    Returns
    -------
    np.ndarray
        ``[c0, c1, c2]``.

    Raises
    ------
    DegenerateFitError
        Fewer than 3 distinct sample times.

    Examples
    --------
    >>> t = np.linspace(-1.0, 1.0, 5)
    >>> fit_quadratic(t, 1.0 + 2.0 * t + 3.0 * t**2)
    array([1., 2., 3.])
    """
    return polyfit(t, r, 2)


__all__ = ["polyfit", "fit_quadratic"]
