# -*- coding: utf-8 -*-
"""
Golden-Section Search - Closest-approach search over a discrete orbit grid.

The search narrows a bracket of integer grid indices with golden-section
steps and stops once the bracket is no wider than ``tolerance`` indices.
Interior points are truncated to integers after each step, so the result is
the better of the two final interior points rather than the exact discrete
minimum. Pixel bias constants are calibrated against this behavior.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
from typing import Callable, Tuple

from sarorbit.utils.constants import GOLDEN_C, GOLDEN_R, SEARCH_TOLERANCE

logger = logging.getLogger(__name__)

# More than enough for 2**31 indices
_MAX_ITERATIONS = 200


def golden_section_search(
    distance_fn: Callable[[int], float],
    start: int,
    end: int,
    middle: int,
    tolerance: int = SEARCH_TOLERANCE
) -> Tuple[int, float]:
    """
    Minimize ``distance_fn`` over integer indices in ``[start, end]``.

    Parameters
    ----------
    distance_fn : callable
        Function of an integer index, unimodal over the bracket.
    start, end : int
        Bracket ends.
    middle : int
        Initial interior point, usually ``int(start + (end - start) * C)``.
    tolerance : int
        Stop when ``x3 - x0 <= tolerance``.

    Returns
    -------
    index : int
        Index of the smaller of the two final interior evaluations; ties go
        to the second (larger) point.
    value : float
        ``distance_fn(index)``.

    Examples
    --------
    >>> golden_section_search(lambda i: abs(i - 700), 0, 999, 381)
    (700, 0)
    """
    x0 = start
    x3 = end
    if abs(end - middle) > abs(middle - start):
        x1 = middle
        x2 = middle + int(abs(GOLDEN_C * (end - middle)))
    else:
        x2 = middle
        x1 = middle - int(abs(GOLDEN_C * (middle - start)))

    f1 = distance_fn(x1)
    f2 = distance_fn(x2)

    iterations = 0
    while x3 - x0 > tolerance and iterations < _MAX_ITERATIONS:
        iterations += 1
        if f2 < f1:
            x0, x1 = x1, x2
            x2 = int(GOLDEN_R * x3 + GOLDEN_C * x1)
            # R + C is not exactly 1, so large brackets can overshoot
            if not x1 <= x2 <= x3:
                x2 = (x1 + x3 + 1) // 2
            f1, f2 = f2, distance_fn(x2)
        else:
            x3, x2 = x2, x1
            x1 = int(GOLDEN_R * x0 + GOLDEN_C * x2)
            if not x0 <= x1 <= x2:
                x1 = (x0 + x2) // 2
            f2, f1 = f1, distance_fn(x1)

    if iterations == _MAX_ITERATIONS:
        logger.debug("Golden-section search stopped after %d iterations, bracket [%d, %d]",
                     iterations, x0, x3)

    if f1 < f2:
        return x1, f1
    return x2, f2


__all__ = ["golden_section_search"]
