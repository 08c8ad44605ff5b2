# -*- coding: utf-8 -*-
"""
Vector Utilities - Small 3-vector helpers used by the orbit geometry code.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import numpy as np


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Cross product of two 3-vectors (or stacks of 3-vectors).

    Parameters
    ----------
    a, b : np.ndarray
        Shape (3,) or (N, 3).

    Returns
    -------
    np.ndarray
        ``a x b``, same shape as the broadcast inputs.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return np.cross(a, b)


def vector_length(v: np.ndarray) -> np.ndarray:
    """Euclidean length along the last axis."""
    v = np.asarray(v, dtype=np.float64)
    return np.sqrt(np.sum(v * v, axis=-1))


def unit_vector(v: np.ndarray) -> np.ndarray:
    """
    Normalize vector(s) along the last axis.

    Raises
    ------
    ValueError
        If any vector has zero length.
    """
    v = np.asarray(v, dtype=np.float64)
    length = vector_length(v)
    if np.any(length == 0):
        raise ValueError("Cannot normalize a zero-length vector")
    return v / np.expand_dims(length, -1)


def distance(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Euclidean distance between points along the last axis."""
    return vector_length(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))


__all__ = ["cross", "vector_length", "unit_vector", "distance"]
