# -*- coding: utf-8 -*-
"""
Exceptions raised by sarorbit.

Setup problems (unreadable parameter or orbit files) are fatal and surface
as :class:`PRMError` / :class:`OrbitFileError`. Per-point numerical trouble
during geolocation is never raised; it is reported through status values
or by dropping the point.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""


class SarOrbitError(Exception):
    """Base class for sarorbit errors."""


class PRMError(SarOrbitError, ValueError):
    """Parameter file is missing, unreadable or holds a malformed value."""


class OrbitFileError(SarOrbitError, ValueError):
    """Orbit (LED) file is missing or malformed."""


class DegenerateFitError(SarOrbitError, ValueError):
    """Least-squares normal matrix is singular (too few distinct samples)."""


__all__ = ["SarOrbitError", "PRMError", "OrbitFileError", "DegenerateFitError"]
