# -*- coding: utf-8 -*-
"""
Ground Points - Free-form text stream of ``lon lat elevation`` triples.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from typing import Iterable, Iterator, TextIO, Tuple, Union


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def read_ground_points(
    stream: Union[TextIO, Iterable[str]]
) -> Iterator[Tuple[float, float, float]]:
    """
    Yield ``(lon, lat, elev)`` triples from whitespace-separated text.

    Tokens may be spread over lines in any way. Reading stops at the first
    token that is not a number, or at end of input; a trailing incomplete
    triple is discarded.

    Parameters
    ----------
    stream : TextIO or iterable of str
        Text source, read lazily.

    Yields
    ------
    tuple of float
        Longitude (deg), latitude (deg), elevation (m).

    Examples
    --------
    >>> list(read_ground_points(["-116.5 33.2 120.0", "-116.4 33.3 95"]))
    [(-116.5, 33.2, 120.0), (-116.4, 33.3, 95.0)]
    """
    triple = []
    for token in _tokens(stream):
        try:
            triple.append(float(token))
        except ValueError:
            return
        if len(triple) == 3:
            yield triple[0], triple[1], triple[2]
            triple = []


__all__ = ["read_ground_points"]
