# -*- coding: utf-8 -*-
"""
LED Orbit Files - Plain-text orbit state vector tables.

Format::

    nd iy id sec dsec
    iy id sec px py pz vx vy vz     (nd lines)

``iy`` is the year, ``id`` the day of year, ``sec`` the second of day of the
first sample and ``dsec`` the sample spacing. Sample ``k`` is at
``86400 * id + sec + k * dsec`` on the continuous clock used by PRM
``clock_start``.

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

import logging
from typing import List, TextIO

import numpy as np

from sarorbit.exceptions import OrbitFileError
from sarorbit.orbit.state_vectors import OrbitTable
from sarorbit.utils.constants import SECONDS_PER_DAY

logger = logging.getLogger(__name__)


def parse_led(lines: List[str], source: str = '<led>') -> OrbitTable:
    """
    Parse LED text.

    Raises
    ------
    OrbitFileError
        Malformed header or records, or record count differing from ``nd``.
    """
    rows = [line.split() for line in lines if line.strip()]
    if not rows:
        raise OrbitFileError(f"{source}: empty orbit file")

    header = rows[0]
    if len(header) < 5:
        raise OrbitFileError(f"{source}: malformed header {' '.join(header)!r}")
    try:
        nd = int(header[0])
        day = int(header[2])
        sec = float(header[3])
        dsec = float(header[4])
    except ValueError as exc:
        raise OrbitFileError(f"{source}: malformed header: {exc}") from exc

    records = rows[1:]
    if len(records) != nd:
        raise OrbitFileError(
            f"{source}: header declares {nd} state vectors, found {len(records)}"
        )

    data = np.empty((nd, 6), dtype=np.float64)
    for k, record in enumerate(records):
        if len(record) < 9:
            raise OrbitFileError(f"{source}: record {k + 1} has {len(record)} fields, expected 9")
        try:
            data[k] = [float(v) for v in record[3:9]]
        except ValueError as exc:
            raise OrbitFileError(f"{source}: record {k + 1}: {exc}") from exc

    try:
        table = OrbitTable(
            start_time=SECONDS_PER_DAY * day + sec,
            spacing=dsec,
            positions=data[:, 0:3],
            velocities=data[:, 3:6],
        )
    except ValueError as exc:
        raise OrbitFileError(f"{source}: {exc}") from exc

    logger.debug("Read %d state vectors from %s, spacing %.3f s", nd, source, dsec)
    return table


def read_led(path: str) -> OrbitTable:
    """
    Read an LED orbit file.

    Raises
    ------
    OrbitFileError
        If the file cannot be opened or is malformed.
    """
    try:
        with open(path, 'r') as f:
            lines = f.readlines()
    except OSError as exc:
        raise OrbitFileError(f"can't open {path}: {exc.strerror}") from exc
    return parse_led(lines, source=path)


def write_led(table: OrbitTable, stream: TextIO, year: int) -> None:
    """
    Write an orbit table in LED format.

    Parameters
    ----------
    table : OrbitTable
        Orbit to write.
    stream : TextIO
        Output text stream.
    year : int
        Calendar year written in the ``iy`` field.
    """
    day = int(table.start_time // SECONDS_PER_DAY)
    sec = table.start_time - SECONDS_PER_DAY * day

    stream.write(f"{len(table)} {year} {day} {sec:.3f} {table.spacing:f} \n")
    for k in range(len(table)):
        px, py, pz = table.positions[k]
        vx, vy, vz = table.velocities[k]
        stream.write(
            f"{year} {day} {sec + k * table.spacing:.3f} "
            f"{px:.6f} {py:.6f} {pz:.6f} {vx:.8f} {vy:.8f} {vz:.8f} \n"
        )


__all__ = ["parse_led", "read_led", "write_led"]
