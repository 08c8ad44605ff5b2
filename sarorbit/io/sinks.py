# -*- coding: utf-8 -*-
"""
Output Sinks - Writers for sensor coordinate records.

Each record is ``range_pixel azimuth_pixel elevation lon lat``. Three
formats are supported:

- ``ASCII``: ``"%f %f %f %f %f \\n"`` text.
- ``FLOAT32``: five IEEE-754 single precision values, native byte order.
- ``FLOAT64``: five IEEE-754 double precision values, native byte order.

All sinks write to a binary stream (``sys.stdout.buffer`` or a file opened
``'wb'``).

Dependencies
------------
numpy - Fixed-width binary record encoding

License
-------
MIT License
Copyright (c) 2024 geoint.org
"""

from enum import Enum
from typing import BinaryIO, Sequence

import numpy as np


class OutputFormat(str, Enum):
    """Record encoding of geolocation output."""
    ASCII = "ascii"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


RECORD_FIELDS = 5


class AsciiSink:
    """
    Text record writer.

    Parameters
    ----------
    stream : BinaryIO
        Destination; text is encoded as ASCII.
    """

    format = OutputFormat.ASCII

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.count = 0

    def write(self, record: Sequence[float]) -> None:
        """Write one 5-value record."""
        if len(record) != RECORD_FIELDS:
            raise ValueError(f"Record must have {RECORD_FIELDS} values, got {len(record)}")
        line = "%f %f %f %f %f \n" % tuple(record)
        self.stream.write(line.encode('ascii'))
        self.count += 1

    def flush(self) -> None:
        self.stream.flush()


class BinarySink:
    """
    Fixed-width binary record writer.

    Parameters
    ----------
    stream : BinaryIO
        Destination.
    dtype : {np.float32, np.float64}
        Value type, native byte order.
    """

    def __init__(self, stream: BinaryIO, dtype=np.float64):
        dtype = np.dtype(dtype)
        if dtype == np.float32:
            self.format = OutputFormat.FLOAT32
        elif dtype == np.float64:
            self.format = OutputFormat.FLOAT64
        else:
            raise ValueError(f"Unsupported record dtype {dtype}")
        self.stream = stream
        self.dtype = dtype.newbyteorder('=')
        self.count = 0

    @property
    def record_size(self) -> int:
        """Bytes per record."""
        return RECORD_FIELDS * self.dtype.itemsize

    def write(self, record: Sequence[float]) -> None:
        """Write one 5-value record."""
        values = np.asarray(record, dtype=self.dtype)
        if values.shape != (RECORD_FIELDS,):
            raise ValueError(f"Record must have {RECORD_FIELDS} values, got shape {values.shape}")
        self.stream.write(values.tobytes())
        self.count += 1

    def flush(self) -> None:
        self.stream.flush()


def open_sink(output_format: OutputFormat, stream: BinaryIO):
    """
    Create the sink for an output format.

    Parameters
    ----------
    output_format : OutputFormat or str
        ``'ascii'``, ``'float32'`` or ``'float64'``.
    stream : BinaryIO
        Destination binary stream.

    Returns
    -------
    AsciiSink or BinarySink
    """
    output_format = OutputFormat(output_format)
    if output_format is OutputFormat.ASCII:
        return AsciiSink(stream)
    if output_format is OutputFormat.FLOAT32:
        return BinarySink(stream, np.float32)
    return BinarySink(stream, np.float64)


__all__ = ["OutputFormat", "AsciiSink", "BinarySink", "open_sink", "RECORD_FIELDS"]
