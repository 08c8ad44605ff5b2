# -*- coding: utf-8 -*-
"""Tests for geolocation output sinks."""
import io
import sys

import numpy as np
import pytest

from sarorbit.io.sinks import AsciiSink, BinarySink, OutputFormat, open_sink

RECORDS = [
    (1000.012345, 9000.5, 525.0, -116.123456, 33.987654),
    (-5.25, 17999.75, -12.5, 179.999999, -0.000001),
    (4321.0, 0.0, 0.0, 7.5, 0.0),
]


def encode(output_format):
    buf = io.BytesIO()
    sink = open_sink(output_format, buf)
    for record in RECORDS:
        sink.write(record)
    sink.flush()
    assert sink.count == len(RECORDS)
    return buf.getvalue()


class TestAsciiSink:
    def test_format(self):
        buf = io.BytesIO()
        AsciiSink(buf).write((1.0, 2.5, -3.0, 4.25, 5.125))
        assert buf.getvalue() == b"1.000000 2.500000 -3.000000 4.250000 5.125000 \n"

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            AsciiSink(io.BytesIO()).write((1.0, 2.0))


class TestBinarySink:
    def test_float32_layout(self):
        data = encode(OutputFormat.FLOAT32)
        assert len(data) == 5 * 4 * len(RECORDS)
        values = np.frombuffer(data, dtype=np.float32).reshape(-1, 5)
        np.testing.assert_array_equal(values, np.array(RECORDS, dtype=np.float32))

    def test_float64_layout(self):
        data = encode(OutputFormat.FLOAT64)
        assert len(data) == 5 * 8 * len(RECORDS)
        values = np.frombuffer(data, dtype=np.float64).reshape(-1, 5)
        np.testing.assert_array_equal(values, np.array(RECORDS))

    def test_native_byte_order(self):
        buf = io.BytesIO()
        BinarySink(buf, np.float64).write((1.0, 0.0, 0.0, 0.0, 0.0))
        expected = np.float64(1.0).tobytes()
        assert buf.getvalue()[:8] == expected
        assert sys.byteorder in ('little', 'big')

    def test_record_size(self):
        assert BinarySink(io.BytesIO(), np.float32).record_size == 20
        assert BinarySink(io.BytesIO(), np.float64).record_size == 40

    def test_unsupported_dtype(self):
        with pytest.raises(ValueError):
            BinarySink(io.BytesIO(), np.int32)

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            BinarySink(io.BytesIO()).write((1.0, 2.0, 3.0))


class TestFormatEquivalence:
    """Binary modes decode to the ASCII values within their precision."""

    def test_float64_matches_ascii(self):
        text = np.loadtxt(io.StringIO(encode(OutputFormat.ASCII).decode('ascii')))
        binary = np.frombuffer(encode(OutputFormat.FLOAT64), dtype=np.float64).reshape(-1, 5)
        np.testing.assert_allclose(binary, text, atol=5e-7)

    def test_float32_matches_ascii(self):
        text = np.loadtxt(io.StringIO(encode(OutputFormat.ASCII).decode('ascii')))
        binary = np.frombuffer(encode(OutputFormat.FLOAT32), dtype=np.float32).reshape(-1, 5)
        np.testing.assert_allclose(binary, text, rtol=1e-6, atol=1e-6)


class TestOpenSink:
    @pytest.mark.parametrize("name, cls, fmt", [
        ('ascii', AsciiSink, OutputFormat.ASCII),
        ('float32', BinarySink, OutputFormat.FLOAT32),
        ('float64', BinarySink, OutputFormat.FLOAT64),
    ])
    def test_factory(self, name, cls, fmt):
        sink = open_sink(name, io.BytesIO())
        assert isinstance(sink, cls)
        assert sink.format is fmt

    def test_unknown(self):
        with pytest.raises(ValueError):
            open_sink('hdf5', io.BytesIO())
