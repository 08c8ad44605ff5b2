# -*- coding: utf-8 -*-
"""Tests for IO modules (PRM, LED, ground points)."""
import dataclasses
import io
import os
import tempfile

import numpy as np
import pytest

from sarorbit.exceptions import OrbitFileError, PRMError
from sarorbit.io.led import parse_led, read_led, write_led
from sarorbit.io.points import read_ground_points
from sarorbit.io.prm import ORBIT_GEOMETRY_KEYS, get_prm_value, parse_prm, read_prm, write_prm

from conftest import CLOCK_START, EARTH_RADIUS, NUM_VALID_AZ, ORBIT_START, PRF, PRM_TEXT


class TestParsePRM:
    def test_typed_fields(self):
        prm = parse_prm(PRM_TEXT.splitlines(True))
        assert prm.num_valid_az == NUM_VALID_AZ
        assert isinstance(prm.num_valid_az, int)
        assert prm.prf == PRF
        assert prm.clock_start == CLOCK_START
        assert prm.ra == EARTH_RADIUS
        assert prm.sc_identity == 5
        assert prm.led_file == 'scene.LED'
        assert prm.wavelength == 0.236

    def test_unknown_keys_kept(self):
        prm = parse_prm(PRM_TEXT.splitlines(True))
        assert prm.extra == {'input_file': 'scene.raw'}
        assert prm.keys[0] == 'num_valid_az'
        assert prm.keys[-1] == 'input_file'

    def test_last_value_wins(self):
        prm = parse_prm(["rng_samp_rate = 1.0e6\n", "rng_samp_rate = 2.0e6\n"])
        assert prm.rng_samp_rate == 2.0e6
        assert prm.keys == ['rng_samp_rate']

    def test_integer_with_exponent(self):
        assert parse_prm(["nrows = 1.6e4"]).nrows == 16000

    def test_lines_without_equals_ignored(self):
        prm = parse_prm(["# comment\n", "\n", "PRF = 100\n"])
        assert prm.prf == 100.0
        assert prm.keys == ['PRF']

    def test_malformed_value(self):
        with pytest.raises(PRMError):
            parse_prm(["PRF = fast\n"])

    def test_defaults(self):
        prm = parse_prm([])
        assert prm.earth_radius == 0.0
        assert prm.fd1 == 0.0
        assert prm.ra == pytest.approx(6378137.0)

    def test_immutable(self):
        prm = parse_prm(PRM_TEXT.splitlines(True))
        with pytest.raises(dataclasses.FrozenInstanceError):
            prm.vel = 7000.0
        assert prm.replace(vel=7000.0).vel == 7000.0
        assert prm.vel == 0.0


class TestPRMGeometry:
    def test_validate(self):
        prm = parse_prm(PRM_TEXT.splitlines(True))
        prm.validate_geometry()
        with pytest.raises(PRMError):
            prm.replace(prf=0.0).validate_geometry()
        with pytest.raises(PRMError):
            prm.replace(num_valid_az=prm.nrows + 1).validate_geometry()

    def test_range_pixel_size(self):
        prm = parse_prm(["rng_samp_rate = 19.2e6"])
        assert prm.range_pixel_size == pytest.approx(0.5 * 299792456.0 / 19.2e6)

    def test_clock_start_seconds(self):
        assert parse_prm(["clock_start = 2.5"]).clock_start_seconds == 216000.0

    def test_replace_copies_extra(self):
        prm = parse_prm(PRM_TEXT.splitlines(True))
        other = prm.replace(vel=7000.0)
        other.extra['new'] = 'x'
        assert 'new' not in prm.extra
        assert prm.vel == 0.0


class TestWritePRM:
    def test_roundtrip(self):
        prm = parse_prm(PRM_TEXT.splitlines(True)).replace(vel=7123.456789, ht=700001.25, orbdir='A')
        buf = io.StringIO()
        write_prm(prm, buf)
        again = parse_prm(io.StringIO(buf.getvalue()))
        assert again.vel == prm.vel
        assert again.ht == prm.ht
        assert again.orbdir == 'A'
        assert again.clock_start == prm.clock_start
        assert again.extra == prm.extra

    def test_orbit_keys_appended(self):
        buf = io.StringIO()
        write_prm(parse_prm(["PRF = 1700.0\n"]), buf)
        names = [line.split('=')[0].strip() for line in buf.getvalue().splitlines()]
        assert names == ['PRF'] + list(ORBIT_GEOMETRY_KEYS)

    def test_line_format(self):
        buf = io.StringIO()
        write_prm(parse_prm(["PRF = 1700\n"]), buf, include=())
        assert buf.getvalue() == f"{'PRF':<24s} = 1700.0\n"


class TestPRMFiles:
    def test_read_and_get(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'master.PRM')
            with open(path, 'w') as f:
                f.write(PRM_TEXT)
            assert read_prm(path).num_valid_az == NUM_VALID_AZ
            assert get_prm_value(path, 'PRF') == '1700.0'
            assert get_prm_value(path, 'input_file') == 'scene.raw'
            with pytest.raises(PRMError):
                get_prm_value(path, 'SC_vel')

    def test_missing_file(self):
        with pytest.raises(PRMError):
            read_prm('/nonexistent/master.PRM')


class TestLED:
    def test_roundtrip(self, orbit):
        buf = io.StringIO()
        write_led(orbit, buf, 2024)
        table = parse_led(buf.getvalue().splitlines())
        assert len(table) == len(orbit)
        assert table.start_time == pytest.approx(ORBIT_START)
        assert table.spacing == pytest.approx(orbit.spacing)
        np.testing.assert_allclose(table.positions, orbit.positions, atol=1e-6)
        np.testing.assert_allclose(table.velocities, orbit.velocities, atol=1e-8)

    def test_header(self, orbit):
        buf = io.StringIO()
        write_led(orbit, buf, 2024)
        header = buf.getvalue().splitlines()[0].split()
        assert header[:3] == ['60', '2024', '100']
        assert float(header[3]) == 0.0
        assert float(header[4]) == 10.0

    def test_start_time_from_day_and_seconds(self):
        lines = ["6 2010 45 3600.5 10.0"]
        lines += [f"2010 45 {3600.5 + 10 * k} 7000000 {k} 0 0 7500 0" for k in range(6)]
        table = parse_led(lines)
        assert table.start_time == 86400.0 * 45 + 3600.5
        assert table.positions[3, 1] == 3.0

    def test_count_mismatch(self):
        lines = ["7 2010 45 0.0 10.0"] + ["2010 45 0 1 2 3 4 5 6"] * 6
        with pytest.raises(OrbitFileError):
            parse_led(lines)

    def test_malformed_record(self):
        lines = ["6 2010 45 0.0 10.0"] + ["2010 45 0 1 2 3 4 5 6"] * 5 + ["2010 45 0 1 x 3 4 5 6"]
        with pytest.raises(OrbitFileError):
            parse_led(lines)

    def test_short_record(self):
        lines = ["6 2010 45 0.0 10.0"] + ["2010 45 0 1 2 3 4 5 6"] * 5 + ["2010 45 0 1 2"]
        with pytest.raises(OrbitFileError):
            parse_led(lines)

    def test_too_few_samples(self):
        lines = ["3 2010 45 0.0 10.0"] + ["2010 45 0 1 2 3 4 5 6"] * 3
        with pytest.raises(OrbitFileError):
            parse_led(lines)

    def test_bad_header(self):
        with pytest.raises(OrbitFileError):
            parse_led(["six 2010 45 0.0 10.0"])
        with pytest.raises(OrbitFileError):
            parse_led([])

    def test_missing_file(self):
        with pytest.raises(OrbitFileError):
            read_led('/nonexistent/scene.LED')

    def test_read_file(self, orbit):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'scene.LED')
            with open(path, 'w') as f:
                write_led(orbit, f, 2024)
            assert len(read_led(path)) == len(orbit)


class TestGroundPoints:
    def test_lines(self):
        points = list(read_ground_points(io.StringIO("-116.5 33.2 120.0\n-116.4 33.3 95\n")))
        assert points == [(-116.5, 33.2, 120.0), (-116.4, 33.3, 95.0)]

    def test_free_form(self):
        points = list(read_ground_points(["1 2", " 3 4\n5", "6"]))
        assert points == [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0)]

    def test_stops_at_non_numeric(self):
        points = list(read_ground_points(["1 2 3\n", "4 5 x\n", "7 8 9\n"]))
        assert points == [(1.0, 2.0, 3.0)]

    def test_incomplete_triple_dropped(self):
        assert list(read_ground_points(["1 2 3 4 5"])) == [(1.0, 2.0, 3.0)]

    def test_empty(self):
        assert list(read_ground_points(io.StringIO(""))) == []
