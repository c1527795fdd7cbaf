"""
Tests for the concrete unit catalog and its relations.
"""

import math
import unittest

from numpy.testing import assert_allclose

from typeunits.config import Base
from typeunits.unit import (
    LSB,
    Acceleration,
    Angle,
    AngularFrequency,
    AngularSpeed,
    Bits,
    Bytes,
    Frequency,
    Length,
    SamplingFrequency,
    Speed,
    Time,
    Velocity,
)
from typeunits.unit.consts import c, g
from typeunits.unit.unit_angle import deg, rev
from typeunits.unit.unit_digital import B, KiB, bit, kB, lsb
from typeunits.unit.unit_frequency import Hz, kHz, ksps, rpm, sps
from typeunits.unit.unit_length import km, m
from typeunits.unit.unit_time import h, min, ms, s, us
from typeunits.unit.unit_velocity import kmph, mps, mps2


class TestScenarios(unittest.TestCase):
    """Test the reference scenarios of the unit catalog."""

    def test_kilohertz_in_hertz(self):
        """Test 10 kHz read in Hz."""
        self.assertEqual((10.0 * kHz).Hz(), 10000.0)

    def test_length_over_time_is_velocity(self):
        """Test 1 m / 1 s == 1 mps."""
        v = 1.0 * m / (1.0 * s)
        self.assertIs(type(v), Velocity)
        self.assertEqual(v, 1.0 * mps)

    def test_meters_per_second_squared(self):
        """Test 1 m/s/s == 1 mps2."""
        a = 1.0 * m / s / s
        self.assertIs(type(a), Acceleration)
        self.assertEqual(a, 1.0 * mps2)

    def test_same_velocity_from_different_subunits(self):
        """Test 1 km / 1 min == 60 km / 1 h."""
        per_minute = 1.0 * km / (1.0 * min)
        per_hour = 60.0 * km / (1.0 * h)
        self.assertEqual(per_minute, per_hour)
        assert_allclose(per_minute.mps(), 1000.0 / 60.0, rtol=1e-6)

    def test_frequency_to_angular_frequency(self):
        """Test 50 Hz converted to 100 pi rad/s."""
        omega = AngularFrequency.from_unit(50.0 * Hz)
        self.assertIs(type(omega), AngularFrequency)
        assert_allclose(omega.canonical(), 100.0 * math.pi, rtol=1e-6)

    def test_bytes_to_bits(self):
        """Test 1 byte converted to 8 bits and back."""
        bits = Bits.from_unit(1.0 * B)
        self.assertEqual(bits, 8.0 * bit)
        self.assertEqual(Bytes.from_unit(bits), 1.0 * B)


class TestTime(unittest.TestCase):
    """Test the Time unit."""

    def test_subunits(self):
        """Test sub-unit factors in seconds."""
        self.assertEqual(ms.canonical(), Base(1e-3))
        self.assertEqual(us.canonical(), Base(1e-6))
        self.assertEqual(min, Time(60.0))
        self.assertEqual(h, 60 * min)

    def test_readout(self):
        """Test reading a duration in several sub-units."""
        t = 1.5 * h
        self.assertEqual(t.h(), 1.5)
        self.assertEqual(t.min(), 90.0)
        self.assertEqual(t.s(), 5400.0)
        assert_allclose(t.ms(), 5.4e6, rtol=1e-6)


class TestLengthAndVelocity(unittest.TestCase):
    """Test Length, Velocity and Acceleration."""

    def test_kilometers(self):
        """Test kilometers in meters."""
        self.assertEqual((2.5 * km).m(), 2500.0)
        assert_allclose((250.0 * Length.cm).m(), 2.5, rtol=1e-6)

    def test_kmph(self):
        """Test km/h against a quotient."""
        assert_allclose((36.0 * kmph).mps(), 10.0, rtol=1e-6)
        assert_allclose((36.0 * km / (1.0 * h)).kmph(), 36.0, rtol=1e-6)

    def test_velocity_over_time(self):
        """Test that Velocity / Time yields Acceleration."""
        a = (9.80665 * mps) / (1.0 * s)
        self.assertEqual(a, g)

    def test_constants(self):
        """Test physical constants."""
        self.assertIs(type(c), Velocity)
        self.assertEqual(c, Velocity(299_792_458.0))
        self.assertIs(type(g), Acceleration)

    def test_no_product_rule(self):
        """Test that Velocity * Time is not declared."""
        with self.assertRaises(TypeError):
            mps * s

    def test_aliases(self):
        """Test type aliases."""
        self.assertIs(Speed, Velocity)
        self.assertIs(SamplingFrequency, Frequency)
        self.assertIs(AngularSpeed, AngularFrequency)


class TestFrequencyAndAngle(unittest.TestCase):
    """Test Frequency, AngularFrequency and Angle."""

    def test_sampling_subunits(self):
        """Test that sps and ksps alias Hz and kHz."""
        self.assertEqual(sps, Hz)
        self.assertEqual(ksps, kHz)
        self.assertEqual(Frequency.SYMBOL, "Hz")

    def test_angle_subunits(self):
        """Test degrees and revolutions."""
        assert_allclose((180.0 * deg).rad(), math.pi, rtol=1e-6)
        assert_allclose((0.5 * rev).deg(), 180.0, rtol=1e-6)

    def test_angle_over_time(self):
        """Test that Angle / Time yields AngularFrequency."""
        omega = (1.0 * rev) / (1.0 * min)
        self.assertIs(type(omega), AngularFrequency)
        assert_allclose(omega.rpm(), 1.0, rtol=1e-6)

    def test_rpm_against_frequency(self):
        """Test that 60 rpm equals 1 Hz converted."""
        assert_allclose(
            (60.0 * rpm).canonical(),
            AngularFrequency.from_unit(1.0 * Hz).canonical(),
            rtol=1e-6,
        )

    def test_angular_frequency_back_to_frequency(self):
        """Test the derived inverse conversion."""
        f = Frequency.from_unit(AngularFrequency(2.0 * math.pi * 50.0))
        assert_allclose(f.Hz(), 50.0, rtol=1e-6)

    def test_angle_is_not_angular_frequency(self):
        """Test that Angle does not convert to AngularFrequency."""
        with self.assertRaises(TypeError):
            AngularFrequency.from_unit(Angle(1.0))


class TestDigital(unittest.TestCase):
    """Test LSB, Bits and Bytes."""

    def test_lsb_count(self):
        """Test LSB arithmetic."""
        reading = 1023 * lsb + 1 * lsb
        self.assertIs(type(reading), LSB)
        self.assertEqual(reading.lsb(), 1024)

    def test_data_sizes(self):
        """Test byte sub-units and their bit counts."""
        self.assertEqual(KiB, 1024 * B)
        self.assertEqual(kB.into(Bits), Bits(8000.0))
        assert_allclose(Bits.from_unit(2.0 * KiB).kbit(), 16.384, rtol=1e-6)

    def test_bits_and_bytes_do_not_mix(self):
        """Test that Bits and Bytes stay distinct types."""
        with self.assertRaises(TypeError):
            bit + B


if __name__ == "__main__":
    unittest.main()
