"""
Tests for the angle and length unit system.
"""

import math
import unittest

import numpy as np

from geocoord.geo import Latitude, Longitude
from geocoord.unit import ArcMinute, ArcSecond, Degree, Kilometer, Meter, NauticalMile, Radian


class TestAngleUnits(unittest.TestCase):
    """Test angular units stored in arc seconds."""

    def test_degree_stored_in_arc_seconds(self):
        """Test that degrees are stored as arc seconds."""
        self.assertEqual(float(Degree(1.5)), 5400.0)

    def test_conversion_between_units(self):
        """Test conversions inside the angle family."""
        self.assertEqual(Degree(1).to(ArcMinute), 60.0)
        self.assertEqual(ArcMinute(90).to(Degree), 1.5)
        self.assertAlmostEqual(Radian(math.pi).to(Degree), 180.0, places=4)

    def test_storage_is_single_precision(self):
        """Test that stored values are rounded to single precision."""
        self.assertEqual(float(ArcSecond(0.1)), float(np.float32(0.1)))

    def test_addition_keeps_left_type(self):
        """Test adding units of the same family."""
        total = Degree(1) + ArcMinute(30)
        self.assertIsInstance(total, Degree)
        self.assertEqual(float(total), 5400.0)

    def test_scalar_multiplication(self):
        """Test multiplying by a plain number."""
        self.assertEqual(Degree(2) * 2, Degree(4))
        self.assertEqual(Degree(3) / 3, Degree(1))

    def test_unit_multiplication_rejected(self):
        """Test that multiplying two units is rejected."""
        with self.assertRaises(TypeError):
            Degree(1) * Degree(1)

    def test_negation_and_abs(self):
        """Test sign operations keep the unit type."""
        self.assertIsInstance(-Degree(1), Degree)
        self.assertEqual(float(abs(Degree(-2))), 7200.0)

    def test_comparison_with_plain_number(self):
        """Test comparing a unit with its stored value."""
        self.assertEqual(Degree(1), 3600.0)

    def test_units_are_hashable(self):
        """Test that equal units hash alike."""
        self.assertEqual(len({Degree(1), ArcMinute(60)}), 1)


class TestLengthUnits(unittest.TestCase):
    """Test length units stored in meters."""

    def test_kilometer(self):
        self.assertEqual(Kilometer(1.5).to(Meter), 1500.0)

    def test_nautical_mile(self):
        """Test that a nautical mile is 1852 meters."""
        self.assertEqual(float(NauticalMile(1)), 1852.0)
        self.assertAlmostEqual(NauticalMile(60).to(Kilometer), 111.12, places=3)


class TestUnitFamilies(unittest.TestCase):
    """Test that unit families cannot be mixed."""

    def test_angle_and_length_rejected(self):
        with self.assertRaises(TypeError):
            Degree(1) + Meter(1)

    def test_latitude_and_longitude_rejected(self):
        """Test that latitude and longitude are separate families."""
        with self.assertRaises(TypeError):
            Latitude(1) + Longitude(1)
        with self.assertRaises(TypeError):
            Latitude(1) < Longitude(2)

    def test_conversion_to_other_family_rejected(self):
        with self.assertRaises(TypeError):
            Degree(1).to(Meter)

    def test_family_roots(self):
        """Test automatic ROOT assignment."""
        self.assertIs(Degree.ROOT, ArcSecond)
        self.assertIs(Kilometer.ROOT, Meter)
        self.assertIs(Latitude.ROOT, Latitude)
        self.assertIs(Longitude.ROOT, Longitude)


if __name__ == '__main__':
    unittest.main()
