"""
Tests for latitude and longitude components.
"""

import unittest

from geocoord.geo import DM, DMS, Latitude, Longitude


class TestAngleValue(unittest.TestCase):
    """Test construction and decomposition of coordinate components."""

    def test_degrees_round_trip(self):
        """Test setting and reading decimal degrees."""
        lat = Latitude.from_degrees(-2.4)
        self.assertEqual(float(lat), -8640.0)
        self.assertAlmostEqual(lat.degrees, -2.4)
        self.assertAlmostEqual(lat.as_d(), -2.4)

    def test_from_dm(self):
        """Test that the hemisphere flag alone sets the sign."""
        lon = Longitude.from_dm(30, 40.5, False)
        self.assertAlmostEqual(lon.degrees, -30.675)
        self.assertAlmostEqual(Longitude.from_dm(30, 40.5, True).degrees, 30.675)

    def test_from_dms(self):
        lat = Latitude.from_dms(48, 51, 24.0, True)
        self.assertAlmostEqual(lat.degrees, 48.856666, places=5)

    def test_as_dm(self):
        self.assertEqual(Latitude(1.5).as_dm(), DM(1, 30.0, True))
        self.assertEqual(Latitude(-2.4).as_dm(), DM(2, 24.0, False))

    def test_as_dms(self):
        self.assertEqual(Latitude(-2.4).as_dms(), DMS(2, 24, 0.0, False))

    def test_as_dms_fractional_seconds(self):
        """Test that fractional seconds survive decomposition."""
        dms = Longitude.from_dms(30, 40, 50.9, False).as_dms()
        self.assertEqual(dms.degrees, 30)
        self.assertEqual(dms.minutes, 40)
        self.assertAlmostEqual(dms.seconds, 50.9, places=2)
        self.assertFalse(dms.positive)

    def test_decompositions_agree_with_degrees(self):
        """Test that D, DM and DMS describe the same angle."""
        for value in (0.0, 0.1724, -2.4, 45.123456, -89.99, 12.5):
            lat = Latitude(value)
            dm = lat.as_dm()
            dms = lat.as_dms()
            sign = 1 if dm.positive else -1
            from_dm = sign * (dm.degrees + dm.minutes / 60)
            from_dms = sign * (dms.degrees + dms.minutes / 60 + dms.seconds / 3600)
            self.assertAlmostEqual(from_dm, lat.degrees, places=6)
            self.assertAlmostEqual(from_dms, lat.degrees, places=6)

    def test_hemisphere(self):
        """Test hemisphere letters, with zero counted as North/East."""
        self.assertEqual(Latitude(-1).hemisphere, "S")
        self.assertEqual(Latitude(0).hemisphere, "N")
        self.assertEqual(Longitude(1).hemisphere, "E")
        self.assertEqual(Longitude(-0.5).hemisphere, "W")

    def test_in_range(self):
        self.assertTrue(Latitude(90).in_range())
        self.assertFalse(Latitude(-90.5).in_range())
        self.assertTrue(Longitude(-180).in_range())
        self.assertFalse(Longitude(181).in_range())

    def test_coerce_rejects_other_axis(self):
        """Test that a longitude cannot be used as a latitude."""
        with self.assertRaises(TypeError):
            Latitude.coerce(Longitude(1))

    def test_coerce_reads_numbers_as_degrees(self):
        self.assertEqual(float(Latitude.coerce(1)), 3600.0)


if __name__ == '__main__':
    unittest.main()
