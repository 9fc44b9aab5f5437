"""
Tests for formatting and parsing single coordinates.
"""

import unittest

from geocoord import Coordinate
from geocoord.codec import (
    Err,
    MissingTerminatorError,
    NumberFormatError,
    Ok,
    OutOfRangeError,
    ParseError,
    Precision,
    PrecisionMismatchError,
    TokenCountError,
    TooShortError,
    UnknownFormatSpecifierError,
    coordinate_codec,
)
from geocoord.geo import Latitude, Longitude


class TestFormat(unittest.TestCase):
    """Test rendering coordinates in every precision."""

    def setUp(self):
        self.coord = Coordinate()
        self.coord.set_dms(0, 10, 20.8, True, 30, 40, 50.9, False)

    def format(self, coord, precision=None):
        result = coordinate_codec.format(coord, precision)
        self.assertIsInstance(result, Ok)
        return result.value

    def test_dms(self):
        self.assertEqual(self.format(self.coord, "DMS"), "00°10'20.8\"N 030°40'50.9\"W")

    def test_default_is_dms(self):
        expected = self.format(self.coord, "DMS")
        self.assertEqual(self.format(self.coord), expected)
        self.assertEqual(self.format(self.coord, ""), expected)

    def test_d(self):
        self.assertEqual(self.format(self.coord, "D"), "00.1724°N 030.6808°W")
        self.assertEqual(self.format(Coordinate(-2.4, 1.5), "D"), "02.4000°S 001.5000°E")

    def test_dm(self):
        self.assertEqual(self.format(self.coord, "DM"), "00°10.35'N 030°40.85'W")

    def test_iso(self):
        self.assertEqual(self.format(self.coord, "ISO"), "+001020.8-0304050.9/")
        self.assertEqual(self.format(Coordinate(1.0, 1.0), "ISO"), "+010000.0+0010000.0/")
        self.assertEqual(self.format(Coordinate(-2.4, 1.5), "ISO"), "-022400.0+0013000.0/")

    def test_iso_keeps_second_decimal(self):
        """Test that ISO seconds carry a second decimal only when needed."""
        coord = Coordinate(Latitude.from_dms(0, 0, 5.25, True), Longitude(0))
        self.assertEqual(self.format(coord, "ISO"), "+000005.25+0000000.0/")

    def test_tokens_are_case_insensitive(self):
        self.assertEqual(self.format(self.coord, "iso"), self.format(self.coord, Precision.ISO))
        self.assertEqual(self.format(self.coord, "dm"), self.format(self.coord, Precision.DM))

    def test_rounding_carries_into_minutes(self):
        """Test that seconds rounding up to 60 carry into the minutes field."""
        coord = Coordinate(Latitude.from_dms(10, 59, 59.96, True), Longitude(0))
        self.assertEqual(self.format(coord, "DMS"), "11°00'00.0\"N 000°00'00.0\"E")

    def test_unknown_specifier(self):
        result = coordinate_codec.format(self.coord, "XYZ")
        self.assertIsInstance(result, Err)
        self.assertIsInstance(result.error, UnknownFormatSpecifierError)
        self.assertEqual(result.error.specifier, "XYZ")
        with self.assertRaises(UnknownFormatSpecifierError):
            result.unwrap()


class TestParse(unittest.TestCase):
    """Test parsing ISO 6709 records."""

    def parse(self, text):
        result = coordinate_codec.parse(text)
        if result.is_err():
            self.fail(f"{text!r} rejected: {result.error}")
        return result.value

    def assertRejected(self, text, error_type):
        result = coordinate_codec.parse(text)
        self.assertTrue(result.is_err(), f"{text!r} accepted")
        self.assertIsInstance(result.error, error_type)
        return result.error

    def assertDegrees(self, coord, lat, lon, places=6):
        self.assertAlmostEqual(coord.lat_deg, lat, places=places)
        self.assertAlmostEqual(coord.lon_deg, lon, places=places)

    def test_dms_records(self):
        """Test the reference DMS records."""
        self.assertDegrees(self.parse("+010000.0+0010000.0/"), 1.0, 1.0)
        self.assertDegrees(self.parse("-022400.0+0013000.0/"), -2.4, 1.5)

    def test_dms_record_equals_constructed(self):
        self.assertEqual(self.parse("-022400.0+0013000.0/"), Coordinate(-2.4, 1.5))

    def test_dm_record(self):
        self.assertDegrees(self.parse("+0130.00-03040.50/"), 1.5, -30.675)

    def test_d_record(self):
        self.assertDegrees(self.parse("+01.50000-030.67500/"), 1.5, -30.675)

    def test_fractional_seconds(self):
        coord = self.parse("+123456.7-0985432.1/")
        self.assertDegrees(coord, 12 + 34 / 60 + 56.7 / 3600, -(98 + 54 / 60 + 32.1 / 3600), places=5)

    def test_altitude_is_validated_and_ignored(self):
        """Test that an altitude field does not change latitude or longitude."""
        with_altitude = self.parse("+123456.7-0985432.1+15.9/")
        self.assertEqual(with_altitude, self.parse("+123456.7-0985432.1/"))
        self.assertEqual(self.parse("+1234.56-09854.321-15/"), self.parse("+1234.56-09854.321/"))

    def test_signs_on_equator_and_meridian(self):
        """Test that zero values still carry and honor explicit signs."""
        coord = self.parse("+000000.0-0010000.0/")
        self.assertDegrees(coord, 0.0, -1.0)
        coord = self.parse("-010000.0+0000000.0/")
        self.assertDegrees(coord, -1.0, 0.0)

    def test_surrounding_whitespace_ignored(self):
        self.assertEqual(self.parse("  +010000.0+0010000.0/\n"), Coordinate(1.0, 1.0))

    def test_too_short(self):
        self.assertRejected("+01.5-030.6/", TooShortError)
        self.assertRejected("", TooShortError)

    def test_missing_terminator(self):
        self.assertRejected("+010000.0+0010000.0", MissingTerminatorError)
        self.assertRejected("+010000.0+0010000.0x", MissingTerminatorError)

    def test_missing_leading_sign(self):
        self.assertRejected("123456.7-0985432.1/", TokenCountError)

    def test_too_many_fields(self):
        self.assertRejected("+010000.0+0010000.0+15.9+1.0/", TokenCountError)

    def test_decimal_point_misplaced(self):
        self.assertRejected("+0100000.+0010000.0/", PrecisionMismatchError)
        self.assertRejected("+0100000+00100000/", PrecisionMismatchError)

    def test_decimal_points_inconsistent(self):
        """Test that the longitude point must sit one place right of the latitude point."""
        self.assertRejected("+010000.0+010000.0/", PrecisionMismatchError)
        self.assertRejected("+0100.00+0010000.0/", PrecisionMismatchError)

    def test_malformed_number(self):
        self.assertRejected("+01a000.0+0010000.0/", NumberFormatError)
        self.assertRejected("+010000.0+0010000.0+1x.9/", NumberFormatError)
        self.assertRejected("+01.5.000-030.67500/", NumberFormatError)

    def test_out_of_range(self):
        self.assertRejected("+910000.0+0010000.0/", OutOfRangeError)
        self.assertRejected("+010000.0+1810000.0/", OutOfRangeError)
        self.assertRejected("+016000.0+0010000.0/", OutOfRangeError)

    def test_errors_carry_text(self):
        error = self.assertRejected("123456.7-0985432.1/", TokenCountError)
        self.assertEqual(error.text, "123456.7-0985432.1/")

    def test_parse_error_is_value_error(self):
        error = self.assertRejected("123456.7-0985432.1/", ParseError)
        self.assertIsInstance(error, ValueError)


class TestRoundTrip(unittest.TestCase):
    """Test that ISO output parses back to the same point."""

    def test_round_trip(self):
        points = [
            (0.0, 0.0),
            (1.0, 1.0),
            (-2.4, 1.5),
            (48.8566, 2.3522),
            (-33.8688, 151.2093),
            (89.9999, -179.9999),
            (-90.0, 180.0),
            (0.1724, -30.6808),
        ]
        for lat, lon in points:
            coord = Coordinate(lat, lon)
            text = coordinate_codec.format(coord, "ISO").unwrap()
            parsed = coordinate_codec.parse(text).unwrap()
            self.assertAlmostEqual(parsed.lat_deg, coord.lat_deg, delta=1e-3, msg=text)
            self.assertAlmostEqual(parsed.lon_deg, coord.lon_deg, delta=1e-3, msg=text)


if __name__ == '__main__':
    unittest.main()
