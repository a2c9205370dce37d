"""
Tests for util helper functions and exceptions.
"""

import unittest
from tempfile import TemporaryDirectory
from pathlib import Path
from illumina_coordinates import util
from illumina_coordinates.util import IlluminaError, SplitError, ParseError
from .test_common import TestBase


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        """Both error kinds should be IlluminaErrors and distinct from each other."""
        self.assertTrue(issubclass(SplitError, IlluminaError))
        self.assertTrue(issubclass(ParseError, IlluminaError))
        self.assertFalse(issubclass(SplitError, ParseError))
        self.assertFalse(issubclass(ParseError, SplitError))
        self.assertFalse(issubclass(IlluminaError, ValueError))


class TestParseUint(unittest.TestCase):
    """Test decoding unsigned integer fields."""

    def test_parse_uint(self):
        """Test plain decimal digits within each width."""
        self.assertEqual(util.parse_uint("0", 8), 0)
        self.assertEqual(util.parse_uint("255", 8), 255)
        self.assertEqual(util.parse_uint("256", 16), 256)
        self.assertEqual(util.parse_uint("65535", 16), 65535)
        self.assertEqual(util.parse_uint("007", 8), 7)

    def test_overflow(self):
        """Test values beyond each width."""
        with self.assertRaises(ParseError):
            util.parse_uint("256", 8)
        with self.assertRaises(ParseError):
            util.parse_uint("65536", 16)
        with self.assertRaises(ParseError) as cm:
            util.parse_uint("9" * 40, 16)
        self.assertIsInstance(cm.exception.__cause__, ValueError)
        self.assertIn("16-bit", str(cm.exception.__cause__))

    def test_non_digits(self):
        """Test that only ASCII digits are accepted."""
        for token in ["", " 1", "1 ", "+1", "-1", "1_0", "0x1", "1e2", "²", "١٢"]:
            with self.subTest(token=token):
                with self.assertRaises(ParseError) as cm:
                    util.parse_uint(token, 16)
                self.assertIsInstance(cm.exception.__cause__, ValueError)

    def test_field_name(self):
        """Test that the field name shows up in the message."""
        with self.assertRaises(ParseError) as cm:
            util.parse_uint("abc", 8, "lane")
        self.assertIn("lane", str(cm.exception))
        self.assertIn("abc", str(cm.exception))


class TestYamlLoad(TestBase):
    """Test loading YAML files."""

    def setUp(self):
        self.tmpdir = TemporaryDirectory()
        self.path_yaml = Path(self.tmpdir.name) / "test.yml"

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_yaml_load(self):
        """Test loading a dictionary."""
        self.path_yaml.write_text("grammar: full\nreport:\n  max_width: 10\n")
        data = util.yaml_load(self.path_yaml)
        self.assertEqual(data, {"grammar": "full", "report": {"max_width": 10}})

    def test_yaml_load_empty(self):
        """Test that a file with no data gives an empty dictionary."""
        self.path_yaml.write_text("# just a comment\n")
        self.assertEqual(util.yaml_load(self.path_yaml), {})


if __name__ == '__main__':
    unittest.main()
