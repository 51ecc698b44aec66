
import unittest

from strmaps.auxiliary.stringutils import as_string, reverse_string
from strmaps.datastructures.errors import NonStringItemError, StrMapsError

class TestReverseString(unittest.TestCase):
    def test_reverse(self):
        self.assertEqual(reverse_string("abc"), "cba")

    def test_reverse_empty(self):
        self.assertEqual(reverse_string(""), "")

    def test_reverse_single_char(self):
        self.assertEqual(reverse_string("x"), "x")

    def test_reverse_round_trip(self):
        for string in ["", "a", "ab", "hello world", "Ωmega", "12 34"]:
            self.assertEqual(reverse_string(reverse_string(string)), string)

class TestAsString(unittest.TestCase):
    def test_string_passes_through(self):
        self.assertEqual(as_string("abc"), "abc")
        self.assertEqual(as_string("abc", strict=False), "abc")

    def test_strict_rejects(self):
        with self.assertRaises(NonStringItemError) as context:
            as_string(7, index=3)
        self.assertIsInstance(context.exception, TypeError)
        self.assertIsInstance(context.exception, StrMapsError)
        self.assertEqual(context.exception.index, 3)
        self.assertIn("index 3", str(context.exception))
        self.assertIn("int", str(context.exception))

    def test_strict_rejects_without_index(self):
        with self.assertRaises(NonStringItemError) as context:
            as_string(None)
        self.assertIsNone(context.exception.index)
        self.assertIn("NoneType", str(context.exception))

    def test_not_strict_coerces(self):
        self.assertEqual(as_string(12, strict=False), "12")
        self.assertEqual(as_string(None, strict=False), "None")
        self.assertEqual(as_string(["a"], strict=False), "['a']")
