
import unittest

from strmaps.auxiliary.moreitertools import count_unique, find_all

class TestFindAll(unittest.TestCase):
    def test_find_all(self):
        found = list(find_all("abcabc", lambda _, char: char == "b"))
        self.assertListEqual(found, [(1, "b"), (4, "b")])

    def test_find_all_none(self):
        self.assertListEqual(list(find_all([1, 2, 3], lambda _, n: n > 5)), [])

    def test_find_all_limit(self):
        found = list(find_all("abcabc", lambda _, char: char == "b", limit=3))
        self.assertListEqual(found, [(1, "b")])

    def test_find_all_by_index(self):
        found = list(find_all("xyz", lambda index, _: index % 2 == 0))
        self.assertListEqual(found, [(0, "x"), (2, "z")])

class TestCountUnique(unittest.TestCase):
    def test_count_unique(self):
        self.assertEqual(count_unique(["a", "b", "a", "c", "b"]), 3)

    def test_count_unique_empty(self):
        self.assertEqual(count_unique([]), 0)

    def test_count_unique_all_distinct(self):
        self.assertEqual(count_unique("abc"), 3)
