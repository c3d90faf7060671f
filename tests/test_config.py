import dataclasses
import unittest

from gofind.config import LINE_WIDTH, SEARCH_ENDPOINT, SearchConfig


class TestSearchConfig(unittest.TestCase):

    def test_from_options(self):
        config = SearchConfig.from_options(["yaml", "OR", "json"], all_pages=True, raw=False)
        self.assertEqual(config.terms, ("yaml", "OR", "json"))
        self.assertTrue(config.all_pages)
        self.assertFalse(config.raw)
        self.assertFalse(config.verbose)
        self.assertEqual(config.endpoint, SEARCH_ENDPOINT)
        self.assertIsNone(config.timeout)
        self.assertEqual(config.width, LINE_WIDTH)

    def test_overrides(self):
        config = SearchConfig.from_options(["x"], endpoint="http://localhost/search", timeout=3)
        self.assertEqual(config.endpoint, "http://localhost/search")
        self.assertEqual(config.timeout, 3)

    def test_is_immutable(self):
        config = SearchConfig.from_options(["x"])
        with self.assertRaises(dataclasses.FrozenInstanceError):
            config.raw = True
