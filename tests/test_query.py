import unittest

from gofind.query import build_query, encode_query


class TestQuery(unittest.TestCase):

    def test_plain_terms_are_not_quoted(self):
        self.assertEqual(build_query(["yaml", "OR", "json"]), "yaml OR json")
        self.assertNotIn('"', build_query(["yaml", "OR", "json"]))

    def test_term_with_space_is_quoted(self):
        self.assertEqual(build_query(["http router", "fast"]), '"http router" fast')

    def test_term_with_tab_is_quoted(self):
        self.assertEqual(build_query(["a\tb"]), '"a\tb"')

    def test_encode_query(self):
        self.assertEqual(encode_query(["yaml", "OR", "json"]), "q=yaml+OR+json")
        self.assertEqual(encode_query(["http router"]), "q=%22http+router%22")

    def test_encode_escapes_reserved_characters(self):
        self.assertEqual(encode_query(["a&b=c"]), "q=a%26b%3Dc")

    def test_empty_terms(self):
        self.assertEqual(build_query([]), "")
        self.assertEqual(encode_query([]), "q=")
