"""Tests for graph_users/paths.py path building."""

from __future__ import annotations

import unittest
from urllib.parse import unquote

from graph_users.paths import build_path, encode_path, join_path, odata_literal


class TestEncodePath(unittest.TestCase):
    def test_slash_is_escaped(self):
        self.assertEqual(encode_path("abc/def"), "abc%2Fdef")

    def test_reserved_characters_round_trip(self):
        for ident in ["a?b", "a#b", "a b", "x/y?z#w", "100%", "AAMk=/+==", "user@contoso.com", "ünï"]:
            with self.subTest(ident=ident):
                encoded = encode_path(ident)
                for ch in "/?# ":
                    self.assertNotIn(ch, encoded)
                self.assertEqual(unquote(encoded), ident)

    def test_unreserved_left_alone(self):
        self.assertEqual(encode_path("user-123_a.b~c"), "user-123_a.b~c")

    def test_non_string_is_stringified(self):
        self.assertEqual(encode_path(42), "42")


class TestBuildPath(unittest.TestCase):
    def test_positional_substitution(self):
        path = build_path("/users/{}/calendars/{}", "u 1", "c/2")
        self.assertEqual(path, "/users/u%201/calendars/c%2F2")

    def test_count_mismatch_raises(self):
        with self.assertRaises(ValueError):
            build_path("/users/{}/calendars/{}", "only-one")

    def test_no_placeholders(self):
        self.assertEqual(build_path("/me"), "/me")


class TestHelpers(unittest.TestCase):
    def test_join_path(self):
        self.assertEqual(join_path("/users/u/", "events", "e1"), "/users/u/events/e1")

    def test_odata_literal_doubles_quotes(self):
        self.assertEqual(odata_literal("o'brien"), "'o%27%27brien'")

    def test_odata_literal_encodes_value(self):
        self.assertEqual(odata_literal("a@b.com"), "'a%40b.com'")


if __name__ == "__main__":
    unittest.main()
