"""
Tests for path cleanup.
"""

from django.test import SimpleTestCase

from eventsite.services.paths import PathCleanup


class PathCleanupTest(SimpleTestCase):
    """Test PathCleanup.cleanup."""

    def setUp(self):
        self.cleanup = PathCleanup()

    def test_simple_title(self):
        self.assertEqual(self.cleanup.cleanup("/Events"), "/events")

    def test_spaces_become_dashes(self):
        self.assertEqual(self.cleanup.cleanup("/Summer Events 2024"), "/summer-events-2024")

    def test_ampersand_replaced_for_english(self):
        self.assertEqual(self.cleanup.cleanup("/Events & Dates"), "/events-and-dates")

    def test_german_replacers(self):
        self.assertEqual(self.cleanup.cleanup("/Über uns", "de"), "/ueber-uns")
        self.assertEqual(self.cleanup.cleanup("/Straße", "de_AT"), "/strasse")

    def test_other_punctuation_dropped(self):
        self.assertEqual(self.cleanup.cleanup("/What's on?"), "/whats-on")

    def test_dots_and_plus(self):
        self.assertEqual(self.cleanup.cleanup("/v1.2+beta"), "/v1-2-beta")

    def test_nested_path(self):
        self.assertEqual(self.cleanup.cleanup("/About Us/Our Team"), "/about-us/our-team")

    def test_double_slashes_collapsed(self):
        self.assertEqual(self.cleanup.cleanup("//events//"), "/events")

    def test_root(self):
        self.assertEqual(self.cleanup.cleanup("/"), "/")

    def test_custom_replacers(self):
        cleanup = PathCleanup(replacers={"default": {"@": " at "}})
        self.assertEqual(cleanup.cleanup("/Meet @ Noon"), "/meet-at-noon")
