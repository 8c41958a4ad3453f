"""
Tests for keyword category classification.
"""

from gigmatch.classifier import classify
from gigmatch.keywords import CATEGORY_KEYWORDS


class TestClassify:

    def test_frontend_query_is_web(self):
        assert classify("Looking for React frontend developer") == "web"

    def test_case_insensitive(self):
        assert classify("KUBERNETES operator") == "devops"

    def test_mobile(self):
        assert classify("iOS developer") == "mobile"

    def test_database(self):
        assert classify("MongoDB administrator") == "database"

    def test_no_keyword_returns_none(self):
        assert classify("barista for weekend coffee shifts") is None

    def test_empty_and_none_text(self):
        assert classify("") is None
        assert classify(None) is None

    def test_first_declared_category_wins(self):
        """'react native' is mobile, but web's 'react' is checked first."""
        assert classify("react native app") == "web"

    def test_shared_keyword_resolves_to_earlier_category(self):
        """'sql' is listed under data and database; data comes first."""
        assert classify("SQL reporting") == "data"

    def test_short_keyword_matches_inside_words(self):
        """Plain substring matching: 'ai' hits inside 'maintain'."""
        assert classify("maintain email templates") == "ai"

    def test_category_order_is_stable(self):
        assert list(CATEGORY_KEYWORDS) == [
            "web", "mobile", "data", "devops", "ai", "design", "qa", "security", "database",
        ]

    def test_custom_dictionary(self):
        categories = {"ops": ("pager",), "support": ("ticket", "pager")}
        assert classify("pager duty and tickets", categories) == "ops"
        assert classify("ticket triage", categories) == "support"
