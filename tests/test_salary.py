"""
Tests for salary filter extraction and formatting.
"""

import pytest

from gigmatch.models import MatchQuery, MaxSalary, MinSalary, SalaryRange
from gigmatch.salary import describe, extract_salary_filter, format_inr


class TestExtractSalaryFilter:

    def test_under_is_max(self):
        assert extract_salary_filter("jobs under 500000") == MaxSalary(500000)

    @pytest.mark.parametrize("text", ["below 9000", "Maximum 9000", "upto 9000", "up to 9000", "max 9000", "less than 9000"])
    def test_max_keywords(self, text):
        assert extract_salary_filter(text) == MaxSalary(9000)

    @pytest.mark.parametrize("text", ["above 300", "minimum 300", "atleast 300", "at least 300", "more than 300", "min 300"])
    def test_min_keywords(self, text):
        assert extract_salary_filter(text) == MinSalary(300)

    def test_between_is_range(self):
        assert extract_salary_filter("between 100000 and 200000") == SalaryRange(100000, 200000)

    def test_to_is_range(self):
        assert extract_salary_filter("100000 to 200000") == SalaryRange(100000, 200000)

    def test_range_needs_two_numbers(self):
        assert extract_salary_filter("between 5000") is None

    def test_numbers_without_keyword(self):
        assert extract_salary_filter("salary 50000") is None

    def test_keyword_without_numbers(self):
        assert extract_salary_filter("anything under budget") is None

    def test_empty_text(self):
        assert extract_salary_filter("") is None
        assert extract_salary_filter(None) is None

    def test_first_number_is_used(self):
        assert extract_salary_filter("under 5 lakh, ideally 450000") == MaxSalary(5)

    def test_known_quirk_max_beats_min(self):
        """'minimum ... up to' resolves as a max filter; kept as-is, intent is ambiguous."""
        assert extract_salary_filter("minimum 300000 up to 900000") == MaxSalary(300000)

    def test_known_quirk_max_beats_range(self):
        assert extract_salary_filter("between 100 to 200 max") == MaxSalary(100)

    def test_known_quirk_min_inside_word(self):
        """'admin' contains 'min'."""
        assert extract_salary_filter("admin role 40000") == MinSalary(40000)


class TestSalaryText:

    def test_salary_range_preferred(self):
        q = MatchQuery(text="react under 100", salary_range="above 500")
        assert extract_salary_filter(q.salary_text) == MinSalary(500)

    def test_falls_back_to_description(self):
        q = MatchQuery(text="react under 100")
        assert extract_salary_filter(q.salary_text) == MaxSalary(100)


class TestAccepts:

    def test_max_is_inclusive(self):
        assert MaxSalary(100).accepts(100)
        assert not MaxSalary(100).accepts(101)

    def test_min_is_inclusive(self):
        assert MinSalary(100).accepts(100)
        assert not MinSalary(100).accepts(99)

    def test_range_bounds_inclusive(self):
        r = SalaryRange(10, 20)
        assert r.accepts(10) and r.accepts(20) and r.accepts(15)
        assert not r.accepts(9) and not r.accepts(21)


class TestFormatting:

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "₹0"),
            (999, "₹999"),
            (100000, "₹1,00,000"),
            (1200000, "₹12,00,000"),
            (12345678, "₹1,23,45,678"),
        ],
    )
    def test_indian_grouping(self, amount, expected):
        assert format_inr(amount) == expected

    def test_describe(self):
        assert describe(None) == "none"
        assert describe(MaxSalary(5)) == "max 5"
        assert describe(SalaryRange(1, 2)) == "range 1-2"
