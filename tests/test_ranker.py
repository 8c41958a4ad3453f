"""
Tests for ranking, thresholds and ordering guarantees.
"""

from unittest.mock import patch

import pytest

from gigmatch.errors import ValidationError
from gigmatch.models import MatchQuery
from gigmatch.ranker import evaluate, rank, round_percent

from conftest import make_posting


def _react_clone(idx: int, **overrides):
    fields = {
        "id": f"r{idx}",
        "title": "Senior React Developer",
        "description": "Looking for a skilled React developer to build modern web applications.",
        "job_type": "Full-time",
        "location": "Remote",
    }
    fields.update(overrides)
    return make_posting(**fields)


class TestValidation:

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_rejected_before_scoring(self, react_posting, text):
        with patch("gigmatch.ranker.score_posting") as scorer:
            with pytest.raises(ValidationError):
                rank(MatchQuery(text=text), [react_posting])
            scorer.assert_not_called()

    def test_empty_corpus_is_not_an_error(self, react_query):
        report = evaluate(react_query, [])
        assert report.results == []
        assert report.breakdowns == []
        assert report.corpus_size == 0


class TestScenarios:

    def test_react_query_keeps_only_react_gig(self, react_query, react_posting, database_posting):
        results = rank(react_query, [database_posting, react_posting])
        assert [r.posting.id for r in results] == [react_posting.id]
        top = results[0]
        # 80% text → 24, web → 20, unfiltered type → 3, unfiltered location → 2
        assert top.percentage == 49
        assert top.job_index == 2
        assert top.primary_reason == "Text match: 80%"
        assert top.full_reason == "Text match: 80% • Category: web"

    def test_salary_over_max_is_dropped(self, react_posting):
        q = MatchQuery(text="jobs under 500000")
        posting = _react_clone(1, salary=600000)
        report = evaluate(q, [posting])
        assert report.results == []
        assert report.breakdowns[0].score == 0
        assert report.breakdowns[0].salary_filtered

    def test_salary_filter_beats_perfect_match(self):
        q = MatchQuery(
            text="Senior React Developer",
            skills="react",
            job_type="Full-time",
            location="Remote",
            salary_range="above 2000000",
        )
        report = evaluate(q, [_react_clone(1, salary=1500000)])
        assert report.results == []

    def test_category_mismatch_never_ranked(self):
        q = MatchQuery(text="React developer", skills="selenium", job_type="Full-time", location="Remote")
        qa_gig = make_posting(
            id="qa",
            title="Selenium automation tester",
            description="Selenium regression suites",
            job_type="Full-time",
            location="Remote",
            experience_level="Senior",
        )
        report = evaluate(q, [qa_gig], min_percent=0)
        assert report.results == []
        assert report.breakdowns[0].category_mismatched


class TestOrdering:

    def test_sorted_by_percentage_descending(self):
        weak = _react_clone(1, job_type="", location="")      # 44
        strong = _react_clone(2)                               # 49
        report = evaluate(MatchQuery(text="Looking for React frontend developer"), [weak, strong])
        assert [r.posting.id for r in report.results] == ["r2", "r1"]
        assert [r.job_index for r in report.results] == [2, 1]

    def test_ties_keep_corpus_order(self, react_query):
        corpus = [_react_clone(i) for i in range(5)]
        results = rank(react_query, corpus)
        assert [r.posting.id for r in results] == ["r0", "r1", "r2", "r3", "r4"]

    def test_deterministic(self, react_query, react_posting, database_posting):
        corpus = [react_posting, database_posting, _react_clone(7)]
        assert rank(react_query, corpus) == rank(react_query, corpus)

    def test_parallel_matches_sequential(self, react_query):
        corpus = []
        for i in range(30):
            corpus.append(_react_clone(i, job_type="Full-time" if i % 3 else "", location="Remote" if i % 2 else ""))
        sequential = evaluate(react_query, corpus)
        parallel = evaluate(react_query, corpus, workers=4, parallel_threshold=2)
        assert parallel.results == sequential.results
        assert parallel.breakdowns == sequential.breakdowns


class TestThreshold:

    def test_round_half_up(self):
        assert round_percent(39.5) == 40
        assert round_percent(39.49) == 39
        assert round_percent(0) == 0

    def test_custom_threshold(self, react_query):
        assert rank(react_query, [_react_clone(1)], min_percent=50) == []

    def test_default_reasons_when_none_recorded(self, barista_posting):
        results = rank(MatchQuery(text="coffee shift"), [barista_posting], min_percent=0)
        assert len(results) == 1
        assert results[0].percentage == 0
        assert results[0].primary_reason == "Matches your search"
        assert results[0].full_reason == "Job matches your requirements"

    def test_breakdowns_cover_whole_corpus(self, react_query, react_posting, database_posting):
        report = evaluate(react_query, [react_posting, database_posting])
        assert len(report.breakdowns) == report.corpus_size == 2
        assert all(0 <= b.score <= 100 for b in report.breakdowns)
