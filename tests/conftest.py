"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("GIGMATCH_LOG_FILE", "false")

import pytest

from gigmatch.models import JobPosting, MatchQuery


def make_posting(**overrides) -> JobPosting:
    """Posting with every optional field blank unless overridden."""
    fields = {
        "id": "p1",
        "title": "",
        "description": "",
        "availability": "",
        "salary": None,
        "location": "",
        "job_type": "",
        "experience_level": "",
    }
    fields.update(overrides)
    return JobPosting(**fields)


@pytest.fixture
def posting_factory():
    return make_posting


@pytest.fixture
def react_posting() -> JobPosting:
    """The backend's flagship sample gig."""
    return JobPosting(
        id="668b3e34a8e1a651f22a7c8a",
        title="Senior React Developer",
        description="Looking for a skilled React developer to build modern web applications.",
        availability="Full-time",
        salary=1200000,
        location="Remote",
        job_type="Full-time",
        experience_level="Senior",
        posted_by="Tech Solutions Inc.",
    )


@pytest.fixture
def database_posting() -> JobPosting:
    return JobPosting(
        id="668b3e34a8e1a651f22a7c8c",
        title="Backend Database Engineer",
        description="Maintain PostgreSQL and MongoDB clusters.",
        availability="Full-time",
        salary=1100000,
        location="Remote",
        job_type="Full-time",
        experience_level="Mid-Level",
    )


@pytest.fixture
def barista_posting() -> JobPosting:
    """Carries no category, text or filter signal for a 'coffee shift' query."""
    return make_posting(id="barista", title="Barista")


@pytest.fixture
def react_query() -> MatchQuery:
    return MatchQuery(text="Looking for React frontend developer")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Strip gigmatch settings from the environment and point config at an empty dir."""
    for key in (
        "GIGMATCH_SOURCE", "GIGMATCH_JOBS_FILE", "GIGMATCH_API_URL", "GIGMATCH_API_TIMEOUT",
        "MATCH_MIN_PERCENT", "MATCH_WORKERS", "MATCH_PARALLEL_THRESHOLD",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("GIGMATCH_CONFIG", str(tmp_path / "missing.yaml"))
    return monkeypatch
