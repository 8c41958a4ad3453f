"""Built-in sample gigs, used when no real job source is configured."""
from __future__ import annotations

from gigmatch.log import get_logger
from gigmatch.models import JobPosting
from gigmatch.sources.base import JobRepository

log = get_logger(__name__)

SAMPLE_POSTINGS: tuple[JobPosting, ...] = (
    JobPosting(
        id="668b3e34a8e1a651f22a7c8a",
        title="Senior React Developer",
        description="Looking for a skilled React developer to build modern web applications.",
        availability="Full-time",
        salary=1200000,
        location="Remote",
        job_type="Full-time",
        experience_level="Senior",
        posted_by="Tech Solutions Inc.",
    ),
    JobPosting(
        id="668b3e34a8e1a651f22a7c8b",
        title="Node.js Backend Engineer",
        description="Join our backend team to work on scalable and robust APIs.",
        availability="Full-time",
        salary=1000000,
        location="New York",
        job_type="Full-time",
        experience_level="Mid-Level",
        posted_by="Data Systems LLC",
    ),
)


class SampleRepository(JobRepository):
    def fetch_postings(self) -> list[JobPosting]:
        log.info("SampleRepository serving %d sample gigs", len(SAMPLE_POSTINGS))
        return list(SAMPLE_POSTINGS)
