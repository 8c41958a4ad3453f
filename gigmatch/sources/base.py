from abc import ABC, abstractmethod

from gigmatch.models import JobPosting


class JobRepository(ABC):
    """Read-only supplier of posting snapshots, newest first."""

    @abstractmethod
    def fetch_postings(self) -> list[JobPosting]:
        pass
