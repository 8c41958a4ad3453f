"""Postings fetched from the gig marketplace backend.

The backend lists every gig at ``GET /api/v1/job/get``, already sorted
newest first, as ``{"jobs": [...], "success": true}``.
"""
from __future__ import annotations

import requests

from gigmatch.errors import SourceError
from gigmatch.log import get_logger
from gigmatch.models import JobPosting
from gigmatch.retry import retry
from gigmatch.sources.base import JobRepository

log = get_logger(__name__)

JOBS_PATH = "/api/v1/job/get"


class ApiRepository(JobRepository):
    def __init__(self, base_url: str, timeout: float = 15.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @retry(max_attempts=3, base_delay=1.5, retryable=(requests.RequestException, OSError))
    def _fetch(self) -> dict:
        r = requests.get(f"{self.base_url}{JOBS_PATH}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def fetch_postings(self) -> list[JobPosting]:
        try:
            data = self._fetch()
        except (requests.RequestException, OSError) as exc:
            raise SourceError(f"Job backend at {self.base_url} unavailable: {exc}") from exc
        except ValueError as exc:
            raise SourceError(f"Job backend at {self.base_url} returned invalid JSON") from exc

        if not isinstance(data, dict) or not data.get("success", False):
            message = data.get("message", "unknown error") if isinstance(data, dict) else "bad payload"
            raise SourceError(f"Job backend refused listing: {message}")

        postings = [JobPosting.from_dict(hit) for hit in data.get("jobs", []) if isinstance(hit, dict)]
        log.info("[%s] returned %d postings", self.base_url, len(postings))
        return postings
