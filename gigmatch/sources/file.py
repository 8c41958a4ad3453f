"""Postings read from a local YAML or JSON export."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import yaml

from gigmatch.errors import SourceError
from gigmatch.log import get_logger
from gigmatch.models import JobPosting
from gigmatch.sources.base import JobRepository

log = get_logger(__name__)


def _records(data: Any, path: Path) -> list[dict]:
    if isinstance(data, dict):
        data = data.get("jobs")
    if not isinstance(data, list):
        raise SourceError(f"{path} must hold a list of postings or a 'jobs' list")
    return [r for r in data if isinstance(r, dict)]


def _created(posting: JobPosting) -> datetime | None:
    if not posting.created_at:
        return None
    try:
        stamp = datetime.fromisoformat(posting.created_at.replace("Z", "+00:00"))
    except ValueError:
        log.debug("Unparseable createdAt %r on posting %s", posting.created_at, posting.id)
        return None
    return stamp if stamp.tzinfo else stamp.replace(tzinfo=timezone.utc)


class FileRepository(JobRepository):
    """YAML is a superset of JSON, so one loader reads both formats."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def fetch_postings(self) -> list[JobPosting]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise SourceError(f"Cannot read jobs file {self.path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise SourceError(f"Jobs file {self.path} is not valid YAML/JSON: {exc}") from exc

        postings = [JobPosting.from_dict(r) for r in _records(data, self.path)]
        # Newest first; undated postings keep file order after the dated ones.
        stamps = [_created(p) for p in postings]
        dated = [p for p, s in sorted(
            ((p, s) for p, s in zip(postings, stamps) if s is not None),
            key=lambda pair: pair[1],
            reverse=True,
        )]
        undated = [p for p, s in zip(postings, stamps) if s is None]
        log.info("Loaded %d postings from %s", len(postings), self.path)
        return dated + undated
