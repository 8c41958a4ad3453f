"""
Gig matching run.

Runs: validate query → fetch corpus → rank → response payload → (optional) Markdown report.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from gigmatch.config import MatchSettings, load_settings
from gigmatch.errors import ValidationError
from gigmatch.log import get_logger
from gigmatch.models import MatchQuery
from gigmatch.ranker import evaluate
from gigmatch.report import build_match_report, build_match_response, write_match_report
from gigmatch.sources import JobRepository, get_source

log = get_logger(__name__)


def run(
    payload: dict[str, Any] | MatchQuery,
    *,
    settings: MatchSettings | None = None,
    repository: JobRepository | None = None,
    write_report: bool = False,
    reports_dir: Path | None = None,
) -> dict[str, Any]:
    query = payload if isinstance(payload, MatchQuery) else MatchQuery.from_dict(payload)

    # Validate before touching the repository so a bad request costs nothing.
    if not query.text or not query.text.strip():
        log.warning("Rejected match request without a text description")
        raise ValidationError("Please provide job requirements")

    settings = settings or load_settings()
    repository = repository or get_source(settings)

    corpus = repository.fetch_postings()
    log.info("Total gigs in corpus: %d", len(corpus))

    report = evaluate(
        query,
        corpus,
        min_percent=settings.min_percent,
        workers=settings.workers,
        parallel_threshold=settings.parallel_threshold,
    )
    response = build_match_response(report)

    report_path = None
    if write_report and corpus:
        content = build_match_report(query, report)
        report_path = write_match_report(content, reports_dir)

    log.info(
        "Match complete — corpus=%d, matched=%d, rejected=%d",
        report.corpus_size, len(report.results), report.rejected_count,
    )
    return {
        "response": response,
        "report": report,
        "report_path": str(report_path) if report_path else None,
    }
