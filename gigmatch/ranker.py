"""Rank a corpus of postings for one match query."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Sequence

from gigmatch.classifier import classify
from gigmatch.errors import ValidationError
from gigmatch.keywords import (
    DEFAULT_FULL_REASON,
    DEFAULT_MIN_PERCENT,
    DEFAULT_PARALLEL_THRESHOLD,
    DEFAULT_PRIMARY_REASON,
    REASON_SEPARATOR,
)
from gigmatch.log import get_logger
from gigmatch.models import (
    JobPosting,
    MatchQuery,
    MatchReport,
    MatchResult,
    SalaryFilter,
    ScoreOutcome,
)
from gigmatch.salary import describe, extract_salary_filter
from gigmatch.scorer import score_posting

log = get_logger(__name__)


def round_percent(score: float) -> int:
    """Round half up, so 39.5 makes the 40% cut."""
    return int(score + 0.5)


def _score_all(
    query: MatchQuery,
    salary_filter: SalaryFilter | None,
    user_category: str | None,
    corpus: Sequence[JobPosting],
    workers: int,
    parallel_threshold: int,
) -> list[ScoreOutcome]:
    if workers <= 1 or len(corpus) < max(parallel_threshold, 2):
        return [score_posting(query, salary_filter, user_category, p) for p in corpus]

    # Slots are addressed by corpus position; completion order must not leak into ranking.
    outcomes: list[ScoreOutcome | None] = [None] * len(corpus)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            pool.submit(score_posting, query, salary_filter, user_category, posting): idx
            for idx, posting in enumerate(corpus)
        }
        for future in as_completed(futures):
            outcomes[futures[future]] = future.result()
    return outcomes  # type: ignore[return-value]


def evaluate(
    query: MatchQuery,
    corpus: Sequence[JobPosting],
    *,
    min_percent: int = DEFAULT_MIN_PERCENT,
    workers: int = 1,
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD,
) -> MatchReport:
    """Score every posting and return the ranked results plus all breakdowns.

    Raises ValidationError when the query text is blank; nothing is scored
    in that case. Postings with equal rounded scores keep corpus order.
    """
    if not query.text or not query.text.strip():
        raise ValidationError("Please provide job requirements")

    if not corpus:
        log.info("No postings to match against")
        return MatchReport()

    user_category = classify(query.text)
    salary_filter = extract_salary_filter(query.salary_text)
    log.info("Query category: %s | salary filter: %s", user_category, describe(salary_filter))

    outcomes = _score_all(query, salary_filter, user_category, corpus, workers, parallel_threshold)
    breakdowns = [o.breakdown for o in outcomes]

    kept: list[MatchResult] = []
    for idx, (posting, breakdown) in enumerate(zip(corpus, breakdowns), start=1):
        log.debug(
            "Job %d %r: score=%.2f reasons=%s",
            idx, posting.title, breakdown.score, ", ".join(breakdown.reasons),
        )
        percentage = round_percent(breakdown.score)
        if percentage < min_percent:
            continue
        reasons = list(breakdown.reasons)
        kept.append(
            MatchResult(
                posting=posting,
                job_index=idx,
                percentage=percentage,
                primary_reason=reasons[0] if reasons else DEFAULT_PRIMARY_REASON,
                full_reason=REASON_SEPARATOR.join(reasons) or DEFAULT_FULL_REASON,
                score=breakdown.score,
            )
        )

    # sorted() is stable: ties keep the repository's newest-first order.
    results = sorted(kept, key=lambda r: -r.percentage)
    log.info(
        "Scored %d postings → %d at or above %d%%",
        len(corpus), len(results), min_percent,
    )
    return MatchReport(results=results, breakdowns=breakdowns, corpus_size=len(corpus))


def rank(query: MatchQuery, corpus: Sequence[JobPosting], **kwargs) -> list[MatchResult]:
    return evaluate(query, corpus, **kwargs).results
