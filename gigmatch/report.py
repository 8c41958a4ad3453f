"""Render match results as an API payload and as a Markdown report."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from gigmatch.config import REPORTS_DIR
from gigmatch.log import get_logger
from gigmatch.models import MatchQuery, MatchReport, MatchResult
from gigmatch.salary import format_inr

log = get_logger(__name__)


def _detail(result: MatchResult) -> dict[str, Any]:
    return {
        "jobIndex": result.job_index,
        "matchPercentage": result.percentage,
        "reason": result.primary_reason,
        "whyGoodFit": result.full_reason,
        "score": result.score,
    }


def build_match_response(report: MatchReport) -> dict[str, Any]:
    """Payload shaped like the marketplace's ``/job/ai-match`` response.

    ``matchDetails[i].jobIndex`` is the 1-based position of the posting in
    the corpus that was scored, so it links back to the input, not to
    ``matchedJobs``.
    """
    if report.corpus_size == 0:
        return {"message": "No jobs available", "matchedJobs": [], "matchDetails": [], "success": True}

    matched_jobs = []
    for r in report.results:
        job = r.posting.to_dict()
        job.update(
            matchPercentage=r.percentage,
            matchReason=r.primary_reason,
            whyGoodFit=r.full_reason,
        )
        matched_jobs.append(job)

    return {
        "message": f"Found {len(matched_jobs)} matching jobs",
        "matchedJobs": matched_jobs,
        "matchDetails": [_detail(r) for r in report.results],
        "success": True,
    }


def _filters_line(query: MatchQuery) -> str:
    parts = [
        f"{label}: {value}"
        for label, value in (
            ("skills", query.skills),
            ("experience", query.experience_level),
            ("location", query.location),
            ("type", query.job_type),
            ("salary", query.salary_range),
        )
        if value
    ]
    return ", ".join(parts) if parts else "none"


def build_match_report(query: MatchQuery, report: MatchReport, *, top: int = 15) -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines: list[str] = [f"# Gig Match Report — {stamp}", ""]
    lines.append(f"**Query:** {query.text}")
    lines.append(f"**Filters:** {_filters_line(query)}")
    lines.append("")

    salary_rejects = sum(1 for b in report.breakdowns if b.salary_filtered)
    category_rejects = sum(1 for b in report.breakdowns if b.category_mismatched)
    lines.append(
        f"**{report.corpus_size}** gigs scored | **{len(report.results)}** matched | "
        f"**{salary_rejects}** outside salary filter | **{category_rejects}** wrong category"
    )
    lines.append("")

    shown = report.results[:top]
    if not shown:
        lines.append("_No gigs reached the match threshold._")
        lines.append("")
    else:
        lines.append("## Top Matches")
        lines.append("")
        for r in shown:
            p = r.posting
            lines.append(f"### {p.title}" + (f" @ {p.posted_by}" if p.posted_by else ""))
            lines.append(f"- **Match:** {r.percentage}%")
            if p.salary:
                lines.append(f"- **Salary:** {format_inr(p.salary)}")
            if p.location:
                lines.append(f"- **Location:** {p.location}")
            lines.append(f"- **Why:** {r.full_reason}")
            lines.append("")

        lines.append("---")
        lines.append("")
        lines.append("## Quick Reference")
        lines.append("")
        lines.append("| # | Gig | Type | Location | Match |")
        lines.append("|--:|-----|------|----------|------:|")
        for i, r in enumerate(shown, 1):
            p = r.posting
            title = p.title[:40] + ("…" if len(p.title) > 40 else "")
            loc = p.location.split(",")[0][:18] if p.location else "—"
            lines.append(f"| {i} | {title} | {p.job_type or '—'} | {loc} | {r.percentage}% |")
        lines.append("")

    log.info("Built match report: %d of %d gigs matched", len(report.results), report.corpus_size)
    return "\n".join(lines)


def write_match_report(content: str, reports_dir: Path | None = None) -> Path:
    out_dir = reports_dir or REPORTS_DIR
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d_%H%M%S")
    path = out_dir / f"match_{stamp}.md"
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
