"""Score a single posting against a match query."""
from __future__ import annotations

import re

from gigmatch.classifier import classify
from gigmatch.keywords import (
    AVAILABILITY_MODES,
    CATEGORY_OVERRIDE_TEXT,
    EXPERIENCE_NEIGHBOURS,
    MAX_SCORE,
    MID_LEVEL_MARKER,
    MID_LEVEL_NEIGHBOURS,
    MIN_TOKEN_LEN,
    TEXT_REASON_ABOVE,
    WEIGHTS,
)
from gigmatch.models import (
    JobPosting,
    MatchQuery,
    Rejected,
    SalaryFilter,
    ScoreBreakdown,
    Scored,
    ScoreOutcome,
)
from gigmatch.relevance import text_match_percent
from gigmatch.salary import format_inr

_SKILL_SPLIT_RE = re.compile(r"[,\s]+")


def _normalize(s: str | None) -> str:
    return (s or "").lower()


def _overlaps(a: str, b: str) -> bool:
    return a == b or a in b or b in a


def _skill_tokens(skills: str) -> list[str]:
    return [s for s in _SKILL_SPLIT_RE.split(skills.lower()) if len(s) >= MIN_TOKEN_LEN]


def _experience_points(wanted: str, offered: str) -> float:
    user_exp = _normalize(wanted)
    job_exp = _normalize(offered)
    if _overlaps(job_exp, user_exp):
        return WEIGHTS["experience"]
    for level, neighbours in EXPERIENCE_NEIGHBOURS:
        if user_exp == level and any(n in job_exp for n in neighbours):
            return WEIGHTS["experience_loose"]
    if MID_LEVEL_MARKER in user_exp and any(n in job_exp for n in MID_LEVEL_NEIGHBOURS):
        return WEIGHTS["experience_loose"]
    return 0


def _location_points(wanted: str, offered: str) -> float:
    user_loc = _normalize(wanted)
    job_loc = _normalize(offered)
    if job_loc == user_loc:
        return WEIGHTS["location_exact"]
    if "remote" in job_loc or "remote" in user_loc:
        return WEIGHTS["location_remote"]
    user_words, job_words = user_loc.split(), job_loc.split()
    if (user_words and user_words[0] in job_loc) or (job_words and job_words[0] in user_loc):
        return WEIGHTS["location_partial"]
    return 0


def _availability_points(query_text: str, availability: str) -> float:
    wanted = _normalize(query_text)
    offered = _normalize(availability)
    for query_phrases, posting_phrases, points in AVAILABILITY_MODES:
        if any(p in wanted for p in query_phrases) and any(p in offered for p in posting_phrases):
            return points
    return 0


def score_posting(
    query: MatchQuery,
    salary_filter: SalaryFilter | None,
    user_category: str | None,
    posting: JobPosting,
) -> ScoreOutcome:
    """Combine every signal into a 0–100 score with reasons.

    Signals are evaluated in a fixed order and reasons keep that order.
    A salary miss or a category mismatch is a hard reject and stops
    evaluation right there.
    """
    score = 0.0
    reasons: list[str] = []

    # Hard filter: salary
    if salary_filter is not None:
        if not posting.salary or not salary_filter.accepts(posting.salary):
            return Rejected("Salary does not match filter", salary_filtered=True)
        score += WEIGHTS["salary"]
        reasons.append(f"Salary: {format_inr(posting.salary)}")

    combined = f"{_normalize(posting.title)} {_normalize(posting.description)}"

    # --- Text relevance ---
    text_score = text_match_percent(query.text, posting.title, posting.description)
    score += min(text_score * WEIGHTS["text_factor"], WEIGHTS["text_cap"])
    if text_score > TEXT_REASON_ABOVE:
        reasons.append(f"Text match: {int(text_score + 0.5)}%")

    # --- Category (hard filter on mismatch) ---
    job_category = classify(combined)
    if user_category and job_category:
        if user_category == job_category:
            score += WEIGHTS["category"]
            reasons.append(f"Category: {user_category}")
        elif text_score < CATEGORY_OVERRIDE_TEXT:
            return Rejected(
                f"Wrong category: looking for {user_category}, found {job_category}",
                category_mismatched=True,
            )
        else:
            score += WEIGHTS["category_partial"]
            reasons.append(f"Partial match: {job_category}")
    elif user_category:
        return Rejected("No relevant category match found", category_mismatched=True)
    elif job_category:
        score += WEIGHTS["category_job_only"]
        reasons.append(f"Job: {job_category}")

    # --- Skills overlap ---
    if query.skills:
        tokens = _skill_tokens(query.skills)
        matched = sum(1 for t in tokens if t in combined)
        if matched:
            score += matched / max(len(tokens), 1) * WEIGHTS["skills"]
            reasons.append(f"Skills: {query.skills}")

    # --- Experience level ---
    if query.experience_level and posting.experience_level:
        points = _experience_points(query.experience_level, posting.experience_level)
        if points:
            score += points
            reasons.append(f"Experience: {posting.experience_level}")

    # --- Job type ---
    if query.job_type and posting.job_type:
        if _overlaps(_normalize(posting.job_type), _normalize(query.job_type)):
            score += WEIGHTS["job_type"]
            reasons.append(f"Type: {posting.job_type}")
    elif not query.job_type and posting.job_type:
        score += WEIGHTS["job_type_unfiltered"]

    # --- Location ---
    if query.location and posting.location:
        points = _location_points(query.location, posting.location)
        if points:
            score += points
            reasons.append(f"Location: {posting.location}")
    elif not query.location and posting.location:
        score += WEIGHTS["location_unfiltered"]

    # --- Availability ---
    if posting.availability:
        points = _availability_points(query.text, posting.availability)
        if points:
            score += points
            reasons.append(f"Availability: {posting.availability}")

    return Scored(ScoreBreakdown(score=min(score, MAX_SCORE), reasons=tuple(reasons)))
