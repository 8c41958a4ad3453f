"""Data models for postings, match queries and match results."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Union

from gigmatch.keywords import ANY_SENTINEL


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _filter_value(value: Any) -> str | None:
    """Blank or "any" filters carry no signal."""
    text = _text(value)
    if not text or text.lower() == ANY_SENTINEL:
        return None
    return text


def _timestamp(value: Any) -> str | None:
    # YAML loads unquoted timestamps as datetime/date objects.
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return _text(value) or None


def _salary(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = int(float(value))
    except (TypeError, ValueError):
        return None
    return amount if amount >= 0 else None


@dataclass(frozen=True)
class JobPosting:
    id: str
    title: str = ""
    description: str = ""
    availability: str = ""
    salary: int | None = None
    location: str = ""
    job_type: str = ""
    experience_level: str = ""
    posted_by: str = ""
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JobPosting":
        posted_by = data.get("postedBy") or data.get("posted_by") or ""
        if isinstance(posted_by, dict):
            posted_by = posted_by.get("fullname", "")
        return cls(
            id=_text(data.get("_id") or data.get("id")),
            title=_text(data.get("title")),
            description=_text(data.get("description")),
            availability=_text(data.get("availability")),
            salary=_salary(data.get("salary")),
            location=_text(data.get("location")),
            job_type=_text(data.get("jobType") or data.get("job_type")),
            experience_level=_text(data.get("experienceLevel") or data.get("experience_level")),
            posted_by=_text(posted_by),
            created_at=_timestamp(data.get("createdAt") or data.get("created_at")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "_id": self.id,
            "title": self.title,
            "description": self.description,
            "availability": self.availability,
            "salary": self.salary,
            "location": self.location,
            "jobType": self.job_type,
            "experienceLevel": self.experience_level,
        }
        if self.posted_by:
            data["postedBy"] = {"fullname": self.posted_by}
        if self.created_at:
            data["createdAt"] = self.created_at
        return data


@dataclass(frozen=True)
class MatchQuery:
    text: str
    skills: str | None = None
    experience_level: str | None = None
    location: str | None = None
    job_type: str | None = None
    salary_range: str | None = None

    def __post_init__(self) -> None:
        for name in ("skills", "experience_level", "location", "job_type"):
            object.__setattr__(self, name, _filter_value(getattr(self, name)))
        object.__setattr__(self, "salary_range", _text(self.salary_range) or None)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchQuery":
        return cls(
            text=_text(data.get("textDescription") or data.get("text")),
            skills=data.get("skills"),
            experience_level=data.get("experienceLevel") or data.get("experience_level"),
            location=data.get("location"),
            job_type=data.get("jobType") or data.get("job_type"),
            salary_range=data.get("salaryRange") or data.get("salary_range"),
        )

    @property
    def salary_text(self) -> str:
        return self.salary_range or self.text or ""


# ── Salary filters ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class MaxSalary:
    value: int

    def accepts(self, salary: int) -> bool:
        return salary <= self.value


@dataclass(frozen=True)
class MinSalary:
    value: int

    def accepts(self, salary: int) -> bool:
        return salary >= self.value


@dataclass(frozen=True)
class SalaryRange:
    low: int
    high: int

    def accepts(self, salary: int) -> bool:
        return self.low <= salary <= self.high


SalaryFilter = Union[MaxSalary, MinSalary, SalaryRange]


# ── Scoring outcomes ────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScoreBreakdown:
    score: float
    reasons: tuple[str, ...] = ()
    salary_filtered: bool = False
    category_mismatched: bool = False


@dataclass(frozen=True)
class Scored:
    breakdown: ScoreBreakdown

    @property
    def rejected(self) -> bool:
        return False


@dataclass(frozen=True)
class Rejected:
    """A hard reject: the posting scores 0 whatever its other signals."""

    reason: str
    salary_filtered: bool = False
    category_mismatched: bool = False

    @property
    def rejected(self) -> bool:
        return True

    @property
    def breakdown(self) -> ScoreBreakdown:
        return ScoreBreakdown(
            score=0.0,
            reasons=(self.reason,),
            salary_filtered=self.salary_filtered,
            category_mismatched=self.category_mismatched,
        )


ScoreOutcome = Union[Scored, Rejected]


@dataclass(frozen=True)
class MatchResult:
    posting: JobPosting
    job_index: int
    percentage: int
    primary_reason: str
    full_reason: str
    score: float


@dataclass
class MatchReport:
    results: list[MatchResult] = field(default_factory=list)
    breakdowns: list[ScoreBreakdown] = field(default_factory=list)
    corpus_size: int = 0

    @property
    def rejected_count(self) -> int:
        return sum(1 for b in self.breakdowns if b.salary_filtered or b.category_mismatched)
