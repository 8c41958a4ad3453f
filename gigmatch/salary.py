"""Pull a salary constraint out of free text."""
from __future__ import annotations

import re

from gigmatch.keywords import SALARY_MAX_KEYWORDS, SALARY_MIN_KEYWORDS, SALARY_RANGE_KEYWORDS
from gigmatch.models import MaxSalary, MinSalary, SalaryFilter, SalaryRange

_NUMBER_RE = re.compile(r"[0-9]+")


def _has_any(text: str, phrases: tuple[str, ...]) -> bool:
    return any(p in text for p in phrases)


def extract_salary_filter(text: str) -> SalaryFilter | None:
    """Parse "under 500000", "above 2 lakh", "between 100 and 200" style text.

    Keywords are checked max first, then min, then range, so "minimum 5
    up to 9" comes back as a max filter. Text without digits, or with
    digits but no recognised keyword, yields no filter.
    """
    low = (text or "").lower()
    numbers = [int(n) for n in _NUMBER_RE.findall(low)]
    if not numbers:
        return None

    first = numbers[0]
    if _has_any(low, SALARY_MAX_KEYWORDS):
        return MaxSalary(first)
    if _has_any(low, SALARY_MIN_KEYWORDS):
        return MinSalary(first)
    if _has_any(low, SALARY_RANGE_KEYWORDS) and len(numbers) >= 2:
        return SalaryRange(first, numbers[1])
    return None


def describe(salary_filter: SalaryFilter | None) -> str:
    if salary_filter is None:
        return "none"
    if isinstance(salary_filter, MaxSalary):
        return f"max {salary_filter.value}"
    if isinstance(salary_filter, MinSalary):
        return f"min {salary_filter.value}"
    return f"range {salary_filter.low}-{salary_filter.high}"


def format_inr(amount: int) -> str:
    """Rupee amount with Indian digit grouping: 1200000 → ₹12,00,000."""
    digits = str(abs(int(amount)))
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    grouped = ",".join(groups + [tail])
    sign = "-" if amount < 0 else ""
    return f"{sign}₹{grouped}"
