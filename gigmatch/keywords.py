"""Fixed keyword tables and weights used by the matcher.

Order matters everywhere in this module: categories are tried top to bottom
and the first hit wins, and salary keywords are checked max, then min, then
range.
"""
from __future__ import annotations

CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "web": (
        "web", "frontend", "backend", "fullstack", "full stack", "html", "css",
        "javascript", "react", "vue", "angular", "node", "nodejs", "express",
        "django", "flask", "laravel", "php", "asp.net", "java", "spring",
    ),
    "mobile": (
        "mobile", "ios", "android", "react native", "flutter", "swift",
        "kotlin", "app development", "appdev",
    ),
    "data": (
        "data", "analytics", "scientist", "engineering", "bigdata", "big data",
        "hadoop", "spark", "sql", "python", "r programming", "tableau", "powerbi",
    ),
    "devops": (
        "devops", "deployment", "docker", "kubernetes", "ci/cd", "cicd",
        "jenkins", "infrastructure", "aws", "azure", "gcp", "cloud",
    ),
    "ai": (
        "ai", "artificial intelligence", "machine learning", "ml", "nlp",
        "deep learning", "tensorflow", "pytorch", "keras",
    ),
    "design": (
        "design", "ui", "ux", "graphic", "figma", "photoshop", "creative", "designer",
    ),
    "qa": (
        "qa", "quality", "testing", "automation", "test", "selenium", "cypress", "manual",
    ),
    "security": (
        "security", "infosec", "cybersecurity", "penetration", "pentest", "ethical hacking",
    ),
    "database": (
        "database", "sql", "mongodb", "postgres", "mysql", "dynamodb", "redis",
        "elasticsearch",
    ),
}

SALARY_MAX_KEYWORDS: tuple[str, ...] = (
    "under", "below", "maximum", "upto", "up to", "max", "less than",
)
SALARY_MIN_KEYWORDS: tuple[str, ...] = (
    "above", "minimum", "atleast", "at least", "more than", "min",
)
SALARY_RANGE_KEYWORDS: tuple[str, ...] = (" to ", "between")

# (query phrases, posting phrases, points) — first family present on both sides wins.
AVAILABILITY_MODES: tuple[tuple[tuple[str, ...], tuple[str, ...], int], ...] = (
    (("full-time", "fulltime"), ("full",), 5),
    (("part-time", "parttime"), ("part",), 5),
    (("freelance", "contract"), ("freelance", "contract", "project"), 5),
    (("immediate", "asap"), ("immediate", "asap"), 3),
)

# Loosened experience matches: query level → posting phrases that count as close.
EXPERIENCE_NEIGHBOURS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("senior", ("senior", "lead")),
    ("junior", ("junior",)),
)
MID_LEVEL_MARKER = "mid"
MID_LEVEL_NEIGHBOURS: tuple[str, ...] = ("mid", "intermediate")

ANY_SENTINEL = "any"
MIN_TOKEN_LEN = 3

WEIGHTS: dict[str, float] = {
    "salary": 5,
    "text_factor": 0.3,
    "text_cap": 30,
    "category": 20,
    "category_partial": 3,
    "category_job_only": 12,
    "skills": 15,
    "experience": 12,
    "experience_loose": 6,
    "job_type": 10,
    "job_type_unfiltered": 3,
    "location_exact": 8,
    "location_remote": 5,
    "location_partial": 3,
    "location_unfiltered": 2,
}

TEXT_REASON_ABOVE = 30.0
CATEGORY_OVERRIDE_TEXT = 40.0
MAX_SCORE = 100.0
DEFAULT_MIN_PERCENT = 40
DEFAULT_PARALLEL_THRESHOLD = 64

REASON_SEPARATOR = " • "
DEFAULT_PRIMARY_REASON = "Matches your search"
DEFAULT_FULL_REASON = "Job matches your requirements"
