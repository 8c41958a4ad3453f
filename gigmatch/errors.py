"""Exceptions raised by the matching engine and its job sources."""


class GigMatchError(Exception):
    """Base exception for all gigmatch errors."""

    pass


class ValidationError(GigMatchError):
    """Raised when a match query is missing its free-text description.

    Raised before any posting is fetched or scored, so callers never see
    partial results.
    """

    pass


class SourceError(GigMatchError):
    """Raised when a job repository cannot produce a corpus.

    Examples:
    - Backend unreachable after retries
    - Backend answered with ``success: false``
    - Corpus file missing or not a list of postings
    """

    pass


class ConfigurationError(GigMatchError):
    """Raised for an unknown source type or a source missing its settings."""

    pass
