from .base import JobRepository
from .api import ApiRepository
from .file import FileRepository
from .sample import SampleRepository

from gigmatch.config import MatchSettings
from gigmatch.errors import ConfigurationError
from gigmatch.log import get_logger

log = get_logger(__name__)

__all__ = [
    "JobRepository", "ApiRepository", "FileRepository", "SampleRepository",
    "get_source",
]


def get_source(settings: MatchSettings) -> JobRepository:
    if settings.source == "api":
        if not settings.api_url:
            raise ConfigurationError("GIGMATCH_API_URL is required for the api source")
        log.info("Using job source: backend API at %s", settings.api_url)
        return ApiRepository(settings.api_url, timeout=settings.api_timeout)

    if settings.source == "file":
        if not settings.jobs_file:
            raise ConfigurationError("GIGMATCH_JOBS_FILE is required for the file source")
        log.info("Using job source: file %s", settings.jobs_file)
        return FileRepository(settings.jobs_file)

    log.info("Using job source: built-in samples")
    return SampleRepository()
