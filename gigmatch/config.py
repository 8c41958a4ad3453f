"""Load matcher settings from YAML and env configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from gigmatch.errors import ConfigurationError
from gigmatch.keywords import DEFAULT_MIN_PERCENT, DEFAULT_PARALLEL_THRESHOLD
from gigmatch.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "matching.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"
DATA_DIR: Path = ROOT_DIR / "data"

SOURCE_TYPES = ("sample", "file", "api")


@dataclass
class MatchSettings:
    source: str = "sample"
    jobs_file: Path | None = None
    api_url: str = ""
    api_timeout: float = 15.0
    min_percent: int = DEFAULT_MIN_PERCENT
    workers: int = 1
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def _settings_path() -> Path:
    override = get_env("GIGMATCH_CONFIG")
    return Path(override) if override else SETTINGS_PATH


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def _as_int(key: str, value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{key} must be an integer, got {value!r}") from exc


def load_settings(path: Path | None = None) -> MatchSettings:
    """Settings from ``config/matching.yaml``, overridden by environment."""
    data = _read_yaml(path or _settings_path())
    source_cfg = data.get("source") or {}
    matching_cfg = data.get("matching") or {}

    source = get_env("GIGMATCH_SOURCE") or source_cfg.get("type", "sample")
    jobs_file = get_env("GIGMATCH_JOBS_FILE") or source_cfg.get("jobs_file") or ""
    api_url = get_env("GIGMATCH_API_URL") or source_cfg.get("api_url") or ""
    api_timeout = get_env("GIGMATCH_API_TIMEOUT") or source_cfg.get("timeout", 15)

    settings = MatchSettings(
        source=str(source).lower(),
        jobs_file=Path(jobs_file) if jobs_file else None,
        api_url=str(api_url).rstrip("/"),
        min_percent=_as_int(
            "min_percent", get_env("MATCH_MIN_PERCENT") or matching_cfg.get("min_percent", DEFAULT_MIN_PERCENT)
        ),
        workers=_as_int("workers", get_env("MATCH_WORKERS") or matching_cfg.get("workers", 1)),
        parallel_threshold=_as_int(
            "parallel_threshold",
            get_env("MATCH_PARALLEL_THRESHOLD")
            or matching_cfg.get("parallel_threshold", DEFAULT_PARALLEL_THRESHOLD),
        ),
    )
    try:
        settings.api_timeout = float(api_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"timeout must be a number, got {api_timeout!r}") from exc

    if settings.source not in SOURCE_TYPES:
        raise ConfigurationError(
            f"Unknown job source {settings.source!r} (expected one of {', '.join(SOURCE_TYPES)})"
        )
    log.debug("Loaded settings: %s", settings)
    return settings


def ensure_dirs() -> None:
    for d in (REPORTS_DIR, DATA_DIR):
        d.mkdir(parents=True, exist_ok=True)
