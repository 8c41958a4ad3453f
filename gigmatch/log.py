"""
Logging for gigmatch runs.

Every module asks for ``get_logger(__name__)``. The first call wires the root
logger: a stdout handler at ``LOG_LEVEL`` and, unless ``GIGMATCH_LOG_FILE`` is
switched off, a DEBUG-level daily file ``gigmatch_YYYY-MM-DD.log`` under
``GIGMATCH_LOG_DIR`` (default ``logs/``). Per-posting score breakdowns are
logged at DEBUG, so the file always carries them.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

_DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
_TRUTHY = ("1", "true", "yes")
_configured = False


def get_logger(name: str) -> logging.Logger:
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def _log_dir() -> Path:
    override = os.environ.get("GIGMATCH_LOG_DIR", "").strip()
    return Path(override) if override else _DEFAULT_LOG_DIR


def _file_logging_enabled() -> bool:
    return os.environ.get("GIGMATCH_LOG_FILE", "true").strip().lower() in _TRUTHY


def _daily_file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(
        log_dir / f"gigmatch_{datetime.now():%Y-%m-%d}.log", encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    return handler


def _configure() -> None:
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    if not _file_logging_enabled():
        return
    log_dir = _log_dir()
    try:
        handler = _daily_file_handler(log_dir)
    except OSError as exc:
        # Read-only checkouts still get console output.
        root.warning("File logging disabled, cannot write to %s: %s", log_dir, exc)
        return
    handler.setFormatter(formatter)
    root.addHandler(handler)
    # The file captures DEBUG breakdowns even when the console is quieter.
    root.setLevel(logging.DEBUG)
