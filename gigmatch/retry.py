"""Retry decorator with exponential backoff for job-source calls."""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Tuple, Type

from gigmatch.log import get_logger

log = get_logger(__name__)


def backoff_delay(attempt: int, base_delay: float, backoff_factor: float, max_delay: float) -> float:
    """Delay before retrying after the given 1-based failed attempt, without jitter."""
    return min(base_delay * (backoff_factor ** (attempt - 1)), max_delay)


def retry(
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    backoff_factor: float = 2.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (Exception,),
) -> Callable:
    """Decorator: retries the wrapped function with exponential backoff.

    Only exceptions listed in *retryable* trigger another attempt; anything
    else propagates immediately. The last failure is re-raised.
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if attempt == max_attempts:
                        log.error("%s gave up after %d attempts: %s", fn.__qualname__, max_attempts, exc)
                        raise
                    delay = backoff_delay(attempt, base_delay, backoff_factor, max_delay)
                    if jitter:
                        delay *= 0.5 + random.random()
                    log.warning(
                        "%s attempt %d/%d failed (%s), retrying in %.1fs",
                        fn.__qualname__, attempt, max_attempts, exc, delay,
                    )
                    time.sleep(delay)
            raise RuntimeError("retry called with max_attempts < 1")

        return wrapper

    return decorator
