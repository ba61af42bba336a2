"""Fixed-schedule backoff for calls that can report "overloaded" — stdlib only."""
from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Three retries, four attempts in total.
OVERLOAD_DELAYS: tuple[float, ...] = (30.0, 60.0, 120.0)


class ServiceOverloaded(Exception):
    """The remote service asked us to come back later."""


def is_overloaded(exc: BaseException) -> bool:
    return isinstance(exc, ServiceOverloaded)


def call_with_backoff(
    fn: Callable[..., T],
    *args: Any,
    delays: Sequence[float] = OVERLOAD_DELAYS,
    is_retryable: Callable[[BaseException], bool] = is_overloaded,
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> T:
    """Call *fn*, sleeping ``delays[i]`` after the i-th retryable failure.

    Errors for which *is_retryable* is false propagate on the spot. Once the
    schedule is used up the last retryable error propagates.
    """
    name = getattr(fn, "__qualname__", repr(fn))
    attempts = len(delays) + 1
    for attempt in range(1, attempts + 1):
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            if not is_retryable(exc):
                raise
            if attempt == attempts:
                logger.error("%s failed after %d attempts: %s", name, attempts, exc)
                raise
            delay = delays[attempt - 1]
            logger.warning(
                "%s attempt %d/%d overloaded (%s), retrying in %.0fs",
                name,
                attempt,
                attempts,
                exc,
                delay,
            )
            sleep(delay)
    raise AssertionError("unreachable")


def retry(
    *,
    delays: Sequence[float] = OVERLOAD_DELAYS,
    is_retryable: Callable[[BaseException], bool] = is_overloaded,
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorator form of :func:`call_with_backoff`."""

    def decorator(fn: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return call_with_backoff(
                fn, *args, delays=delays, is_retryable=is_retryable, sleep=sleep, **kwargs
            )

        return wrapper

    return decorator
