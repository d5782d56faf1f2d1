"""Retry decorators with exponential backoff."""

from __future__ import annotations

from typing import Any, Callable, Iterable, ParamSpec, TypeVar

import backoff
from openai import APIConnectionError, APITimeoutError, InternalServerError, RateLimitError

from core.errors import NetworkError, ServerError

T = TypeVar("T")
P = ParamSpec("P")

# Transient job-board API failures; only read requests are retried.
API_READ_RETRY_EXCEPTIONS: tuple[type[Exception], ...] = (
    NetworkError,
    ServerError,
)

# Retryable OpenAI exceptions for the AI helpers.
OPENAI_RETRY_EXCEPTIONS: tuple[type[Exception], ...] = (
    APITimeoutError,
    APIConnectionError,
    RateLimitError,
    InternalServerError,
)


def retry_with_backoff(
    *,
    exceptions: Iterable[type[Exception]] = API_READ_RETRY_EXCEPTIONS,
    max_tries: int = 3,
    giveup: Callable[[Exception], bool] | None = None,
    on_giveup: Callable[[Any], None] | Iterable[Callable[[Any], None]] | None = None,
    jitter: Any = backoff.full_jitter,
    logger: Any = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Return a decorator applying exponential backoff for ``exceptions``.

    Centralises the retry configuration so API reads and OpenAI calls share
    the same guard rails while remaining testable (tests pass ``jitter=None``
    and patch ``time.sleep``).
    """

    exception_tuple: tuple[type[Exception], ...] = tuple(exceptions)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        def default_giveup(_: Exception) -> bool:
            return False

        resolved_giveup: Callable[[Exception], bool]
        if giveup is None:
            resolved_giveup = default_giveup
        else:
            resolved_giveup = giveup

        return backoff.on_exception(
            backoff.expo,
            exception_tuple,
            max_tries=max_tries,
            jitter=jitter,
            giveup=resolved_giveup,
            on_giveup=on_giveup,
            logger=logger,
        )(func)

    return decorator
