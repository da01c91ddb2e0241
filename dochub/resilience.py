"""Resilience patterns for documentation fetches.

This module provides retry with exponential backoff for handling transient
failures (connection resets, timeouts, 5xx responses) when talking to
documentation hosts.
"""

from __future__ import annotations

import asyncio
import functools
import logging
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Tuple, Type, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_retries: int = 2
    base_delay: float = 0.5
    max_delay: float = 8.0
    exponential_base: float = 2.0
    jitter: bool = True

    def __post_init__(self):
        # Negative counts still make one attempt
        self.max_retries = max(0, self.max_retries)

    def delay_for(self, attempt: int) -> float:
        """Backoff delay in seconds before retry number ``attempt + 1``."""
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        if self.jitter:
            delay *= 0.5 + random.random()
        return delay


def with_async_retry(
    config: Optional[RetryConfig] = None,
    retryable_exceptions: Tuple[Type[BaseException], ...] = (Exception,),
    should_retry: Optional[Callable[[BaseException], bool]] = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorator for adding retry behavior with exponential backoff to coroutines.

    Args:
        config: Retry configuration
        retryable_exceptions: Tuple of exception types to retry on
        should_retry: Optional predicate to veto retrying a caught exception

    Returns:
        Decorator function

    Example:
        >>> @with_async_retry(RetryConfig(max_retries=3), (httpx.TransportError,))
        ... async def get_page(client, url):
        ...     return await client.get(url)
    """
    config = config or RetryConfig()

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        name = getattr(func, "__name__", repr(func))

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            for attempt in range(config.max_retries + 1):
                try:
                    return await func(*args, **kwargs)
                except retryable_exceptions as e:
                    if attempt >= config.max_retries or (should_retry and not should_retry(e)):
                        raise
                    delay = config.delay_for(attempt)
                    logger.warning(
                        f"{name} failed (attempt {attempt + 1}/{config.max_retries + 1}): {e}; "
                        f"retrying in {delay:.2f}s"
                    )
                    await asyncio.sleep(delay)

            # Unreachable: the last attempt either returns or raises
            raise RuntimeError("retry loop exited without result")

        return wrapper

    return decorator
