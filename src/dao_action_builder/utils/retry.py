"""
Retry helpers for block-explorer requests.

Exponential backoff with optional full jitter. Only the exception types listed
in RetryConfig.retryable_errors are retried; anything else propagates at once.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, Tuple, Type, TypeVar

from dao_action_builder.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)


@dataclass
class RetryConfig:
    """
    Configuration for retry behavior.

    Example:
        ```python
        config = RetryConfig(
            max_attempts=5,
            base_delay_ms=250,
            retryable_errors=(httpx.TransportError,),
        )
        ```
    """

    max_attempts: int = 3
    """Total number of attempts, including the first one."""

    base_delay_ms: int = 500
    """Delay before the first retry, in milliseconds."""

    max_delay_ms: int = 10000
    """Upper bound for any single delay, in milliseconds."""

    jitter: bool = True
    """Randomize each delay between zero and its computed value."""

    exponential_base: float = 2.0

    retryable_errors: Tuple[Type[BaseException], ...] = field(
        default_factory=lambda: (Exception,)
    )


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """
    Compute the delay (seconds) to wait before retry number ``attempt``.

    Args:
        attempt: Zero-based retry index (0 = first retry)
        config: Retry configuration

    Returns:
        Delay in seconds
    """
    delay_ms = min(
        config.base_delay_ms * (config.exponential_base ** attempt),
        config.max_delay_ms,
    )
    if config.jitter:
        delay_ms = random.uniform(0, delay_ms)
    return delay_ms / 1000


async def retry_async(
    fn: Callable[[], Awaitable[T]],
    config: Optional[RetryConfig] = None,
) -> T:
    """
    Await ``fn`` until it succeeds or the attempts run out.

    Args:
        fn: Zero-argument coroutine factory
        config: Retry configuration (defaults if None)

    Returns:
        The first successful result.

    Raises:
        The last retryable exception once all attempts fail, or any
        non-retryable exception immediately.
    """
    config = config or RetryConfig()
    if config.max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(config.max_attempts):
        try:
            return await fn()
        except config.retryable_errors as e:
            if attempt == config.max_attempts - 1:
                raise
            delay = calculate_delay(attempt, config)
            _logger.debug(
                "Retrying after transient failure",
                extra={"attempt": attempt + 1, "delay_s": delay, "error": str(e)},
            )
            await asyncio.sleep(delay)

    raise RuntimeError("unreachable")  # pragma: no cover
