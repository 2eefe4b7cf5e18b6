#!/usr/bin/env python3
"""
Retry utilities for Newslingo.
Provides sequential retry with exponential backoff for provider calls.
"""
import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from utils.logging_utils import log_error, log_retry

T = TypeVar('T')


@dataclass(frozen=True)
class RetryPolicy:
    """Retry parameters for a single call site.

    Attributes:
        max_attempts: Total number of attempts, including the first one
        initial_delay: Seconds to wait after the first failed attempt
        backoff_multiplier: Factor applied to the delay after each further failure
        timeout: Optional per-attempt timeout in seconds
    """
    max_attempts: int = 3
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    timeout: Optional[float] = None

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.initial_delay < 0:
            raise ValueError(f"initial_delay must not be negative, got {self.initial_delay}")
        if self.backoff_multiplier < 1:
            raise ValueError(f"backoff_multiplier must be at least 1, got {self.backoff_multiplier}")

    def delay_for(self, attempt_index: int) -> float:
        """Seconds to wait after the failed attempt with the given 0-based index."""
        return self.initial_delay * (self.backoff_multiplier ** attempt_index)


async def retry_async(
    action: Callable[[], Awaitable[T]],
    policy: Optional[RetryPolicy] = None,
    module_name: str = "Retry",
    context: Optional[str] = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Run an async action with sequential retries and exponential backoff.

    Attempts never overlap. After a failed attempt the controller waits
    ``policy.delay_for(index)`` before the next one; there is no wait after the
    final attempt. Only the last error is raised once attempts are exhausted.

    Args:
        action: Zero-argument callable returning a fresh awaitable per attempt
        policy: Retry parameters for this call site (default: 3 attempts, 1s)
        module_name: Module name for logging
        context: Human-readable description of what's being retried
        sleep: Awaitable sleep function, replaceable in tests

    Returns:
        The result of the first successful attempt

    Raises:
        Exception: The error raised by the final attempt
    """
    policy = policy or RetryPolicy()
    operation_context = context or getattr(action, '__name__', 'operation')

    for attempt in range(1, policy.max_attempts + 1):
        try:
            if policy.timeout:
                return await asyncio.wait_for(action(), timeout=policy.timeout)
            return await action()
        except Exception as e:
            if attempt == policy.max_attempts:
                if policy.max_attempts > 1:
                    log_error(module_name, f"Async operation '{operation_context}' failed after {policy.max_attempts} attempts: {e}")
                raise

            delay = policy.delay_for(attempt - 1)
            if isinstance(e, asyncio.TimeoutError):
                log_retry(module_name, f"Async operation '{operation_context}' timed out, retrying in {delay:g}s", attempt, policy.max_attempts, e)
            else:
                log_retry(module_name, f"Async operation '{operation_context}' failed, retrying in {delay:g}s", attempt, policy.max_attempts, e)

            await sleep(delay)

    # max_attempts >= 1 guarantees the loop returns or raises
    raise RuntimeError("retry_async exited without a result")

