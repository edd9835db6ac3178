r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that runs a fallible
coroutine function with automatic retry logic, exponential backoff,
cooperative cancellation and an optional per-attempt timeout.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.classifier import as_classifier
from aretry.outcome import Attempt, Cancelled, Exhausted, Succeeded
from aretry.retry.executor_core import (
    MAX_WAIT,
    check_policy,
    classify_failure,
    log_outcome,
    plan_next_wait,
    report_attempt,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.delay import RandomSource
    from aretry.cancellation import CancellationToken
    from aretry.classifier.base import BaseErrorClassifier
    from aretry.core.config import RetryPolicy
    from aretry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Runs a coroutine function with automatic retry logic.

    This is the asyncio counterpart of ``RetryExecutor``. Waits between
    attempts use ``asyncio.sleep`` (or the cancellation token), so other
    tasks keep running during backoff.

    Cancelling the task that awaits ``run`` is not the same as cancelling
    the token: ``asyncio.CancelledError`` propagates as usual and no
    outcome is produced.

    Args:
        policy: The retry policy.
        classifier: Optional error classifier, or a predicate returning
            ``True`` for retryable errors. Defaults to retrying every error.
        on_attempt: Optional hook invoked synchronously after each attempt
            concludes, with the immutable ``Attempt`` record.
        rng: Optional random source for jitter.
        attempt_timeout: Optional time limit in seconds for a single
            attempt. An attempt exceeding it fails with the built-in
            ``TimeoutError`` (also on Python 3.10), which is then
            classified like any other error. Must be > 0.

    Raises:
        ValueError: If attempt_timeout is not positive.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryExecutor, RetryPolicy
        >>> async def fetch():
        ...     return 42
        ...
        >>> executor = AsyncRetryExecutor(RetryPolicy(max_attempts=3, base_delay=0.01))
        >>> asyncio.run(executor.run(fetch))
        Succeeded(value=42, attempts_made=1)

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        classifier: BaseErrorClassifier | Callable[[Exception], bool] | None = None,
        on_attempt: Callable[[Attempt], None] | None = None,
        rng: RandomSource | None = None,
        attempt_timeout: float | None = None,
    ) -> None:
        if attempt_timeout is not None and not attempt_timeout > 0:
            msg = f"attempt_timeout must be > 0, got {attempt_timeout}"
            raise ValueError(msg)
        self.policy = policy
        self.classifier: BaseErrorClassifier = as_classifier(classifier)
        self.on_attempt = on_attempt
        self.rng = rng
        self.attempt_timeout = attempt_timeout

    async def run(
        self,
        operation: Callable[[], Awaitable[Any]],
        token: CancellationToken | None = None,
    ) -> Outcome:
        """Run the operation until it succeeds or no attempt remains.

        Args:
            operation: Coroutine function without arguments. A returned
                value is a success, a raised ``Exception`` is a failure.
            token: Optional cancellation token. It may be cancelled from any
                thread.

        Returns:
            ``Succeeded(value, attempts_made)``,
            ``Exhausted(error, attempts_made)`` or
            ``Cancelled(attempts_made)``.

        Raises:
            PolicyConfigurationError: If the policy is misconfigured. This
                is checked before the first attempt.
        """
        check_policy(self.policy)
        max_attempts = self.policy.max_attempts

        index = 1
        while True:
            if token is not None and token.is_cancelled:
                return log_outcome(Cancelled(attempts_made=index - 1), max_attempts)

            logger.debug(f"Starting attempt {index}/{max_attempts}")
            started_at = time.time()
            start = time.monotonic()
            try:
                value = await self._invoke(operation)
            except Exception as exc:
                duration = time.monotonic() - start
                decision = classify_failure(self.classifier, exc, index, max_attempts)
                delay = plan_next_wait(decision, index, self.policy, self.rng)
                report_attempt(
                    self.on_attempt,
                    Attempt(
                        index=index,
                        started_at=started_at,
                        duration=duration,
                        error=exc,
                        decision=decision,
                        wait_before_next=delay,
                    ),
                )
                if delay is None:
                    return log_outcome(Exhausted(error=exc, attempts_made=index), max_attempts)
                if await self._wait(delay, token):
                    return log_outcome(Cancelled(attempts_made=index), max_attempts)
                index += 1
                continue

            report_attempt(
                self.on_attempt,
                Attempt(
                    index=index,
                    started_at=started_at,
                    duration=time.monotonic() - start,
                    value=value,
                ),
            )
            return log_outcome(Succeeded(value=value, attempts_made=index), max_attempts)

    async def _invoke(self, operation: Callable[[], Awaitable[Any]]) -> Any:
        if self.attempt_timeout is None:
            return await operation()
        try:
            return await asyncio.wait_for(operation(), timeout=self.attempt_timeout)
        except asyncio.TimeoutError as exc:
            # asyncio.TimeoutError is not the built-in TimeoutError before Python 3.11
            msg = f"attempt timed out after {self.attempt_timeout}s"
            raise TimeoutError(msg) from exc

    async def _wait(self, delay: float, token: CancellationToken | None) -> bool:
        """Suspend before the next attempt.

        Returns:
            ``True`` if the token was cancelled during the wait.
        """
        logger.debug(f"Waiting {delay:.3f}s before next attempt")
        delay = min(delay, MAX_WAIT)
        if token is None:
            await asyncio.sleep(delay)
            return False
        return await token.wait_async(delay)
