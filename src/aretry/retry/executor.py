r"""Synchronous retry executor.

This module provides the RetryExecutor class that runs a fallible
operation with automatic retry logic, exponential backoff and
cooperative cancellation.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

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
    from collections.abc import Callable

    from aretry.backoff.delay import RandomSource
    from aretry.cancellation import CancellationToken
    from aretry.classifier.base import BaseErrorClassifier
    from aretry.core.config import RetryPolicy
    from aretry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Runs an operation with automatic retry logic.

    The executor invokes the operation until it returns a value, fails
    with an error classified as fatal, runs out of attempts, or the
    cancellation token is observed. It never raises for those cases:
    ``run`` returns a ``Succeeded``, ``Exhausted`` or ``Cancelled`` outcome.

    The executor keeps no state between runs, so one instance can serve
    concurrent runs from several threads.

    Args:
        policy: The retry policy.
        classifier: Optional error classifier, or a predicate returning
            ``True`` for retryable errors. Defaults to retrying every error.
        on_attempt: Optional hook invoked synchronously after each attempt
            concludes, with the immutable ``Attempt`` record. It should
            return quickly, the retry loop waits for it.
        rng: Optional random source for jitter, for example a seeded
            ``random.Random``.

    Attributes:
        policy: The retry policy.
        classifier: The error classifier.
        on_attempt: The attempt hook.
        rng: The random source for jitter.

    Example:
        ```pycon
        >>> from aretry import RetryExecutor, RetryPolicy, Succeeded
        >>> calls = []
        >>> def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise ConnectionError("unreachable")
        ...     return "done"
        ...
        >>> executor = RetryExecutor(RetryPolicy(max_attempts=3, base_delay=0.001))
        >>> executor.run(flaky)
        Succeeded(value='done', attempts_made=3)

        ```
    """

    def __init__(
        self,
        policy: RetryPolicy,
        classifier: BaseErrorClassifier | Callable[[Exception], bool] | None = None,
        on_attempt: Callable[[Attempt], None] | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.policy = policy
        self.classifier: BaseErrorClassifier = as_classifier(classifier)
        self.on_attempt = on_attempt
        self.rng = rng

    def run(self, operation: Callable[[], Any], token: CancellationToken | None = None) -> Outcome:
        """Run the operation until it succeeds or no attempt remains.

        The operation is invoked at most ``policy.max_attempts`` times.
        The cancellation token is checked immediately before each attempt
        and during each wait. An attempt in progress is never interrupted:
        an operation that may stall must enforce its own timeout.

        Args:
            operation: Function without arguments. A returned value is a
                success, a raised ``Exception`` is a failure.
            token: Optional cancellation token.

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
                value = operation()
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
                if self._wait(delay, token):
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

    def _wait(self, delay: float, token: CancellationToken | None) -> bool:
        """Suspend before the next attempt.

        Returns:
            ``True`` if the token was cancelled during the wait.
        """
        logger.debug(f"Waiting {delay:.3f}s before next attempt")
        delay = min(delay, MAX_WAIT)
        if token is None:
            time.sleep(delay)
            return False
        return token.wait(delay)
