r"""Contains the function to run a synchronous operation with automatic
retry logic."""

from __future__ import annotations

__all__ = ["run"]

from typing import TYPE_CHECKING, Any

from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.delay import RandomSource
    from aretry.cancellation import CancellationToken
    from aretry.classifier.base import BaseErrorClassifier
    from aretry.core.config import RetryPolicy
    from aretry.outcome import Attempt, Outcome


def run(
    operation: Callable[[], Any],
    policy: RetryPolicy,
    classifier: BaseErrorClassifier | Callable[[Exception], bool] | None = None,
    token: CancellationToken | None = None,
    on_attempt: Callable[[Attempt], None] | None = None,
    rng: RandomSource | None = None,
) -> Outcome:
    """Run an operation with automatic retry logic.

    The operation is attempted up to ``policy.max_attempts`` times. After a
    retryable failure, the executor waits
    ``base_delay * backoff_multiplier ** (attempt - 1)`` seconds (capped at
    ``max_delay``, fully jittered if ``jitter`` is set) before the next
    attempt. A fatal failure ends the run immediately.

    Args:
        operation: Function without arguments to run.
        policy: The retry policy.
        classifier: Optional error classifier, or a predicate returning
            ``True`` for retryable errors. Defaults to retrying every error.
        token: Optional cancellation token, checked before each attempt
            and during each wait.
        on_attempt: Optional hook invoked after each attempt with its
            ``Attempt`` record.
        rng: Optional random source for jitter.

    Returns:
        ``Succeeded``, ``Exhausted`` or ``Cancelled``. Failures of the
        operation are never raised.

    Raises:
        PolicyConfigurationError: If the policy is misconfigured.

    Example:
        ```pycon
        >>> from aretry import ExceptionTypeClassifier, RetryPolicy, run
        >>> def parse():
        ...     return int("not a number")
        ...
        >>> outcome = run(
        ...     parse,
        ...     RetryPolicy(max_attempts=5, base_delay=0.01),
        ...     classifier=ExceptionTypeClassifier(fatal=(ValueError,)),
        ... )
        >>> outcome.attempts_made
        1
        >>> type(outcome.error).__name__
        'ValueError'

        ```
    """
    executor = RetryExecutor(policy, classifier=classifier, on_attempt=on_attempt, rng=rng)
    return executor.run(operation, token=token)
