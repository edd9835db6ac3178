r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors. They cover policy checks, failure
classification, planning of the next wait, and reporting of attempts
and outcomes.
"""

from __future__ import annotations

__all__ = [
    "MAX_WAIT",
    "check_policy",
    "classify_failure",
    "log_outcome",
    "plan_next_wait",
    "report_attempt",
]

import logging
import threading
from typing import TYPE_CHECKING

from aretry.backoff.delay import compute_delay
from aretry.classifier.base import Decision
from aretry.core.validation import validate_policy_params
from aretry.outcome import Cancelled, Exhausted, Succeeded

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.backoff.delay import RandomSource
    from aretry.classifier.base import BaseErrorClassifier
    from aretry.core.config import RetryPolicy
    from aretry.outcome import Attempt, Outcome

logger: logging.Logger = logging.getLogger(__name__)

# Longest wait the blocking primitives accept; longer delays are truncated
MAX_WAIT: float = threading.TIMEOUT_MAX


def check_policy(policy: RetryPolicy) -> None:
    """Validate a policy before the first attempt of a run.

    Args:
        policy: The retry policy to check.

    Raises:
        PolicyConfigurationError: If the policy is misconfigured.
    """
    validate_policy_params(
        max_attempts=policy.max_attempts,
        base_delay=policy.base_delay,
        max_delay=policy.max_delay,
        backoff_multiplier=policy.backoff_multiplier,
    )


def classify_failure(
    classifier: BaseErrorClassifier, error: Exception, index: int, max_attempts: int
) -> Decision:
    """Classify the error of a failed attempt.

    Args:
        classifier: The classifier to consult. It is called exactly once.
        error: The error raised by the attempt.
        index: The attempt number (1-indexed).
        max_attempts: Maximum number of attempts.

    Returns:
        The classifier's decision.

    Raises:
        TypeError: If the classifier does not return a ``Decision``.
    """
    decision = classifier.classify(error)
    if not isinstance(decision, Decision):
        msg = (
            f"{type(classifier).__qualname__}.classify must return a Decision, "
            f"got {decision!r}"
        )
        raise TypeError(msg)
    logger.debug(
        f"Attempt {index}/{max_attempts} failed with {type(error).__name__}: {error} "
        f"({decision.value})"
    )
    return decision


def plan_next_wait(
    decision: Decision, index: int, policy: RetryPolicy, rng: RandomSource | None = None
) -> float | None:
    """Compute the wait before the next attempt, if there is one.

    A fatal error or a failure of the last allowed attempt ends the run,
    in which case no delay is computed.

    Args:
        decision: The classification of the failure.
        index: The attempt number (1-indexed).
        policy: The retry policy.
        rng: Optional random source for jitter.

    Returns:
        The delay in seconds, or ``None`` if no other attempt follows.
    """
    if decision is Decision.FATAL or index >= policy.max_attempts:
        return None
    return compute_delay(index, policy, rng)


def report_attempt(on_attempt: Callable[[Attempt], None] | None, attempt: Attempt) -> None:
    """Invoke the on_attempt hook if provided.

    Args:
        on_attempt: Optional hook receiving every attempt record.
        attempt: The record of the attempt that just concluded.
    """
    if on_attempt is not None:
        on_attempt(attempt)


def log_outcome(outcome: Outcome, max_attempts: int) -> Outcome:
    """Log the terminal outcome of a run and return it unchanged.

    Args:
        outcome: The terminal outcome.
        max_attempts: Maximum number of attempts.

    Returns:
        The same outcome.
    """
    if isinstance(outcome, Succeeded):
        logger.debug(f"Operation succeeded on attempt {outcome.attempts_made}/{max_attempts}")
    elif isinstance(outcome, Exhausted):
        logger.debug(
            f"Operation failed after {outcome.attempts_made}/{max_attempts} attempts: "
            f"{outcome.error!r}"
        )
    elif isinstance(outcome, Cancelled):
        logger.debug(f"Retry cancelled after {outcome.attempts_made}/{max_attempts} attempts")
    return outcome
