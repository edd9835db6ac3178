r"""Delay calculation between two attempts.

This module combines the exponential backoff of a retry policy with
optional full jitter.
"""

from __future__ import annotations

__all__ = ["RandomSource", "compute_delay"]

import logging
import random
from typing import TYPE_CHECKING, Protocol

from aretry.backoff.exponential import ExponentialBackoff

if TYPE_CHECKING:
    from aretry.core.config import RetryPolicy

logger: logging.Logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Source of random numbers used for jitter.

    ``random.Random`` instances and the ``random`` module both satisfy it.
    """

    def uniform(self, a: float, b: float) -> float: ...


def compute_delay(attempt: int, policy: RetryPolicy, rng: RandomSource | None = None) -> float:
    """Compute the delay that follows a failed attempt.

    The delay is calculated as follows:
    1. raw = policy.base_delay * (policy.backoff_multiplier ** (attempt - 1))
    2. raw = min(raw, policy.max_delay)
    3. If policy.jitter is set, the delay is drawn uniformly from
       ``[0, raw]`` (full jitter), otherwise it is ``raw``.

    Args:
        attempt: The index of the attempt that just failed (1-indexed).
        policy: The retry policy.
        rng: Optional random source for jitter, for example a seeded
            ``random.Random``. Defaults to the ``random`` module.

    Returns:
        The delay in seconds, never negative and never above
        ``policy.max_delay``.

    Raises:
        ValueError: If attempt is lower than 1.

    Example:
        ```pycon
        >>> from aretry.backoff import compute_delay
        >>> from aretry.core import RetryPolicy
        >>> policy = RetryPolicy(max_attempts=5, base_delay=0.1, max_delay=0.3)
        >>> compute_delay(1, policy)
        0.1
        >>> compute_delay(2, policy)
        0.2
        >>> compute_delay(3, policy)  # Would be 0.4, but capped
        0.3

        ```
    """
    backoff = ExponentialBackoff(
        base_delay=policy.base_delay,
        multiplier=policy.backoff_multiplier,
        max_delay=policy.max_delay,
    )
    raw = backoff.calculate(attempt)
    if not policy.jitter:
        logger.debug(f"Backoff after attempt {attempt}: {raw:.3f}s")
        return raw

    if rng is None:
        rng = random
    delay = min(max(rng.uniform(0, raw), 0.0), raw)
    logger.debug(f"Backoff after attempt {attempt}: {delay:.3f}s (full jitter, max={raw:.3f}s)")
    return delay
