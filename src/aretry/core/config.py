r"""Retry policy dataclass and defaults.

This module provides the default constants and the immutable
``RetryPolicy`` object consumed by the retry executors.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "RETRY_STATUS_CODES",
    "RetryPolicy",
]

from dataclasses import dataclass, replace
from typing import Any

from aretry.core.validation import validate_policy_params

# Default maximum number of attempts, the first attempt included
DEFAULT_MAX_ATTEMPTS = 5

# Default delay in seconds before the first retry
DEFAULT_BASE_DELAY = 1.0

# Default cap in seconds on the delay between two attempts
DEFAULT_MAX_DELAY = 60.0

# Default growth factor of the delay
# Wait time before retry i = base_delay * (backoff_multiplier ** (i - 1))
# With 1.0 and 2.0: 1st retry waits 1s, 2nd waits 2s, 3rd waits 4s
DEFAULT_BACKOFF_MULTIPLIER = 2.0

# HTTP status codes that are worth retrying
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable description of how an operation is retried.

    The policy is validated when it is created, so an invalid policy never
    reaches an executor. Because it is frozen, a single policy can be shared
    by any number of concurrent runs.

    Args:
        max_attempts: Maximum number of attempts, the first attempt
            included. Must be >= 1. A value of 1 disables retries.
        base_delay: Delay in seconds before the first retry. Must be > 0.
        max_delay: Maximum delay in seconds between two attempts.
            Must be >= base_delay.
        jitter: If ``True``, each delay is drawn uniformly from
            ``[0, computed delay]`` (full jitter).
        backoff_multiplier: Growth factor of the delay. Must be >= 1.

    Raises:
        PolicyConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryPolicy
        >>> policy = RetryPolicy(max_attempts=3, base_delay=0.1)
        >>> policy.max_attempts
        3
        >>> policy.merge(max_attempts=10).max_attempts
        10
        >>> policy.max_attempts  # Original unchanged
        3

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: float = DEFAULT_BASE_DELAY
    max_delay: float = DEFAULT_MAX_DELAY
    jitter: bool = False
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate the policy parameters.

        Raises:
            PolicyConfigurationError: If any parameter fails validation.
        """
        validate_policy_params(
            max_attempts=self.max_attempts,
            base_delay=self.base_delay,
            max_delay=self.max_delay,
            backoff_multiplier=self.backoff_multiplier,
        )

    def merge(self, **overrides: Any) -> RetryPolicy:
        """Create a new policy with the specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new validated ``RetryPolicy``.

        Example:
            ```pycon
            >>> from aretry.core.config import RetryPolicy
            >>> policy = RetryPolicy(base_delay=0.5, max_delay=5.0)
            >>> policy.merge(jitter=True, max_delay=None)
            RetryPolicy(max_attempts=5, base_delay=0.5, max_delay=5.0, jitter=True, backoff_multiplier=2.0)

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
