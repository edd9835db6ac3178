r"""Parameter validation utilities for retry policies.

This module provides the validation function used to check retry
policy parameters before any attempt of the operation is made.
"""

from __future__ import annotations

__all__ = ["validate_policy_params"]

import math

from aretry.exceptions import PolicyConfigurationError


def validate_policy_params(
    max_attempts: int,
    base_delay: float,
    max_delay: float,
    backoff_multiplier: float,
) -> None:
    """Validate retry policy parameters.

    Args:
        max_attempts: Maximum number of attempts, including the first one.
            Must be an integer >= 1. A value of 1 disables retries.
        base_delay: Delay in seconds before the first retry. Must be
            finite and > 0.
        max_delay: Maximum delay in seconds between two attempts.
            Must be finite and >= base_delay.
        backoff_multiplier: Growth factor of the delay between two
            consecutive retries. Must be finite and >= 1.

    Raises:
        PolicyConfigurationError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_policy_params
        >>> validate_policy_params(
        ...     max_attempts=3, base_delay=0.1, max_delay=1.0, backoff_multiplier=2.0
        ... )
        >>> validate_policy_params(
        ...     max_attempts=0, base_delay=0.1, max_delay=1.0, backoff_multiplier=2.0
        ... )
        Traceback (most recent call last):
        ...
        aretry.exceptions.PolicyConfigurationError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {max_attempts!r}"
        raise PolicyConfigurationError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise PolicyConfigurationError(msg)
    if not base_delay > 0:
        msg = f"base_delay must be > 0, got {base_delay}"
        raise PolicyConfigurationError(msg)
    if not math.isfinite(base_delay):
        msg = f"base_delay must be finite, got {base_delay}"
        raise PolicyConfigurationError(msg)
    if not max_delay >= base_delay:
        msg = f"max_delay must be >= base_delay ({base_delay}), got {max_delay}"
        raise PolicyConfigurationError(msg)
    if not math.isfinite(max_delay):
        msg = f"max_delay must be finite, got {max_delay}"
        raise PolicyConfigurationError(msg)
    if not backoff_multiplier >= 1:
        msg = f"backoff_multiplier must be >= 1, got {backoff_multiplier}"
        raise PolicyConfigurationError(msg)
    if not math.isfinite(backoff_multiplier):
        msg = f"backoff_multiplier must be finite, got {backoff_multiplier}"
        raise PolicyConfigurationError(msg)
