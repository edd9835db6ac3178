r"""Core configuration and validation for retry policies."""

from __future__ import annotations

__all__ = [
    "DEFAULT_BACKOFF_MULTIPLIER",
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_MAX_DELAY",
    "RETRY_STATUS_CODES",
    "RetryPolicy",
    "validate_policy_params",
]

from aretry.core.config import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    RETRY_STATUS_CODES,
    RetryPolicy,
)
from aretry.core.validation import validate_policy_params
