r"""aretry - Retry executor with exponential backoff and cancellation.

This package runs fallible operations with automatic retry logic. Each
run produces exactly one typed outcome, so exhaustion and cancellation
are results to handle rather than exceptions to catch.

Key Features:
    - Exponential backoff with a delay cap and optional full jitter
    - Pluggable error classification (retryable or fatal), including httpx errors
    - Cooperative, thread-safe cancellation that interrupts backoff waits
    - Typed outcomes: Succeeded, Exhausted, Cancelled
    - Per-attempt observability hook and structured logging
    - Full async support, with an optional per-attempt timeout

Example:
    ```pycon
    >>> from aretry import Exhausted, RetryPolicy, Succeeded, run
    >>> outcome = run(lambda: "ok", RetryPolicy(max_attempts=3, base_delay=0.1))
    >>> outcome
    Succeeded(value='ok', attempts_made=1)
    >>> def fails():
    ...     raise ConnectionError("unreachable")
    ...
    >>> outcome = run(fails, RetryPolicy(max_attempts=2, base_delay=0.001))
    >>> isinstance(outcome, Exhausted), outcome.attempts_made
    (True, 2)

    ```
"""

from __future__ import annotations

__all__ = [
    "AlwaysRetryClassifier",
    "AretryError",
    "AsyncRetryExecutor",
    "Attempt",
    "BaseErrorClassifier",
    "CancellationToken",
    "Cancelled",
    "Decision",
    "ExceptionTypeClassifier",
    "Exhausted",
    "HttpErrorClassifier",
    "Outcome",
    "PolicyConfigurationError",
    "PredicateClassifier",
    "RetryCancelledError",
    "RetryExecutor",
    "RetryExhaustedError",
    "RetryPolicy",
    "Succeeded",
    "__version__",
    "compute_delay",
    "retrying",
    "run",
    "run_async",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import compute_delay
from aretry.cancellation import CancellationToken
from aretry.classifier import (
    AlwaysRetryClassifier,
    BaseErrorClassifier,
    Decision,
    ExceptionTypeClassifier,
    HttpErrorClassifier,
    PredicateClassifier,
)
from aretry.core.config import RetryPolicy
from aretry.decorator import retrying
from aretry.exceptions import (
    AretryError,
    PolicyConfigurationError,
    RetryCancelledError,
    RetryExhaustedError,
)
from aretry.outcome import Attempt, Cancelled, Exhausted, Outcome, Succeeded
from aretry.retry import AsyncRetryExecutor, RetryExecutor
from aretry.run import run
from aretry.run_async import run_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
