r"""Contains the function to run an asynchronous operation with automatic
retry logic."""

from __future__ import annotations

__all__ = ["run_async"]

from typing import TYPE_CHECKING, Any

from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.backoff.delay import RandomSource
    from aretry.cancellation import CancellationToken
    from aretry.classifier.base import BaseErrorClassifier
    from aretry.core.config import RetryPolicy
    from aretry.outcome import Attempt, Outcome


async def run_async(
    operation: Callable[[], Awaitable[Any]],
    policy: RetryPolicy,
    classifier: BaseErrorClassifier | Callable[[Exception], bool] | None = None,
    token: CancellationToken | None = None,
    on_attempt: Callable[[Attempt], None] | None = None,
    rng: RandomSource | None = None,
    attempt_timeout: float | None = None,
) -> Outcome:
    """Run a coroutine function with automatic retry logic.

    This is the asyncio counterpart of ``run``.

    Args:
        operation: Coroutine function without arguments to run.
        policy: The retry policy.
        classifier: Optional error classifier, or a predicate returning
            ``True`` for retryable errors. Defaults to retrying every error.
        token: Optional cancellation token, checked before each attempt
            and during each wait.
        on_attempt: Optional hook invoked after each attempt with its
            ``Attempt`` record.
        rng: Optional random source for jitter.
        attempt_timeout: Optional time limit in seconds for a single
            attempt. A timed-out attempt fails with the built-in
            ``TimeoutError``.

    Returns:
        ``Succeeded``, ``Exhausted`` or ``Cancelled``.

    Raises:
        PolicyConfigurationError: If the policy is misconfigured.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from aretry import HttpErrorClassifier, RetryPolicy, run_async
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...
        ...         async def fetch():
        ...             response = await client.get("https://api.example.com/data")
        ...             response.raise_for_status()
        ...             return response
        ...
        ...         return await run_async(
        ...             fetch,
        ...             RetryPolicy(max_attempts=3, base_delay=0.5, jitter=True),
        ...             classifier=HttpErrorClassifier(),
        ...             attempt_timeout=10.0,
        ...         )
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """
    executor = AsyncRetryExecutor(
        policy,
        classifier=classifier,
        on_attempt=on_attempt,
        rng=rng,
        attempt_timeout=attempt_timeout,
    )
    return await executor.run(operation, token=token)
