r"""Decorator retrying every call of a function.

Unlike ``run``, the decorated function keeps a plain calling convention:
it returns the value of the successful attempt and raises
``RetryExhaustedError`` (chained from the last error) when the retries
are exhausted.
"""

from __future__ import annotations

__all__ = ["retrying"]

import functools
import inspect
from typing import TYPE_CHECKING, Any

from aretry.core.config import RetryPolicy
from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.classifier.base import BaseErrorClassifier
    from aretry.outcome import Attempt


def retrying(
    policy: RetryPolicy | None = None,
    classifier: BaseErrorClassifier | Callable[[Exception], bool] | None = None,
    on_attempt: Callable[[Attempt], None] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Create a decorator that retries calls of the decorated function.

    Coroutine functions are supported and are retried with the
    asynchronous executor.

    Args:
        policy: Optional retry policy. Defaults to ``RetryPolicy()``.
        classifier: Optional error classifier, or a predicate returning
            ``True`` for retryable errors.
        on_attempt: Optional hook invoked after each attempt.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from aretry import RetryExhaustedError, RetryPolicy, retrying
        >>> @retrying(RetryPolicy(max_attempts=2, base_delay=0.001))
        ... def always_fails():
        ...     raise ConnectionError("unreachable")
        ...
        >>> always_fails()
        Traceback (most recent call last):
            ...
        aretry.exceptions.RetryExhaustedError: operation failed after 2 attempt(s): unreachable

        ```
    """
    if policy is None:
        policy = RetryPolicy()

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if inspect.iscoroutinefunction(func):
            async_executor = AsyncRetryExecutor(policy, classifier=classifier, on_attempt=on_attempt)

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                outcome = await async_executor.run(functools.partial(func, *args, **kwargs))
                return outcome.unwrap()

            return async_wrapper

        executor = RetryExecutor(policy, classifier=classifier, on_attempt=on_attempt)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            outcome = executor.run(functools.partial(func, *args, **kwargs))
            return outcome.unwrap()

        return wrapper

    return decorator
