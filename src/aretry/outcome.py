r"""Attempt records and terminal outcomes of a retry run.

Every call to an executor's ``run`` returns exactly one outcome:

- ``Succeeded``: an attempt returned a value
- ``Exhausted``: the last allowed attempt failed, or an attempt failed
  with an error classified as fatal
- ``Cancelled``: the cancellation token was observed before an attempt
  or during a wait

Outcomes are plain frozen dataclasses and can be matched with ``match``:

```python
match run(fetch, policy):
    case Succeeded(value=value):
        use(value)
    case Exhausted(error=error, attempts_made=n):
        logger.warning(f"giving up after {n} attempts: {error}")
    case Cancelled():
        pass
```
"""

from __future__ import annotations

__all__ = ["Attempt", "Cancelled", "Exhausted", "Outcome", "Succeeded"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NoReturn, Union

from aretry.exceptions import RetryCancelledError, RetryExhaustedError

if TYPE_CHECKING:
    from aretry.classifier.base import Decision


@dataclass(frozen=True)
class Attempt:
    """Record of one invocation of the retried operation.

    Attributes:
        index: The attempt number (1-indexed).
        started_at: Timestamp (seconds since the epoch) when the attempt
            started.
        duration: Time in seconds spent in the operation.
        value: The value returned by the operation, ``None`` on failure.
        error: The error raised by the operation, ``None`` on success.
        decision: The classification of ``error``, ``None`` on success.
        wait_before_next: The delay in seconds before the next attempt, or
            ``None`` if no other attempt follows.
    """

    index: int
    started_at: float
    duration: float
    value: Any = None
    error: Exception | None = None
    decision: Decision | None = None
    wait_before_next: float | None = None

    @property
    def succeeded(self) -> bool:
        """``True`` if the operation returned a value."""
        return self.error is None


@dataclass(frozen=True)
class Succeeded:
    """The operation returned a value.

    Attributes:
        value: The value returned by the successful attempt.
        attempts_made: The number of attempts, the successful one included.

    Example:
        ```pycon
        >>> from aretry.outcome import Succeeded
        >>> Succeeded(value=42, attempts_made=2).unwrap()
        42

        ```
    """

    value: Any
    attempts_made: int

    def unwrap(self) -> Any:
        """Return the value of the successful attempt."""
        return self.value


@dataclass(frozen=True)
class Exhausted:
    """The operation failed and no other attempt will be made.

    Attributes:
        error: The error raised by the last attempt.
        attempts_made: The number of attempts that were made.

    Example:
        ```pycon
        >>> from aretry.outcome import Exhausted
        >>> Exhausted(error=ValueError("boom"), attempts_made=3).unwrap()
        Traceback (most recent call last):
            ...
        aretry.exceptions.RetryExhaustedError: operation failed after 3 attempt(s): boom

        ```
    """

    error: Exception
    attempts_made: int

    def unwrap(self) -> NoReturn:
        """Raise ``RetryExhaustedError`` chained from the last error.

        Raises:
            RetryExhaustedError: Always.
        """
        raise RetryExhaustedError(
            last_error=self.error, attempts_made=self.attempts_made
        ) from self.error


@dataclass(frozen=True)
class Cancelled:
    """The run was cancelled through its cancellation token.

    Attributes:
        attempts_made: The number of attempts completed before the
            cancellation was observed. It is 0 if the token was cancelled
            before the first attempt.
    """

    attempts_made: int

    def unwrap(self) -> NoReturn:
        """Raise ``RetryCancelledError``.

        Raises:
            RetryCancelledError: Always.
        """
        raise RetryCancelledError(attempts_made=self.attempts_made)


Outcome = Union[Succeeded, Exhausted, Cancelled]
