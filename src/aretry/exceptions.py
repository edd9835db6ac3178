r"""Exceptions raised by the aretry library.

Failures of the retried operation are not exceptions from the point of
view of aretry: they are recorded in ``Attempt`` objects and summarised
by the terminal ``Outcome``. The exceptions below cover invalid
configuration and the opt-in conversion of an outcome back into an
exception.
"""

from __future__ import annotations

__all__ = [
    "AretryError",
    "PolicyConfigurationError",
    "RetryCancelledError",
    "RetryExhaustedError",
]


class AretryError(Exception):
    """Base class for all exceptions raised by aretry."""


class PolicyConfigurationError(AretryError, ValueError):
    """Exception raised when a retry policy is misconfigured.

    It subclasses ``ValueError`` so existing code that guards parameter
    validation with ``except ValueError`` keeps working.

    Example:
        ```pycon
        >>> from aretry.exceptions import PolicyConfigurationError
        >>> raise PolicyConfigurationError("max_attempts must be >= 1, got 0")
        Traceback (most recent call last):
            ...
        aretry.exceptions.PolicyConfigurationError: max_attempts must be >= 1, got 0

        ```
    """


class RetryExhaustedError(AretryError):
    """Exception raised when an exhausted outcome is unwrapped.

    Args:
        last_error: The error raised by the final attempt.
        attempts_made: The number of attempts that were made.

    Attributes:
        last_error: The error raised by the final attempt.
        attempts_made: The number of attempts that were made.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError(last_error=ValueError("boom"), attempts_made=3)
        >>> error.attempts_made
        3
        >>> str(error)
        'operation failed after 3 attempt(s): boom'

        ```
    """

    def __init__(self, last_error: Exception, attempts_made: int) -> None:
        super().__init__(f"operation failed after {attempts_made} attempt(s): {last_error}")
        self.last_error = last_error
        self.attempts_made = attempts_made


class RetryCancelledError(AretryError):
    """Exception raised when a cancelled outcome is unwrapped.

    Args:
        attempts_made: The number of attempts completed before the
            cancellation was observed.
    """

    def __init__(self, attempts_made: int) -> None:
        super().__init__(f"retry cancelled after {attempts_made} attempt(s)")
        self.attempts_made = attempts_made
