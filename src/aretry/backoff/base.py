r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait after a failed attempt
    before the next attempt starts.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay that follows a failed attempt.

        Args:
            attempt: The index of the attempt that just failed (1-indexed).
                For example, attempt=1 gives the delay before the second
                attempt.

        Returns:
            The delay in seconds before the next attempt.
        """
