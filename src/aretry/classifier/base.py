r"""Abstract base class for error classifiers."""

from __future__ import annotations

__all__ = ["BaseErrorClassifier", "Decision"]

from abc import ABC, abstractmethod
from enum import Enum


class Decision(Enum):
    """Classification of an error raised by the retried operation.

    Attributes:
        RETRYABLE: The failure may be transient, another attempt is warranted.
        FATAL: The failure is terminal, remaining attempts are skipped.
    """

    RETRYABLE = "retryable"
    FATAL = "fatal"


class BaseErrorClassifier(ABC):
    """Abstract base class for error classifiers.

    An error classifier decides whether a failed attempt should be
    retried. The executors call ``classify`` exactly once per failed
    attempt.
    """

    @abstractmethod
    def classify(self, error: Exception) -> Decision:
        """Classify an error raised by the retried operation.

        Args:
            error: The error raised by the failed attempt.

        Returns:
            ``Decision.RETRYABLE`` or ``Decision.FATAL``. The executors raise
            ``TypeError`` for any other return value, truthy values included.
        """
