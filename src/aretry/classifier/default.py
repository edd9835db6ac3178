r"""General purpose error classifiers."""

from __future__ import annotations

__all__ = ["AlwaysRetryClassifier", "ExceptionTypeClassifier", "PredicateClassifier"]

from typing import TYPE_CHECKING

from aretry.classifier.base import BaseErrorClassifier, Decision

if TYPE_CHECKING:
    from collections.abc import Callable


class AlwaysRetryClassifier(BaseErrorClassifier):
    """Classifier that treats every error as retryable.

    This is the default classifier of the executors.

    Example:
        ```pycon
        >>> from aretry.classifier import AlwaysRetryClassifier
        >>> AlwaysRetryClassifier().classify(ValueError("boom"))
        <Decision.RETRYABLE: 'retryable'>

        ```
    """

    def classify(self, error: Exception) -> Decision:  # noqa: ARG002
        return Decision.RETRYABLE

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"


class PredicateClassifier(BaseErrorClassifier):
    """Classifier backed by a user-defined predicate.

    Args:
        predicate: Function that receives the error and returns ``True``
            if another attempt is warranted.

    Example:
        ```pycon
        >>> from aretry.classifier import PredicateClassifier
        >>> classifier = PredicateClassifier(lambda error: not isinstance(error, ValueError))
        >>> classifier.classify(ValueError("invalid input"))
        <Decision.FATAL: 'fatal'>
        >>> classifier.classify(TimeoutError())
        <Decision.RETRYABLE: 'retryable'>

        ```
    """

    def __init__(self, predicate: Callable[[Exception], bool]) -> None:
        self.predicate = predicate

    def classify(self, error: Exception) -> Decision:
        return Decision.RETRYABLE if self.predicate(error) else Decision.FATAL

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(predicate={self.predicate!r})"


class ExceptionTypeClassifier(BaseErrorClassifier):
    """Classifier that decides based on the type of the error.

    Fatal types are checked first, so an error matching both groups is
    fatal. Errors matching neither group get the default decision.

    Args:
        retryable: Exception types that are retryable.
        fatal: Exception types that are fatal.
        default: Decision for errors matching neither group.

    Example:
        ```pycon
        >>> from aretry.classifier import Decision, ExceptionTypeClassifier
        >>> classifier = ExceptionTypeClassifier(
        ...     retryable=(ConnectionError, TimeoutError), fatal=(ValueError,)
        ... )
        >>> classifier.classify(ConnectionResetError())
        <Decision.RETRYABLE: 'retryable'>
        >>> classifier.classify(KeyError("missing"))
        <Decision.FATAL: 'fatal'>

        ```
    """

    def __init__(
        self,
        retryable: tuple[type[Exception], ...] = (),
        fatal: tuple[type[Exception], ...] = (),
        default: Decision = Decision.FATAL,
    ) -> None:
        self.retryable = tuple(retryable)
        self.fatal = tuple(fatal)
        self.default = default

    def classify(self, error: Exception) -> Decision:
        if self.fatal and isinstance(error, self.fatal):
            return Decision.FATAL
        if self.retryable and isinstance(error, self.retryable):
            return Decision.RETRYABLE
        return self.default

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(retryable={self.retryable!r}, "
            f"fatal={self.fatal!r}, default={self.default})"
        )
