r"""Error classifiers deciding whether a failed attempt is retried.

Public API:
    - Decision: Outcome of a classification (RETRYABLE or FATAL)
    - BaseErrorClassifier: Abstract base class for classifiers
    - AlwaysRetryClassifier: Default classifier, every error is retryable
    - PredicateClassifier: Classifier backed by a user-defined predicate
    - ExceptionTypeClassifier: Classifier based on exception types
    - HttpErrorClassifier: Classifier for errors raised by httpx
    - as_classifier: Normalize a classifier argument
"""

from __future__ import annotations

__all__ = [
    "AlwaysRetryClassifier",
    "BaseErrorClassifier",
    "Decision",
    "ExceptionTypeClassifier",
    "HttpErrorClassifier",
    "PredicateClassifier",
    "as_classifier",
]

from typing import TYPE_CHECKING

from aretry.classifier.base import BaseErrorClassifier, Decision
from aretry.classifier.default import (
    AlwaysRetryClassifier,
    ExceptionTypeClassifier,
    PredicateClassifier,
)
from aretry.classifier.http import HttpErrorClassifier

if TYPE_CHECKING:
    from collections.abc import Callable


def as_classifier(
    classifier: BaseErrorClassifier | Callable[[Exception], bool] | None,
) -> BaseErrorClassifier:
    """Normalize a classifier argument.

    Args:
        classifier: ``None`` for the default classifier, a classifier
            instance, or a predicate returning ``True`` for retryable
            errors.

    Returns:
        A classifier instance.

    Raises:
        TypeError: If the argument is neither a classifier nor callable.

    Example:
        ```pycon
        >>> from aretry.classifier import as_classifier
        >>> as_classifier(None)
        AlwaysRetryClassifier()
        >>> as_classifier(lambda error: False).classify(RuntimeError())
        <Decision.FATAL: 'fatal'>

        ```
    """
    if classifier is None:
        return AlwaysRetryClassifier()
    if isinstance(classifier, BaseErrorClassifier):
        return classifier
    if callable(classifier):
        return PredicateClassifier(classifier)
    msg = f"classifier must be a BaseErrorClassifier or a callable, got {classifier!r}"
    raise TypeError(msg)
