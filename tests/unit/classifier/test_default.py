r"""Unit tests for general purpose error classifiers."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.classifier import (
    AlwaysRetryClassifier,
    BaseErrorClassifier,
    Decision,
    ExceptionTypeClassifier,
    PredicateClassifier,
    as_classifier,
)


@pytest.mark.parametrize(
    "error", [ValueError("invalid"), ConnectionError("reset"), TimeoutError(), KeyError("x")]
)
def test_always_retry_classifier(error: Exception) -> None:
    """Test that every error is retryable by default."""
    assert AlwaysRetryClassifier().classify(error) is Decision.RETRYABLE


def test_always_retry_classifier_repr() -> None:
    assert repr(AlwaysRetryClassifier()) == "AlwaysRetryClassifier()"


def test_predicate_classifier_retryable() -> None:
    """Test that a predicate returning True gives RETRYABLE."""
    predicate = Mock(return_value=True)
    error = ConnectionError("reset")
    assert PredicateClassifier(predicate).classify(error) is Decision.RETRYABLE
    predicate.assert_called_once_with(error)


def test_predicate_classifier_fatal() -> None:
    """Test that a predicate returning False gives FATAL."""
    classifier = PredicateClassifier(lambda error: not isinstance(error, ValueError))
    assert classifier.classify(ValueError("invalid")) is Decision.FATAL
    assert classifier.classify(TimeoutError()) is Decision.RETRYABLE


def test_exception_type_classifier() -> None:
    """Test classification by exception type."""
    classifier = ExceptionTypeClassifier(
        retryable=(ConnectionError, TimeoutError), fatal=(ValueError,)
    )
    assert classifier.classify(ConnectionRefusedError()) is Decision.RETRYABLE
    assert classifier.classify(TimeoutError()) is Decision.RETRYABLE
    assert classifier.classify(UnicodeDecodeError("utf-8", b"", 0, 1, "bad")) is Decision.FATAL
    assert classifier.classify(RuntimeError()) is Decision.FATAL


def test_exception_type_classifier_fatal_wins() -> None:
    """Test that fatal types take precedence over retryable types."""
    classifier = ExceptionTypeClassifier(retryable=(OSError,), fatal=(FileNotFoundError,))
    assert classifier.classify(FileNotFoundError()) is Decision.FATAL
    assert classifier.classify(PermissionError()) is Decision.RETRYABLE


def test_exception_type_classifier_default() -> None:
    """Test the decision for errors matching no group."""
    classifier = ExceptionTypeClassifier(fatal=(ValueError,), default=Decision.RETRYABLE)
    assert classifier.classify(RuntimeError()) is Decision.RETRYABLE
    assert classifier.classify(ValueError()) is Decision.FATAL


def test_exception_type_classifier_empty() -> None:
    """Test that an empty classifier always returns the default."""
    assert ExceptionTypeClassifier().classify(RuntimeError()) is Decision.FATAL


def test_custom_classifier_subclass() -> None:
    """Test a user-defined classifier."""

    class StatusClassifier(BaseErrorClassifier):
        def classify(self, error: Exception) -> Decision:
            return Decision.RETRYABLE if "busy" in str(error) else Decision.FATAL

    classifier = StatusClassifier()
    assert classifier.classify(RuntimeError("server busy")) is Decision.RETRYABLE
    assert classifier.classify(RuntimeError("denied")) is Decision.FATAL


def test_base_error_classifier_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseErrorClassifier()  # type: ignore[abstract]


def test_as_classifier_none() -> None:
    """Test that None gives the default classifier."""
    assert isinstance(as_classifier(None), AlwaysRetryClassifier)


def test_as_classifier_instance() -> None:
    """Test that a classifier instance is returned unchanged."""
    classifier = ExceptionTypeClassifier()
    assert as_classifier(classifier) is classifier


def test_as_classifier_callable() -> None:
    """Test that a callable is wrapped in a PredicateClassifier."""
    classifier = as_classifier(lambda error: False)
    assert isinstance(classifier, PredicateClassifier)
    assert classifier.classify(RuntimeError()) is Decision.FATAL


def test_as_classifier_invalid() -> None:
    with pytest.raises(TypeError, match=r"classifier must be a BaseErrorClassifier"):
        as_classifier(42)  # type: ignore[arg-type]
