r"""Unit tests for the retry policy dataclass."""

from __future__ import annotations

import dataclasses

import pytest
from coola.equality import objects_are_equal

from aretry.core.config import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_DELAY,
    RETRY_STATUS_CODES,
    RetryPolicy,
)
from aretry.exceptions import PolicyConfigurationError


def test_retry_policy_default_values() -> None:
    """Test RetryPolicy with default values."""
    policy = RetryPolicy()
    assert policy.max_attempts == DEFAULT_MAX_ATTEMPTS
    assert policy.base_delay == DEFAULT_BASE_DELAY
    assert policy.max_delay == DEFAULT_MAX_DELAY
    assert policy.backoff_multiplier == DEFAULT_BACKOFF_MULTIPLIER
    assert policy.jitter is False


def test_default_constants() -> None:
    """Test the default constants."""
    assert DEFAULT_MAX_ATTEMPTS == 5
    assert DEFAULT_BASE_DELAY == 1.0
    assert DEFAULT_BACKOFF_MULTIPLIER == 2.0
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


def test_retry_policy_custom_values() -> None:
    """Test RetryPolicy with custom values."""
    policy = RetryPolicy(
        max_attempts=3, base_delay=0.1, max_delay=2.0, jitter=True, backoff_multiplier=3.0
    )
    assert policy.max_attempts == 3
    assert policy.base_delay == 0.1
    assert policy.max_delay == 2.0
    assert policy.jitter is True
    assert policy.backoff_multiplier == 3.0


def test_retry_policy_is_immutable() -> None:
    """Test that RetryPolicy cannot be modified after creation."""
    policy = RetryPolicy()
    with pytest.raises(dataclasses.FrozenInstanceError):
        policy.max_attempts = 10  # type: ignore[misc]


def test_retry_policy_is_hashable() -> None:
    """Test that equal policies hash equally."""
    assert hash(RetryPolicy(max_attempts=2)) == hash(RetryPolicy(max_attempts=2))


def test_retry_policy_single_attempt() -> None:
    """Test that max_attempts=1 is valid and disables retries."""
    assert RetryPolicy(max_attempts=1).max_attempts == 1


def test_retry_policy_max_delay_equal_to_base_delay() -> None:
    """Test that max_delay may equal base_delay."""
    policy = RetryPolicy(base_delay=2.0, max_delay=2.0)
    assert policy.max_delay == 2.0


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_retry_policy_invalid_max_attempts(max_attempts: int) -> None:
    """Test that max_attempts < 1 raises PolicyConfigurationError."""
    with pytest.raises(PolicyConfigurationError, match=r"max_attempts must be >= 1"):
        RetryPolicy(max_attempts=max_attempts)


@pytest.mark.parametrize("max_attempts", [2.5, True, "3"])
def test_retry_policy_non_integer_max_attempts(max_attempts: object) -> None:
    """Test that a non-integer max_attempts raises PolicyConfigurationError."""
    with pytest.raises(PolicyConfigurationError, match=r"max_attempts must be an integer"):
        RetryPolicy(max_attempts=max_attempts)  # type: ignore[arg-type]


@pytest.mark.parametrize("base_delay", [0.0, -1.0, float("nan")])
def test_retry_policy_invalid_base_delay(base_delay: float) -> None:
    """Test that a non-positive base_delay raises PolicyConfigurationError."""
    with pytest.raises(PolicyConfigurationError, match=r"base_delay must be > 0"):
        RetryPolicy(base_delay=base_delay)


def test_retry_policy_max_delay_below_base_delay() -> None:
    """Test that max_delay < base_delay raises PolicyConfigurationError."""
    with pytest.raises(PolicyConfigurationError, match=r"max_delay must be >= base_delay"):
        RetryPolicy(base_delay=2.0, max_delay=1.0)


def test_retry_policy_invalid_backoff_multiplier() -> None:
    """Test that backoff_multiplier < 1 raises PolicyConfigurationError."""
    with pytest.raises(PolicyConfigurationError, match=r"backoff_multiplier must be >= 1"):
        RetryPolicy(backoff_multiplier=0.5)


def test_retry_policy_configuration_error_is_value_error() -> None:
    """Test that configuration errors can be caught as ValueError."""
    with pytest.raises(ValueError, match=r"max_attempts"):
        RetryPolicy(max_attempts=0)


def test_retry_policy_merge() -> None:
    """Test merging overrides into a policy."""
    policy = RetryPolicy(max_attempts=3, base_delay=0.5)
    merged = policy.merge(max_attempts=10, jitter=True)
    assert objects_are_equal(
        merged, RetryPolicy(max_attempts=10, base_delay=0.5, jitter=True)
    )
    assert policy.max_attempts == 3


def test_retry_policy_merge_ignores_none() -> None:
    """Test that None overrides keep the original values."""
    policy = RetryPolicy(max_attempts=3)
    assert policy.merge(max_attempts=None, base_delay=None) == policy


def test_retry_policy_merge_validates() -> None:
    """Test that merged policies are validated."""
    with pytest.raises(PolicyConfigurationError, match=r"max_attempts must be >= 1"):
        RetryPolicy().merge(max_attempts=0)


def test_retry_policy_infinite_delays() -> None:
    with pytest.raises(PolicyConfigurationError, match=r"base_delay must be finite"):
        RetryPolicy(max_attempts=2, base_delay=float("inf"), max_delay=float("inf"))
