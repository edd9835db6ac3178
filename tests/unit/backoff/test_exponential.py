r"""Unit tests for ExponentialBackoff strategy."""

from __future__ import annotations

import pytest

from aretry.backoff import BaseBackoffStrategy, ExponentialBackoff


def test_exponential_backoff_is_strategy() -> None:
    """Test that ExponentialBackoff implements BaseBackoffStrategy."""
    assert isinstance(ExponentialBackoff(base_delay=1.0), BaseBackoffStrategy)


def test_exponential_backoff_basic() -> None:
    """Test basic exponential backoff calculation."""
    backoff = ExponentialBackoff(base_delay=0.5)
    assert backoff.calculate(1) == 0.5  # 0.5 * 2^0
    assert backoff.calculate(2) == 1.0  # 0.5 * 2^1
    assert backoff.calculate(3) == 2.0  # 0.5 * 2^2
    assert backoff.calculate(4) == 4.0  # 0.5 * 2^3


def test_exponential_backoff_custom_multiplier() -> None:
    """Test exponential backoff with a custom multiplier."""
    backoff = ExponentialBackoff(base_delay=1.0, multiplier=3.0)
    assert backoff.calculate(1) == 1.0
    assert backoff.calculate(2) == 3.0
    assert backoff.calculate(3) == 9.0


def test_exponential_backoff_multiplier_one_is_constant() -> None:
    """Test that multiplier=1 gives a constant delay."""
    backoff = ExponentialBackoff(base_delay=0.25, multiplier=1.0)
    assert [backoff.calculate(i) for i in range(1, 6)] == [0.25] * 5


def test_exponential_backoff_with_max_delay() -> None:
    """Test exponential backoff with max_delay cap."""
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
    assert backoff.calculate(3) == 4.0
    assert backoff.calculate(4) == 5.0  # Would be 8.0, but capped
    assert backoff.calculate(11) == 5.0  # Would be 1024.0, but capped


def test_exponential_backoff_overflow_is_capped() -> None:
    """Test that a huge attempt number returns max_delay."""
    backoff = ExponentialBackoff(base_delay=1.0, max_delay=30.0)
    assert backoff.calculate(100_000) == 30.0


def test_exponential_backoff_overflow_without_cap() -> None:
    """Test that overflow propagates when no cap is set."""
    backoff = ExponentialBackoff(base_delay=1.0)
    with pytest.raises(OverflowError):
        backoff.calculate(100_000)


def test_exponential_backoff_invalid_attempt() -> None:
    """Test that attempt < 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"attempt must be >= 1"):
        ExponentialBackoff(base_delay=1.0).calculate(0)


def test_exponential_backoff_invalid_base_delay() -> None:
    """Test that a non-positive base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"base_delay must be positive"):
        ExponentialBackoff(base_delay=0.0)


def test_exponential_backoff_invalid_multiplier() -> None:
    """Test that multiplier < 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"multiplier must be >= 1"):
        ExponentialBackoff(base_delay=1.0, multiplier=0.5)


def test_exponential_backoff_invalid_max_delay() -> None:
    """Test that max_delay < base_delay raises ValueError."""
    with pytest.raises(ValueError, match=r"max_delay must be >= base_delay"):
        ExponentialBackoff(base_delay=2.0, max_delay=1.0)
