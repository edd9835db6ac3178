r"""Unit tests for retry policy parameter validation."""

from __future__ import annotations

import math

import pytest

from aretry.core.validation import validate_policy_params
from aretry.exceptions import PolicyConfigurationError


def test_validate_policy_params_valid() -> None:
    """Test that valid parameters pass."""
    validate_policy_params(max_attempts=3, base_delay=0.1, max_delay=1.0, backoff_multiplier=2.0)


def test_validate_policy_params_boundaries() -> None:
    """Test the smallest accepted values."""
    validate_policy_params(
        max_attempts=1, base_delay=1e-9, max_delay=1e-9, backoff_multiplier=1.0
    )


def test_validate_policy_params_invalid_max_attempts() -> None:
    """Test that max_attempts=0 is rejected."""
    with pytest.raises(PolicyConfigurationError, match=r"max_attempts must be >= 1, got 0"):
        validate_policy_params(
            max_attempts=0, base_delay=0.1, max_delay=1.0, backoff_multiplier=2.0
        )


def test_validate_policy_params_negative_base_delay() -> None:
    """Test that a negative base_delay is rejected."""
    with pytest.raises(PolicyConfigurationError, match=r"base_delay must be > 0, got -0.1"):
        validate_policy_params(
            max_attempts=3, base_delay=-0.1, max_delay=1.0, backoff_multiplier=2.0
        )


def test_validate_policy_params_max_delay_below_base_delay() -> None:
    """Test that max_delay < base_delay is rejected."""
    with pytest.raises(PolicyConfigurationError, match=r"max_delay must be >= base_delay"):
        validate_policy_params(
            max_attempts=3, base_delay=1.0, max_delay=0.5, backoff_multiplier=2.0
        )


def test_validate_policy_params_invalid_multiplier() -> None:
    """Test that backoff_multiplier < 1 is rejected."""
    with pytest.raises(PolicyConfigurationError, match=r"backoff_multiplier must be >= 1"):
        validate_policy_params(
            max_attempts=3, base_delay=0.1, max_delay=1.0, backoff_multiplier=0.9
        )


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"base_delay": math.inf, "max_delay": math.inf}, r"base_delay must be finite, got inf"),
        ({"base_delay": 0.1, "max_delay": math.inf}, r"max_delay must be finite, got inf"),
        ({"base_delay": math.nan, "max_delay": 1.0}, r"base_delay must be > 0, got nan"),
        ({"base_delay": 0.1, "max_delay": math.nan}, r"max_delay must be >= base_delay"),
        (
            {"base_delay": 0.1, "max_delay": 1.0, "backoff_multiplier": math.inf},
            r"backoff_multiplier must be finite, got inf",
        ),
    ],
)
def test_validate_policy_params_non_finite(kwargs: dict, message: str) -> None:
    """Test that infinite and NaN values are rejected."""
    params = {"max_attempts": 3, "backoff_multiplier": 2.0, **kwargs}
    with pytest.raises(PolicyConfigurationError, match=message):
        validate_policy_params(**params)
