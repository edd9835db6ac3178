from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry import RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def policy() -> RetryPolicy:
    """Create a retry policy with three attempts and short delays."""
    return RetryPolicy(max_attempts=3, base_delay=0.1, max_delay=1.0, backoff_multiplier=2.0)


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock on_attempt hook."""
    return Mock()
