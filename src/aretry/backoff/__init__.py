r"""Backoff strategies and delay computation for retry attempts."""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ExponentialBackoff",
    "RandomSource",
    "compute_delay",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.delay import RandomSource, compute_delay
from aretry.backoff.exponential import ExponentialBackoff
