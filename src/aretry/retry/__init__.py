r"""Retry executors.

Public API:
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "RetryExecutor"]

from aretry.retry.executor import RetryExecutor
from aretry.retry.executor_async import AsyncRetryExecutor
