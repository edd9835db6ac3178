r"""Cooperative cancellation for retry loops.

A ``CancellationToken`` is created by the caller, passed to an executor
and may be cancelled from any thread. The executors check it before
every attempt and while waiting between attempts. An attempt that is
already running is never interrupted.

Example:
    ```pycon
    >>> import threading
    >>> from aretry.cancellation import CancellationToken
    >>> token = CancellationToken()
    >>> token.is_cancelled
    False
    >>> threading.Timer(0.01, token.cancel).start()
    >>> token.wait(5.0)  # Returns as soon as the token is cancelled
    True
    >>> token.is_cancelled
    True

    ```
"""

from __future__ import annotations

__all__ = ["CancellationToken"]

import asyncio
import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class CancellationToken:
    """Thread-safe, one-shot cancellation signal.

    Once cancelled, a token stays cancelled. Waits on the token return as
    soon as it is cancelled and never poll.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._callbacks: list[Callable[[], None]] = []

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(cancelled={self.is_cancelled})"

    @property
    def is_cancelled(self) -> bool:
        """``True`` once ``cancel`` has been called."""
        return self._event.is_set()

    def cancel(self) -> None:
        """Signal cancellation.

        Registered callbacks are invoked once, in registration order, from
        the thread calling ``cancel``. Calling ``cancel`` again has no
        effect.
        """
        with self._lock:
            if self._event.is_set():
                return
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []
        logger.debug("Cancellation requested")
        for callback in callbacks:
            callback()

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Register a function called when the token is cancelled.

        If the token is already cancelled, the callback is invoked
        immediately.

        Args:
            callback: Function without arguments.
        """
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        """Unregister a callback. Unknown callbacks are ignored.

        Args:
            callback: A function previously passed to ``add_callback``.
        """
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def wait(self, timeout: float) -> bool:
        """Block until the token is cancelled or the timeout elapses.

        Args:
            timeout: Maximum time to wait in seconds.

        Returns:
            ``True`` if the token is cancelled, ``False`` if the timeout
            elapsed first.
        """
        return self._event.wait(timeout)

    async def wait_async(self, timeout: float) -> bool:
        """Wait without blocking the event loop until the token is
        cancelled or the timeout elapses.

        The token may be cancelled from another thread: the wake-up is
        scheduled on the running loop with ``call_soon_threadsafe``.

        Args:
            timeout: Maximum time to wait in seconds.

        Returns:
            ``True`` if the token is cancelled, ``False`` if the timeout
            elapsed first.
        """
        if self.is_cancelled:
            return True

        loop = asyncio.get_running_loop()
        waiter: asyncio.Future[None] = loop.create_future()

        def _resolve() -> None:
            if not waiter.done():
                waiter.set_result(None)

        def _wake() -> None:
            if not loop.is_closed():
                loop.call_soon_threadsafe(_resolve)

        self.add_callback(_wake)
        try:
            await asyncio.wait({waiter}, timeout=timeout)
        finally:
            self.remove_callback(_wake)
            if not waiter.done():
                waiter.cancel()
        return self.is_cancelled
