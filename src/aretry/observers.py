r"""Ready-made attempt observers.

An observer is any callable accepting an ``Attempt``. It is passed to
the executors through ``on_attempt`` and runs synchronously after every
attempt.
"""

from __future__ import annotations

__all__ = ["AttemptRecorder", "LoggingObserver"]

import logging
import threading
from typing import TYPE_CHECKING

from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from aretry.outcome import Attempt


class LoggingObserver:
    """Observer that emits one structured log record per attempt.

    Successful attempts and failures followed by a wait are logged at
    ``level``; the failure that ends a run is logged at ``final_level``.
    The record carries the fields ``attempt``, ``duration``, ``succeeded``,
    ``error_type``, ``decision`` and ``wait_before_next``.

    The standard logging machinery serializes writes, so one observer can
    be shared by concurrent runs.

    Args:
        logger: Optional logger. Defaults to the ``aretry.observers``
            logger.
        level: Level for successes and retried failures.
        final_level: Level for the failure that ends a run.

    Example:
        ```pycon
        >>> import logging
        >>> from aretry import RetryPolicy, run
        >>> from aretry.observers import LoggingObserver
        >>> observer = LoggingObserver(logging.getLogger("jobs"), level=logging.INFO)
        >>> run(lambda: "ok", RetryPolicy(), on_attempt=observer)
        Succeeded(value='ok', attempts_made=1)

        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        final_level: int = logging.WARNING,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.level = level
        self.final_level = final_level

    def __call__(self, attempt: Attempt) -> None:
        if attempt.succeeded:
            level = self.level
            message = f"Attempt {attempt.index} succeeded in {attempt.duration:.3f}s"
        elif attempt.wait_before_next is None:
            level = self.final_level
            message = (
                f"Attempt {attempt.index} failed with {type(attempt.error).__name__}: "
                f"{attempt.error}, giving up"
            )
        else:
            level = self.level
            message = (
                f"Attempt {attempt.index} failed with {type(attempt.error).__name__}: "
                f"{attempt.error}, retrying in {attempt.wait_before_next:.3f}s"
            )
        log_structured(
            self.logger,
            level,
            message,
            attempt=attempt.index,
            duration=attempt.duration,
            succeeded=attempt.succeeded,
            error_type=None if attempt.error is None else type(attempt.error).__name__,
            decision=None if attempt.decision is None else attempt.decision.value,
            wait_before_next=attempt.wait_before_next,
        )


class AttemptRecorder:
    """Observer that keeps every attempt it receives, in order.

    It is thread-safe, so one recorder may collect the attempts of
    several concurrent runs.

    Example:
        ```pycon
        >>> from aretry import RetryPolicy, run
        >>> from aretry.observers import AttemptRecorder
        >>> recorder = AttemptRecorder()
        >>> _ = run(lambda: 1, RetryPolicy(), on_attempt=recorder)
        >>> [attempt.index for attempt in recorder.attempts]
        [1]

        ```
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._attempts: list[Attempt] = []

    def __call__(self, attempt: Attempt) -> None:
        with self._lock:
            self._attempts.append(attempt)

    @property
    def attempts(self) -> tuple[Attempt, ...]:
        """The recorded attempts."""
        with self._lock:
            return tuple(self._attempts)

    def clear(self) -> None:
        """Forget the recorded attempts."""
        with self._lock:
            self._attempts.clear()
