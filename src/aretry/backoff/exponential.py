r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (multiplier ** (attempt - 1)),
    capped at max_delay.

    Args:
        base_delay: The delay in seconds after the first failed attempt.
            Must be > 0.
        multiplier: The growth factor of the delay. Must be >= 1.
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.1)
        >>> backoff.calculate(1)  # Before the second attempt
        0.1
        >>> backoff.calculate(2)
        0.2
        >>> backoff.calculate(3)
        0.4
        >>> backoff = ExponentialBackoff(base_delay=1.0, max_delay=5.0)
        >>> backoff.calculate(11)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(
        self, base_delay: float, multiplier: float = 2.0, max_delay: float | None = None
    ) -> None:
        if not base_delay > 0:
            msg = f"base_delay must be positive, got {base_delay}"
            raise ValueError(msg)
        if not multiplier >= 1:
            msg = f"multiplier must be >= 1, got {multiplier}"
            raise ValueError(msg)
        if max_delay is not None and max_delay < base_delay:
            msg = f"max_delay must be >= base_delay if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.multiplier = multiplier
        self.max_delay = max_delay

    def calculate(self, attempt: int) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The index of the attempt that just failed (1-indexed).

        Returns:
            The calculated delay: base_delay * (multiplier ** (attempt - 1)),
            capped at max_delay if set.

        Raises:
            ValueError: If attempt is lower than 1.
        """
        if attempt < 1:
            msg = f"attempt must be >= 1, got {attempt}"
            raise ValueError(msg)
        try:
            delay = self.base_delay * (self.multiplier ** (attempt - 1))
        except OverflowError:
            if self.max_delay is None:
                raise
            return self.max_delay
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay
