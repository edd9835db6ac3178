r"""Error classifier for operations built on httpx.

This module lets HTTP calls made with httpx be retried with the usual
policy: timeouts, network errors and a set of transient status codes are
retryable, any other error is fatal.
"""

from __future__ import annotations

__all__ = ["HttpErrorClassifier"]

import logging

import httpx

from aretry.classifier.base import BaseErrorClassifier, Decision
from aretry.core.config import RETRY_STATUS_CODES

logger: logging.Logger = logging.getLogger(__name__)


class HttpErrorClassifier(BaseErrorClassifier):
    """Classifier for errors raised by httpx.

    The classification rules are:
    - ``httpx.TransportError`` (timeouts, connection and protocol errors):
      retryable
    - ``httpx.HTTPStatusError``: retryable if the response status code is
      in ``status_forcelist``, fatal otherwise
    - any other error: ``default``

    ``httpx.HTTPStatusError`` is raised by ``response.raise_for_status()``,
    so an operation usually looks like:

    ```python
    def fetch() -> httpx.Response:
        response = client.get("https://api.example.com/data")
        response.raise_for_status()
        return response
    ```

    Args:
        status_forcelist: Tuple of HTTP status codes that are retryable.
        default: Decision for errors that do not come from httpx.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.classifier import HttpErrorClassifier
        >>> classifier = HttpErrorClassifier()
        >>> classifier.classify(httpx.ConnectTimeout("timed out"))
        <Decision.RETRYABLE: 'retryable'>
        >>> request = httpx.Request("GET", "https://api.example.com/data")
        >>> response = httpx.Response(404, request=request)
        >>> error = httpx.HTTPStatusError("not found", request=request, response=response)
        >>> classifier.classify(error)
        <Decision.FATAL: 'fatal'>

        ```
    """

    def __init__(
        self,
        status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
        default: Decision = Decision.FATAL,
    ) -> None:
        self.status_forcelist = tuple(status_forcelist)
        self.default = default

    def classify(self, error: Exception) -> Decision:
        if isinstance(error, httpx.HTTPStatusError):
            status_code = error.response.status_code
            if status_code in self.status_forcelist:
                return Decision.RETRYABLE
            logger.debug(f"HTTP status {status_code} is not retryable")
            return Decision.FATAL
        if isinstance(error, httpx.TransportError):
            return Decision.RETRYABLE
        return self.default

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(status_forcelist={self.status_forcelist}, "
            f"default={self.default})"
        )
