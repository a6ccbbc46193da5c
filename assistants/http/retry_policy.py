import time
import random
import threading
import requests
from typing import Callable, List, Optional, TypeVar

from assistants.logger import ClientLogger
from .errors import APIConnectionError, MalformedResponseError, RequestCancelledError

T = TypeVar('T')

# Network-level failures worth another attempt. HTTP error statuses never
# reach this layer as exceptions, so they are never retried here.
TRANSIENT_ERRORS = (
    requests.exceptions.ConnectionError,
    requests.exceptions.Timeout,
)

# Failures while reading a response the service already sent. Not retried.
RESPONSE_READ_ERRORS = (
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.ContentDecodingError,
)


class RetryPolicy:
    """
    Bounded retry with exponential backoff around one transport attempt.

    The delay after failed attempt n (zero-indexed) is 2**n backoff units.
    There is no sleep after the final attempt. A cancel_event, when given,
    is checked before every attempt and interrupts the backoff wait. An
    attempt already in flight is not interrupted; it is bounded only by the
    transport timeout (timeout_seconds).
    """

    def __init__(
        self,
        logger: Optional[ClientLogger] = None,
        max_attempts: int = 3,
        backoff_unit: float = 1.0,
        jitter: bool = False
    ):
        self.logger = logger or ClientLogger("retry")
        self.max_attempts = max(1, max_attempts)
        self.backoff_unit = max(0.0, backoff_unit)
        self.jitter = jitter

    def backoff_delay(self, attempt: int) -> float:
        delay = self.backoff_unit * (2 ** attempt)
        if self.jitter:
            delay *= random.uniform(0.5, 1.5)
        return delay

    def execute_with_retry(
        self,
        fn: Callable[[], T],
        label: str = "request",
        cancel_event: Optional[threading.Event] = None
    ) -> T:
        """
        Run fn until it returns or attempts run out.

        Raises:
            APIConnectionError: Every attempt failed at the transport level
            RequestCancelledError: cancel_event was set before completion
            MalformedResponseError: The response body could not be read
        """
        attempt_errors: List[str] = []

        for attempt in range(self.max_attempts):
            self._check_cancelled(cancel_event, label, attempt)

            try:
                self.logger.debug(
                    f"Attempt {attempt+1}/{self.max_attempts} for {label}",
                    attempt=attempt+1,
                    max_attempts=self.max_attempts
                )

                result = fn()

                if attempt > 0:
                    self.logger.debug(
                        f"{label} succeeded after {attempt+1} attempts",
                        attempt=attempt+1
                    )

                return result

            except TRANSIENT_ERRORS as e:
                attempt_errors.append(f"attempt {attempt+1}: {type(e).__name__}: {e}")

                if attempt >= self.max_attempts - 1:
                    self.logger.warning(
                        f"Transport failure on final attempt for {label}",
                        attempt=attempt+1,
                        max_attempts=self.max_attempts,
                        error=str(e),
                        error_type=type(e).__name__
                    )
                    break

                delay = self.backoff_delay(attempt)
                self.logger.debug(
                    f"Transport failure for {label}, retrying in {delay:.1f}s",
                    attempt=attempt+1,
                    max_attempts=self.max_attempts,
                    delay_seconds=delay,
                    error=str(e),
                    error_type=type(e).__name__
                )
                self._wait(delay, cancel_event, label, attempt)

            except RESPONSE_READ_ERRORS as e:
                # Not retried: the service may already have acted on the request
                self.logger.warning(
                    f"Response body for {label} could not be read",
                    attempt=attempt+1,
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise MalformedResponseError(
                    f"Malformed API response: body could not be read ({type(e).__name__}: {e})"
                ) from e

            except requests.exceptions.RequestException as e:
                # Invalid URL, bad header value, etc: another attempt cannot help
                attempt_errors.append(f"attempt {attempt+1}: {type(e).__name__}: {e}")
                self.logger.warning(
                    f"Non-retryable transport error for {label}",
                    attempt=attempt+1,
                    error=str(e),
                    error_type=type(e).__name__
                )
                break

        raise APIConnectionError(
            f"Failed to perform HTTP request after {len(attempt_errors)} attempt(s): "
            f"{attempt_errors[-1] if attempt_errors else 'no attempt made'}",
            attempts=len(attempt_errors),
            attempt_errors=attempt_errors,
        )

    def _check_cancelled(self, cancel_event: Optional[threading.Event], label: str, attempt: int):
        if cancel_event is not None and cancel_event.is_set():
            self.logger.debug(f"{label} cancelled before attempt {attempt+1}", attempt=attempt+1)
            raise RequestCancelledError(f"{label} cancelled before attempt {attempt+1}")

    def _wait(self, delay: float, cancel_event: Optional[threading.Event], label: str, attempt: int):
        if cancel_event is None:
            time.sleep(delay)
            return
        if cancel_event.wait(delay):
            self.logger.debug(f"{label} cancelled during backoff", attempt=attempt+1)
            raise RequestCancelledError(f"{label} cancelled during backoff after attempt {attempt+1}")
