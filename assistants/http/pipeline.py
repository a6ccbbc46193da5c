#!/usr/bin/env python3
"""
Request pipeline.

Composes the transport, retry policy and response classifier:

    Request -> RetryPolicy(Transport.send) -> ResponseClassifier -> Outcome

Only transport-level failures are retried. Any HTTP status the service
returns (429 and 5xx included) is classified once and handed back.
"""

import threading
from typing import Any, Optional

from assistants.logger import ClientLogger
from .errors import APIConnectionError, MalformedResponseError, RequestCancelledError
from .outcome import Failure, FailureKind, Outcome
from .request import Request
from .response_parser import ResponseClassifier
from .retry_policy import RetryPolicy
from .transport import Transport


class RequestPipeline:
    """
    Stateless beyond the read-only components it is built with; safe to
    call from many threads at once.
    """

    def __init__(
        self,
        transport: Transport,
        retry: Optional[RetryPolicy] = None,
        classifier: Optional[ResponseClassifier] = None,
        logger: Optional[ClientLogger] = None
    ):
        self.transport = transport
        self.retry = retry or RetryPolicy()
        self.classifier = classifier or ResponseClassifier()
        self.logger = logger or ClientLogger("pipeline")

    def execute(self, request: Request, cancel_event: Optional[threading.Event] = None) -> Outcome:
        """
        Send one logical request and classify the response.

        Returns Success with the raw body, or Failure of kind HTTP,
        UNREACHABLE, CANCELLED or MALFORMED (body could not be read).
        Never raises for those cases.
        """
        label = request.describe()

        try:
            raw = self.retry.execute_with_retry(
                lambda: self.transport.send(request),
                label=label,
                cancel_event=cancel_event
            )
        except APIConnectionError as e:
            self.logger.warning(
                f"Service unreachable for {label}",
                method=request.method,
                url=request.url,
                attempt=e.attempts,
                error=e.message
            )
            return Failure(
                status=0,
                message=e.message,
                kind=FailureKind.UNREACHABLE,
                attempt_errors=e.attempt_errors,
            )
        except RequestCancelledError as e:
            return Failure(status=0, message=str(e), kind=FailureKind.CANCELLED)
        except MalformedResponseError as e:
            return Failure(status=0, message=e.message, kind=FailureKind.MALFORMED)

        outcome = self.classifier.classify(raw)

        if not outcome.ok:
            self.logger.debug(
                f"Request rejected: {outcome.message}",
                method=request.method,
                url=request.url,
                status_code=outcome.status,
                error_type=outcome.error_type,
                error_code=outcome.error_code
            )

        return outcome

    def execute_json(
        self,
        request: Request,
        model: Any = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Outcome:
        """execute() followed by JSON decoding into model (a type or pydantic model)."""
        return self.classifier.decode(self.execute(request, cancel_event=cancel_event), model)
