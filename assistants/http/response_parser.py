import json
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from assistants.logger import ClientLogger
from .outcome import Failure, FailureKind, Outcome, Success
from .transport import RawResponse


SUCCESS_STATUSES = frozenset({200, 201, 204})


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


class ResponseClassifier:
    """
    Turns a raw response into Success or Failure, and decodes success
    payloads into the caller's expected shape.

    Never raises for malformed bodies: error envelopes degrade to a generic
    message, undecodable success payloads become MALFORMED failures.
    """

    def __init__(self, logger: Optional[ClientLogger] = None):
        self.logger = logger or ClientLogger("classifier")

    def classify(self, response: RawResponse) -> Outcome:
        status = response.status_code

        if status in SUCCESS_STATUSES:
            payload = b"" if status == 204 else response.body
            return Success(status=status, payload=payload)

        error_detail = self._parse_error_envelope(response.body)
        provider_message = _as_text(error_detail.get("message")) if error_detail else None

        message = f"HTTP request failed with status code: {status}."
        if provider_message:
            message = f"{message} {provider_message}"

        failure = Failure(
            status=status,
            message=message,
            kind=FailureKind.HTTP,
            error_type=_as_text(error_detail.get("type")) if error_detail else None,
            error_code=_as_text(error_detail.get("code")) if error_detail else None,
            error_param=_as_text(error_detail.get("param")) if error_detail else None,
            retry_after=self._parse_retry_after(response),
        )

        self.logger.debug(
            f"Classified error response: {message}",
            status_code=status,
            error_type=failure.error_type,
            error_code=failure.error_code
        )

        return failure

    def decode(self, outcome: Outcome, model: Any = None) -> Outcome:
        """
        Decode a Success payload from JSON, optionally validating into model.

        An empty body (e.g. 204) decodes to {} without a model and to None
        with one. Failures pass through unchanged.
        """
        if not isinstance(outcome, Success):
            return outcome

        raw = outcome.payload or b""
        if not raw.strip():
            return Success(status=outcome.status, payload=None if model is not None else {})

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._malformed(outcome.status, f"response body is not valid JSON: {e}", raw)

        if model is None:
            return Success(status=outcome.status, payload=data)

        try:
            decoded = TypeAdapter(model).validate_python(data)
        except ValidationError as e:
            return self._malformed(
                outcome.status,
                f"response does not match {getattr(model, '__name__', model)}: {e.error_count()} error(s)",
                raw
            )

        return Success(status=outcome.status, payload=decoded)

    def _malformed(self, status: int, detail: str, raw: bytes) -> Failure:
        self.logger.error(
            f"Malformed API response: {detail}",
            status_code=status,
            error=raw[:500].decode("utf-8", errors="replace")
        )
        return Failure(
            status=status,
            message=f"Malformed API response (status code: {status}): {detail}",
            kind=FailureKind.MALFORMED,
        )

    def _parse_error_envelope(self, body: bytes) -> Optional[dict]:
        try:
            envelope = json.loads(body) if body else None
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

        if not isinstance(envelope, dict):
            return None

        detail = envelope.get("error")
        return detail if isinstance(detail, dict) else None

    def _parse_retry_after(self, response: RawResponse) -> Optional[int]:
        value = response.headers.get("Retry-After") if response.headers else None
        if not value:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
