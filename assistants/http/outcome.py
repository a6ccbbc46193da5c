"""
Outcome of one pipeline call.

Exactly one of Success / Failure is returned by RequestPipeline.execute.
The status code is always kept, including on failures; transport-level
failures that never reached the service carry status 0.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union

from .errors import (
    APIConnectionError,
    MalformedResponseError,
    RequestCancelledError,
    status_error_class,
)


class FailureKind(str, Enum):
    HTTP = "http"                  # Service rejected the request (4xx/5xx)
    UNREACHABLE = "unreachable"    # Every transport attempt failed
    MALFORMED = "malformed"        # Success status, undecodable payload
    CANCELLED = "cancelled"        # Caller cancelled before completion


@dataclass(frozen=True)
class Success:
    status: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class Failure:
    status: int
    message: str
    kind: FailureKind = FailureKind.HTTP
    error_type: Optional[str] = None
    error_code: Optional[str] = None
    error_param: Optional[str] = None
    retry_after: Optional[int] = None
    attempt_errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self) -> Exception:
        if self.kind == FailureKind.UNREACHABLE:
            return APIConnectionError(
                self.message,
                attempts=len(self.attempt_errors),
                attempt_errors=self.attempt_errors,
            )
        if self.kind == FailureKind.CANCELLED:
            return RequestCancelledError(self.message)
        if self.kind == FailureKind.MALFORMED:
            return MalformedResponseError(self.message, status_code=self.status)

        error_cls = status_error_class(self.status)
        return error_cls(
            self.message,
            status_code=self.status,
            error_type=self.error_type,
            error_code=self.error_code,
            error_param=self.error_param,
            retry_after=self.retry_after,
        )

    def unwrap(self) -> Any:
        raise self.to_exception()


Outcome = Union[Success, Failure]
