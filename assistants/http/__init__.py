"""
HTTP request pipeline components.

Clean separation of concerns:
- urls.py: Resource path templates and query encoding
- request.py: Immutable requests and per-client header profiles
- transport.py: One HTTP exchange per call
- retry_policy.py: Bounded retry with exponential backoff
- response_parser.py: Success/failure classification and decoding
- pipeline.py: Composition of the above
"""

from .errors import (
    AssistantsError,
    RequestValidationError,
    APIConnectionError,
    RequestCancelledError,
    PollTimeoutError,
    MalformedResponseError,
    APIStatusError,
    BadRequestError,
    AuthenticationError,
    PermissionDeniedError,
    NotFoundError,
    ConflictError,
    UnprocessableEntityError,
    RateLimitError,
    InternalServerError,
)
from .outcome import Outcome, Success, Failure, FailureKind
from .request import Request, HeaderProfiles
from .urls import URLBuilder
from .http_session import ThreadLocalSessionManager
from .transport import Transport, RawResponse
from .retry_policy import RetryPolicy
from .response_parser import ResponseClassifier
from .pipeline import RequestPipeline

__all__ = [
    'AssistantsError',
    'RequestValidationError',
    'APIConnectionError',
    'RequestCancelledError',
    'PollTimeoutError',
    'MalformedResponseError',
    'APIStatusError',
    'BadRequestError',
    'AuthenticationError',
    'PermissionDeniedError',
    'NotFoundError',
    'ConflictError',
    'UnprocessableEntityError',
    'RateLimitError',
    'InternalServerError',
    'Outcome',
    'Success',
    'Failure',
    'FailureKind',
    'Request',
    'HeaderProfiles',
    'URLBuilder',
    'ThreadLocalSessionManager',
    'Transport',
    'RawResponse',
    'RetryPolicy',
    'ResponseClassifier',
    'RequestPipeline',
]
