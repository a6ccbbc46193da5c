from typing import List, Optional


class AssistantsError(Exception):
    """Base class for every error raised by the client."""


class RequestValidationError(AssistantsError, ValueError):
    """Invalid parameters caught before any request is sent."""


class APIConnectionError(AssistantsError):
    """The service was never reached: every transport attempt failed."""

    def __init__(self, message: str, attempts: int = 0, attempt_errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.attempts = attempts
        self.attempt_errors = list(attempt_errors or [])


class RequestCancelledError(AssistantsError):
    """The caller cancelled the request before it completed."""


class MalformedResponseError(AssistantsError):
    """A successful response whose payload could not be decoded."""

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class APIStatusError(AssistantsError):
    """The service rejected the request with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: Optional[str] = None,
        error_code: Optional[str] = None,
        error_param: Optional[str] = None,
        retry_after: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.error_code = error_code
        self.error_param = error_param
        self.retry_after = retry_after


class BadRequestError(APIStatusError):
    pass


class AuthenticationError(APIStatusError):
    pass


class PermissionDeniedError(APIStatusError):
    pass


class NotFoundError(APIStatusError):
    pass


class ConflictError(APIStatusError):
    pass


class UnprocessableEntityError(APIStatusError):
    pass


class RateLimitError(APIStatusError):
    pass


class InternalServerError(APIStatusError):
    pass


STATUS_ERRORS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def status_error_class(status_code: int) -> type:
    if status_code >= 500:
        return InternalServerError
    return STATUS_ERRORS.get(status_code, APIStatusError)


class PollTimeoutError(AssistantsError, TimeoutError):
    """A run did not reach a settled status within the polling deadline."""

    def __init__(self, message: str, last_status: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.last_status = last_status
