import time
from dataclasses import dataclass, field
from typing import Mapping, Optional

from requests.structures import CaseInsensitiveDict

from assistants.logger import ClientLogger
from .http_session import ThreadLocalSessionManager
from .request import Request


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport:
    """
    Performs exactly one network exchange per call.

    Network failures (requests.ConnectionError, requests.Timeout) propagate
    to the RetryPolicy; HTTP error statuses are returned as-is for the
    ResponseClassifier.
    """

    def __init__(
        self,
        session_manager: Optional[ThreadLocalSessionManager] = None,
        timeout: float = 120.0,
        logger: Optional[ClientLogger] = None
    ):
        self.session_manager = session_manager or ThreadLocalSessionManager()
        self.timeout = timeout
        self.logger = logger or ClientLogger("transport")

    def send(self, request: Request) -> RawResponse:
        self.logger.debug(
            f"API request {request.describe()}",
            method=request.method,
            url=request.url,
        )

        kwargs = {
            "headers": dict(request.headers),
            "timeout": self.timeout,
        }
        if request.is_multipart:
            kwargs["files"] = request.files
            kwargs["data"] = request.data
        elif request.content is not None:
            kwargs["data"] = request.content

        start = time.time()
        session = self.session_manager.get_session()
        response = session.request(request.method, request.url, **kwargs)

        self.logger.debug(
            f"API response {response.status_code} for {request.describe()}",
            method=request.method,
            url=request.url,
            status_code=response.status_code,
            duration_seconds=round(time.time() - start, 3),
        )

        return RawResponse(
            status_code=response.status_code,
            body=response.content or b"",
            headers=CaseInsensitiveDict(response.headers),
        )
