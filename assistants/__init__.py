from assistants.config import ClientConfig, ConfigManager, load_config

from assistants.http import (
    AssistantsError,
    RequestValidationError,
    APIConnectionError,
    RequestCancelledError,
    PollTimeoutError,
    MalformedResponseError,
    APIStatusError,
    NotFoundError,
    RateLimitError,
    Outcome,
    Success,
    Failure,
    FailureKind,
    Request,
    RequestPipeline,
)

from assistants.pagination import PaginationCursor, Page, iterate

from assistants.models import (
    Assistant,
    Thread,
    Message,
    MessageParams,
    FileObject,
    Run,
    RunStatus,
    RunStep,
    ToolObject,
    ToolOutput,
)

from assistants.logger import ClientLogger, create_logger

from assistants.client import AssistantsClient

__all__ = [
    "ClientConfig",
    "ConfigManager",
    "load_config",

    "AssistantsError",
    "RequestValidationError",
    "APIConnectionError",
    "RequestCancelledError",
    "PollTimeoutError",
    "MalformedResponseError",
    "APIStatusError",
    "NotFoundError",
    "RateLimitError",
    "Outcome",
    "Success",
    "Failure",
    "FailureKind",
    "Request",
    "RequestPipeline",

    "PaginationCursor",
    "Page",
    "iterate",

    "Assistant",
    "Thread",
    "Message",
    "MessageParams",
    "FileObject",
    "Run",
    "RunStatus",
    "RunStep",
    "ToolObject",
    "ToolOutput",

    "ClientLogger",
    "create_logger",

    "AssistantsClient",
]
