"""
Resource models.

Read-only projections of service-owned objects, plus request bodies.
"""

from assistants.models.common import (
    Metadata,
    RemoteObject,
    FunctionDefinition,
    ToolObject,
    DeletionStatus,
    RequestParams,
)
from assistants.models.assistant import Assistant, AssistantParams, AssistantFile
from assistants.models.message import (
    Message,
    MessageParams,
    MessageContent,
    TextContent,
    ImageFileContent,
    MessageFile,
)
from assistants.models.thread import Thread, ThreadParams
from assistants.models.file import FileObject, FileList
from assistants.models.run import (
    Run,
    RunStatus,
    RunError,
    RunErrorCode,
    RunParams,
    ThreadAndRunParams,
    RequiredAction,
    ToolCall,
    FunctionCall,
    ToolOutput,
    RunState,
    Queued,
    InProgress,
    RequiresAction,
    Cancelling,
    Cancelled,
    Failed,
    Completed,
    Expired,
    Unrecognized,
    TERMINAL_STATUSES,
    is_known_transition,
)
from assistants.models.run_step import RunStep, StepDetails, ToolCallDetails

__all__ = [
    "Metadata",
    "RemoteObject",
    "FunctionDefinition",
    "ToolObject",
    "DeletionStatus",
    "RequestParams",
    "Assistant",
    "AssistantParams",
    "AssistantFile",
    "Message",
    "MessageParams",
    "MessageContent",
    "TextContent",
    "ImageFileContent",
    "MessageFile",
    "Thread",
    "ThreadParams",
    "FileObject",
    "FileList",
    "Run",
    "RunStatus",
    "RunError",
    "RunErrorCode",
    "RunParams",
    "ThreadAndRunParams",
    "RequiredAction",
    "ToolCall",
    "FunctionCall",
    "ToolOutput",
    "RunState",
    "Queued",
    "InProgress",
    "RequiresAction",
    "Cancelling",
    "Cancelled",
    "Failed",
    "Completed",
    "Expired",
    "Unrecognized",
    "TERMINAL_STATUSES",
    "is_known_transition",
    "RunStep",
    "StepDetails",
    "ToolCallDetails",
]
