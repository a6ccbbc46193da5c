"""
Run lifecycle model.

A Run is an asynchronous task executing an assistant against a thread.
Its status is driven only by the service:

    queued -> in_progress -> requires_action | cancelling | completed | failed | expired
    requires_action -> in_progress | cancelling
    cancelling -> cancelled

The client can only request a run, request cancellation, or submit tool
outputs while the run requires action. Statuses outside the known set, and
transitions outside the graph above, are passed through unchanged.

Deserialization keeps the status-dependent fields coherent:
- last_error is dropped unless status is "failed"
- cancelled_at / failed_at / completed_at are dropped unless they belong
  to the current status
Both only apply to recognized statuses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from assistants.logger import ClientLogger
from .common import Metadata, RemoteObject, RequestParams, ToolObject
from .thread import ThreadParams


logger = ClientLogger("models.run")


class RunStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    CANCELLED = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"

    @classmethod
    def parse(cls, value: str) -> Optional["RunStatus"]:
        """Known status for value, or None if the service sent something new."""
        try:
            return cls(value)
        except ValueError:
            return None


TERMINAL_STATUSES = frozenset({
    RunStatus.COMPLETED,
    RunStatus.FAILED,
    RunStatus.CANCELLED,
    RunStatus.EXPIRED,
})

KNOWN_TRANSITIONS = {
    RunStatus.QUEUED: frozenset({RunStatus.IN_PROGRESS}),
    RunStatus.IN_PROGRESS: frozenset({
        RunStatus.REQUIRES_ACTION,
        RunStatus.CANCELLING,
        RunStatus.COMPLETED,
        RunStatus.FAILED,
        RunStatus.EXPIRED,
    }),
    RunStatus.REQUIRES_ACTION: frozenset({RunStatus.IN_PROGRESS, RunStatus.CANCELLING}),
    RunStatus.CANCELLING: frozenset({RunStatus.CANCELLED}),
}

# Timestamp that records reaching each terminal status
TERMINAL_TIMESTAMPS = {
    RunStatus.CANCELLED: "cancelled_at",
    RunStatus.FAILED: "failed_at",
    RunStatus.COMPLETED: "completed_at",
}


def is_known_transition(previous: str, current: str) -> bool:
    """True if previous -> current is on the documented graph (or unchanged)."""
    if previous == current:
        return True
    before, after = RunStatus.parse(previous), RunStatus.parse(current)
    if before is None or after is None:
        return False
    return after in KNOWN_TRANSITIONS.get(before, frozenset())


class RunErrorCode(str, Enum):
    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


class RunError(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    code: str = Field(..., description="server_error or rate_limit_exceeded")
    message: str = ""

    @property
    def known_code(self) -> Optional[RunErrorCode]:
        try:
            return RunErrorCode(self.code)
        except ValueError:
            return None


class FunctionCall(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    arguments: str = "{}"


class ToolCall(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str = "function"
    function: Optional[FunctionCall] = None


class SubmitToolOutputsAction(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    tool_calls: List[ToolCall] = Field(default_factory=list)


class RequiredAction(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "submit_tool_outputs"
    submit_tool_outputs: Optional[SubmitToolOutputsAction] = None

    @property
    def tool_calls(self) -> List[ToolCall]:
        return list(self.submit_tool_outputs.tool_calls) if self.submit_tool_outputs else []


class ToolOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tool_call_id: str
    output: str

    @field_validator('tool_call_id')
    @classmethod
    def validate_tool_call_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("tool_call_id must be a non-empty string")
        return v


# Lifecycle variants: one per status, carrying only what that status implies

@dataclass(frozen=True)
class Queued:
    status = RunStatus.QUEUED


@dataclass(frozen=True)
class InProgress:
    started_at: Optional[int] = None
    status = RunStatus.IN_PROGRESS


@dataclass(frozen=True)
class RequiresAction:
    required_action: Optional[RequiredAction] = None
    status = RunStatus.REQUIRES_ACTION


@dataclass(frozen=True)
class Cancelling:
    status = RunStatus.CANCELLING


@dataclass(frozen=True)
class Cancelled:
    at: Optional[int] = None
    status = RunStatus.CANCELLED


@dataclass(frozen=True)
class Failed:
    at: Optional[int] = None
    error: Optional[RunError] = None
    status = RunStatus.FAILED


@dataclass(frozen=True)
class Completed:
    at: Optional[int] = None
    status = RunStatus.COMPLETED


@dataclass(frozen=True)
class Expired:
    at: Optional[int] = None
    status = RunStatus.EXPIRED


@dataclass(frozen=True)
class Unrecognized:
    """A status this client does not know; passed through verbatim."""
    raw_status: str


RunState = Union[Queued, InProgress, RequiresAction, Cancelling, Cancelled, Failed, Completed, Expired, Unrecognized]


class Run(RemoteObject):
    """
    Read-only projection of a run, as observed on one call.

    Frozen: lifecycle fields belong to the service.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    thread_id: Optional[str] = None
    assistant_id: Optional[str] = None
    status: str
    required_action: Optional[RequiredAction] = None
    last_error: Optional[RunError] = None
    started_at: Optional[int] = None
    expires_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: List[ToolObject] = Field(default_factory=list)
    file_ids: List[str] = Field(default_factory=list)
    metadata: Optional[Metadata] = None

    @model_validator(mode="before")
    @classmethod
    def enforce_status_coupling(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        raw_status = data.get("status", "")
        status = RunStatus.parse(raw_status)
        data = dict(data)

        # Applies to unrecognized statuses too: only a failed run carries an error
        if status != RunStatus.FAILED and data.get("last_error") is not None:
            logger.warning(
                f"Dropping last_error on run in status {raw_status}",
                run_id=data.get("id"),
                status=raw_status
            )
            data["last_error"] = None

        if status is None:
            return data

        for terminal, field_name in TERMINAL_TIMESTAMPS.items():
            if terminal != status and data.get(field_name) is not None:
                logger.warning(
                    f"Dropping {field_name} on run in status {status.value}",
                    run_id=data.get("id"),
                    status=status.value
                )
                data[field_name] = None

        return data

    @property
    def known_status(self) -> Optional[RunStatus]:
        return RunStatus.parse(self.status)

    @property
    def is_terminal(self) -> bool:
        return self.known_status in TERMINAL_STATUSES

    @property
    def requires_action(self) -> bool:
        return self.known_status == RunStatus.REQUIRES_ACTION

    @property
    def state(self) -> RunState:
        status = self.known_status
        if status == RunStatus.QUEUED:
            return Queued()
        if status == RunStatus.IN_PROGRESS:
            return InProgress(started_at=self.started_at)
        if status == RunStatus.REQUIRES_ACTION:
            return RequiresAction(required_action=self.required_action)
        if status == RunStatus.CANCELLING:
            return Cancelling()
        if status == RunStatus.CANCELLED:
            return Cancelled(at=self.cancelled_at)
        if status == RunStatus.FAILED:
            return Failed(at=self.failed_at, error=self.last_error)
        if status == RunStatus.COMPLETED:
            return Completed(at=self.completed_at)
        if status == RunStatus.EXPIRED:
            return Expired(at=self.expires_at)
        return Unrecognized(raw_status=self.status)


class RunParams(RequestParams):
    """Body for creating a run on an existing thread."""
    assistant_id: str
    model: Optional[str] = None
    instructions: Optional[str] = None
    additional_instructions: Optional[str] = None
    tools: Optional[List[ToolObject]] = None
    metadata: Optional[Metadata] = None

    @field_validator('assistant_id')
    @classmethod
    def validate_assistant_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("assistant_id must be a non-empty string")
        return v


class ThreadAndRunParams(RequestParams):
    """Body for creating a thread and a run on it in one call."""
    assistant_id: str
    thread: Optional[ThreadParams] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: Optional[List[ToolObject]] = None
    metadata: Optional[Metadata] = None

    @field_validator('assistant_id')
    @classmethod
    def validate_assistant_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("assistant_id must be a non-empty string")
        return v

    def to_body(self) -> Dict[str, Any]:
        body = self.model_dump(exclude_none=True, exclude={"thread"})
        if self.thread is not None:
            body["thread"] = self.thread.to_body()
        return body
