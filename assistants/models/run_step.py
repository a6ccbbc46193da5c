from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import Metadata, RemoteObject
from .run import RunError


class MessageCreationDetails(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    message_id: str


class CodeInterpreterOutput(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = Field(..., description="'logs' or 'image'")
    logs: Optional[str] = None
    image: Optional[Dict[str, Any]] = None


class CodeInterpreterDetails(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    input: str = ""
    outputs: List[CodeInterpreterOutput] = Field(default_factory=list)


class FunctionDetails(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    arguments: str = ""
    output: Optional[str] = None


class ToolCallDetails(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str
    code_interpreter: Optional[CodeInterpreterDetails] = None
    retrieval: Optional[Dict[str, Any]] = None
    function: Optional[FunctionDetails] = None


class StepDetails(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = Field(..., description="'message_creation' or 'tool_calls'")
    message_creation: Optional[MessageCreationDetails] = None
    tool_calls: List[ToolCallDetails] = Field(default_factory=list)


class RunStep(RemoteObject):
    """One unit of work inside a run. Append-only on the service, never mutated here."""
    model_config = ConfigDict(extra="allow", frozen=True)

    assistant_id: Optional[str] = None
    thread_id: Optional[str] = None
    run_id: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    step_details: Optional[StepDetails] = None
    last_error: Optional[RunError] = None
    expired_at: Optional[int] = None
    cancelled_at: Optional[int] = None
    failed_at: Optional[int] = None
    completed_at: Optional[int] = None
    metadata: Optional[Metadata] = None
