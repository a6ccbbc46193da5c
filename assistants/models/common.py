from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


Metadata = Dict[str, Any]


class RemoteObject(BaseModel):
    """
    Base for every service-owned resource projection.

    Unknown fields are kept so newer service payloads round-trip intact.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Service-assigned identifier")
    object: Optional[str] = Field(None, description="Object type tag, e.g. 'thread.run'")
    created_at: Optional[int] = Field(None, description="Unix timestamp (seconds)")


class FunctionDefinition(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    description: Optional[str] = None
    parameters: Dict[str, Any] = Field(
        default_factory=dict,
        description="JSON Schema of the function arguments"
    )


class ToolObject(BaseModel):
    """A tool enabled on an assistant or run: code_interpreter, retrieval or function."""
    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Tool type")
    function: Optional[FunctionDefinition] = None


class DeletionStatus(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    object: Optional[str] = None
    deleted: bool = False


class RequestParams(BaseModel):
    """Base for request bodies: dumped without unset/None fields."""
    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
