from typing import List, Optional
from pydantic import Field, field_validator

from .common import Metadata, RemoteObject, RequestParams, ToolObject


class Assistant(RemoteObject):
    name: Optional[str] = None
    description: Optional[str] = None
    model: Optional[str] = None
    instructions: Optional[str] = None
    tools: List[ToolObject] = Field(default_factory=list)
    file_ids: List[str] = Field(default_factory=list)
    metadata: Optional[Metadata] = None


class AssistantParams(RequestParams):
    """Body for create/modify. `model` is required on create only."""
    model: Optional[str] = None
    name: Optional[str] = Field(None, max_length=256)
    description: Optional[str] = Field(None, max_length=512)
    instructions: Optional[str] = None
    tools: Optional[List[ToolObject]] = None
    file_ids: Optional[List[str]] = None
    metadata: Optional[Metadata] = None

    @field_validator('model')
    @classmethod
    def validate_model(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v.strip() == "":
            raise ValueError("model must be a non-empty string when given")
        return v


class AssistantFile(RemoteObject):
    assistant_id: Optional[str] = None
