from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .common import RemoteObject


class FileObject(RemoteObject):
    """A document uploaded to the service."""
    bytes: Optional[int] = Field(None, description="Size in bytes")
    filename: Optional[str] = None
    purpose: Optional[str] = None
    status: Optional[str] = None


class FileList(BaseModel):
    """Response of `GET files`: no cursor fields, just data."""
    model_config = ConfigDict(extra="allow")

    object: str = "list"
    data: List[FileObject] = Field(default_factory=list)
