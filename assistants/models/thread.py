from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict

from .common import Metadata, RemoteObject
from .message import MessageParams


class Thread(RemoteObject):
    metadata: Optional[Metadata] = None


class ThreadParams(BaseModel):
    """Thread to create, either on its own or inline with a run."""
    model_config = ConfigDict(extra="forbid")

    messages: List[MessageParams]
    metadata: Optional[Metadata] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"messages": [m.to_body() for m in self.messages]}
        if self.metadata:
            body["metadata"] = self.metadata
        return body
