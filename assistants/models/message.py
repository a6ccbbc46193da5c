from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from .common import Metadata, RemoteObject


class TextContent(BaseModel):
    model_config = ConfigDict(extra="allow")

    value: str = ""
    annotations: List[Dict[str, Any]] = Field(default_factory=list)


class ImageFileContent(BaseModel):
    model_config = ConfigDict(extra="allow")

    file_id: str


class MessageContent(BaseModel):
    """One content block of a message: type 'text' or 'image_file'."""
    model_config = ConfigDict(extra="allow")

    type: str
    text: Optional[TextContent] = None
    image_file: Optional[ImageFileContent] = None

    @classmethod
    def of_text(cls, value: str) -> "MessageContent":
        return cls(type="text", text=TextContent(value=value))


class Message(RemoteObject):
    thread_id: Optional[str] = None
    role: Optional[str] = None
    content: List[MessageContent] = Field(default_factory=list)
    file_ids: List[str] = Field(default_factory=list)
    assistant_id: Optional[str] = None
    run_id: Optional[str] = None
    metadata: Optional[Metadata] = None

    @property
    def text(self) -> str:
        """Concatenated text of all text blocks."""
        return "\n".join(c.text.value for c in self.content if c.type == "text" and c.text)


class MessageParams(BaseModel):
    """
    A message to send. Content may be a plain string or content blocks;
    the wire format is always the string form the service accepts on create.
    """
    model_config = ConfigDict(extra="forbid")

    role: str = "user"
    content: Union[str, List[MessageContent]]
    file_ids: Optional[List[str]] = None
    metadata: Optional[Metadata] = None

    def blocks(self) -> List[MessageContent]:
        if isinstance(self.content, str):
            return [MessageContent.of_text(self.content)]
        return list(self.content)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"role": self.role, "content": self.text_content()}
        if self.file_ids:
            body["file_ids"] = self.file_ids
        if self.metadata:
            body["metadata"] = self.metadata
        return body

    def text_content(self) -> str:
        if isinstance(self.content, str):
            return self.content
        return "\n".join(c.text.value for c in self.content if c.type == "text" and c.text)


class MessageFile(RemoteObject):
    message_id: Optional[str] = None
    file_id: Optional[str] = None
