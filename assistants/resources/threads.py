import threading
from typing import List, Optional, Union

from assistants.http import urls
from assistants.http.errors import RequestValidationError
from assistants.models import DeletionStatus, MessageParams, Thread, ThreadParams
from assistants.models.common import Metadata
from .base import CRUDResource, build_params, metadata_body


def validate_messages(messages: List[Union[MessageParams, dict]]) -> List[MessageParams]:
    """
    Structural checks only: at least one message, each with a role and
    non-empty content, and text-only content with no empty blocks.
    """
    if not messages:
        raise RequestValidationError("messages must be a non-empty array")

    validated = []
    for message in messages:
        if isinstance(message, dict):
            message = build_params(MessageParams, **message)

        if not message.role or not message.content:
            raise RequestValidationError("each message must have a valid role and non-empty content")

        for block in message.blocks():
            if not block.type or (block.type == "text" and (block.text is None or block.text.value == "")):
                raise RequestValidationError(
                    "each content within a message must have a type and non-empty value if type is text"
                )
            if block.type != "text":
                # Message create takes text only; images are attached through file_ids
                raise RequestValidationError(
                    f"content of type {block.type!r} cannot be sent when creating a message; "
                    "only text content is supported"
                )

        if not message.text_content():
            raise RequestValidationError("each message must have a valid role and non-empty content")

        validated.append(message)

    return validated


class Threads(CRUDResource[Thread]):
    collection_path = urls.THREADS
    item_path = urls.THREAD
    model = Thread

    def create(
        self,
        messages: List[Union[MessageParams, dict]],
        metadata: Optional[Metadata] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Thread:
        params = ThreadParams(messages=validate_messages(messages), metadata=metadata)
        return self._create(params.to_body(), cancel_event=cancel_event)

    def retrieve(self, thread_id: str, cancel_event: Optional[threading.Event] = None) -> Thread:
        return self._retrieve(cancel_event=cancel_event, thread_id=thread_id)

    def modify(self, thread_id: str, metadata: Metadata, cancel_event: Optional[threading.Event] = None) -> Thread:
        return self._modify(metadata_body(metadata), cancel_event=cancel_event, thread_id=thread_id)

    def delete(self, thread_id: str, cancel_event: Optional[threading.Event] = None) -> DeletionStatus:
        return self._delete(cancel_event=cancel_event, thread_id=thread_id)
