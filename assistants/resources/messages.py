import threading
from typing import List, Optional, Union

from assistants.http import urls
from assistants.http.errors import RequestValidationError
from assistants.models import Message, MessageContent, MessageFile, MessageParams
from assistants.models.common import Metadata
from assistants.pagination import Page, PaginationCursor
from .base import CRUDResource, build_params, make_cursor, metadata_body, require
from .threads import validate_messages


class Messages(CRUDResource[Message]):
    collection_path = urls.MESSAGES
    item_path = urls.MESSAGE
    model = Message

    def create(
        self,
        thread_id: str,
        content: Union[str, List[MessageContent]],
        role: str = "user",
        file_ids: Optional[List[str]] = None,
        metadata: Optional[Metadata] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Message:
        require(thread_id=thread_id)
        if role != "user":
            raise RequestValidationError("currently, only 'user' role is supported")

        params = build_params(MessageParams, role=role, content=content, file_ids=file_ids, metadata=metadata)
        validate_messages([params])
        return self._create(params.to_body(), cancel_event=cancel_event, thread_id=thread_id)

    def retrieve(self, thread_id: str, message_id: str, cancel_event: Optional[threading.Event] = None) -> Message:
        return self._retrieve(cancel_event=cancel_event, thread_id=thread_id, message_id=message_id)

    def modify(
        self,
        thread_id: str,
        message_id: str,
        metadata: Metadata,
        cancel_event: Optional[threading.Event] = None
    ) -> Message:
        return self._modify(
            metadata_body(metadata),
            cancel_event=cancel_event,
            thread_id=thread_id,
            message_id=message_id
        )

    def list(
        self,
        thread_id: str,
        limit: int = 0,
        order: str = "",
        after: str = "",
        before: str = "",
        cursor: Optional[PaginationCursor] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Page[Message]:
        cursor = make_cursor(cursor, limit, order, after, before)
        return self._list(cursor, cancel_event=cancel_event, thread_id=thread_id)

    def iterate(self, thread_id: str, cursor: Optional[PaginationCursor] = None):
        require(thread_id=thread_id)
        return self._iterate(make_cursor(cursor), thread_id=thread_id)


class MessageFiles(CRUDResource[MessageFile]):
    """Files attached to a message. Read-only."""
    collection_path = urls.MESSAGE_FILES
    item_path = urls.MESSAGE_FILE
    model = MessageFile

    def retrieve(
        self,
        thread_id: str,
        message_id: str,
        file_id: str,
        cancel_event: Optional[threading.Event] = None
    ) -> MessageFile:
        return self._retrieve(
            cancel_event=cancel_event,
            thread_id=thread_id,
            message_id=message_id,
            file_id=file_id
        )

    def list(
        self,
        thread_id: str,
        message_id: str,
        limit: int = 0,
        order: str = "",
        after: str = "",
        before: str = "",
        cursor: Optional[PaginationCursor] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Page[MessageFile]:
        cursor = make_cursor(cursor, limit, order, after, before)
        return self._list(cursor, cancel_event=cancel_event, thread_id=thread_id, message_id=message_id)
