import threading
from typing import List, Optional

from assistants.http import urls
from assistants.models import Assistant, AssistantFile, AssistantParams, DeletionStatus, ToolObject
from assistants.models.common import Metadata
from assistants.pagination import Page, PaginationCursor
from .base import CRUDResource, build_params, make_cursor, require


class Assistants(CRUDResource[Assistant]):
    collection_path = urls.ASSISTANTS
    item_path = urls.ASSISTANT
    model = Assistant

    def create(
        self,
        model: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        instructions: Optional[str] = None,
        tools: Optional[List[ToolObject]] = None,
        file_ids: Optional[List[str]] = None,
        metadata: Optional[Metadata] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Assistant:
        require(model=model)
        params = build_params(
            AssistantParams,
            model=model,
            name=name,
            description=description,
            instructions=instructions,
            tools=tools,
            file_ids=file_ids,
            metadata=metadata,
        )
        return self._create(params.to_body(), cancel_event=cancel_event)

    def retrieve(self, assistant_id: str, cancel_event: Optional[threading.Event] = None) -> Assistant:
        return self._retrieve(cancel_event=cancel_event, assistant_id=assistant_id)

    def modify(
        self,
        assistant_id: str,
        cancel_event: Optional[threading.Event] = None,
        **changes
    ) -> Assistant:
        """Update any AssistantParams field; omitted fields are left unchanged."""
        require(assistant_id=assistant_id)
        params = build_params(AssistantParams, **changes)
        return self._modify(params.to_body(), cancel_event=cancel_event, assistant_id=assistant_id)

    def delete(self, assistant_id: str, cancel_event: Optional[threading.Event] = None) -> DeletionStatus:
        return self._delete(cancel_event=cancel_event, assistant_id=assistant_id)

    def list(
        self,
        limit: int = 0,
        order: str = "",
        after: str = "",
        before: str = "",
        cursor: Optional[PaginationCursor] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Page[Assistant]:
        return self._list(make_cursor(cursor, limit, order, after, before), cancel_event=cancel_event)

    def iterate(self, cursor: Optional[PaginationCursor] = None):
        return self._iterate(make_cursor(cursor))


class AssistantFiles(CRUDResource[AssistantFile]):
    """Files attached to an assistant (for retrieval / code interpreter)."""
    collection_path = urls.ASSISTANT_FILES
    item_path = urls.ASSISTANT_FILE
    model = AssistantFile

    def create(self, assistant_id: str, file_id: str, cancel_event: Optional[threading.Event] = None) -> AssistantFile:
        require(assistant_id=assistant_id, file_id=file_id)
        return self._create({"file_id": file_id}, cancel_event=cancel_event, assistant_id=assistant_id)

    def retrieve(self, assistant_id: str, file_id: str, cancel_event: Optional[threading.Event] = None) -> AssistantFile:
        return self._retrieve(cancel_event=cancel_event, assistant_id=assistant_id, file_id=file_id)

    def delete(self, assistant_id: str, file_id: str, cancel_event: Optional[threading.Event] = None) -> DeletionStatus:
        return self._delete(cancel_event=cancel_event, assistant_id=assistant_id, file_id=file_id)

    def list(
        self,
        assistant_id: str,
        limit: int = 0,
        order: str = "",
        after: str = "",
        before: str = "",
        cursor: Optional[PaginationCursor] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Page[AssistantFile]:
        cursor = make_cursor(cursor, limit, order, after, before)
        return self._list(cursor, cancel_event=cancel_event, assistant_id=assistant_id)
