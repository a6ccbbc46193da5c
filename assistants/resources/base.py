"""
Generic CRUD facade over the request pipeline.

Each resource kind is a subclass naming its collection and item path
templates and its model; the create/retrieve/modify/delete/list plumbing
lives here once. Facades validate identifiers and parameters locally, so
invalid input never produces a network call, then unwrap the pipeline
Outcome into the decoded model or the matching exception.
"""

import threading
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from assistants.http import HeaderProfiles, Request, RequestPipeline, URLBuilder
from assistants.http.errors import RequestValidationError
from assistants.logger import ClientLogger
from assistants.models import DeletionStatus
from assistants.pagination import Page, PaginationCursor, iterate

T = TypeVar('T')
P = TypeVar('P', bound=BaseModel)


def build_params(params_cls: Type[P], **kwargs) -> P:
    """Construct a request body model, reporting bad input as RequestValidationError."""
    try:
        return params_cls(**kwargs)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or params_cls.__name__}: {err['msg']}"
            for err in e.errors()
        )
        raise RequestValidationError(f"Invalid {params_cls.__name__}: {problems}") from e


def require(**values: Any) -> None:
    """Raise RequestValidationError for the first empty value."""
    for name, value in values.items():
        if value is None or (isinstance(value, str) and value.strip() == ""):
            raise RequestValidationError(f"{name} must be a non-empty string")


def make_cursor(
    cursor: Optional[PaginationCursor] = None,
    limit: int = 0,
    order: str = "",
    after: str = "",
    before: str = ""
) -> PaginationCursor:
    return cursor if cursor is not None else PaginationCursor(limit=limit, order=order, after=after, before=before)


class ResourceFacade:
    """Shared access to the pipeline for every resource kind."""

    def __init__(
        self,
        pipeline: RequestPipeline,
        urls: URLBuilder,
        headers: HeaderProfiles,
        logger: Optional[ClientLogger] = None
    ):
        self.pipeline = pipeline
        self.urls = urls
        self.headers = headers
        self.logger = logger or ClientLogger(f"resources.{type(self).__name__.lower()}")

    def _request(
        self,
        method: str,
        template: str,
        ids: Mapping[str, str],
        body: Any = None,
        query: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None
    ) -> Request:
        if headers is None:
            headers = self.headers.read if method in ("GET", "DELETE") else self.headers.mutating
        return Request(
            method=method,
            url=self.urls.build(template, query=query, **ids),
            headers=headers,
            body=body,
        )

    def _execute(self, request: Request, model: Any, cancel_event: Optional[threading.Event] = None) -> Any:
        outcome = self.pipeline.execute_json(request, model, cancel_event=cancel_event)
        return outcome.unwrap()


class CRUDResource(ResourceFacade, Generic[T]):
    """
    CRUD + list keyed by path templates.

    Subclasses set:
        collection_path: template for create/list, e.g. "threads/{thread_id}/messages"
        item_path:       template for retrieve/modify/delete
        model:           pydantic model the service returns
    """
    collection_path: str = ""
    item_path: str = ""
    model: Type[T] = None

    def _create(self, body: Any, cancel_event: Optional[threading.Event] = None, **ids: str) -> T:
        request = self._request("POST", self.collection_path, ids, body=body)
        return self._execute(request, self.model, cancel_event)

    def _retrieve(self, cancel_event: Optional[threading.Event] = None, **ids: str) -> T:
        request = self._request("GET", self.item_path, ids)
        return self._execute(request, self.model, cancel_event)

    def _modify(self, body: Any, cancel_event: Optional[threading.Event] = None, **ids: str) -> T:
        request = self._request("POST", self.item_path, ids, body=body)
        return self._execute(request, self.model, cancel_event)

    def _delete(self, cancel_event: Optional[threading.Event] = None, **ids: str) -> DeletionStatus:
        request = self._request("DELETE", self.item_path, ids)
        result = self._execute(request, Optional[DeletionStatus], cancel_event)
        if result is None:
            # 204: nothing to decode, report the deletion of the requested id
            result = DeletionStatus(id=list(ids.values())[-1], deleted=True)
        return result

    def _list(self, cursor: PaginationCursor, cancel_event: Optional[threading.Event] = None, **ids: str) -> Page[T]:
        request = self._request("GET", self.collection_path, ids, query=cursor.to_query())
        page = self._execute(request, Page[self.model], cancel_event)
        self.logger.debug(
            f"Listed {len(page.data)} item(s) from {self.collection_path}",
            count=len(page.data)
        )
        return page

    def _iterate(self, cursor: PaginationCursor, **ids: str):
        fetch: Callable[[PaginationCursor], Page[T]] = lambda c: self._list(c, **ids)
        return iterate(fetch, cursor)


def metadata_body(metadata: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return {"metadata": metadata or {}}
