"""
Pagination for list operations.

A PaginationCursor is validated when constructed, so an out-of-range
limit or unknown order never reaches the wire. Only non-default fields
are serialized: omission, not an empty value, means "no filter".

List calls are not streaming. Each returns one Page; continue with
page.next_cursor(), or walk everything with iterate().
"""

from dataclasses import dataclass, replace
from typing import Callable, Dict, Generic, Iterator, List, Optional, TypeVar
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, Field

from assistants.http.errors import RequestValidationError


MIN_LIMIT = 0
MAX_LIMIT = 100
ORDERS = ("asc", "desc")

T = TypeVar('T')


@dataclass(frozen=True)
class PaginationCursor:
    limit: int = 0
    order: str = ""
    after: str = ""
    before: str = ""

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise RequestValidationError(f"limit must be an integer, got {self.limit!r}")
        if self.limit < MIN_LIMIT or self.limit > MAX_LIMIT:
            raise RequestValidationError(f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}, got {self.limit}")
        if self.order and self.order not in ORDERS:
            raise RequestValidationError(f"order must be either 'asc' or 'desc', got {self.order!r}")
        for name in ("after", "before"):
            value = getattr(self, name)
            if value is None or not isinstance(value, str):
                raise RequestValidationError(f"{name} must be a string, got {value!r}")

    def to_query(self) -> Dict[str, str]:
        params = {}
        if self.limit > 0:
            params["limit"] = str(self.limit)
        if self.order:
            params["order"] = self.order
        if self.after:
            params["after"] = self.after
        if self.before:
            params["before"] = self.before
        return params

    def encode(self) -> str:
        return urlencode(self.to_query())

    @classmethod
    def from_query(cls, query: str) -> "PaginationCursor":
        """Parse a query string produced by encode()."""
        parsed = parse_qs(query.lstrip("?"), keep_blank_values=False)

        def first(name: str) -> str:
            values = parsed.get(name)
            return values[0] if values else ""

        raw_limit = first("limit")
        try:
            limit = int(raw_limit) if raw_limit else 0
        except ValueError:
            raise RequestValidationError(f"limit must be an integer, got {raw_limit!r}")

        return cls(limit=limit, order=first("order"), after=first("after"), before=first("before"))

    def advance(self, after: str) -> "PaginationCursor":
        """Same cursor, continuing after the given id."""
        return replace(self, after=after, before="")


class Page(BaseModel, Generic[T]):
    """One page of a list operation."""
    object: str = "list"
    data: List[T] = Field(default_factory=list)
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False

    model_config = {"extra": "allow"}

    def next_cursor(self, cursor: Optional[PaginationCursor] = None) -> Optional[PaginationCursor]:
        if not self.has_more or not self.last_id:
            return None
        return (cursor or PaginationCursor()).advance(self.last_id)


def iterate(
    fetch: Callable[[PaginationCursor], Page],
    cursor: Optional[PaginationCursor] = None
) -> Iterator:
    """Yield every item across pages, issuing one fetch per page."""
    cursor = cursor or PaginationCursor()
    while cursor is not None:
        page = fetch(cursor)
        yield from page.data
        cursor = page.next_cursor(cursor)
