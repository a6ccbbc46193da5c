"""
URL construction for resource paths.

Templates are relative to the client's base URL. Identifiers are
validated non-empty and percent-encoded before substitution; query
parameters are encoded only when present.
"""

import string
from typing import Dict, Mapping, Optional
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .errors import RequestValidationError


ASSISTANTS = "assistants"
ASSISTANT = "assistants/{assistant_id}"
ASSISTANT_FILES = "assistants/{assistant_id}/files"
ASSISTANT_FILE = "assistants/{assistant_id}/files/{file_id}"

THREADS = "threads"
THREAD = "threads/{thread_id}"

MESSAGES = "threads/{thread_id}/messages"
MESSAGE = "threads/{thread_id}/messages/{message_id}"
MESSAGE_FILES = "threads/{thread_id}/messages/{message_id}/files"
MESSAGE_FILE = "threads/{thread_id}/messages/{message_id}/files/{file_id}"

RUNS = "threads/{thread_id}/runs"
RUN = "threads/{thread_id}/runs/{run_id}"
RUN_CANCEL = "threads/{thread_id}/runs/{run_id}/cancel"
RUN_SUBMIT_TOOL_OUTPUTS = "threads/{thread_id}/runs/{run_id}/submit_tool_outputs"
RUN_STEPS = "threads/{thread_id}/runs/{run_id}/steps"
RUN_STEP = "threads/{thread_id}/runs/{run_id}/steps/{step_id}"
THREAD_AND_RUN = "threads/runs"

FILES = "files"
FILE = "files/{file_id}"
FILE_CONTENT = "files/{file_id}/content"


def template_fields(template: str):
    return [name for _, name, _, _ in string.Formatter().parse(template) if name]


class URLBuilder:
    def __init__(self, base_url: str):
        parts = urlsplit(base_url)
        if not parts.scheme or not parts.netloc:
            raise RequestValidationError(f"base URL must be absolute, got: {base_url!r}")
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"

    def build(self, template: str, query: Optional[Mapping[str, str]] = None, **ids: str) -> str:
        """
        Compose an absolute, encoded request target.

        Raises:
            RequestValidationError: If an identifier the template needs is empty
        """
        encoded: Dict[str, str] = {}
        for name in template_fields(template):
            value = ids.get(name)
            if value is None or str(value).strip() == "":
                raise RequestValidationError(f"{name} must be a non-empty string")
            encoded[name] = quote(str(value), safe="")

        url = self.base_url + template.format(**encoded)
        return self.with_query(url, query) if query else url

    @staticmethod
    def with_query(url: str, params: Optional[Mapping[str, str]]) -> str:
        """Replace the query string with the given params, omitting empty values."""
        filtered = {k: v for k, v in (params or {}).items() if v not in (None, "")}
        parts = urlsplit(url)
        return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(filtered), parts.fragment))
