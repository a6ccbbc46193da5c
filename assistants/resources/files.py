import threading
from pathlib import Path
from typing import Optional, Union

from assistants.http import Request, urls
from assistants.http.errors import RequestValidationError
from assistants.models import DeletionStatus, FileList, FileObject
from .base import CRUDResource, require


class Files(CRUDResource[FileObject]):
    """
    Uploaded documents.

    Upload is the one multipart call; its body is read fully into memory so
    every retry attempt sends the same bytes.
    """
    collection_path = urls.FILES
    item_path = urls.FILE
    model = FileObject

    def upload(
        self,
        path: Union[str, Path],
        purpose: str = "assistants",
        cancel_event: Optional[threading.Event] = None
    ) -> FileObject:
        require(purpose=purpose)
        path = Path(path).expanduser()
        if not path.is_file():
            raise RequestValidationError(f"failed to open file: {path}")

        content = path.read_bytes()
        request = Request(
            method="POST",
            url=self.urls.build(urls.FILES),
            headers=self.headers.upload,
            files={"file": (path.name, content)},
            data={"purpose": purpose},
        )
        result = self._execute(request, FileObject, cancel_event)
        self.logger.info(f"Uploaded {path.name} as {result.id}", count=len(content))
        return result

    def list(self, purpose: str = "", cancel_event: Optional[threading.Event] = None) -> FileList:
        query = {"purpose": purpose} if purpose else None
        request = self._request("GET", urls.FILES, {}, query=query)
        return self._execute(request, FileList, cancel_event)

    def retrieve(self, file_id: str, cancel_event: Optional[threading.Event] = None) -> FileObject:
        return self._retrieve(cancel_event=cancel_event, file_id=file_id)

    def delete(self, file_id: str, cancel_event: Optional[threading.Event] = None) -> DeletionStatus:
        return self._delete(cancel_event=cancel_event, file_id=file_id)

    def content(self, file_id: str, cancel_event: Optional[threading.Event] = None) -> bytes:
        """Raw file bytes; not JSON-decoded."""
        request = self._request("GET", urls.FILE_CONTENT, {"file_id": file_id})
        outcome = self.pipeline.execute(request, cancel_event=cancel_event)
        return outcome.unwrap() or b""
