"""Tests for files and assistant facades."""

import pytest
import requests

from assistants.http import APIConnectionError, RequestValidationError
from assistants.models import FileList, FileObject
from tests.assistants.fakes import make_response, page_payload, sent_json, sent_request


FILE_PAYLOAD = {
    "id": "file_abc",
    "object": "file",
    "bytes": 11,
    "created_at": 1700000000,
    "filename": "notes.txt",
    "purpose": "assistants",
}

class TestFiles:

    def test_upload_is_multipart(self, client, session, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"hello world")
        session.request.return_value = make_response(200, FILE_PAYLOAD)

        result = client.files.upload(path)

        assert isinstance(result, FileObject)
        assert result.bytes == 11
        method, url, kwargs = sent_request(session)
        assert (method, url) == ("POST", "https://api.example.com/v1/files")
        assert kwargs["files"] == {"file": ("notes.txt", b"hello world")}
        assert kwargs["data"] == {"purpose": "assistants"}
        assert "Content-Type" not in kwargs["headers"]
        assert kwargs["headers"]["Authorization"] == "Bearer sk-test-key"

    def test_upload_missing_file(self, client, session, tmp_path):
        with pytest.raises(RequestValidationError, match="failed to open file"):
            client.files.upload(tmp_path / "nope.txt")
        session.request.assert_not_called()

    def test_upload_retries_send_same_bytes(self, client, session, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_bytes(b"v1")
        session.request.side_effect = [
            requests.exceptions.ConnectionError("reset"),
            make_response(200, FILE_PAYLOAD),
        ]

        client.files.upload(path)

        first, second = session.request.call_args_list
        assert first.kwargs["files"] == second.kwargs["files"]

    def test_list_with_purpose(self, client, session):
        session.request.return_value = make_response(200, {"object": "list", "data": [FILE_PAYLOAD]})

        files = client.files.list(purpose="assistants")

        assert isinstance(files, FileList)
        assert files.data[0].filename == "notes.txt"
        assert sent_request(session)[1] == "https://api.example.com/v1/files?purpose=assistants"

    def test_content_returns_raw_bytes(self, client, session):
        session.request.return_value = make_response(200, content=b"\x00\x01raw")

        assert client.files.content("file_abc") == b"\x00\x01raw"
        assert sent_request(session)[1].endswith("/files/file_abc/content")

    def test_unreachable_raises_connection_error(self, client, session):
        session.request.side_effect = requests.exceptions.ConnectionError("no route")

        with pytest.raises(APIConnectionError) as exc_info:
            client.files.retrieve("file_abc")

        assert session.request.call_count == 3
        assert len(exc_info.value.attempt_errors) == 3

class TestAssistants:

    def test_create(self, client, session):
        session.request.return_value = make_response(200, {"id": "asst_abc", "object": "assistant", "model": "gpt-4"})

        assistant = client.assistants.create(
            "gpt-4",
            name="Helper",
            tools=[{"type": "code_interpreter"}],
        )

        assert assistant.model == "gpt-4"
        assert sent_json(session) == {"model": "gpt-4", "name": "Helper", "tools": [{"type": "code_interpreter"}]}

    def test_name_too_long_rejected(self, client, session):
        with pytest.raises(RequestValidationError, match="name"):
            client.assistants.create("gpt-4", name="x" * 257)
        session.request.assert_not_called()

    def test_modify_partial(self, client, session):
        session.request.return_value = make_response(200, {"id": "asst_abc", "name": "Renamed"})

        client.assistants.modify("asst_abc", name="Renamed")

        assert sent_request(session)[1].endswith("/assistants/asst_abc")
        assert sent_json(session) == {"name": "Renamed"}

    def test_list(self, client, session):
        session.request.return_value = make_response(200, page_payload([{"id": "asst_1"}, {"id": "asst_2"}], has_more=True))

        page = client.assistants.list(limit=2, after="asst_0")

        assert page.next_cursor().after == "asst_2"
        assert sent_request(session)[1].endswith("/assistants?limit=2&after=asst_0")

    def test_attach_file(self, client, session):
        session.request.return_value = make_response(200, {"id": "file_abc", "object": "assistant.file", "assistant_id": "asst_abc"})

        attached = client.assistant_files.create("asst_abc", "file_abc")

        assert attached.assistant_id == "asst_abc"
        assert sent_json(session) == {"file_id": "file_abc"}
