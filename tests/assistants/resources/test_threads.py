"""Tests for thread and message facades."""

import pytest

from assistants.http import NotFoundError, RequestValidationError
from assistants.models import DeletionStatus, MessageContent, Thread
from tests.assistants.fakes import error_response, make_response, page_payload, sent_json, sent_request


def message_payload(message_id="msg_1", text="hello"):
    return {
        "id": message_id,
        "object": "thread.message",
        "thread_id": "thread_abc",
        "role": "user",
        "content": [{"type": "text", "text": {"value": text, "annotations": []}}],
    }


class TestThreadValidation:
    """Invalid input is rejected before any network call."""

    def test_empty_messages_rejected(self, client, session):
        with pytest.raises(RequestValidationError, match="messages must be a non-empty array"):
            client.threads.create(messages=[])
        session.request.assert_not_called()

    def test_empty_content_rejected(self, client, session):
        with pytest.raises(RequestValidationError, match="valid role and non-empty content"):
            client.threads.create(messages=[{"role": "user", "content": ""}])
        session.request.assert_not_called()

    def test_empty_text_block_rejected(self, client, session):
        with pytest.raises(RequestValidationError, match="non-empty value if type is text"):
            client.threads.create(messages=[{"role": "user", "content": [MessageContent.of_text("")]}])
        session.request.assert_not_called()

    def test_unknown_message_field_rejected(self, client, session):
        with pytest.raises(RequestValidationError, match="Invalid MessageParams"):
            client.threads.create(messages=[{"role": "user", "content": "hi", "colour": "red"}])
        session.request.assert_not_called()

    def test_empty_thread_id_rejected(self, client, session):
        with pytest.raises(RequestValidationError, match="thread_id"):
            client.threads.retrieve("")
        session.request.assert_not_called()


class TestThreads:

    def test_create(self, client, session):
        session.request.return_value = make_response(200, {"id": "thread_abc", "object": "thread", "metadata": {}})

        thread = client.threads.create(
            messages=[{"role": "user", "content": "hello"}],
            metadata={"user": "42"},
        )

        assert isinstance(thread, Thread)
        assert thread.id == "thread_abc"
        method, url, kwargs = sent_request(session)
        assert (method, url) == ("POST", "https://api.example.com/v1/threads")
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert sent_json(session) == {
            "messages": [{"role": "user", "content": "hello"}],
            "metadata": {"user": "42"},
        }

    def test_retrieve_uses_read_headers(self, client, session):
        session.request.return_value = make_response(200, {"id": "thread_abc", "object": "thread"})

        client.threads.retrieve("thread_abc")

        method, url, kwargs = sent_request(session)
        assert (method, url) == ("GET", "https://api.example.com/v1/threads/thread_abc")
        assert "Content-Type" not in kwargs["headers"]
        assert "data" not in kwargs

    def test_modify_sends_metadata(self, client, session):
        session.request.return_value = make_response(200, {"id": "thread_abc", "metadata": {"a": "b"}})

        thread = client.threads.modify("thread_abc", {"a": "b"})

        assert thread.metadata == {"a": "b"}
        assert sent_json(session) == {"metadata": {"a": "b"}}

    def test_delete(self, client, session):
        session.request.return_value = make_response(200, {"id": "thread_abc", "object": "thread.deleted", "deleted": True})

        status = client.threads.delete("thread_abc")

        assert status == DeletionStatus(id="thread_abc", object="thread.deleted", deleted=True)
        assert sent_request(session)[0] == "DELETE"

    def test_delete_no_content(self, client, session):
        session.request.return_value = make_response(204)
        status = client.threads.delete("thread_abc")
        assert status.id == "thread_abc"
        assert status.deleted

    def test_not_found_raises(self, client, session):
        session.request.return_value = error_response(404, "No thread found with id 'thread_x'.")

        with pytest.raises(NotFoundError) as exc_info:
            client.threads.retrieve("thread_x")

        assert exc_info.value.status_code == 404
        assert "No thread found with id 'thread_x'." in str(exc_info.value)


class TestMessages:

    def test_create_sends_string_content(self, client, session):
        session.request.return_value = make_response(200, message_payload())

        message = client.messages.create("thread_abc", "hello", file_ids=["file_1"])

        assert message.text == "hello"
        assert sent_request(session)[1] == "https://api.example.com/v1/threads/thread_abc/messages"
        assert sent_json(session) == {"role": "user", "content": "hello", "file_ids": ["file_1"]}

    def test_only_user_role(self, client, session):
        with pytest.raises(RequestValidationError, match="only 'user' role"):
            client.messages.create("thread_abc", "hi", role="assistant")
        session.request.assert_not_called()

    def test_image_block_rejected(self, client, session):
        """Non-text content is refused instead of being dropped from the body."""
        with pytest.raises(RequestValidationError, match="'image_file' cannot be sent"):
            client.messages.create("thread_abc", [{"type": "image_file", "image_file": {"file_id": "file_1"}}])
        session.request.assert_not_called()

    def test_mixed_blocks_rejected_in_thread(self, client, session):
        with pytest.raises(RequestValidationError, match="only text content"):
            client.threads.create(messages=[{"role": "user", "content": [
                {"type": "text", "text": {"value": "look at this"}},
                {"type": "image_file", "image_file": {"file_id": "file_1"}},
            ]}])
        session.request.assert_not_called()

    def test_text_blocks_sent_as_string(self, client, session):
        session.request.return_value = make_response(200, message_payload())

        client.messages.create("thread_abc", [MessageContent.of_text("first"), MessageContent.of_text("second")])

        assert sent_json(session) == {"role": "user", "content": "first\nsecond"}

    def test_list_with_cursor(self, client, session):
        session.request.return_value = make_response(200, page_payload([message_payload("msg_1"), message_payload("msg_2")], has_more=True))

        page = client.messages.list("thread_abc", limit=2, order="asc")

        assert [m.id for m in page.data] == ["msg_1", "msg_2"]
        assert page.has_more
        assert sent_request(session)[1] == "https://api.example.com/v1/threads/thread_abc/messages?limit=2&order=asc"

    def test_invalid_cursor_rejected(self, client, session):
        with pytest.raises(RequestValidationError):
            client.messages.list("thread_abc", limit=500)
        session.request.assert_not_called()

    def test_iterate_follows_pages(self, client, session):
        session.request.side_effect = [
            make_response(200, page_payload([message_payload("msg_1")], has_more=True)),
            make_response(200, page_payload([message_payload("msg_2")], has_more=False)),
        ]

        ids = [m.id for m in client.messages.iterate("thread_abc")]

        assert ids == ["msg_1", "msg_2"]
        assert sent_request(session, 1)[1].endswith("/messages?after=msg_1")

    def test_message_files_list(self, client, session):
        session.request.return_value = make_response(200, page_payload([
            {"id": "file_1", "object": "thread.message.file", "message_id": "msg_1"},
        ]))

        page = client.message_files.list("thread_abc", "msg_1")

        assert page.data[0].message_id == "msg_1"
        assert sent_request(session)[1] == "https://api.example.com/v1/threads/thread_abc/messages/msg_1/files"
