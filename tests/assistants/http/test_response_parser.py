"""Tests for assistants/http/response_parser.py"""

import json
import pytest
from typing import Optional

from assistants.http import (
    Failure,
    FailureKind,
    NotFoundError,
    RateLimitError,
    InternalServerError,
    MalformedResponseError,
    RawResponse,
    ResponseClassifier,
    Success,
)
from assistants.models import DeletionStatus, Thread


def raw(status, body=None, headers=None):
    content = json.dumps(body).encode() if isinstance(body, (dict, list)) else (body or b"")
    return RawResponse(status_code=status, body=content, headers=headers or {})


@pytest.fixture
def classifier():
    return ResponseClassifier()


class TestClassify:

    @pytest.mark.parametrize("status", [200, 201, 204])
    def test_success_statuses(self, classifier, status):
        outcome = classifier.classify(raw(status, {"id": "x"}))
        assert isinstance(outcome, Success)
        assert outcome.ok
        assert outcome.status == status

    def test_no_content_has_empty_payload(self, classifier):
        assert classifier.classify(raw(204, b"ignored")).payload == b""

    def test_error_envelope_message_kept_verbatim(self, classifier):
        outcome = classifier.classify(raw(404, {
            "error": {
                "message": "No thread found with id 'thread_x'.",
                "type": "invalid_request_error",
                "param": None,
                "code": None,
            }
        }))

        assert isinstance(outcome, Failure)
        assert outcome.kind == FailureKind.HTTP
        assert outcome.status == 404
        assert "404" in outcome.message
        assert "No thread found with id 'thread_x'." in outcome.message
        assert outcome.error_type == "invalid_request_error"

    @pytest.mark.parametrize("body", [
        b"<html>Bad Gateway</html>",
        b"",
        {"error": "just a string"},
        ["not", "an", "object"],
    ])
    def test_malformed_envelope_falls_back(self, classifier, body):
        outcome = classifier.classify(raw(502, body))
        assert outcome.message == "HTTP request failed with status code: 502."
        assert outcome.error_type is None

    def test_retry_after_exposed(self, classifier):
        outcome = classifier.classify(raw(429, {"error": {"message": "slow down"}}, {"Retry-After": "7"}))
        assert outcome.retry_after == 7

        err = outcome.to_exception()
        assert isinstance(err, RateLimitError)
        assert err.retry_after == 7

    def test_unparseable_retry_after_ignored(self, classifier):
        outcome = classifier.classify(raw(429, b"", {"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}))
        assert outcome.retry_after is None

    @pytest.mark.parametrize("status,error_cls", [(404, NotFoundError), (503, InternalServerError)])
    def test_status_maps_to_exception(self, classifier, status, error_cls):
        with pytest.raises(error_cls) as exc_info:
            classifier.classify(raw(status, b"")).unwrap()
        assert exc_info.value.status_code == status


class TestDecode:

    def test_decodes_into_model(self, classifier):
        outcome = classifier.decode(Success(200, b'{"id": "thread_1", "metadata": {"a": 1}}'), Thread)
        assert isinstance(outcome.payload, Thread)
        assert outcome.payload.metadata == {"a": 1}

    def test_empty_body_without_model(self, classifier):
        assert classifier.decode(Success(204, b"")).payload == {}

    def test_empty_body_with_model(self, classifier):
        assert classifier.decode(Success(204, b""), Optional[DeletionStatus]).payload is None

    def test_invalid_json_is_malformed(self, classifier):
        outcome = classifier.decode(Success(200, b"{not json"), Thread)
        assert outcome.kind == FailureKind.MALFORMED
        assert outcome.message.startswith("Malformed API response (status code: 200)")
        with pytest.raises(MalformedResponseError):
            outcome.unwrap()

    def test_shape_mismatch_is_malformed(self, classifier):
        outcome = classifier.decode(Success(200, b'{"object": "thread"}'), Thread)
        assert not outcome.ok
        assert outcome.kind == FailureKind.MALFORMED

    def test_failure_passes_through(self, classifier):
        failure = Failure(status=500, message="boom")
        assert classifier.decode(failure, Thread) is failure
