"""Tests for URL building and header profiles."""

import pytest

from assistants.config import ClientConfig
from assistants.http import HeaderProfiles, Request, RequestValidationError, URLBuilder, urls


@pytest.fixture
def builder():
    return URLBuilder("https://api.example.com/v1/")


class TestURLBuilder:

    def test_joins_template_onto_base(self, builder):
        url = builder.build(urls.RUN, thread_id="thread_1", run_id="run_2")
        assert url == "https://api.example.com/v1/threads/thread_1/runs/run_2"

    def test_base_without_trailing_slash(self):
        builder = URLBuilder("https://api.example.com/v1")
        assert builder.build(urls.ASSISTANTS) == "https://api.example.com/v1/assistants"

    def test_cancel_path(self, builder):
        url = builder.build(urls.RUN_CANCEL, thread_id="t", run_id="r")
        assert url.endswith("/threads/t/runs/r/cancel")

    def test_identifiers_are_percent_encoded(self, builder):
        """An id can never escape its path segment."""
        url = builder.build(urls.THREAD, thread_id="a/b?c=d")
        assert url == "https://api.example.com/v1/threads/a%2Fb%3Fc%3Dd"

    @pytest.mark.parametrize("bad", ["", "   ", None])
    def test_empty_identifier_rejected(self, builder, bad):
        with pytest.raises(RequestValidationError, match="thread_id must be a non-empty string"):
            builder.build(urls.MESSAGES, thread_id=bad)

    def test_missing_identifier_rejected(self, builder):
        with pytest.raises(RequestValidationError, match="run_id"):
            builder.build(urls.RUN, thread_id="t")

    def test_query_omits_empty_values(self, builder):
        url = builder.build(urls.ASSISTANTS, query={"limit": "10", "order": "", "after": "asst_1"})
        assert url == "https://api.example.com/v1/assistants?limit=10&after=asst_1"

    def test_relative_base_rejected(self):
        with pytest.raises(RequestValidationError):
            URLBuilder("/v1/")


class TestHeaderProfiles:

    def test_every_profile_carries_credentials(self):
        config = ClientConfig(api_key="sk-xyz", organization="org-1")
        headers = HeaderProfiles.from_config(config)

        for profile in (headers.mutating, headers.read, headers.upload):
            assert profile["Authorization"] == "Bearer sk-xyz"
            assert profile["OpenAI-Organization"] == "org-1"
            assert profile["OpenAI-Beta"] == "assistants=v1"

    def test_only_mutating_declares_json(self):
        headers = HeaderProfiles.from_config(ClientConfig(api_key="sk"))
        assert headers.mutating["Content-Type"] == "application/json"
        assert "Content-Type" not in headers.read
        assert "Content-Type" not in headers.upload

    def test_organization_omitted_when_unset(self):
        headers = HeaderProfiles.from_config(ClientConfig(api_key="sk"))
        assert "OpenAI-Organization" not in headers.read

    def test_profiles_are_read_only(self):
        headers = HeaderProfiles.from_config(ClientConfig(api_key="sk"))
        with pytest.raises(TypeError):
            headers.read["Authorization"] = "Bearer other"


class TestRequest:

    def test_body_encoded_once(self):
        """Later changes to the caller's dict never reach the wire."""
        body = {"metadata": {"k": "v"}}
        request = Request("post", "https://x/threads", body=body)
        body["metadata"]["k"] = "changed"

        assert request.method == "POST"
        assert request.content == b'{"metadata": {"k": "v"}}'

    def test_unserializable_body_rejected(self):
        with pytest.raises(RequestValidationError, match="JSON-serializable"):
            Request("POST", "https://x/threads", body={"when": object()})

    def test_no_body_no_content(self):
        request = Request("GET", "https://x/threads/t")
        assert request.content is None
        assert not request.is_multipart
