"""Tests for AssistantsClient construction."""

import pytest

from assistants import AssistantsClient
from assistants.resources import Assistants, Files, Runs, Threads


class TestAssistantsClient:

    def test_from_api_key(self, session_manager):
        client = AssistantsClient(api_key="sk-direct", max_attempts=5, session_manager=session_manager)

        assert client.config.api_key == "sk-direct"
        assert client.retry.max_attempts == 5
        assert client.headers.read["Authorization"] == "Bearer sk-direct"

    def test_from_environment(self, monkeypatch, session_manager):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        client = AssistantsClient(session_manager=session_manager)
        assert client.config.api_key == "sk-env"

    def test_overrides_applied_to_config(self, config, session_manager):
        client = AssistantsClient(config=config, timeout_seconds=9, session_manager=session_manager)

        assert client.config.timeout_seconds == 9
        assert client.transport.timeout == 9
        assert config.timeout_seconds == 120.0

    def test_invalid_override_rejected(self, config, session_manager):
        with pytest.raises(ValueError):
            AssistantsClient(config=config, max_attempts=0, session_manager=session_manager)

    def test_facades_share_pipeline(self, client):
        assert isinstance(client.assistants, Assistants)
        assert isinstance(client.threads, Threads)
        assert isinstance(client.runs, Runs)
        assert isinstance(client.files, Files)
        for facade in (client.assistants, client.messages, client.runs, client.files):
            assert facade.pipeline is client.pipeline

    def test_context_manager_closes_session(self, config, session_manager):
        with AssistantsClient(config=config, session_manager=session_manager):
            pass
        session_manager.close.assert_called_once()
