"""
Shared fixtures for client tests.

No network: the thread-local session is replaced by a MagicMock whose
request() returns canned responses, so every test can assert on exactly
what would have gone over the wire.
"""

import pytest
from unittest.mock import MagicMock

from assistants import AssistantsClient
from assistants.config import ClientConfig
from tests.assistants.fakes import make_response


@pytest.fixture
def config():
    """Client config with zero backoff so retry tests run instantly."""
    return ClientConfig(
        api_key="sk-test-key",
        organization="org-test",
        base_url="https://api.example.com/v1",
        backoff_unit_seconds=0,
    )


@pytest.fixture
def session():
    """Mock requests.Session; set session.request.return_value / side_effect per test."""
    session = MagicMock()
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def session_manager(session):
    manager = MagicMock()
    manager.get_session.return_value = session
    return manager


@pytest.fixture
def client(config, session_manager):
    return AssistantsClient(config=config, session_manager=session_manager)
