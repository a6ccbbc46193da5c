#!/usr/bin/env python3
"""
Assistants API client.

Orchestrates configuration, transport, retry and classification layers
and exposes one facade per resource kind.

Simplified architecture:
- No streaming support
- No caching: every call is a fresh read of service-owned state
- Clean composition of focused components
"""

from typing import Optional

from assistants.config import ClientConfig, load_config
from assistants.http import (
    HeaderProfiles,
    RequestPipeline,
    ResponseClassifier,
    RetryPolicy,
    ThreadLocalSessionManager,
    Transport,
    URLBuilder,
)
from assistants.logger import create_logger
from assistants.resources import (
    AssistantFiles,
    Assistants,
    Files,
    MessageFiles,
    Messages,
    Runs,
    Threads,
)


class AssistantsClient:
    """
    Client for the Assistants API.

    Components:
    - Transport: one HTTP exchange per attempt, thread-local sessions
    - RetryPolicy: bounded exponential backoff on transport failures
    - ResponseClassifier: Success / Failure classification and decoding
    - RequestPipeline: composition of the three

    Configuration is read once at construction and never mutated, so one
    client can be shared by many threads.

    Usage:
        client = AssistantsClient()                       # env / config.yaml
        client = AssistantsClient(api_key="sk-...")
        run = client.runs.create(thread_id, assistant_id)
        run = client.runs.poll(thread_id, run.id, timeout=60)
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        api_key: Optional[str] = None,
        session_manager: Optional[ThreadLocalSessionManager] = None,
        **overrides
    ):
        """
        Initialize the client.

        Args:
            config: Full configuration (default: load_config())
            api_key: Build a config from this key plus overrides instead of loading one
            session_manager: Shared thread-local session manager (default: a new one)
            **overrides: ClientConfig fields, applied on top of config
        """
        if config is None:
            config = ClientConfig(api_key=api_key, **overrides) if api_key else load_config()
            overrides = {}
        if overrides:
            config = config.model_copy(update=overrides)
            config = ClientConfig.model_validate(config.model_dump())

        self.config = config
        self.headers = HeaderProfiles.from_config(config)
        self.urls = URLBuilder(config.base_url)

        self.session_manager = session_manager or ThreadLocalSessionManager()
        self.transport = Transport(
            session_manager=self.session_manager,
            timeout=config.timeout_seconds,
            logger=create_logger("transport", config),
        )
        self.retry = RetryPolicy(
            logger=create_logger("retry", config),
            max_attempts=config.max_attempts,
            backoff_unit=config.backoff_unit_seconds,
            jitter=config.backoff_jitter,
        )
        self.classifier = ResponseClassifier(logger=create_logger("classifier", config))
        self.pipeline = RequestPipeline(
            self.transport,
            retry=self.retry,
            classifier=self.classifier,
            logger=create_logger("pipeline", config),
        )

        facade_args = (self.pipeline, self.urls, self.headers)
        self.assistants = Assistants(*facade_args, logger=create_logger("assistants", config))
        self.assistant_files = AssistantFiles(*facade_args, logger=create_logger("assistant_files", config))
        self.threads = Threads(*facade_args, logger=create_logger("threads", config))
        self.messages = Messages(*facade_args, logger=create_logger("messages", config))
        self.message_files = MessageFiles(*facade_args, logger=create_logger("message_files", config))
        self.runs = Runs(*facade_args, logger=create_logger("runs", config))
        self.files = Files(*facade_args, logger=create_logger("files", config))

    def close(self) -> None:
        """Close the calling thread's HTTP session."""
        self.session_manager.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
