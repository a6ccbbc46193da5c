"""
Runs and run steps.

The client never writes run lifecycle fields. It can create a run,
request cancellation, submit tool outputs while the run requires action,
and observe the run as the service moves it along. Submissions against a
terminal run are rejected by the service and surface as APIStatusError;
they are not retried.
"""

import threading
import time
from typing import Any, Dict, List, Optional, Union

from assistants.http import urls
from assistants.http.errors import PollTimeoutError, RequestCancelledError, RequestValidationError
from assistants.models import (
    MessageParams,
    Run,
    RunParams,
    RunStep,
    ThreadAndRunParams,
    ThreadParams,
    ToolObject,
    ToolOutput,
    is_known_transition,
)
from assistants.models.common import Metadata
from assistants.pagination import Page, PaginationCursor
from .base import CRUDResource, build_params, make_cursor, metadata_body, require
from .threads import validate_messages


class Runs(CRUDResource[Run]):
    collection_path = urls.RUNS
    item_path = urls.RUN
    model = Run

    def create(
        self,
        thread_id: str,
        assistant_id: str,
        model: Optional[str] = None,
        instructions: Optional[str] = None,
        additional_instructions: Optional[str] = None,
        tools: Optional[List[ToolObject]] = None,
        metadata: Optional[Metadata] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Run:
        """Request a run of assistant_id on thread_id. The run starts out queued."""
        require(thread_id=thread_id, assistant_id=assistant_id)
        params = build_params(
            RunParams,
            assistant_id=assistant_id,
            model=model,
            instructions=instructions,
            additional_instructions=additional_instructions,
            tools=tools,
            metadata=metadata,
        )
        run = self._create(params.to_body(), cancel_event=cancel_event, thread_id=thread_id)
        self.logger.info(f"Created run {run.id}", thread_id=thread_id, run_id=run.id, status=run.status)
        return run

    def create_thread_and_run(
        self,
        assistant_id: str,
        messages: Optional[List[Union[MessageParams, dict]]] = None,
        thread_metadata: Optional[Metadata] = None,
        model: Optional[str] = None,
        instructions: Optional[str] = None,
        tools: Optional[List[ToolObject]] = None,
        metadata: Optional[Metadata] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Run:
        """Create a thread (optionally seeded with messages) and start a run on it."""
        require(assistant_id=assistant_id)
        thread = None
        if messages is not None or thread_metadata is not None:
            thread = ThreadParams(
                messages=validate_messages(messages) if messages is not None else [],
                metadata=thread_metadata,
            )
        params = build_params(
            ThreadAndRunParams,
            assistant_id=assistant_id,
            thread=thread,
            model=model,
            instructions=instructions,
            tools=tools,
            metadata=metadata,
        )
        request = self._request("POST", urls.THREAD_AND_RUN, {}, body=params.to_body())
        return self._execute(request, Run, cancel_event)

    def retrieve(self, thread_id: str, run_id: str, cancel_event: Optional[threading.Event] = None) -> Run:
        return self._retrieve(cancel_event=cancel_event, thread_id=thread_id, run_id=run_id)

    def modify(
        self,
        thread_id: str,
        run_id: str,
        metadata: Metadata,
        cancel_event: Optional[threading.Event] = None
    ) -> Run:
        """Only metadata can be modified; lifecycle fields belong to the service."""
        return self._modify(metadata_body(metadata), cancel_event=cancel_event, thread_id=thread_id, run_id=run_id)

    def list(
        self,
        thread_id: str,
        limit: int = 0,
        order: str = "",
        after: str = "",
        before: str = "",
        cursor: Optional[PaginationCursor] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Page[Run]:
        cursor = make_cursor(cursor, limit, order, after, before)
        return self._list(cursor, cancel_event=cancel_event, thread_id=thread_id)

    def submit_tool_outputs(
        self,
        thread_id: str,
        run_id: str,
        tool_outputs: List[Union[ToolOutput, Dict[str, Any]]],
        cancel_event: Optional[threading.Event] = None
    ) -> Run:
        """
        Answer the tool calls of a run in requires_action.

        The service moves the run back toward in_progress. Against any other
        status, the service's rejection is raised as-is.
        """
        require(thread_id=thread_id, run_id=run_id)
        if not tool_outputs:
            raise RequestValidationError("tool_outputs must be a non-empty array")

        outputs = [
            o if isinstance(o, ToolOutput) else build_params(ToolOutput, **o)
            for o in tool_outputs
        ]
        body = {"tool_outputs": [o.model_dump() for o in outputs]}

        request = self._request(
            "POST",
            urls.RUN_SUBMIT_TOOL_OUTPUTS,
            {"thread_id": thread_id, "run_id": run_id},
            body=body
        )
        run = self._execute(request, Run, cancel_event)
        self.logger.info(
            f"Submitted {len(outputs)} tool output(s) to run {run_id}",
            thread_id=thread_id,
            run_id=run_id,
            status=run.status,
            count=len(outputs)
        )
        return run

    def cancel(self, thread_id: str, run_id: str, cancel_event: Optional[threading.Event] = None) -> Run:
        """Request cancellation. The service answers with the run, usually in cancelling."""
        request = self._request("POST", urls.RUN_CANCEL, {"thread_id": thread_id, "run_id": run_id})
        run = self._execute(request, Run, cancel_event)
        self.logger.info(f"Requested cancellation of run {run_id}", thread_id=thread_id, run_id=run_id, status=run.status)
        return run

    def retrieve_step(
        self,
        thread_id: str,
        run_id: str,
        step_id: str,
        cancel_event: Optional[threading.Event] = None
    ) -> RunStep:
        request = self._request(
            "GET",
            urls.RUN_STEP,
            {"thread_id": thread_id, "run_id": run_id, "step_id": step_id}
        )
        return self._execute(request, RunStep, cancel_event)

    def list_steps(
        self,
        thread_id: str,
        run_id: str,
        limit: int = 0,
        order: str = "",
        after: str = "",
        before: str = "",
        cursor: Optional[PaginationCursor] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Page[RunStep]:
        cursor = make_cursor(cursor, limit, order, after, before)
        request = self._request(
            "GET",
            urls.RUN_STEPS,
            {"thread_id": thread_id, "run_id": run_id},
            query=cursor.to_query()
        )
        return self._execute(request, Page[RunStep], cancel_event)

    def poll(
        self,
        thread_id: str,
        run_id: str,
        interval: float = 1.0,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None
    ) -> Run:
        """
        Observe a run until it is terminal or requires action.

        Only reads: every observed status, including ones off the known
        graph, is accepted and returned.

        Raises:
            PollTimeoutError: timeout elapsed first
            RequestCancelledError: cancel_event was set
        """
        require(thread_id=thread_id, run_id=run_id)
        deadline = time.monotonic() + timeout if timeout is not None else None
        previous = None

        while True:
            run = self.retrieve(thread_id, run_id, cancel_event=cancel_event)

            if previous is not None and not is_known_transition(previous, run.status):
                self.logger.warning(
                    f"Run {run_id} moved {previous} -> {run.status} (off the known lifecycle graph)",
                    thread_id=thread_id,
                    run_id=run_id,
                    status=run.status
                )
            previous = run.status

            if run.is_terminal or run.requires_action:
                return run

            if deadline is not None and time.monotonic() + interval > deadline:
                raise PollTimeoutError(
                    f"Run {run_id} still {run.status} after {timeout}s",
                    last_status=run.status
                )

            if cancel_event is None:
                time.sleep(interval)
            elif cancel_event.wait(interval):
                raise RequestCancelledError(f"Polling of run {run_id} cancelled")
