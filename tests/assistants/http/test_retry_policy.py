"""Tests for assistants/http/retry_policy.py"""

import threading
import pytest
import requests
from unittest.mock import MagicMock, patch

from assistants.http import APIConnectionError, MalformedResponseError, RequestCancelledError, RetryPolicy


class TestBackoff:

    def test_exponential_delays(self):
        policy = RetryPolicy(backoff_unit=0.5)
        assert [policy.backoff_delay(n) for n in range(4)] == [0.5, 1.0, 2.0, 4.0]

    def test_jitter_stays_in_range(self):
        policy = RetryPolicy(backoff_unit=1.0, jitter=True)
        for _ in range(50):
            assert 1.0 <= policy.backoff_delay(1) < 3.0

    def test_max_attempts_floor(self):
        assert RetryPolicy(max_attempts=0).max_attempts == 1


class TestExecuteWithRetry:

    def test_success_first_try(self):
        fn = MagicMock(return_value="ok")
        assert RetryPolicy(backoff_unit=0).execute_with_retry(fn) == "ok"
        assert fn.call_count == 1

    def test_recovers_after_transient_failure(self):
        fn = MagicMock(side_effect=[requests.exceptions.ConnectionError("reset"), "ok"])
        assert RetryPolicy(backoff_unit=0).execute_with_retry(fn) == "ok"
        assert fn.call_count == 2

    def test_exhausted_attempts_raise_connection_error(self):
        """Every attempt's failure is kept; the message names the last one."""
        fn = MagicMock(side_effect=[
            requests.exceptions.ConnectionError("refused 1"),
            requests.exceptions.Timeout("slow 2"),
            requests.exceptions.ConnectionError("refused 3"),
        ])

        with pytest.raises(APIConnectionError) as exc_info:
            RetryPolicy(max_attempts=3, backoff_unit=0).execute_with_retry(fn)

        err = exc_info.value
        assert fn.call_count == 3
        assert err.attempts == 3
        assert len(err.attempt_errors) == 3
        assert "Timeout" in err.attempt_errors[1]
        assert err.message.startswith("Failed to perform HTTP request after 3 attempt(s)")
        assert "refused 3" in err.message

    @patch("assistants.http.retry_policy.time.sleep")
    def test_no_sleep_after_final_attempt(self, mock_sleep):
        fn = MagicMock(side_effect=requests.exceptions.ConnectionError("down"))

        with pytest.raises(APIConnectionError):
            RetryPolicy(max_attempts=3, backoff_unit=1.0).execute_with_retry(fn)

        assert [c.args[0] for c in mock_sleep.call_args_list] == [1.0, 2.0]

    def test_non_transient_error_not_retried(self):
        fn = MagicMock(side_effect=requests.exceptions.InvalidURL("bad url"))

        with pytest.raises(APIConnectionError) as exc_info:
            RetryPolicy(max_attempts=5, backoff_unit=0).execute_with_retry(fn)

        assert fn.call_count == 1
        assert exc_info.value.attempts == 1

    @pytest.mark.parametrize("error", [
        requests.exceptions.ChunkedEncodingError("connection broken mid-body"),
        requests.exceptions.ContentDecodingError("bad gzip"),
    ])
    def test_unreadable_response_not_reported_unreachable(self, error):
        """The service answered, so the failure is a malformed response, not a connection error."""
        fn = MagicMock(side_effect=error)

        with pytest.raises(MalformedResponseError, match="body could not be read"):
            RetryPolicy(max_attempts=3, backoff_unit=0).execute_with_retry(fn)

        assert fn.call_count == 1

    def test_other_exceptions_propagate(self):
        fn = MagicMock(side_effect=KeyError("bug"))
        with pytest.raises(KeyError):
            RetryPolicy(backoff_unit=0).execute_with_retry(fn)
        assert fn.call_count == 1


class TestCancellation:

    def test_cancelled_before_first_attempt(self):
        event = threading.Event()
        event.set()
        fn = MagicMock(return_value="ok")

        with pytest.raises(RequestCancelledError):
            RetryPolicy().execute_with_retry(fn, cancel_event=event)

        fn.assert_not_called()

    def test_cancel_stops_further_retries(self):
        """Setting the event during an attempt prevents the next one."""
        event = threading.Event()

        def failing():
            event.set()
            raise requests.exceptions.ConnectionError("down")

        fn = MagicMock(side_effect=failing)

        with pytest.raises(RequestCancelledError):
            RetryPolicy(max_attempts=5, backoff_unit=10.0).execute_with_retry(fn, cancel_event=event)

        assert fn.call_count == 1
