"""Thread-local HTTP session management."""

import threading
import requests


class ThreadLocalSessionManager:
    """
    One requests.Session per thread.

    Sessions are never shared across threads, so concurrent callers have
    no shared mutable state. urllib3-level retries are disabled: the
    RetryPolicy is the only place attempts are counted.
    """

    def __init__(self, pool_maxsize: int = 4):
        self.pool_maxsize = pool_maxsize
        self._thread_local = threading.local()

    def get_session(self) -> requests.Session:
        if not hasattr(self._thread_local, 'session'):
            self._thread_local.session = self._create_session()
        return self._thread_local.session

    def close(self) -> None:
        session = getattr(self._thread_local, 'session', None)
        if session is not None:
            session.close()
            del self._thread_local.session

    def _create_session(self) -> requests.Session:
        session = requests.Session()

        adapter = requests.adapters.HTTPAdapter(
            pool_connections=1,
            pool_maxsize=self.pool_maxsize,
            max_retries=0
        )
        session.mount('https://', adapter)
        session.mount('http://', adapter)

        return session
