import threading
import time
from collections.abc import Callable

from docproc.logging.logger import Log


class Worker:
    """Spawns one daemon thread per job: no pool, no queue, no cap.

    Jobs are detached from the submitting request and only bounded by the
    process lifetime. Live threads are tracked so shutdown can wait for them.
    """

    def __init__(self) -> None:
        self._threads: set[threading.Thread] = set()
        self._lock = threading.Lock()

    def submit(self, job_id: str, job: Callable[[], None]) -> threading.Thread:
        """Start ``job`` on a new thread and return immediately.

        A thread that fails to start is not tracked; the error propagates.
        """
        thread = threading.Thread(
            target=self._run,
            args=(job,),
            name=f"extract-{job_id}",
            daemon=True,
        )
        with self._lock:
            self._threads.add(thread)
        try:
            thread.start()
        except Exception:
            with self._lock:
                self._threads.discard(thread)
            raise
        Log.debug(f"Started background job {job_id}")
        return thread

    @property
    def in_flight(self) -> int:
        with self._lock:
            return len(self._threads)

    def join(self, timeout: float | None = None) -> bool:
        """Wait for in-flight jobs. Returns True if none are left running."""
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._lock:
            threads = list(self._threads)
        for thread in threads:
            remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
            thread.join(remaining)
        return self.in_flight == 0

    def _run(self, job: Callable[[], None]) -> None:
        try:
            job()
        finally:
            with self._lock:
                self._threads.discard(threading.current_thread())
