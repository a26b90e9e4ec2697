from .config import GRACE_PERIOD
import threading
import time


class Coordinator:
    """
    Tracks how many workers (plus the seeder) are active and decides when
    the pool may retire.

    A worker registers before it claims anything and deregisters once the
    queue looks empty, then pauses for `grace_period` and asks
    `should_retire`. Retiring requires zero active doers and an empty
    queue, checked under the same lock that guards the counter. This is a
    heuristic: it errs towards another loop rather than an early exit, but
    it is not an exact distributed termination algorithm.
    """

    def __init__(self, workers, grace_period=GRACE_PERIOD):
        self.grace_period = grace_period
        self._max_active = workers + 1  # workers plus the seeder
        self._active = 0
        self._lock = threading.Lock()
        self._cancelled = threading.Event()

    @property
    def active(self):
        with self._lock:
            return self._active

    @property
    def cancelled(self):
        return self._cancelled.is_set()

    def register(self):
        with self._lock:
            if self._active >= self._max_active:
                raise RuntimeError(f"More than {self._max_active} active doers registered")
            self._active += 1

    def deregister(self):
        with self._lock:
            if self._active == 0:
                raise RuntimeError("deregister() called with no active doers")
            self._active -= 1

    def pause(self):
        time.sleep(self.grace_period)

    def is_quiescent(self, work_queue):
        with self._lock:
            return self._active == 0 and work_queue.empty()

    def should_retire(self, work_queue):
        return self.cancelled or self.is_quiescent(work_queue)

    def cancel(self):
        self._cancelled.set()
