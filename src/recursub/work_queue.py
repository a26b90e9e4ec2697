from collections import namedtuple
import queue

# A name waiting to be resolved. depth 1 is wordlist.root_domain,
# each recursive fan-out adds one.
Candidate = namedtuple("Candidate", ["name", "depth"])


class WorkQueue:
    """
    Unbounded FIFO shared by the seeder and every worker.

    Claims never block: a worker that finds the queue empty has to go
    through the quiescence check instead of waiting, otherwise an idle
    pool would deadlock once nobody is left to produce.
    """

    def __init__(self):
        self._items = queue.SimpleQueue()

    def enqueue(self, candidate):
        self._items.put(candidate)

    def try_claim(self):
        try:
            return self._items.get_nowait()
        except queue.Empty:
            return None

    def empty(self):
        return self._items.empty()

    def __len__(self):
        return self._items.qsize()
