from .config import logger
from .work_queue import Candidate
from .utils.dns_utils import Found, ResolutionError, is_wildcard_match


def enqueue_words(work_queue, wordlist, suffix, depth):
    for word in wordlist:
        work_queue.enqueue(Candidate(f"{word}.{suffix}", depth))


def seed(self, work_queue, coordinator):
    """
    Queues wordlist x root domain. The caller registers the seeder with the
    coordinator before any worker starts; it is deregistered here once every
    word is queued.
    """
    try:
        logger.debug(f" [.] Seeding {len(self.wordlist)} candidates for {self.domain}")
        enqueue_words(work_queue, self.wordlist, self.domain, 1)
    finally:
        coordinator.deregister()


def handle_candidate(self, candidate, work_queue):
    self._count('resolved')
    try:
        outcome = self.resolver.resolve(candidate.name)
    except Exception as e:
        outcome = ResolutionError(str(e))

    if isinstance(outcome, ResolutionError):
        self._count('errors')
        logger.debug(f" [!] Dropping {candidate.name}: {outcome.reason}")
        return
    if not isinstance(outcome, Found) or not outcome.addresses:
        self._count('not_found')
        return
    if is_wildcard_match(outcome.addresses, self.wildcard_signature):
        self._count('wildcard')
        logger.debug(f" [-] Skipping {candidate.name} due to wildcard match.")
        return

    self._add_found(candidate.name)
    if self.max_depth and candidate.depth >= self.max_depth:
        logger.debug(f" [.] Not recursing into {candidate.name}: max depth {self.max_depth} reached.")
        return
    enqueue_words(work_queue, self.wordlist, candidate.name, candidate.depth + 1)


def process(self, work_queue, coordinator):
    """Worker thread body: drain, go idle, wait out the grace period, retire on quiescence."""
    while True:
        coordinator.register()
        try:
            while not coordinator.cancelled:
                candidate = work_queue.try_claim()
                if candidate is None:
                    break
                handle_candidate(self, candidate, work_queue)
        finally:
            coordinator.deregister()

        coordinator.pause()
        if coordinator.should_retire(work_queue):
            return
