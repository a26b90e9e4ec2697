from .config import logger, validate_settings, DEFAULT_THREADS, DEFAULT_TIMEOUT, GRACE_PERIOD
from .coordinator import Coordinator
from .work_queue import WorkQueue
from .worker import process, seed
from .utils.dns_utils import DnsResolver, detect_wildcard

import sys
import threading


def print_finding(name):
    sys.stdout.write(f"{name}\n")
    sys.stdout.flush()


class SubdomainEnumerator:
    def __init__(self, domain, wordlist, threads=DEFAULT_THREADS, timeout=DEFAULT_TIMEOUT, resolver=None, nameservers=None, grace_period=GRACE_PERIOD, max_depth=0, emit=None):
        self.domain = validate_settings(domain, threads, grace_period, max_depth)

        self.wordlist = list(wordlist)
        self.threads = threads
        self.timeout = timeout
        self.grace_period = grace_period
        self.max_depth = max_depth
        self.resolver = resolver if resolver is not None else DnsResolver(timeout=timeout, nameservers=nameservers)
        self.emit = emit if emit is not None else print_finding

        # Findings and counters are written from every worker thread
        self.findings = []
        self.stats = {'resolved': 0, 'not_found': 0, 'errors': 0, 'wildcard': 0}
        self.data_lock = threading.Lock()

        self.wildcard_signature = None

    def _add_found(self, name):
        """Records a genuine finding and hands it to the sink."""
        with self.data_lock:
            self.findings.append(name)
        logger.debug(f" [+] Found: {name}")
        self.emit(name)

    def _count(self, key):
        with self.data_lock:
            self.stats[key] += 1

    def run(self):
        logger.info(f"--- Recursive subdomain scan for {self.domain} ({len(self.wordlist)} words, {self.threads} threads) ---")
        self.phase_wildcard_detection()
        self.phase_scan()
        self.phase_final_reporting()
        return list(self.findings)

    def phase_wildcard_detection(self):
        self.wildcard_signature = detect_wildcard(self.resolver, self.domain)

    def phase_scan(self):
        work_queue = WorkQueue()
        coordinator = Coordinator(self.threads, grace_period=self.grace_period)

        # The seeder counts as a doer from before the first worker starts,
        # otherwise a fast worker could see an empty queue and retire.
        coordinator.register()

        workers = [
            threading.Thread(target=process, args=(self, work_queue, coordinator), name=f"recursub-worker-{i}", daemon=True)
            for i in range(self.threads)
        ]
        seeder = threading.Thread(target=seed, args=(self, work_queue, coordinator), name="recursub-seeder", daemon=True)

        for worker in workers:
            worker.start()
        seeder.start()

        try:
            self._join([seeder] + workers)
        except KeyboardInterrupt:
            logger.warning(" [!] Interrupted, waiting for workers to finish their current lookups...")
            coordinator.cancel()
            self._join([seeder] + workers)
            raise

        if coordinator.cancelled:
            logger.warning(f" [!] Scan cancelled with {len(work_queue)} candidates still queued.")

    @staticmethod
    def _join(threads):
        for thread in threads:
            thread.join()

    def phase_final_reporting(self):
        logger.info("--- Subdomain Enumeration Complete ---")
        with self.data_lock:
            stats = dict(self.stats)
            total_found = len(self.findings)
        logger.info(f"Summary for {self.domain}:")
        logger.info(f"  Candidates resolved: {stats['resolved']}")
        logger.info(f"  Subdomains found: {total_found}")
        if self.wildcard_signature:
            logger.info(f"  Wildcard matches filtered: {stats['wildcard']}")
        if stats['errors']:
            logger.info(f"  Resolver errors (dropped): {stats['errors']}")
