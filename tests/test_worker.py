from fakes import FakeResolver
from recursub.coordinator import Coordinator
from recursub.enumerator import SubdomainEnumerator
from recursub.utils.dns_utils import Found
from recursub.work_queue import Candidate, WorkQueue
from recursub.worker import handle_candidate, process, seed


def make_enumerator(answers=None, wordlist=("www", "api")):
    emitted = []
    enum = SubdomainEnumerator(domain="example.com", wordlist=list(wordlist), resolver=FakeResolver(answers),
                               threads=1, grace_period=0.001, emit=emitted.append)
    return enum, emitted


def drain(work_queue):
    items = []
    while True:
        candidate = work_queue.try_claim()
        if candidate is None:
            return items
        items.append(candidate)


def test_seed_queues_words_in_order_and_deregisters():
    enum, _ = make_enumerator()
    work_queue = WorkQueue()
    coordinator = Coordinator(workers=1)
    coordinator.register()

    seed(enum, work_queue, coordinator)

    assert coordinator.active == 0
    assert drain(work_queue) == [Candidate("www.example.com", 1), Candidate("api.example.com", 1)]


def test_wildcard_match_is_neither_emitted_nor_expanded():
    enum, emitted = make_enumerator({"www.example.com": Found(frozenset({"1.2.3.4"}))})
    enum.wildcard_signature = frozenset({"1.2.3.4"})
    work_queue = WorkQueue()

    handle_candidate(enum, Candidate("www.example.com", 1), work_queue)

    assert emitted == []
    assert work_queue.empty()
    assert enum.stats["wildcard"] == 1


def test_non_wildcard_answer_is_emitted_and_expanded():
    enum, emitted = make_enumerator({"www.example.com": Found(frozenset({"5.6.7.8"}))})
    enum.wildcard_signature = frozenset({"1.2.3.4"})
    work_queue = WorkQueue()

    handle_candidate(enum, Candidate("www.example.com", 1), work_queue)

    assert emitted == ["www.example.com"]
    assert drain(work_queue) == [Candidate("www.www.example.com", 2), Candidate("api.www.example.com", 2)]


def test_answer_overlapping_wildcard_is_still_a_finding():
    enum, emitted = make_enumerator({"www.example.com": Found(frozenset({"1.2.3.4", "5.6.7.8"}))})
    enum.wildcard_signature = frozenset({"1.2.3.4"})

    handle_candidate(enum, Candidate("www.example.com", 1), WorkQueue())

    assert emitted == ["www.example.com"]


def test_process_retires_when_nothing_is_left():
    enum, _ = make_enumerator()
    coordinator = Coordinator(workers=1, grace_period=0.001)

    process(enum, WorkQueue(), coordinator)

    assert coordinator.active == 0
    assert enum.resolver.calls == []


def test_process_drains_queue_before_retiring():
    enum, emitted = make_enumerator({"www.example.com": Found(frozenset({"9.9.9.9"}))})
    work_queue = WorkQueue()
    coordinator = Coordinator(workers=1, grace_period=0.001)
    coordinator.register()
    seed(enum, work_queue, coordinator)

    process(enum, work_queue, coordinator)

    assert emitted == ["www.example.com"]
    assert work_queue.empty()
    assert enum.resolver.calls == ["www.example.com", "api.example.com", "www.www.example.com", "api.www.example.com"]


def test_cancelled_worker_stops_claiming():
    enum, _ = make_enumerator()
    work_queue = WorkQueue()
    work_queue.enqueue(Candidate("www.example.com", 1))
    coordinator = Coordinator(workers=1, grace_period=0.001)
    coordinator.cancel()

    process(enum, work_queue, coordinator)

    assert len(work_queue) == 1
    assert enum.resolver.calls == []
