"""
Tests for the sequential alias strategy.
Focus on start value, strict +1 progression and per-instance counters.
"""
import threading

import pytest

from shorturl_platform.manager.strategies import SequentialStrategy


def test_sequential_starts_at_one_and_increments():
    s = SequentialStrategy()
    assert [s.generate() for _ in range(5)] == [1, 2, 3, 4, 5]


def test_sequential_custom_start():
    s = SequentialStrategy(start=1000)
    assert s.generate() == 1000
    assert s.generate() == 1001


def test_sequential_rejects_non_positive_start():
    with pytest.raises(ValueError, match="positive"):
        SequentialStrategy(start=0)


def test_instances_have_independent_counters():
    a, b = SequentialStrategy(), SequentialStrategy()
    a.generate()
    a.generate()
    assert b.generate() == 1


def test_sequential_is_thread_safe():
    s = SequentialStrategy()
    seen = []
    lock = threading.Lock()

    def worker():
        local = [s.generate() for _ in range(500)]
        with lock:
            seen.extend(local)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(seen) == list(range(1, 4001))
