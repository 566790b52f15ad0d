# topmark:header:start
#
#   project      : SgrMark
#   file         : test_rwlock.py
#   file_relpath : tests/registry/test_rwlock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the writer-preferring readers-writer lock."""

from __future__ import annotations

import threading
import time
from typing import Callable

import pytest

from sgrmark.registry.rwlock import ReadWriteLock


def wait_until(predicate: Callable[[], bool], timeout: float = 5.0) -> None:
    deadline: float = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            pytest.fail("condition not reached in time")
        time.sleep(0.001)


def test_readers_share_the_lock() -> None:
    lock = ReadWriteLock()
    barrier = threading.Barrier(2, timeout=5)
    errors: list[BaseException] = []

    def reader() -> None:
        try:
            with lock.read():
                # Both readers must be inside at the same time to pass.
                barrier.wait()
        except threading.BrokenBarrierError as exc:
            errors.append(exc)

    threads: list[threading.Thread] = [threading.Thread(target=reader) for _ in range(2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)
    assert errors == []


def test_writer_excludes_readers() -> None:
    lock = ReadWriteLock()
    entered = threading.Event()

    def reader() -> None:
        with lock.read():
            entered.set()

    with lock.write():
        t = threading.Thread(target=reader)
        t.start()
        assert not entered.wait(0.1)
    t.join(timeout=5)
    assert entered.is_set()


def test_waiting_writer_blocks_new_readers() -> None:
    lock = ReadWriteLock()
    order: list[str] = []

    def writer() -> None:
        with lock.write():
            order.append("w")

    def late_reader() -> None:
        with lock.read():
            order.append("r")

    lock.acquire_read()
    w = threading.Thread(target=writer)
    w.start()
    wait_until(lambda: lock._writers_waiting == 1)

    r = threading.Thread(target=late_reader)
    r.start()
    time.sleep(0.05)
    assert order == []

    lock.release_read()
    w.join(timeout=5)
    r.join(timeout=5)
    assert order == ["w", "r"]


def test_unbalanced_release_raises() -> None:
    lock = ReadWriteLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_lock_is_released_on_error() -> None:
    lock = ReadWriteLock()
    with pytest.raises(ValueError), lock.write():
        raise ValueError("boom")
    with lock.write():
        pass
