# tests/test_concurrency.py
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest

from blog_api.app.core.rwlock import ReadWriteLock
from blog_api.app.models.post import Post


def test_concurrent_creates_get_distinct_ids(store):
    workers = 50
    barrier = threading.Barrier(workers)

    def create(i):
        barrier.wait()
        return store.create_with_generated_id(f"Title {i}", f"Content {i}", f"Author {i}").id

    with ThreadPoolExecutor(max_workers=workers) as pool:
        ids = list(pool.map(create, range(workers)))

    assert len(set(ids)) == workers
    assert sorted(ids) == list(range(1, workers + 1))
    assert len(store) == workers


def test_concurrent_reads_and_writes(store):
    store.bulk_load([Post.create(i, f"T{i}", "c", "a") for i in range(1, 11)])
    errors = []

    def reader():
        for _ in range(200):
            posts = store.get_all()
            ids = [p.id for p in posts]
            if ids != sorted(ids) or len(ids) != len(set(ids)):
                errors.append(ids)

    def writer(offset):
        for i in range(50):
            post = store.create_with_generated_id(f"W{offset}-{i}", "c", "a")
            store.update(post.id, Post.create(post.id, "updated", "c", "a"))

    threads = [threading.Thread(target=reader) for _ in range(5)]
    threads += [threading.Thread(target=writer, args=(n,)) for n in range(5)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)

    assert not errors
    assert len(store) == 10 + 5 * 50
    assert store.next_id == 10 + 5 * 50 + 1


def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=5)
    passed = []

    def read():
        with lock.read_lock():
            # All three readers must be inside at once to pass the barrier.
            inside.wait()
            passed.append(True)

    threads = [threading.Thread(target=read) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)
    assert len(passed) == 3
    assert lock.readers == 0


def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_in = threading.Event()

    def write():
        with lock.write_lock():
            writer_in.set()
            time.sleep(0.1)
            events.append("write-done")

    def read():
        writer_in.wait(5)
        with lock.read_lock():
            events.append("read")

    w = threading.Thread(target=write)
    r = threading.Thread(target=read)
    w.start()
    r.start()
    w.join(5)
    r.join(5)
    assert events == ["write-done", "read"]
    assert not lock.write_locked


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    order = []
    lock.acquire_read()

    def write():
        with lock.write_lock():
            order.append("write")

    def late_read():
        with lock.read_lock():
            order.append("read")

    w = threading.Thread(target=write)
    w.start()
    deadline = time.time() + 5
    while lock._writers_waiting == 0 and time.time() < deadline:
        time.sleep(0.01)
    r = threading.Thread(target=late_read)
    r.start()
    time.sleep(0.05)
    assert order == []
    lock.release_read()
    w.join(5)
    r.join(5)
    assert order == ["write", "read"]


def test_interrupted_writer_wakes_queued_readers():
    lock = ReadWriteLock()
    lock.acquire_read()
    notify_all = MagicMock(wraps=lock._cond.notify_all)
    lock._cond.notify_all = notify_all

    def interrupted_wait(timeout=None):
        raise RuntimeError("interrupted")

    lock._cond.wait = interrupted_wait
    with pytest.raises(RuntimeError, match="interrupted"):
        lock.acquire_write()

    assert lock._writers_waiting == 0
    assert not lock.write_locked
    notify_all.assert_called()
    lock.release_read()
    assert lock.readers == 0
