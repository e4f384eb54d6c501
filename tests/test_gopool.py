import threading
import time

import pytest

from beankit import gopool


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    monkeypatch.setattr(gopool, "_default_pool", gopool.Pool(-1))
    monkeypatch.setattr(gopool, "_pools", {})


def test_new_pool_defaults():
    pool = gopool.new_pool(None, None)
    assert pool.cap == -1
    assert pool.max_blocking_tasks == 0
    assert pool.is_closed is False


def test_new_pool_with_size_and_block_after():
    pool = gopool.new_pool(1, 1)
    assert pool.cap == 1
    assert pool.max_blocking_tasks == 1


def test_register_success():
    gopool.register("test", gopool.Pool(0))
    assert gopool.pools() == ["test"]


def test_register_nil_pool():
    with pytest.raises(gopool.PoolError):
        gopool.register("test", None)


def test_register_empty_name():
    with pytest.raises(gopool.PoolError):
        gopool.register("", gopool.Pool(0))


def test_register_twice():
    pool = gopool.Pool(0)
    gopool.register("test", pool)
    with pytest.raises(gopool.PoolError):
        gopool.register("test", pool)


def test_get_pool_success():
    pool = gopool.Pool(0)
    gopool.register("test", pool)
    assert gopool.get_pool("test") is pool


def test_get_pool_not_found():
    gopool.register("test", gopool.Pool(0))
    with pytest.raises(gopool.PoolError):
        gopool.get_pool("wrong_name")


def test_pools_sorted():
    gopool.register("b", gopool.Pool(0))
    gopool.register("a", gopool.Pool(0))
    assert gopool.pools() == ["a", "b"]


def test_get_default_pool():
    pool = gopool.get_default_pool()
    assert pool.is_closed is False
    assert pool is gopool.get_default_pool()


def test_submit_runs_tasks():
    pool = gopool.Pool(2)
    done = []
    lock = threading.Lock()

    def task():
        with lock:
            done.append(1)

    for _ in range(5):
        pool.submit(task)
    pool.release_timeout(2)
    assert len(done) == 5
    assert pool.running == 0


def test_submit_to_closed_pool():
    pool = gopool.Pool(0)
    pool.release()
    with pytest.raises(gopool.PoolError, match="closed"):
        pool.submit(lambda: None)


def test_submit_overload():
    gate = threading.Event()
    pool = gopool.new_pool(1, 1)
    pool.submit(gate.wait)
    blocked = threading.Thread(target=lambda: pool.submit(lambda: None))
    blocked.start()
    deadline = time.monotonic() + 2
    while pool.waiting < 1 and time.monotonic() < deadline:
        time.sleep(0.01)
    assert pool.waiting == 1
    with pytest.raises(gopool.PoolError, match="too many"):
        pool.submit(lambda: None)
    gate.set()
    blocked.join(2)
    pool.release_timeout(2)
    assert pool.running == 0


def test_release_timeout_on_closed_pool():
    pool = gopool.Pool(0)
    pool.release()
    with pytest.raises(gopool.PoolError):
        pool.release_timeout(1)


def _submit_tasks(duration, release):
    pool = gopool.Pool(0)
    gopool.register("test", pool)
    default = gopool.get_default_pool()
    for _ in range(3):
        default.submit(lambda: time.sleep(duration))
    for _ in range(3):
        pool.submit(lambda: time.sleep(duration))
    if release:
        pool.release()
        default.release()


def test_unregister_without_timeout():
    gopool.register("test", gopool.Pool(0))
    assert gopool.release_all_pools(0)() is None
    assert gopool.pools() == []
    assert gopool.get_default_pool().is_closed is True


def test_unregister_with_timeout_success():
    _submit_tasks(0.1, release=False)
    gopool.release_all_pools(1.0)()
    assert gopool.pools() == []


def test_unregister_with_timeout_fail():
    _submit_tasks(0.5, release=False)
    with pytest.raises(gopool.PoolError):
        gopool.release_all_pools(0.05)()
    assert gopool.pools() == ["test"]


def test_unregister_already_closed_pools():
    _submit_tasks(0.1, release=True)
    with pytest.raises(gopool.PoolError, match="closed"):
        gopool.release_all_pools(0.15)()