"""Named pools of worker threads with bounded capacity and graceful release."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

_log = logging.getLogger(__name__)

ERR_POOL_CLOSED = "this pool has been closed"
ERR_POOL_OVERLOAD = "too many tasks blocked on submit"
ERR_TIMEOUT = "operation timed out"


class PoolError(Exception):
    """Raised for pool registration, submission and release failures."""


class Pool:
    """A pool running each submitted task on a worker thread.

    ``size`` of zero or less means unlimited capacity. When the pool is full,
    ``submit`` blocks; ``max_blocking_tasks`` above zero limits how many
    submitters may block at once.
    """

    def __init__(self, size: int = -1, max_blocking_tasks: int = 0) -> None:
        self._cap = size if size > 0 else -1
        self._max_blocking = max(max_blocking_tasks, 0)
        self._cond = threading.Condition()
        self._running = 0
        self._waiting = 0
        self._closed = False

    @property
    def cap(self) -> int:
        """Capacity of the pool, -1 if unlimited."""
        return self._cap

    @property
    def max_blocking_tasks(self) -> int:
        """How many submitters may block at once, 0 if unlimited."""
        return self._max_blocking

    @property
    def running(self) -> int:
        """Number of tasks currently running."""
        with self._cond:
            return self._running

    @property
    def waiting(self) -> int:
        """Number of submitters blocked waiting for capacity."""
        with self._cond:
            return self._waiting

    @property
    def is_closed(self) -> bool:
        """Whether the pool has been released."""
        with self._cond:
            return self._closed

    def submit(self, task: Callable[[], object]) -> None:
        """Run ``task`` on a worker, blocking while the pool is full."""
        with self._cond:
            if self._closed:
                raise PoolError(ERR_POOL_CLOSED)
            while self._cap > 0 and self._running >= self._cap:
                if self._max_blocking and self._waiting >= self._max_blocking:
                    raise PoolError(ERR_POOL_OVERLOAD)
                self._waiting += 1
                try:
                    self._cond.wait()
                finally:
                    self._waiting -= 1
                if self._closed:
                    raise PoolError(ERR_POOL_CLOSED)
            self._running += 1
        try:
            threading.Thread(target=self._run, args=(task,), daemon=True).start()
        except Exception:
            self._finish()
            raise

    def _finish(self) -> None:
        with self._cond:
            self._running -= 1
            self._cond.notify_all()

    def _run(self, task: Callable[[], object]) -> None:
        try:
            task()
        except Exception:
            _log.exception("gopool: task raised an exception")
        finally:
            self._finish()

    def release(self) -> None:
        """Close the pool without waiting for running tasks."""
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._cond.notify_all()

    def release_timeout(self, timeout: float) -> None:
        """Close the pool and wait up to ``timeout`` seconds for running tasks to finish."""
        with self._cond:
            if self._closed:
                raise PoolError(ERR_POOL_CLOSED)
            self._closed = True
            self._cond.notify_all()
            if not self._cond.wait_for(lambda: self._running == 0, timeout=timeout):
                raise PoolError(ERR_TIMEOUT)


def new_pool(size: int | None, block_after: int | None) -> Pool:
    """Create a pool; None means unlimited size and unlimited blocking submitters."""
    return Pool(
        size if size is not None else -1,
        block_after if block_after is not None else 0,
    )


_lock = threading.RLock()
_pools: dict[str, Pool] = {}
_default_pool: Pool = Pool(-1)


def register(name: str, pool: Pool | None) -> None:
    """Make ``pool`` available under ``name``; each name may be registered once."""
    if not name:
        raise PoolError("gopool: register pool name is empty")
    if pool is None:
        raise PoolError("gopool: register pool is nil")
    with _lock:
        if name in _pools:
            raise PoolError(f"gopool: register pool already exists with name {name!r}")
        _pools[name] = pool


def unregister_all_pools() -> None:
    """Release every registered pool and the default pool without waiting."""
    global _pools
    with _lock:
        for pool in _pools.values():
            pool.release()
        _pools = {}
        if _default_pool is not None:
            _default_pool.release()


def _release_one(
    name: str,
    pool: Pool,
    timeout: float,
    deadline: float,
    cancelled: threading.Event,
) -> None:
    if time.monotonic() >= deadline:
        cancelled.set()
        raise PoolError(f"pool[{name}] release cancelled due to timeout")
    if cancelled.is_set():
        raise PoolError(f"pool[{name}] release cancelled")
    try:
        pool.release_timeout(timeout)
    except Exception as exc:
        cancelled.set()
        raise PoolError(f"pool[{name}] release: {exc}") from exc


def release_all_pools(timeout: float) -> Callable[[], None]:
    """Return a function that releases every pool, waiting up to ``timeout`` seconds.

    A timeout of zero or less releases without waiting. On failure PoolError
    is raised and the registered pools are kept.
    """

    def release() -> None:
        global _pools
        if timeout <= 0:
            unregister_all_pools()
            return

        deadline = time.monotonic() + timeout
        cancelled = threading.Event()
        with _lock:
            targets = list(_pools.items())
            if _default_pool is not None:
                targets.append(("default", _default_pool))
            with ThreadPoolExecutor(max_workers=max(1, len(targets))) as executor:
                futures = [
                    executor.submit(_release_one, name, pool, timeout, deadline, cancelled)
                    for name, pool in targets
                ]
            errors = [f.exception() for f in futures if f.exception() is not None]
            if errors:
                raise PoolError("\n".join(str(e) for e in errors)) from errors[0]
            _pools = {}

    return release


def pools() -> list[str]:
    """Return the sorted names of the registered pools."""
    with _lock:
        return sorted(_pools)


def get_pool(pool_name: str) -> Pool:
    """Return the pool registered as ``pool_name``."""
    with _lock:
        pool = _pools.get(pool_name)
    if pool is None:
        raise PoolError(f"gopool: unknown pool name {pool_name!r}")
    return pool


def get_default_pool() -> Pool:
    """Return the default pool."""
    return _default_pool