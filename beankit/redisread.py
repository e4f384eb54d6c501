"""Redis connection settings and read operations that spread load over read replicas."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

import redis
from redis.backoff import NoBackoff
from redis.cluster import ClusterNode, RedisCluster
from redis.exceptions import RedisClusterException
from redis.retry import Retry

T = TypeVar("T")


class InvalidParameterError(ValueError):
    """Raised when a redis command is given arguments it cannot use."""

    def __init__(self, message: str = "redis invalid parameter") -> None:
        super().__init__(message)


@dataclass
class RedisMasterConfig:
    """Address and credentials of the master redis server and its read replicas."""

    database: int = 0
    password: str = ""
    host: str = ""
    port: str = ""
    reads: list[str] = field(default_factory=list)


@dataclass
class RedisConfig:
    """Redis settings; timeouts are in seconds, zero meaning no timeout."""

    master: RedisMasterConfig | None = None
    prefix: str = ""
    max_retries: int = 0
    pool_size: int = 0
    min_idle_connections: int = 0
    dial_timeout: float = 0.0
    read_timeout: float = 0.0
    write_timeout: float = 0.0
    pool_timeout: float = 0.0


def _addresses(host: str, port: str) -> list[tuple[str, int]]:
    addresses = []
    for entry in host.split(","):
        if ":" not in entry:
            entry = f"{entry}:{port}"
        name, _, number = entry.rpartition(":")
        addresses.append((name, int(number)))
    return addresses


def _seconds(value: float) -> float | None:
    return value if value and value > 0 else None


def connect_redis_db(
    password: str,
    host: str,
    port: str,
    db_name: int,
    max_retries: int,
    pool_size: int,
    min_idle_connections: int,
    dial_timeout: float,
    read_timeout: float,
    write_timeout: float,
    pool_timeout: float,
    read_only: bool,
) -> tuple[Any, int]:
    """Connect to redis, ping it, and return the client with its database number.

    ``host`` may list several comma separated hosts, in which case a cluster
    client is made. Hosts without a port get ``port``. Raises ConnectionError
    if the server cannot be reached. ``min_idle_connections``,
    ``write_timeout`` and ``pool_timeout`` are accepted for configuration
    compatibility; the client library has no separate knob for them.
    """
    addresses = _addresses(host, port)
    options: dict[str, Any] = {
        "password": password or None,
        "socket_connect_timeout": _seconds(dial_timeout),
        "socket_timeout": _seconds(read_timeout),
        "decode_responses": True,
    }
    try:
        if len(addresses) > 1:
            client: Any = RedisCluster(
                startup_nodes=[ClusterNode(h, p) for h, p in addresses],
                read_from_replicas=read_only,
                max_connections=pool_size if pool_size > 0 else 2**31,
                **options,
            )
        else:
            (only_host, only_port), = addresses
            client = redis.Redis(
                host=only_host,
                port=only_port,
                db=db_name,
                max_connections=pool_size if pool_size > 0 else None,
                retry=Retry(NoBackoff(), max(max_retries, 0)),
                **options,
            )
        client.ping()
    except (redis.RedisError, RedisClusterException) as exc:
        raise ConnectionError(f"redis connection error: {exc}") from exc
    return client, db_name


def _wrap_mget(client: Any, keys: Iterable[str]) -> list[Any] | None:
    pipe = client.pipeline()
    for key in keys:
        pipe.get(key)
    values = pipe.execute()
    if any(value is None for value in values):
        return None
    return list(values)


class RedisReader:
    """Read operations on a primary redis client with optional read replicas.

    In cluster mode every read goes to the primary. Otherwise a replica is
    chosen (at random when there are several) and the primary is tried again
    if the replica fails.
    """

    def __init__(
        self,
        primary: Any,
        reads: Iterable[Any] | None = None,
        name: int = 0,
        is_cluster: bool = False,
    ) -> None:
        self.primary = primary
        self.reads: list[Any] = list(reads or [])
        self.name = name
        self.is_cluster = is_cluster

    @property
    def read_count(self) -> int:
        """Number of read replicas."""
        return len(self.reads)

    def _reader(self) -> Any:
        if self.is_cluster or not self.reads:
            return self.primary
        if len(self.reads) == 1:
            return self.reads[0]
        return self.reads[random.randrange(len(self.reads))]

    def _read(self, op: Callable[[Any], T]) -> T:
        client = self._reader()
        if client is self.primary:
            return op(self.primary)
        try:
            return op(client)
        except redis.RedisError:
            return op(self.primary)

    def key_exists(self, key: str) -> bool:
        """Return whether ``key`` exists on the primary."""
        return self.primary.exists(key) == 1

    def ttl(self, key: str) -> int:
        """Return the remaining time to live of ``key`` in seconds (-1 no expiry, -2 missing)."""
        return self._read(lambda c: c.ttl(key))

    def keys(self, pattern: str) -> list[str]:
        """Return the keys matching ``pattern``."""
        return list(self._read(lambda c: c.keys(pattern)) or [])

    def get_string(self, key: str) -> str:
        """Return the value of ``key``, or an empty string if it is missing."""
        value = self._read(lambda c: c.get(key))
        return "" if value is None else value

    def mget(self, *args: str) -> list[Any] | None:
        """Return the values of the given keys.

        In cluster mode the values are fetched through a pipeline and None is
        returned if any key is missing.
        """
        if self.is_cluster:
            return _wrap_mget(self.primary, args)
        return list(self._read(lambda c: c.mget(list(args))))

    def hget(self, key: str, field: str) -> str:
        """Return one field of a hash, or an empty string if it is missing."""
        value = self._read(lambda c: c.hget(key, field))
        return "" if value is None else value

    def hmget(self, key: str, *args: str) -> list[Any]:
        """Return several fields of a hash; missing fields are None."""
        return list(self._read(lambda c: c.hmget(key, list(args))))

    def hgetall(self, key: str) -> dict[str, Any]:
        """Return every field and value of a hash."""
        return dict(self._read(lambda c: c.hgetall(key)) or {})

    def hgets(self, keys_with_fields: Mapping[str, str]) -> dict[str, Any]:
        """Return one field from each of several hashes, keyed by hash name.

        Missing hashes or fields map to an empty string.
        """
        pipe = self._reader().pipeline()
        keys = list(keys_with_fields)
        for key in keys:
            pipe.hget(key, keys_with_fields[key])
        values = pipe.execute()
        return {key: "" if value is None else value for key, value in zip(keys, values)}

    def get_lrange(self, key: str, start: int, stop: int) -> list[str]:
        """Return the elements of a list between ``start`` and ``stop`` inclusive."""
        return list(self._read(lambda c: c.lrange(key, start, stop)) or [])

    def smembers(self, key: str) -> list[str]:
        """Return the members of a set."""
        return list(self._read(lambda c: c.smembers(key)) or [])

    def sismember(self, key: str, element: Any) -> bool:
        """Return whether ``element`` is a member of the set ``key``."""
        return bool(self._read(lambda c: c.sismember(key, element)))

    def srandmember_n(self, key: str, count: int) -> list[str]:
        """Return up to ``count`` random members of a set.

        A failing replica is not retried on the primary.
        """
        return list(self._reader().srandmember(key, count) or [])