# beankit

Building blocks for web services:

- `beankit.urlpath`: parse route templates such as `/shelves/:shelf/books/:book` with `parse_path`, match request paths against them with `Path.match`, and build paths back from a `Match` with `Path.build`.
- `beankit.routes`: turn registered `(method, path, name)` triples into `Route` records with parsed path templates (`build_routes`).
- `beankit.skippers`: regex-based path skippers for access logs (`init_access_log_path_skipper`), metrics (`init_prometheus_path_skipper`) and trace sampling (`set_sampling_path_skipper`, `skip_sampling`).
- `beankit.structure`: convert dataclasses to plain dictionaries through their JSON form (`struct_to_map`) and check whether a field carries a given tag name (`is_tag_exist`). Tags live in field metadata, e.g. `field(metadata={"json": "name,omitempty"})`.
- `beankit.strutil`: string helpers covering blank checks, URL validation, substrings, padding, snake case and random strings.
- `beankit.server_header`: a WSGI middleware that adds a `Server: name/version` response header unless the application sets one.
- `beankit.redisread`: Redis connection settings (`RedisConfig`, `RedisMasterConfig`), `connect_redis_db`, and `RedisReader`, which sends reads to read replicas and falls back to the primary when a replica fails.
- `beankit.gopool`: worker pools with bounded capacity (`Pool`, `new_pool`), a registry of named pools, and release with a timeout (`release_all_pools`).

## Install

```
pip install beankit
```

Install the test tools with `pip install beankit[test]`.

## Examples

Match a path against a template:

```python
from beankit.urlpath import parse_path

path = parse_path("/users/:user/files/*")
match = path.match("/users/alice/files/a/b.txt")
print(match.params, match.trailing)   # {'user': 'alice'} a/b.txt
print(path.build(match))              # /users/alice/files/a/b.txt
```

`match` returns `None` when the input does not fit the template, and `build` returns `None` when a parameter is missing.

Skip health checks in access logs:

```python
from beankit.skippers import init_access_log_path_skipper

skip = init_access_log_path_skipper([r"^/health$"])
print(skip("/health"), skip("/users"))  # True False
```

String helpers:

```python
from beankit.strutil import left_pad_to_length, to_snake_case

print(left_pad_to_length("42", "0", 5))  # 00042
print(to_snake_case("HelloWorld"))       # hello_world
```

Add a `Server` header to a WSGI application:

```python
from beankit.server_header import server_header

app = server_header("myapp", "1.0")(app)
```

Read from Redis through replicas:

```python
from beankit.redisread import RedisReader, connect_redis_db

primary, db = connect_redis_db("", "localhost", "6379", 0, 0, 10, 0, 5.0, 3.0, 3.0, 4.0, False)
replica, _ = connect_redis_db("", "replica-1", "6379", 0, 0, 10, 0, 5.0, 3.0, 3.0, 4.0, True)
reader = RedisReader(primary, reads=[replica], name=db)
print(reader.get_string("greeting"))  # "" when the key is missing
```

Run work in a named pool:

```python
from beankit import gopool

pool = gopool.new_pool(4, None)
gopool.register("jobs", pool)
gopool.get_pool("jobs").submit(lambda: print("done"))
gopool.release_all_pools(1.0)()
```

`release_all_pools` also releases the default pool; it raises `PoolError` if a pool does not finish within the timeout.

## What the package does not do

- `RedisReader` only reads. There are no Redis write operations (setting, deleting or expiring keys, pipelines of writes, scripts), no key-prefixed cache layers, and no per-tenant connection setup.
- There is no in-process cache with time-to-live and no shared application logger.
- It does not run a web server or route requests itself; the route records, skippers and middleware are meant to be wired into an application you provide.

## Tests

```
pytest
```