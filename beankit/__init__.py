"""Building blocks for web services: path templates, routes, skippers, string helpers, Redis reads and worker pools."""

__version__ = "0.1.0"

__all__ = [
    "urlpath",
    "routes",
    "skippers",
    "structure",
    "strutil",
    "server_header",
    "redisread",
    "gopool",
]