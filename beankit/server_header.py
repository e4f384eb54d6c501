"""WSGI middleware that adds a ``Server`` header to every response."""

from __future__ import annotations

import posixpath
from collections.abc import Callable, Iterable
from typing import Any

WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]


def _join_path(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    return posixpath.normpath(joined) if joined else ""


def server_header(name: str, version: str) -> Callable[[WSGIApp], WSGIApp]:
    """Return middleware that sets ``Server: name/version`` unless the app sets its own."""
    value = _join_path(name, version)

    def middleware(app: WSGIApp) -> WSGIApp:
        def wrapped(environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
            def start(status: str, headers: list[tuple[str, str]], exc_info: Any = None) -> Any:
                if not any(header.lower() == "server" for header, _ in headers):
                    headers = [*headers, ("Server", value)]
                if exc_info is None:
                    return start_response(status, headers)
                return start_response(status, headers, exc_info)

            return app(environ, start)

        return wrapped

    return middleware