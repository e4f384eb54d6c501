"""Registered route information used for path and method matching."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from beankit.urlpath import Path, parse_path


@dataclass
class Route:
    """A registered route: method, path template, name and parsed template."""

    method: str
    path: str
    name: str = ""
    path_segment: Path = field(init=False)

    def __post_init__(self) -> None:
        self.path_segment = parse_path(self.path)


def build_routes(registered: Iterable[tuple[str, str, str]]) -> list[Route]:
    """Build routes from ``(method, path, name)`` triples, keeping their order."""
    return [Route(method, path, name) for method, path, name in registered]