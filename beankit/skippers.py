"""Regular-expression based path skippers for sampling, access logs and metrics."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

PathSkipper = Callable[[str], bool]


def _never_skip(path: str) -> bool:
    return False


_skip_sampling: PathSkipper = _never_skip


def skip_sampling(path: str) -> bool:
    """Return whether ``path`` should be left out of trace sampling."""
    return _skip_sampling(path)


def _compile_unique(paths: Iterable[str]) -> list[re.Pattern[str]]:
    return [re.compile(p) for p in dict.fromkeys(paths)]


def _path_skipper(patterns: list[re.Pattern[str]]) -> PathSkipper:
    if not patterns:
        return _never_skip

    def skipper(path: str) -> bool:
        return any(p.search(path) for p in patterns)

    return skipper


def set_sampling_path_skipper(skip_paths: Iterable[str]) -> None:
    """Replace the sampling skipper; it takes effect only with more than one unique pattern."""
    global _skip_sampling
    patterns = _compile_unique(skip_paths)
    if len(patterns) > 1:
        _skip_sampling = _path_skipper(patterns)


def init_access_log_path_skipper(skip_paths: Iterable[str]) -> PathSkipper:
    """Return a skipper that is true for request paths matching any pattern."""
    return _path_skipper(_compile_unique(skip_paths))


def init_prometheus_path_skipper(skip_paths: Iterable[str], metrics_path: str) -> PathSkipper:
    """Return a skipper that also skips ``metrics_path``; raise ValueError if it is empty."""
    if not metrics_path:
        raise ValueError("metrics path is empty")
    return _path_skipper(_compile_unique([*skip_paths, metrics_path]))