"""Helpers for dataclasses tagged with JSON names through field metadata.

A field's tags live in its metadata, e.g. ``field(metadata={"json": "name,omitempty"})``.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any


def _is_empty(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        out: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            tag = f.metadata.get("json", "")
            name, *options = tag.split(",")
            if name == "-" and not options:
                continue
            item = getattr(value, f.name)
            if "omitempty" in options and _is_empty(item):
                continue
            out[name or f.name] = _to_jsonable(item)
        return out
    if isinstance(value, dict):
        return {k: _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    return value


def struct_to_map(data: Any) -> dict[str, Any]:
    """Convert ``data`` to a plain dict through its JSON form, honouring ``json`` tags.

    Raises TypeError if the value cannot be serialised or is not a JSON object.
    """
    result = json.loads(json.dumps(_to_jsonable(data)))
    if not isinstance(result, dict):
        raise TypeError(f"cannot convert {type(data).__name__} to a map")
    return result


def is_tag_exist(tag: str, key: str, obj: Any) -> bool:
    """Return whether any field of the dataclass ``obj`` has ``tag`` as its ``key`` tag name."""
    if not dataclasses.is_dataclass(obj):
        raise TypeError("Bad type")
    return any(
        f.metadata.get(key, "").split(",")[0] == tag for f in dataclasses.fields(obj)
    )