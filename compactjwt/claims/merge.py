"""Flat merge of two claim values into one JSON object."""

from __future__ import annotations

import json
from typing import Any

from ..errors import SerializationError
from ..utils.encoding import marshal

_EMPTY = (b"", b"{}", b"null")


class _Object(list):
    """JSON object kept as an ordered list of (key, value) pairs."""


def _parse_object(raw: bytes) -> _Object:
    try:
        parsed = json.loads(raw, object_pairs_hook=_Object)
    except ValueError as exc:
        raise SerializationError(f"cannot merge claims: {exc}") from exc
    if not isinstance(parsed, _Object):
        raise SerializationError("cannot merge claims: both operands must serialize to JSON objects")
    return parsed


def _dump(value: Any) -> str:
    if isinstance(value, _Object):
        return "{" + ",".join(f"{json.dumps(k, ensure_ascii=False)}:{_dump(v)}" for k, v in value) + "}"
    if isinstance(value, list):
        return "[" + ",".join(_dump(item) for item in value) + "]"
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def merge(primary: Any, secondary: Any) -> bytes:
    """Merge two claim values into a single flat JSON object.

    Accepts mappings, dataclasses, ``Claims`` or raw JSON bytes. An empty
    secondary returns the primary's serialization unchanged. Entries keep
    their order, primary first. Duplicate keys are not removed: if both sides
    set the same key the result carries both, and which one wins is up to the
    parser reading it. Callers must keep the two key sets disjoint.
    """
    primary_raw = marshal(primary)
    secondary_raw = marshal(secondary)
    if secondary_raw.strip() in _EMPTY:
        return primary_raw

    entries = _Object(_parse_object(primary_raw) + _parse_object(secondary_raw))
    return _dump(entries).encode("utf-8")
