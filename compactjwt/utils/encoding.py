"""Base64url and JSON helpers shared by the codec and claims modules."""

from __future__ import annotations

import base64
import binascii
import dataclasses
import json
import re
from typing import Any, Mapping

from ..errors import SerializationError

_B64URL_RE = re.compile(rb"^[A-Za-z0-9_-]*$")


def b64url_encode(data: bytes) -> bytes:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=")


def b64url_decode(segment: bytes | str) -> bytes:
    """Strictly decode an unpadded base64url segment.

    Raises ``ValueError`` for padding, characters outside the alphabet, an
    impossible length, or a non-canonical encoding (unused trailing bits set).
    """
    if isinstance(segment, str):
        segment = segment.encode("ascii", errors="strict")
    if not _B64URL_RE.match(segment):
        raise ValueError("segment is not unpadded base64url")
    if len(segment) % 4 == 1:
        raise ValueError("segment has an invalid base64url length")
    try:
        decoded = base64.urlsafe_b64decode(segment + b"=" * (-len(segment) % 4))
    except binascii.Error as exc:
        raise ValueError(str(exc)) from exc
    if b64url_encode(decoded) != segment:
        raise ValueError("segment is not canonical base64url")
    return decoded


def _to_jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Mapping):
        return dict(value)
    return value


def marshal(value: Any) -> bytes:
    """Serialize ``value`` to compact JSON bytes.

    Bytes are taken as already-serialized JSON and returned unchanged. Objects
    exposing ``to_dict()`` and dataclasses are converted first.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    try:
        return json.dumps(_to_jsonable(value), separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot marshal {type(value).__name__}: {exc}") from exc


def unmarshal(raw: bytes | str) -> Any:
    """Parse JSON bytes, raising ``SerializationError`` on failure."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"cannot unmarshal payload: {exc}") from exc
