"""Utility helpers for encoding and time operations."""

from .encoding import b64url_decode, b64url_encode, marshal, unmarshal
from .time import Clock, unix_seconds, utc_now

__all__ = ["b64url_encode", "b64url_decode", "marshal", "unmarshal", "Clock", "unix_seconds", "utc_now"]
