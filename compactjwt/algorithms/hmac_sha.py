"""HMAC-SHA2 family (HS256, HS384, HS512)."""

from __future__ import annotations

import hmac
from hashlib import sha256, sha384, sha512
from typing import Any, Callable

from ..errors import InvalidKeyError, SignatureMismatchError
from .base import Algorithm


def _secret(key: Any) -> bytes:
    if isinstance(key, str):
        key = key.encode("utf-8")
    if not isinstance(key, (bytes, bytearray)):
        raise InvalidKeyError(f"HMAC requires a bytes secret, got {type(key).__name__}")
    if not key:
        raise InvalidKeyError("HMAC secret is empty")
    return bytes(key)


class HMACAlgorithm(Algorithm):
    """Symmetric shared-secret signatures."""

    def __init__(self, name: str, digestmod: Callable[..., Any]) -> None:
        self.name = name
        self._digestmod = digestmod

    def sign(self, signing_input: bytes, key: Any) -> bytes:
        return hmac.new(_secret(key), signing_input, self._digestmod).digest()

    def verify(self, signing_input: bytes, signature: bytes, key: Any) -> None:
        expected = hmac.new(_secret(key), signing_input, self._digestmod).digest()
        if not hmac.compare_digest(expected, signature):
            raise SignatureMismatchError("invalid token signature")


HS256 = HMACAlgorithm("HS256", sha256)
HS384 = HMACAlgorithm("HS384", sha384)
HS512 = HMACAlgorithm("HS512", sha512)
