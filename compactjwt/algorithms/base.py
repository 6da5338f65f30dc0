"""Signing algorithm contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Algorithm(ABC):
    """A JWS signing scheme identified by its JOSE ``alg`` name.

    Implementations hold no mutable state and are safe to share across
    threads. Keys are only read for the duration of a call.
    """

    name: str

    @abstractmethod
    def sign(self, signing_input: bytes, key: Any) -> bytes:
        """Return the signature of ``signing_input``.

        Raises ``InvalidKeyError`` when ``key`` is not a signing key of this
        algorithm's family and ``SigningFailedError`` when the primitive fails.
        """

    @abstractmethod
    def verify(self, signing_input: bytes, signature: bytes, key: Any) -> None:
        """Check ``signature`` over ``signing_input``.

        Raises ``InvalidKeyError`` for a key of the wrong family and
        ``SignatureMismatchError`` when the signature does not verify.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
