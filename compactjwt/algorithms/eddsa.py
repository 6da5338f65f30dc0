"""EdDSA over Ed25519 or Ed448 keys."""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519, ed448

from ..errors import InvalidKeyError, SignatureMismatchError
from .base import Algorithm

_PRIVATE_KEYS = (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey)
_PUBLIC_KEYS = (ed25519.Ed25519PublicKey, ed448.Ed448PublicKey)


class EdDSAAlgorithm(Algorithm):
    """Edwards-curve signatures; the curve follows the key."""

    name = "EdDSA"

    def sign(self, signing_input: bytes, key: Any) -> bytes:
        if not isinstance(key, _PRIVATE_KEYS):
            raise InvalidKeyError(f"EdDSA signing requires an Ed25519 or Ed448 private key, got {type(key).__name__}")
        return key.sign(signing_input)

    def verify(self, signing_input: bytes, signature: bytes, key: Any) -> None:
        if isinstance(key, _PRIVATE_KEYS):
            key = key.public_key()
        if not isinstance(key, _PUBLIC_KEYS):
            raise InvalidKeyError(f"EdDSA verification requires an Ed25519 or Ed448 key, got {type(key).__name__}")
        try:
            key.verify(signature, signing_input)
        except InvalidSignature as exc:
            raise SignatureMismatchError("invalid token signature") from exc


EdDSA = EdDSAAlgorithm()
