"""RSA families: RSASSA-PKCS1-v1_5 (RS*) and RSASSA-PSS (PS*)."""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.asymmetric.padding import AsymmetricPadding

from ..errors import InvalidKeyError, SignatureMismatchError, SigningFailedError
from .base import Algorithm


def _public_key(key: Any) -> rsa.RSAPublicKey:
    if isinstance(key, rsa.RSAPublicKey):
        return key
    if isinstance(key, rsa.RSAPrivateKey):
        return key.public_key()
    raise InvalidKeyError(f"RSA verification requires an RSA key, got {type(key).__name__}")


class RSAAlgorithm(Algorithm):
    """RSASSA-PKCS1-v1_5 signatures; deterministic for a given key and input."""

    def __init__(self, name: str, hash_alg: hashes.HashAlgorithm) -> None:
        self.name = name
        self._hash = hash_alg

    def _padding(self) -> AsymmetricPadding:
        return padding.PKCS1v15()

    def sign(self, signing_input: bytes, key: Any) -> bytes:
        if not isinstance(key, rsa.RSAPrivateKey):
            raise InvalidKeyError(f"{self.name} signing requires an RSA private key, got {type(key).__name__}")
        try:
            return key.sign(signing_input, self._padding(), self._hash)
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise SigningFailedError(f"{self.name} signing failed: {exc}") from exc

    def verify(self, signing_input: bytes, signature: bytes, key: Any) -> None:
        public_key = _public_key(key)
        try:
            public_key.verify(signature, signing_input, self._padding(), self._hash)
        except InvalidSignature as exc:
            raise SignatureMismatchError("invalid token signature") from exc


class RSAPSSAlgorithm(RSAAlgorithm):
    """RSASSA-PSS with MGF1 over the same hash and a digest-sized salt."""

    def _padding(self) -> AsymmetricPadding:
        return padding.PSS(mgf=padding.MGF1(self._hash), salt_length=self._hash.digest_size)


RS256 = RSAAlgorithm("RS256", hashes.SHA256())
RS384 = RSAAlgorithm("RS384", hashes.SHA384())
RS512 = RSAAlgorithm("RS512", hashes.SHA512())

PS256 = RSAPSSAlgorithm("PS256", hashes.SHA256())
PS384 = RSAPSSAlgorithm("PS384", hashes.SHA384())
PS512 = RSAPSSAlgorithm("PS512", hashes.SHA512())
