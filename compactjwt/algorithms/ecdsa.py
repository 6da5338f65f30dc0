"""ECDSA family (ES256, ES384, ES512) with JOSE ``R || S`` signatures."""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import decode_dss_signature, encode_dss_signature

from ..errors import InvalidKeyError, SignatureMismatchError, SigningFailedError
from .base import Algorithm


class ECDSAAlgorithm(Algorithm):
    """ECDSA bound to one curve and hash.

    Signatures are randomized, so two tokens over the same input differ.
    """

    def __init__(self, name: str, hash_alg: hashes.HashAlgorithm, curve: type[ec.EllipticCurve]) -> None:
        self.name = name
        self._hash = hash_alg
        self._curve = curve

    def _check_curve(self, key: ec.EllipticCurvePrivateKey | ec.EllipticCurvePublicKey) -> int:
        if not isinstance(key.curve, self._curve):
            raise InvalidKeyError(f"{self.name} requires a {self._curve.name} key, got {key.curve.name}")
        return (key.curve.key_size + 7) // 8

    def sign(self, signing_input: bytes, key: Any) -> bytes:
        if not isinstance(key, ec.EllipticCurvePrivateKey):
            raise InvalidKeyError(f"{self.name} signing requires an EC private key, got {type(key).__name__}")
        size = self._check_curve(key)
        try:
            der = key.sign(signing_input, ec.ECDSA(self._hash))
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise SigningFailedError(f"{self.name} signing failed: {exc}") from exc
        r, s = decode_dss_signature(der)
        return r.to_bytes(size, "big") + s.to_bytes(size, "big")

    def verify(self, signing_input: bytes, signature: bytes, key: Any) -> None:
        if isinstance(key, ec.EllipticCurvePrivateKey):
            key = key.public_key()
        if not isinstance(key, ec.EllipticCurvePublicKey):
            raise InvalidKeyError(f"{self.name} verification requires an EC key, got {type(key).__name__}")
        size = self._check_curve(key)
        if len(signature) != 2 * size:
            raise SignatureMismatchError("invalid token signature")
        r = int.from_bytes(signature[:size], "big")
        s = int.from_bytes(signature[size:], "big")
        try:
            key.verify(encode_dss_signature(r, s), signing_input, ec.ECDSA(self._hash))
        except InvalidSignature as exc:
            raise SignatureMismatchError("invalid token signature") from exc


ES256 = ECDSAAlgorithm("ES256", hashes.SHA256(), ec.SECP256R1)
ES384 = ECDSAAlgorithm("ES384", hashes.SHA384(), ec.SECP384R1)
ES512 = ECDSAAlgorithm("ES512", hashes.SHA512(), ec.SECP521R1)
