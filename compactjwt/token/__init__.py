"""Compact token encoding, issuance and verification."""

from .codec import decode_token, encode_token
from .header import Header
from .issuer import TokenIssuer
from .types import IssuedToken, VerificationResult, VerifiedToken
from .verifier import TokenVerifier

__all__ = [
    "encode_token",
    "decode_token",
    "Header",
    "TokenIssuer",
    "TokenVerifier",
    "IssuedToken",
    "VerifiedToken",
    "VerificationResult",
]
