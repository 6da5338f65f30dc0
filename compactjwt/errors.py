"""Token error hierarchy.

Every error carries a short ``reason`` code so callers can tell a garbage
token from a bad signature from a wrong key without string matching.
"""

from __future__ import annotations


class TokenError(Exception):
    """Base exception for all token errors."""

    reason = "token_error"


class ConfigError(TokenError):
    """Raised for invalid configuration values."""

    reason = "invalid_config"


class InvalidKeyError(TokenError):
    """Key type or family does not match what the algorithm requires."""

    reason = "invalid_key"


class MalformedTokenError(TokenError):
    """Wrong segment count, bad base64url, or an unreadable header."""

    reason = "malformed_token"


class MissingTokenError(MalformedTokenError):
    """Token is empty."""

    reason = "missing_token"


class TokenAlgorithmError(TokenError):
    """Header ``alg`` cannot be used with the requested algorithm."""

    reason = "token_algorithm"


class UnknownAlgorithmError(TokenAlgorithmError):
    """Header ``alg`` is not a registered algorithm name."""

    reason = "unknown_algorithm"


class AlgorithmMismatchError(TokenAlgorithmError):
    """Header ``alg`` names a different algorithm than the verifier's."""

    reason = "algorithm_mismatch"


class SignatureMismatchError(TokenError):
    """Token is well formed but its signature does not verify."""

    reason = "invalid_signature"


class SigningFailedError(TokenError):
    """Underlying cryptographic primitive could not produce a signature."""

    reason = "signing_failed"


class SerializationError(TokenError):
    """JSON marshal or unmarshal of header or claims failed."""

    reason = "serialization_failed"


class ClaimsError(TokenError):
    """Base for claim checks applied after signature verification."""

    reason = "invalid_claims"


class ExpiredError(ClaimsError):
    """Token used after its ``exp`` claim."""

    reason = "expired"


class NotValidYetError(ClaimsError):
    """Token used before its ``nbf`` claim."""

    reason = "not_valid_yet"


class IssuedInTheFutureError(ClaimsError):
    """Token ``iat`` claim is later than the current time."""

    reason = "issued_in_the_future"


class UnexpectedClaimError(ClaimsError):
    """A claim does not hold the expected value."""

    reason = "unexpected_claim"

    def __init__(self, claim: str, message: str | None = None) -> None:
        self.claim = claim
        super().__init__(message or f'unexpected value for "{claim}" claim')


class MissingClaimError(ClaimsError):
    """A required claim is absent from the payload."""

    reason = "missing_claim"

    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(f'token is missing the "{claim}" claim')


class BlockedTokenError(ClaimsError):
    """Token was invalidated through a blocklist."""

    reason = "blocked"
