"""compactjwt package.

Issue and verify compact signed JSON Web Tokens (JWS compact serialization)
with HMAC, RSA, RSA-PSS, ECDSA and EdDSA signatures.
"""

from .algorithms import (
    DEFAULT_REGISTRY,
    ES256,
    ES384,
    ES512,
    HS256,
    HS384,
    HS512,
    PS256,
    PS384,
    PS512,
    RS256,
    RS384,
    RS512,
    Algorithm,
    AlgorithmRegistry,
    EdDSA,
    get_algorithm,
)
from .claims import Blocklist, Claims, Expected, Leeway, Required, merge, validate_claims
from .config import TokenConfig
from .errors import (
    AlgorithmMismatchError,
    BlockedTokenError,
    ClaimsError,
    ConfigError,
    ExpiredError,
    InvalidKeyError,
    IssuedInTheFutureError,
    MalformedTokenError,
    MissingClaimError,
    MissingTokenError,
    NotValidYetError,
    SerializationError,
    SignatureMismatchError,
    SigningFailedError,
    TokenAlgorithmError,
    TokenError,
    UnexpectedClaimError,
    UnknownAlgorithmError,
)
from .token import (
    Header,
    IssuedToken,
    TokenIssuer,
    TokenVerifier,
    VerificationResult,
    VerifiedToken,
    decode_token,
    encode_token,
)

__all__ = [
    "Algorithm",
    "AlgorithmRegistry",
    "DEFAULT_REGISTRY",
    "get_algorithm",
    "HS256",
    "HS384",
    "HS512",
    "RS256",
    "RS384",
    "RS512",
    "PS256",
    "PS384",
    "PS512",
    "ES256",
    "ES384",
    "ES512",
    "EdDSA",
    "Claims",
    "merge",
    "validate_claims",
    "Leeway",
    "Expected",
    "Required",
    "Blocklist",
    "TokenConfig",
    "Header",
    "encode_token",
    "decode_token",
    "TokenIssuer",
    "TokenVerifier",
    "IssuedToken",
    "VerifiedToken",
    "VerificationResult",
    "TokenError",
    "ConfigError",
    "InvalidKeyError",
    "MalformedTokenError",
    "MissingTokenError",
    "TokenAlgorithmError",
    "UnknownAlgorithmError",
    "AlgorithmMismatchError",
    "SignatureMismatchError",
    "SigningFailedError",
    "SerializationError",
    "ClaimsError",
    "ExpiredError",
    "NotValidYetError",
    "IssuedInTheFutureError",
    "UnexpectedClaimError",
    "MissingClaimError",
    "BlockedTokenError",
]
