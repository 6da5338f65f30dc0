"""Token verification with pluggable claim validators."""

from __future__ import annotations

import logging
import os
from typing import Any, List, Optional, Union

from ..algorithms.base import Algorithm
from ..algorithms.registry import AlgorithmRegistry
from ..claims.types import Claims
from ..claims.validation import Leeway, Validator, validate_claims
from ..config import TokenConfig
from ..errors import InvalidKeyError, TokenError
from ..utils.encoding import unmarshal
from ..utils.time import Clock, utc_now
from .codec import decode_token_with_header
from .types import VerificationResult, VerifiedToken

logger = logging.getLogger(__name__)


class TokenVerifier:
    """Verify signed tokens, then their registered claims, then extra validators.

    ``key`` may be a shared secret, a public key, or a private key whose
    public half is used.
    """

    def __init__(
        self,
        key: Any = None,
        *,
        algorithm: Optional[Algorithm] = None,
        config: Optional[TokenConfig] = None,
        clock: Clock = utc_now,
        validators: Optional[List[Validator]] = None,
        registry: Optional[AlgorithmRegistry] = None,
    ) -> None:
        self.config = config or TokenConfig()
        self.algorithm = algorithm or self.config.resolve_algorithm()
        self._key = key if key is not None else (self.config.secret or os.getenv("COMPACTJWT_SECRET"))
        if self._key is None:
            raise InvalidKeyError("no verification key configured")
        self._clock = clock
        self._registry = registry
        self.validators: List[Validator] = list(validators or [])
        if self.config.leeway_seconds:
            self.validators.append(Leeway(self.config.leeway_seconds))

    def verify(self, token: Union[str, bytes], *validators: Validator) -> VerifiedToken:
        """Return the verified token or raise the first ``TokenError`` found."""
        header, payload = decode_token_with_header(self.algorithm, self._key, token, registry=self._registry)
        standard = Claims.from_dict(unmarshal(payload))

        now = self._clock()
        validate_claims(now, standard)

        verified = VerifiedToken(
            token=token if isinstance(token, str) else token.decode("ascii"),
            header=header,
            payload=payload,
            standard_claims=standard,
        )
        for validator in (*self.validators, *validators):
            validator(verified, now)
        return verified

    def check(self, token: Union[str, bytes], *validators: Validator) -> VerificationResult:
        """Like ``verify`` but report failures as a result instead of raising."""
        try:
            verified = self.verify(token, *validators)
        except TokenError as exc:
            logger.debug("token rejected reason=%s", exc.reason)
            return VerificationResult(False, exc.reason)
        return VerificationResult(True, "ok", token=verified)

