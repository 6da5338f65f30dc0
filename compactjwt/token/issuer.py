"""Token issuer binding an algorithm, a signing key and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from datetime import timedelta
from typing import Any, Optional, Union
from uuid import uuid4

from ..algorithms.base import Algorithm
from ..claims.merge import merge
from ..claims.types import Claims
from ..config import TokenConfig
from ..errors import InvalidKeyError
from ..utils.encoding import marshal, unmarshal
from ..utils.time import Clock, utc_now
from .codec import encode_token
from .types import IssuedToken

logger = logging.getLogger(__name__)


class TokenIssuer:
    """Issue signed tokens for caller claims plus registered claims."""

    def __init__(
        self,
        key: Any = None,
        *,
        algorithm: Optional[Algorithm] = None,
        config: Optional[TokenConfig] = None,
        clock: Clock = utc_now,
        with_id: bool = False,
    ) -> None:
        self.config = config or TokenConfig()
        self.algorithm = algorithm or self.config.resolve_algorithm()
        self._key = key if key is not None else (self.config.secret or os.getenv("COMPACTJWT_SECRET"))
        if self._key is None:
            raise InvalidKeyError("no signing key configured")
        self._clock = clock
        self.with_id = with_id

    def issue(
        self,
        claims: Any = None,
        *,
        max_age: Union[timedelta, int, None] = None,
        standard: Optional[Claims] = None,
    ) -> IssuedToken:
        """Sign ``claims`` merged with the registered claims.

        ``max_age`` (or the configured default) sets ``iat`` and ``exp``. The
        configured issuer and audience fill ``iss``/``aud`` when ``standard``
        leaves them empty. ``claims`` must not repeat registered keys.
        """
        std = standard or Claims()
        if not std.issuer and self.config.issuer:
            std = replace(std, issuer=self.config.issuer)
        if not std.audience and self.config.audience:
            std = replace(std, audience=list(self.config.audience))
        if self.with_id and not std.id:
            std = replace(std, id=str(uuid4()))

        age = max_age if max_age is not None else self.config.max_age_seconds
        if age:
            std = std.with_max_age(self._clock(), age)

        payload_raw = merge(claims, std) if claims is not None else marshal(std)
        token = encode_token(self.algorithm, self._key, payload_raw)
        logger.debug("token issued alg=%s jti=%s exp=%s", self.algorithm.name, std.id, std.expiry)
        return IssuedToken(token=token, token_id=std.id, payload=unmarshal(payload_raw))
