"""In-memory token revocation."""

from __future__ import annotations

import hashlib
import logging
import threading
from datetime import datetime
from typing import TYPE_CHECKING, Dict, Optional, Union

from ..errors import BlockedTokenError
from ..utils.time import Clock, unix_seconds, utc_now
from .types import Claims

if TYPE_CHECKING:
    from ..token.types import VerifiedToken

logger = logging.getLogger(__name__)


def _entry_key(token: Union[str, bytes], claims: Claims) -> str:
    if claims.id:
        return f"jti:{claims.id}"
    raw = token.encode("utf-8") if isinstance(token, str) else token
    return f"sha256:{hashlib.sha256(raw).hexdigest()}"


class Blocklist:
    """Invalidate tokens before they expire.

    Entries are keyed by ``jti`` when the token has one, otherwise by a hash
    of the token. Each entry is dropped once the token's own ``exp`` passes;
    tokens without ``exp`` stay blocked until removed. Instances are usable
    as a verifier validator.
    """

    def __init__(self, *, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._entries: Dict[str, int] = {}
        self._lock = threading.Lock()

    def invalidate(self, token: Union[str, bytes], claims: Claims) -> None:
        now = unix_seconds(self._clock())
        with self._lock:
            self._gc_locked(now)
            self._entries[_entry_key(token, claims)] = claims.expiry
        logger.debug("token invalidated expiry=%s", claims.expiry)

    def has(self, token: Union[str, bytes], claims: Claims) -> bool:
        now = unix_seconds(self._clock())
        key = _entry_key(token, claims)
        with self._lock:
            expiry = self._entries.get(key)
            if expiry is None:
                return False
            if 0 < expiry < now:
                self._entries.pop(key, None)
                return False
            return True

    def remove(self, token: Union[str, bytes], claims: Claims) -> None:
        with self._lock:
            self._entries.pop(_entry_key(token, claims), None)

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def gc(self, now: Optional[datetime] = None) -> int:
        """Drop entries whose token has expired; return how many were removed."""
        current = unix_seconds(now or self._clock())
        with self._lock:
            removed = self._gc_locked(current)
        if removed:
            logger.debug("blocklist gc removed=%d", removed)
        return removed

    def _gc_locked(self, now: int) -> int:
        expired = [k for k, exp in self._entries.items() if 0 < exp < now]
        for k in expired:
            self._entries.pop(k, None)
        return len(expired)

    def __call__(self, token: "VerifiedToken", now: datetime) -> None:
        if self.has(token.token, token.standard_claims):
            raise BlockedTokenError("token is blocked")
