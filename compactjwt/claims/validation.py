"""Time-based acceptance checks and extra claim validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Callable, List, Tuple, Union

from ..errors import (
    ExpiredError,
    IssuedInTheFutureError,
    MissingClaimError,
    NotValidYetError,
    UnexpectedClaimError,
)
from ..utils.time import unix_seconds
from .types import Claims

if TYPE_CHECKING:
    from ..token.types import VerifiedToken

Validator = Callable[["VerifiedToken", datetime], None]


def validate_claims(now: datetime, claims: Claims) -> None:
    """Check ``nbf``, ``iat`` and ``exp`` against ``now``.

    ``now`` is floored to whole seconds. Unset (zero) claims are skipped and
    only the first violation is raised. ``exp`` itself is still valid.
    """
    current = unix_seconds(now)

    if claims.not_before > 0 and current < claims.not_before:
        raise NotValidYetError("token not valid yet")

    if claims.issued_at > 0 and current < claims.issued_at:
        raise IssuedInTheFutureError("token issued in the future")

    if claims.expiry > 0 and current > claims.expiry:
        raise ExpiredError("token expired")


@dataclass(frozen=True)
class Leeway:
    """Reject tokens that expire within ``seconds`` of now."""

    seconds: Union[int, timedelta]

    def __call__(self, token: "VerifiedToken", now: datetime) -> None:
        leeway = self.seconds
        if isinstance(leeway, timedelta):
            leeway = int(leeway.total_seconds())
        expiry = token.standard_claims.expiry
        if expiry > 0 and unix_seconds(now) + leeway > expiry:
            raise ExpiredError("token expires within the allowed leeway")


@dataclass(frozen=True)
class Expected:
    """Require registered claims to hold given values.

    Empty fields are not checked. Every expected audience must appear in the
    token's audience.
    """

    issuer: str = ""
    subject: str = ""
    id: str = ""
    audience: List[str] = field(default_factory=list)

    def __call__(self, token: "VerifiedToken", now: datetime) -> None:
        claims = token.standard_claims
        checks: Tuple[Tuple[str, str, str], ...] = (
            ("iss", self.issuer, claims.issuer),
            ("sub", self.subject, claims.subject),
            ("jti", self.id, claims.id),
        )
        for key, expected, actual in checks:
            if expected and expected != actual:
                raise UnexpectedClaimError(key)
        missing = [aud for aud in self.audience if aud not in claims.audience]
        if missing:
            raise UnexpectedClaimError("aud", f'"aud" claim does not include {", ".join(missing)}')


class Required:
    """Require the payload to carry each of the given keys."""

    def __init__(self, *keys: str) -> None:
        self.keys = keys

    def __call__(self, token: "VerifiedToken", now: datetime) -> None:
        payload = token.claims()
        for key in self.keys:
            if key not in payload:
                raise MissingClaimError(key)
