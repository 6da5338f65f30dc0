"""Issued and verified token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Type, TypeVar

from ..claims.types import Claims
from ..errors import SerializationError
from ..utils.encoding import unmarshal
from .header import Header

T = TypeVar("T")


@dataclass(frozen=True)
class IssuedToken:
    token: str
    token_id: str
    payload: Dict[str, Any]


@dataclass(frozen=True)
class VerifiedToken:
    """A token whose signature and standard claims have been checked."""

    token: str
    header: Header
    payload: bytes
    standard_claims: Claims

    def claims(self) -> Dict[str, Any]:
        """Return the full payload as a dict."""
        return unmarshal(self.payload)

    def claims_into(self, cls: Type[T]) -> T:
        """Build ``cls`` from the payload via ``from_dict`` or keyword arguments."""
        data = self.claims()
        from_dict = getattr(cls, "from_dict", None)
        if callable(from_dict):
            return from_dict(data)
        try:
            return cls(**data)
        except TypeError as exc:
            raise SerializationError(f"cannot unmarshal payload into {cls.__name__}: {exc}") from exc


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    reason: str
    token: VerifiedToken | None = None
