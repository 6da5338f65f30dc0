"""Token header model."""

from __future__ import annotations

from dataclasses import dataclass

from ..algorithms.base import Algorithm
from ..errors import MalformedTokenError, SerializationError
from ..utils.encoding import marshal, unmarshal

TOKEN_TYPE = "JWT"


@dataclass(frozen=True)
class Header:
    """The ``{"alg", "typ"}`` header segment."""

    alg: str
    typ: str = TOKEN_TYPE

    @classmethod
    def for_algorithm(cls, algorithm: Algorithm) -> "Header":
        return cls(alg=algorithm.name)

    def to_json(self) -> bytes:
        return marshal({"alg": self.alg, "typ": self.typ})

    @classmethod
    def from_json(cls, raw: bytes) -> "Header":
        """Parse a decoded header segment.

        Only ``alg`` is required; a missing ``typ`` reads as the default.
        """
        try:
            data = unmarshal(raw)
        except SerializationError as exc:
            raise MalformedTokenError("token header is not valid JSON") from exc
        if not isinstance(data, dict) or not isinstance(data.get("alg"), str):
            raise MalformedTokenError('token header must be a JSON object with a string "alg"')
        typ = data.get("typ", TOKEN_TYPE)
        if not isinstance(typ, str):
            raise MalformedTokenError('token header "typ" must be a string')
        return cls(alg=data["alg"], typ=typ)
