"""Compact token encoding and verified decoding."""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from ..algorithms.base import Algorithm
from ..algorithms.registry import DEFAULT_REGISTRY, AlgorithmRegistry
from ..errors import (
    AlgorithmMismatchError,
    MalformedTokenError,
    MissingTokenError,
    SigningFailedError,
    TokenError,
)
from ..utils.encoding import b64url_decode, b64url_encode, marshal
from .header import Header

SEPARATOR = b"."


def encode_token(algorithm: Algorithm, key: Any, claims: Any) -> str:
    """Sign ``claims`` and return the compact ``header.payload.signature`` token.

    ``claims`` may be any JSON-serializable value or pre-serialized JSON bytes.
    """
    header_segment = b64url_encode(Header.for_algorithm(algorithm).to_json())
    payload_segment = b64url_encode(marshal(claims))
    signing_input = header_segment + SEPARATOR + payload_segment

    try:
        signature = algorithm.sign(signing_input, key)
    except TokenError:
        raise
    except Exception as exc:
        raise SigningFailedError(f"{algorithm.name} signing failed: {exc}") from exc

    return (signing_input + SEPARATOR + b64url_encode(signature)).decode("ascii")


def split_token(token: Union[str, bytes]) -> Tuple[bytes, bytes, bytes]:
    """Split a token into its three encoded segments."""
    if isinstance(token, str):
        try:
            token = token.encode("ascii")
        except UnicodeEncodeError as exc:
            raise MalformedTokenError("token contains non-ASCII characters") from exc
    if not token:
        raise MissingTokenError("token is missing")
    parts = token.split(SEPARATOR)
    if len(parts) != 3:
        raise MalformedTokenError(f"token must have 3 segments, got {len(parts)}")
    return parts[0], parts[1], parts[2]


def _decode_segment(segment: bytes, name: str) -> bytes:
    try:
        return b64url_decode(segment)
    except ValueError as exc:
        raise MalformedTokenError(f"token {name} segment is not valid base64url") from exc


def decode_header(header_segment: bytes) -> Header:
    return Header.from_json(_decode_segment(header_segment, "header"))


def decode_token(
    algorithm: Algorithm,
    key: Any,
    token: Union[str, bytes],
    *,
    registry: Optional[AlgorithmRegistry] = None,
) -> bytes:
    """Verify ``token`` and return its raw payload JSON.

    The header must name ``algorithm``: an unregistered ``alg`` raises
    ``UnknownAlgorithmError`` and a different registered one raises
    ``AlgorithmMismatchError``. The payload is not read before the signature
    verifies.
    """
    return decode_token_with_header(algorithm, key, token, registry=registry)[1]


def decode_token_with_header(
    algorithm: Algorithm,
    key: Any,
    token: Union[str, bytes],
    *,
    registry: Optional[AlgorithmRegistry] = None,
) -> Tuple[Header, bytes]:
    """Like ``decode_token`` but also return the parsed header."""
    header_segment, payload_segment, signature_segment = split_token(token)

    header = decode_header(header_segment)
    payload = _decode_segment(payload_segment, "payload")
    signature = _decode_segment(signature_segment, "signature")

    if header.alg != algorithm.name:
        # unregistered names raise UnknownAlgorithmError here
        (registry or DEFAULT_REGISTRY).get(header.alg)
        raise AlgorithmMismatchError(f"token algorithm {header.alg!r} does not match {algorithm.name!r}")

    algorithm.verify(header_segment + SEPARATOR + payload_segment, signature, key)
    return header, payload
