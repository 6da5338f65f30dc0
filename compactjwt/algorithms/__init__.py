"""Signing algorithms and their registry."""

from .base import Algorithm
from .ecdsa import ES256, ES384, ES512, ECDSAAlgorithm
from .eddsa import EdDSA, EdDSAAlgorithm
from .hmac_sha import HS256, HS384, HS512, HMACAlgorithm
from .registry import DEFAULT_REGISTRY, AlgorithmRegistry, get_algorithm
from .rsa import PS256, PS384, PS512, RS256, RS384, RS512, RSAAlgorithm, RSAPSSAlgorithm

__all__ = [
    "Algorithm",
    "AlgorithmRegistry",
    "DEFAULT_REGISTRY",
    "get_algorithm",
    "HMACAlgorithm",
    "RSAAlgorithm",
    "RSAPSSAlgorithm",
    "ECDSAAlgorithm",
    "EdDSAAlgorithm",
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
]
