"""Registry mapping JOSE ``alg`` names to algorithm values."""

from __future__ import annotations

from typing import Dict, List

from ..errors import UnknownAlgorithmError
from .base import Algorithm
from .ecdsa import ES256, ES384, ES512
from .eddsa import EdDSA
from .hmac_sha import HS256, HS384, HS512
from .rsa import PS256, PS384, PS512, RS256, RS384, RS512


class AlgorithmRegistry:
    """In-memory registry of signing algorithms by name."""

    def __init__(self) -> None:
        self._algorithms: Dict[str, Algorithm] = {}

    def register(self, algorithm: Algorithm) -> None:
        self._algorithms[algorithm.name] = algorithm

    def get(self, name: str) -> Algorithm:
        try:
            return self._algorithms[name]
        except KeyError:
            raise UnknownAlgorithmError(f"unknown token algorithm {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._algorithms

    def names(self) -> List[str]:
        return list(self._algorithms)

    def all(self) -> Dict[str, Algorithm]:
        return dict(self._algorithms)


DEFAULT_REGISTRY = AlgorithmRegistry()
for _alg in (HS256, HS384, HS512, RS256, RS384, RS512, PS256, PS384, PS512, ES256, ES384, ES512, EdDSA):
    DEFAULT_REGISTRY.register(_alg)
del _alg


def get_algorithm(name: str) -> Algorithm:
    """Return the registered algorithm for ``name`` from the default registry."""
    return DEFAULT_REGISTRY.get(name)
