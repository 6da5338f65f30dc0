"""Environment-driven defaults for issuers and verifiers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

from .algorithms.base import Algorithm
from .algorithms.registry import DEFAULT_REGISTRY, AlgorithmRegistry
from .errors import ConfigError


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class TokenConfig:
    """Defaults shared by ``TokenIssuer`` and ``TokenVerifier``.

    ``max_age_seconds`` and ``leeway_seconds`` of 0 disable the feature.
    """

    algorithm: str = "HS256"
    max_age_seconds: int = 0
    leeway_seconds: int = 0
    issuer: str = ""
    audience: List[str] = field(default_factory=list)
    secret: Optional[str] = None

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """Read ``COMPACTJWT_*`` environment variables."""
        audience = [a.strip() for a in os.getenv("COMPACTJWT_AUDIENCE", "").split(",") if a.strip()]
        return cls(
            algorithm=os.getenv("COMPACTJWT_ALGORITHM", "HS256"),
            max_age_seconds=_int_env("COMPACTJWT_MAX_AGE_SECONDS", 0),
            leeway_seconds=_int_env("COMPACTJWT_LEEWAY_SECONDS", 0),
            issuer=os.getenv("COMPACTJWT_ISSUER", ""),
            audience=audience,
            secret=os.getenv("COMPACTJWT_SECRET") or None,
        )

    def resolve_algorithm(self, registry: Optional[AlgorithmRegistry] = None) -> Algorithm:
        """Look up ``algorithm`` by name, raising ``ConfigError`` if unknown."""
        effective_registry = registry or DEFAULT_REGISTRY
        if self.algorithm not in effective_registry:
            raise ConfigError(f"unknown algorithm {self.algorithm!r}; expected one of: {', '.join(effective_registry.names())}")
        return effective_registry.get(self.algorithm)
