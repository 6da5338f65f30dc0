"""Registered claims, merging and validation."""

from .blocklist import Blocklist
from .merge import merge
from .types import Claims
from .validation import Expected, Leeway, Required, Validator, validate_claims

__all__ = ["Claims", "merge", "validate_claims", "Validator", "Leeway", "Expected", "Required", "Blocklist"]
