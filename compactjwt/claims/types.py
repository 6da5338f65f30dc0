"""Standard registered claims."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Mapping, Union

from ..errors import SerializationError
from ..utils.time import unix_seconds

_NUMERIC = {"nbf": "not_before", "iat": "issued_at", "exp": "expiry"}
_STRINGS = {"jti": "id", "iss": "issuer", "sub": "subject"}


def _numeric_date(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SerializationError(f'"{key}" claim must be a number, got {type(value).__name__}')
    if isinstance(value, float) and not math.isfinite(value):
        raise SerializationError(f'"{key}" claim must be a finite number')
    return int(value)


@dataclass
class Claims:
    """The registered JWT claims.

    Zero or empty fields are "not asserted": they are omitted from the
    payload and skipped by validation. Times are Unix seconds.
    """

    not_before: int = 0
    issued_at: int = 0
    expiry: int = 0
    id: str = ""
    issuer: str = ""
    subject: str = ""
    audience: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON claim mapping, omitting unset fields."""
        out: Dict[str, Any] = {}
        for key, attr in (*_NUMERIC.items(), *_STRINGS.items()):
            value = getattr(self, attr)
            if value:
                out[key] = value
        if self.audience:
            out["aud"] = list(self.audience)
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Claims":
        """Read the registered claims from a decoded payload; other keys are ignored."""
        if not isinstance(data, Mapping):
            raise SerializationError(f"claims payload must be a JSON object, got {type(data).__name__}")
        values: Dict[str, Any] = {}
        for key, attr in _NUMERIC.items():
            if data.get(key) is not None:
                values[attr] = _numeric_date(key, data[key])
        for key, attr in _STRINGS.items():
            value = data.get(key)
            if value is not None:
                if not isinstance(value, str):
                    raise SerializationError(f'"{key}" claim must be a string')
                values[attr] = value
        aud = data.get("aud")
        if isinstance(aud, str):
            values["audience"] = [aud]
        elif isinstance(aud, list) and all(isinstance(item, str) for item in aud):
            values["audience"] = list(aud)
        elif aud is not None:
            raise SerializationError('"aud" claim must be a string or a list of strings')
        return cls(**values)

    def with_max_age(self, now: datetime, max_age: Union[timedelta, int]) -> "Claims":
        """Return a copy issued at ``now`` that expires ``max_age`` later."""
        seconds = int(max_age.total_seconds()) if isinstance(max_age, timedelta) else int(max_age)
        issued_at = unix_seconds(now)
        return dataclasses.replace(self, issued_at=issued_at, expiry=issued_at + seconds)

    def timeleft(self, now: datetime) -> int:
        """Seconds until expiry; 0 when expired or no ``exp`` is set."""
        if self.expiry <= 0:
            return 0
        return max(self.expiry - unix_seconds(now), 0)
