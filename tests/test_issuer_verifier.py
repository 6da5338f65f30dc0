from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from compactjwt import (
    Claims,
    Expected,
    ExpiredError,
    HS256,
    InvalidKeyError,
    Leeway,
    MissingClaimError,
    RS256,
    SerializationError,
    TokenConfig,
    TokenIssuer,
    TokenVerifier,
    UnexpectedClaimError,
    encode_token,
)
from compactjwt.claims import Required

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)
NOW_TS = int(NOW.timestamp())


def fixed(value: datetime):
    return lambda: value


def test_issue_and_verify_with_max_age() -> None:
    issuer = TokenIssuer(b"unit-secret", algorithm=HS256, clock=fixed(NOW))
    issued = issuer.issue({"username": "alice"}, max_age=timedelta(minutes=1))
    assert issued.payload == {"username": "alice", "iat": NOW_TS, "exp": NOW_TS + 60}

    verifier = TokenVerifier(b"unit-secret", algorithm=HS256, clock=fixed(NOW + timedelta(seconds=60)))
    verified = verifier.verify(issued.token)
    assert verified.token == issued.token
    assert verified.header.alg == "HS256"
    assert verified.header.typ == "JWT"
    assert verified.standard_claims.expiry == NOW_TS + 60
    assert verified.claims()["username"] == "alice"


def test_expired_token_rejected() -> None:
    issuer = TokenIssuer(b"unit-secret", algorithm=HS256, clock=fixed(NOW))
    issued = issuer.issue({"username": "alice"}, max_age=60)

    verifier = TokenVerifier(b"unit-secret", algorithm=HS256, clock=fixed(NOW + timedelta(seconds=61)))
    with pytest.raises(ExpiredError):
        verifier.verify(issued.token)

    result = verifier.check(issued.token)
    assert result.valid is False
    assert result.reason == "expired"
    assert result.token is None


def test_check_reports_signature_and_format_failures() -> None:
    issued = TokenIssuer(b"unit-secret", algorithm=HS256).issue({"username": "alice"})
    verifier = TokenVerifier(b"other-secret", algorithm=HS256)
    assert verifier.check(issued.token).reason == "invalid_signature"
    assert verifier.check("not-a-token").reason == "malformed_token"
    assert verifier.check("").reason == "missing_token"

    ok = TokenVerifier(b"unit-secret", algorithm=HS256).check(issued.token)
    assert ok.valid is True
    assert ok.reason == "ok"
    assert ok.token is not None


def test_config_defaults_fill_registered_claims() -> None:
    config = TokenConfig(max_age_seconds=300, issuer="auth.example", audience=["api"])
    issuer = TokenIssuer(b"unit-secret", config=config, clock=fixed(NOW), with_id=True)
    issued = issuer.issue({"role": "admin"}, standard=Claims(subject="u-1"))

    assert UUID(issued.token_id)
    assert issued.payload == {
        "role": "admin",
        "iat": NOW_TS,
        "exp": NOW_TS + 300,
        "jti": issued.token_id,
        "iss": "auth.example",
        "sub": "u-1",
        "aud": ["api"],
    }

    verifier = TokenVerifier(b"unit-secret", config=config, clock=fixed(NOW))
    verified = verifier.verify(issued.token, Expected(issuer="auth.example", audience=["api"], subject="u-1"))
    assert verified.standard_claims.id == issued.token_id


def test_issue_without_caller_claims() -> None:
    issued = TokenIssuer(b"unit-secret", clock=fixed(NOW)).issue(standard=Claims(subject="u-1"), max_age=10)
    assert issued.payload == {"iat": NOW_TS, "exp": NOW_TS + 10, "sub": "u-1"}
    assert issued.token_id == ""


def test_expected_claims_mismatch() -> None:
    issued = TokenIssuer(b"unit-secret").issue(standard=Claims(issuer="a", audience=["web"]))
    verifier = TokenVerifier(b"unit-secret")
    with pytest.raises(UnexpectedClaimError) as exc:
        verifier.verify(issued.token, Expected(issuer="b"))
    assert exc.value.claim == "iss"
    with pytest.raises(UnexpectedClaimError):
        verifier.verify(issued.token, Expected(audience=["api"]))


def test_required_keys() -> None:
    issued = TokenIssuer(b"unit-secret").issue({"username": "alice"})
    verifier = TokenVerifier(b"unit-secret")
    verifier.verify(issued.token, Required("username"))
    with pytest.raises(MissingClaimError) as exc:
        verifier.verify(issued.token, Required("username", "role"))
    assert exc.value.claim == "role"


def test_leeway_rejects_tokens_about_to_expire() -> None:
    issued = TokenIssuer(b"unit-secret", clock=fixed(NOW)).issue({"a": 1}, max_age=60)
    verifier = TokenVerifier(b"unit-secret", clock=fixed(NOW))
    verifier.verify(issued.token, Leeway(60))
    with pytest.raises(ExpiredError):
        verifier.verify(issued.token, Leeway(timedelta(seconds=61)))

    strict = TokenVerifier(b"unit-secret", config=TokenConfig(leeway_seconds=120), clock=fixed(NOW))
    assert strict.check(issued.token).reason == "expired"


def test_verify_into_custom_type() -> None:
    @dataclass
    class Session:
        username: str
        iat: int
        exp: int

    issued = TokenIssuer(b"unit-secret", clock=fixed(NOW)).issue({"username": "alice"}, max_age=5)
    verified = TokenVerifier(b"unit-secret", clock=fixed(NOW)).verify(issued.token)
    session = verified.claims_into(Session)
    assert session == Session(username="alice", iat=NOW_TS, exp=NOW_TS + 5)
    assert verified.claims_into(Claims).expiry == NOW_TS + 5

    @dataclass
    class Narrow:
        username: str

    with pytest.raises(SerializationError):
        verified.claims_into(Narrow)


def test_asymmetric_issuer_and_public_key_verifier(rsa_key) -> None:
    issuer = TokenIssuer(rsa_key, algorithm=RS256, clock=fixed(NOW))
    issued = issuer.issue({"username": "alice"}, max_age=60)
    verified = TokenVerifier(rsa_key.public_key(), algorithm=RS256, clock=fixed(NOW)).verify(issued.token)
    assert verified.claims()["username"] == "alice"

    with pytest.raises(InvalidKeyError):
        TokenVerifier(b"unit-secret", algorithm=RS256).verify(issued.token)


def test_non_object_payload_is_serialization_error() -> None:
    token = encode_token(HS256, b"unit-secret", [1, 2, 3])
    with pytest.raises(SerializationError):
        TokenVerifier(b"unit-secret").verify(token)


def test_key_falls_back_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("COMPACTJWT_SECRET", "env-secret")
    issued = TokenIssuer().issue({"a": 1})
    TokenVerifier(b"env-secret").verify(issued.token)


def test_missing_key_is_invalid_key(monkeypatch) -> None:
    monkeypatch.delenv("COMPACTJWT_SECRET", raising=False)
    with pytest.raises(InvalidKeyError):
        TokenIssuer()
    with pytest.raises(InvalidKeyError):
        TokenVerifier()


@pytest.mark.parametrize("payload", [b'{"exp":1e400}', b'{"nbf":-1e400}', b'{"iat":NaN}'])
def test_non_finite_time_claims_are_serialization_errors(payload) -> None:
    token = encode_token(HS256, b"unit-secret", payload)
    verifier = TokenVerifier(b"unit-secret")
    with pytest.raises(SerializationError):
        verifier.verify(token)
    result = verifier.check(token)
    assert result.valid is False
    assert result.reason == "serialization_failed"
