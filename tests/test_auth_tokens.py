import time

import jwt
import pytest

from services import auth_tokens
from services.auth.gate import authenticate
from services.errors import Forbidden, Unauthenticated


def test_issue_and_verify_roundtrip():
    token = auth_tokens.issue_token("user-123")
    assert auth_tokens.verify_token(token) == "user-123"


def test_perpetual_token_carries_only_user_claim():
    token = auth_tokens.issue_token("user-123", ttl_seconds=0)
    payload = jwt.decode(token, options={"verify_signature": False})
    assert payload == {"userId": "user-123"}


def test_token_signed_with_other_key_is_invalid():
    forged = jwt.encode({"userId": "user-123"}, "another-signing-secret-0123456789abcdef", algorithm="HS256")
    with pytest.raises(auth_tokens.AuthTokenError) as excinfo:
        auth_tokens.verify_token(forged)
    assert excinfo.value.code == "auth.token_invalid"


def test_rotating_the_key_invalidates_existing_tokens(monkeypatch):
    token = auth_tokens.issue_token("user-123")
    monkeypatch.setattr(auth_tokens, "_JWT_SECRET", "rotated-signing-secret-0123456789abcdef")
    with pytest.raises(auth_tokens.AuthTokenError) as excinfo:
        auth_tokens.verify_token(token)
    assert excinfo.value.code == "auth.token_invalid"


@pytest.mark.parametrize("garbage", ["not-a-jwt", "a.b.c", ""])
def test_malformed_token_is_invalid(garbage):
    with pytest.raises(auth_tokens.AuthTokenError) as excinfo:
        auth_tokens.verify_token(garbage)
    assert excinfo.value.code == "auth.token_invalid"


def test_bare_string_payload_is_a_format_error():
    token = jwt.api_jws.encode(b'"user-123"', auth_tokens._JWT_SECRET, algorithm="HS256")
    with pytest.raises(auth_tokens.AuthTokenError) as excinfo:
        auth_tokens.verify_token(token)
    assert excinfo.value.code == "auth.token_format"


def test_payload_without_user_id_is_a_format_error():
    token = jwt.encode({"id": "user-123"}, auth_tokens._JWT_SECRET, algorithm="HS256")
    with pytest.raises(auth_tokens.AuthTokenError) as excinfo:
        auth_tokens.verify_token(token)
    assert excinfo.value.code == "auth.token_format"


def test_expired_token_is_distinguishable():
    token = jwt.encode(
        {"userId": "user-123", "exp": int(time.time()) - 10},
        auth_tokens._JWT_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(auth_tokens.TokenExpiredError) as excinfo:
        auth_tokens.verify_token(token)
    assert excinfo.value.code == "auth.token_expired"


def test_configured_ttl_adds_expiry():
    token = auth_tokens.issue_token("user-123", ttl_seconds=60)
    payload = jwt.decode(token, options={"verify_signature": False})
    assert payload["exp"] - payload["iat"] == 60
    assert auth_tokens.verify_token(token) == "user-123"


@pytest.mark.parametrize("missing", [None, "", "   "])
def test_gate_rejects_missing_token_as_unauthenticated(missing):
    with pytest.raises(Unauthenticated) as excinfo:
        authenticate(missing)
    assert excinfo.value.status_code == 401


def test_gate_rejects_bad_token_as_forbidden():
    with pytest.raises(Forbidden) as excinfo:
        authenticate("not-a-jwt")
    assert excinfo.value.status_code == 403
    assert excinfo.value.code == "auth.token_invalid"


def test_gate_reports_expiry_as_forbidden():
    token = jwt.encode(
        {"userId": "user-123", "exp": int(time.time()) - 10},
        auth_tokens._JWT_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(Forbidden) as excinfo:
        authenticate(token)
    assert excinfo.value.code == "auth.token_expired"


def test_gate_returns_user_id():
    assert authenticate(auth_tokens.issue_token("user-123")) == "user-123"
