from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.payroll_system.payroll_system.auth.credentials import Principal, SingleUserCredentialVerifier
from src.payroll_system.payroll_system.auth.service import AuthService, extract_bearer
from src.payroll_system.payroll_system.auth.tokens import TokenService
from src.payroll_system.payroll_system.core.enums import Role
from src.payroll_system.payroll_system.core.exceptions import AuthenticationError, ValidationError


def test_single_user_verifier():
    verifier = SingleUserCredentialVerifier("admin", "admin123")

    assert verifier.verify("admin", "admin123") == Principal(username="admin", role=Role.ADMIN)
    assert verifier.verify("admin", "wrong") is None
    assert verifier.verify("root", "admin123") is None


def test_login_issues_token_with_claims(tokens):
    svc = AuthService(SingleUserCredentialVerifier("admin", "admin123"), tokens)

    result = svc.login({"username": "admin", "password": "admin123"})

    assert result["user"] == {"username": "admin", "role": "admin"}
    claims = svc.current_user(f"Bearer {result['token']}")
    assert claims["username"] == "admin"
    assert claims["role"] == "admin"


def test_login_with_wrong_password(tokens):
    svc = AuthService(SingleUserCredentialVerifier("admin", "admin123"), tokens)
    with pytest.raises(AuthenticationError):
        svc.login({"username": "admin", "password": "nope"})


def test_login_reports_every_missing_field(tokens):
    svc = AuthService(SingleUserCredentialVerifier("admin", "admin123"), tokens)
    with pytest.raises(ValidationError) as exc:
        svc.login({})
    assert {e["field"] for e in exc.value.errors} == {"username", "password"}


def test_expired_token_is_rejected():
    issued_at = datetime(2020, 1, 1, tzinfo=timezone.utc)
    old = TokenService("secret", expires_minutes=5, clock=lambda: issued_at)
    token = old.issue(Principal(username="admin", role=Role.ADMIN))

    with pytest.raises(AuthenticationError):
        TokenService("secret").decode(token)


def test_token_signed_with_other_secret_is_rejected():
    token = TokenService("one").issue(Principal(username="admin", role=Role.ADMIN))
    with pytest.raises(AuthenticationError):
        TokenService("two").decode(token)


def test_missing_token_is_rejected(tokens):
    with pytest.raises(AuthenticationError):
        tokens.decode(None)


@pytest.mark.parametrize(
    "header, expected",
    [("Bearer abc", "abc"), ("bearer abc", "abc"), ("Token abc", None), ("Bearer", None), (None, None)],
)
def test_extract_bearer(header, expected):
    assert extract_bearer(header) == expected


def test_recent_token_within_expiry_is_accepted():
    now = datetime.now(timezone.utc) - timedelta(minutes=1)
    svc = TokenService("secret", expires_minutes=5, clock=lambda: now)
    token = svc.issue(Principal(username="admin", role=Role.ADMIN))
    assert TokenService("secret").decode(token)["username"] == "admin"
