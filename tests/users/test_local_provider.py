from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from src.employee_directory.employee_directory.common.datetime_utils import now_utc
from src.employee_directory.employee_directory.identity.local_provider import LocalAuthProvider
from src.employee_directory.employee_directory.identity.provider import AuthProviderError

SECRET = "test-jwt-secret-0123456789abcdefghij"


@pytest.fixture
def provider(store):
    return LocalAuthProvider(store, jwt_secret=SECRET)


def test_password_is_hashed(provider, store):
    provider.create_user(email="Amy@Company.com", password="secret123")

    account = store.get("account:amy@company.com")
    assert account["email"] == "Amy@Company.com"
    assert account["passwordHash"] != "secret123"


@pytest.mark.parametrize(
    "email, password, message",
    [
        ("not-an-email", "secret123", "invalid format"),
        ("amy@company.com", "12345", "at least 6 characters"),
    ],
)
def test_create_user_validation(provider, email, password, message):
    with pytest.raises(AuthProviderError, match=message):
        provider.create_user(email=email, password=password)


def test_token_carries_subject_and_email(provider):
    user = provider.create_user(email="amy@company.com", password="secret123")

    session = provider.sign_in_with_password(email="AMY@company.com", password="secret123")
    payload = jwt.decode(session.access_token, SECRET, algorithms=["HS256"])

    assert payload["sub"] == user.user_id
    assert payload["email"] == "amy@company.com"
    assert provider.get_user(session.access_token) == user


def test_expired_token(provider):
    user = provider.create_user(email="amy@company.com", password="secret123")
    token = jwt.encode(
        {"sub": user.user_id, "email": user.email, "exp": now_utc() - timedelta(minutes=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(AuthProviderError, match="Token expired"):
        provider.get_user(token)


def test_token_signed_with_other_secret(provider):
    user = provider.create_user(email="amy@company.com", password="secret123")
    token = jwt.encode(
        {"sub": user.user_id, "email": user.email, "exp": now_utc() + timedelta(minutes=5)},
        "another-secret-0123456789abcdefghijkl",
        algorithm="HS256",
    )

    with pytest.raises(AuthProviderError, match="Invalid token"):
        provider.get_user(token)


def test_token_for_deleted_account(provider, store):
    provider.create_user(email="amy@company.com", password="secret123")
    session = provider.sign_in_with_password(email="amy@company.com", password="secret123")
    store.delete("account:amy@company.com")

    with pytest.raises(AuthProviderError, match="User not found"):
        provider.get_user(session.access_token)


def test_list_users(provider):
    provider.create_user(email="a@company.com", password="secret123")
    provider.create_user(email="b@company.com", password="secret123")

    assert sorted(u.email for u in provider.list_users()) == ["a@company.com", "b@company.com"]
