from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.core.enums import Role
from src.employee_directory.employee_directory.core.exceptions import AuthenticationError, ValidationError
from src.employee_directory.employee_directory.identity.local_provider import LocalAuthProvider
from src.employee_directory.employee_directory.identity.provider import AuthProviderError
from src.employee_directory.employee_directory.users.service import AuthService
from src.employee_directory.employee_directory.users.store_user_repository import StoreUserRepository

SECRET = "test-jwt-secret-0123456789abcdefghij"


@pytest.fixture
def provider(store):
    return LocalAuthProvider(store, jwt_secret=SECRET, token_minutes=5)


@pytest.fixture
def users(store):
    return StoreUserRepository(store)


@pytest.fixture
def auth(provider, users):
    return AuthService(provider, users)


def test_sign_up_creates_employee_profile(auth, users):
    user_id = auth.sign_up(email="amy@company.com", password="secret123", first_name="Amy", last_name="Lee")

    profile = users.get_by_id(user_id)
    assert profile.email == "amy@company.com"
    assert profile.role is Role.EMPLOYEE
    assert profile.is_active


def test_sign_up_missing_fields(auth):
    with pytest.raises(ValidationError, match="Missing required fields"):
        auth.sign_up(email="amy@company.com", password="secret123", first_name="", last_name="Lee")


def test_sign_up_reports_provider_rejection(auth):
    auth.sign_up(email="amy@company.com", password="secret123", first_name="Amy", last_name="Lee")
    with pytest.raises(ValidationError, match="already been registered"):
        auth.sign_up(email="AMY@company.com", password="secret123", first_name="Amy", last_name="Lee")


def test_sign_in_returns_token_that_authenticates(auth):
    user_id = auth.sign_up(email="amy@company.com", password="secret123", first_name="Amy", last_name="Lee")

    result = auth.sign_in(email="amy@company.com", password="secret123")
    principal = auth.authenticate_token(result.access_token)

    assert result.to_dict()["user"]["firstName"] == "Amy"
    assert principal.user_id == user_id
    assert principal.email == "amy@company.com"


def test_sign_in_wrong_password(auth):
    auth.sign_up(email="amy@company.com", password="secret123", first_name="Amy", last_name="Lee")
    with pytest.raises(AuthenticationError, match="Invalid login credentials"):
        auth.sign_in(email="amy@company.com", password="nope-nope")


def test_sign_in_requires_both_fields(auth):
    with pytest.raises(ValidationError, match="Email and password required"):
        auth.sign_in(email="amy@company.com", password="")


def test_sign_in_synthesizes_missing_profile(auth, provider, users):
    created = provider.create_user(
        email="ops@company.com", password="secret123", metadata={"firstName": "Ops", "role": "admin"}
    )

    result = auth.sign_in(email="ops@company.com", password="secret123")

    assert result.user.first_name == "Ops"
    assert result.user.last_name == "User"
    assert result.user.role is Role.ADMIN
    assert users.get_by_id(created.user_id) == result.user


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token(auth, token):
    with pytest.raises(AuthenticationError, match="Missing authorization token"):
        auth.authenticate_token(token)


def test_garbage_token(auth):
    with pytest.raises(AuthenticationError, match="Invalid or expired token"):
        auth.authenticate_token("not-a-jwt")


@pytest.mark.parametrize(
    "email, password",
    [(12345, "secret123"), ("amy@company.com", 123456), (None, None)],
)
def test_sign_in_rejects_non_string_credentials(auth, email, password):
    with pytest.raises(ValidationError, match="Email and password required"):
        auth.sign_in(email=email, password=password)


@pytest.mark.parametrize(
    "email, password",
    [(12345, "secret123"), ("amy@company.com", 1234567)],
)
def test_sign_up_rejects_non_string_credentials(auth, email, password):
    with pytest.raises(ValidationError, match="Missing required fields"):
        auth.sign_up(email=email, password=password, first_name="Amy", last_name="Lee")


def test_provider_rejects_non_string_credentials(provider):
    with pytest.raises(AuthProviderError):
        provider.create_user(email="amy@company.com", password=1234567)
    with pytest.raises(AuthProviderError, match="Invalid login credentials"):
        provider.sign_in_with_password(email=12345, password="secret123")
