from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

from src.employee_directory.employee_directory import create_app
from src.employee_directory.employee_directory.audit.service import AuditService
from src.employee_directory.employee_directory.audit.store_audit_repository import StoreAuditRepository
from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.employees.service import EmployeeService
from src.employee_directory.employee_directory.employees.store_employee_repository import StoreEmployeeRepository
from src.employee_directory.employee_directory.identity.provider import AuthProviderError, ProviderSession, ProviderUser
from src.employee_directory.employee_directory.storage.memory_storage import InMemoryObjectStorage
from src.employee_directory.employee_directory.storage.signing import UrlSigner
from src.employee_directory.employee_directory.store.memory_record_store import InMemoryRecordStore

TEST_SECRET = "test-jwt-secret-0123456789abcdefghij"


def employee_payload(**overrides) -> dict:
    data = {
        "firstName": "John",
        "lastName": "Doe",
        "email": "john.doe@company.com",
        "phone": "(555) 123-4567",
        "position": "Software Engineer",
        "department": "Engineering",
        "salary": 75000,
        "startDate": "2023-01-15",
    }
    data.update(overrides)
    return data


@pytest.fixture
def settings(tmp_path):
    base = importlib.import_module("config.testing")
    values = {name: getattr(base, name) for name in dir(base) if name.isupper()}
    values["STORAGE_DIR"] = str(tmp_path / "storage")
    return SimpleNamespace(**values)


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def signer():
    return UrlSigner(TEST_SECRET, "http://localhost")


@pytest.fixture
def storage(signer):
    return InMemoryObjectStorage("employee-photos", signer=signer)


@pytest.fixture
def audit_service(store):
    return AuditService(StoreAuditRepository(store))


@pytest.fixture
def employee_service(store, audit_service):
    return EmployeeService(StoreEmployeeRepository(store), audit_service)


@pytest.fixture
def container(settings, store, storage):
    return build_container(settings, store=store, storage=storage)


@pytest.fixture
def app(settings, container):
    return create_app(settings, container=container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(container):
    container.auth_service.sign_up(
        email="manager@company.com", password="secret123", first_name="Mary", last_name="Manager"
    )
    result = container.auth_service.sign_in(email="manager@company.com", password="secret123")
    return {"Authorization": f"Bearer {result.access_token}"}


@pytest.fixture
def employee_data():
    return employee_payload


class FakeAuthProvider:
    """Token table standing in for the identity service."""

    def __init__(self):
        self.users: dict[str, ProviderUser] = {}
        self.tokens: dict[str, str] = {}

    def add_user(self, user_id: str, email: str, *, token: str, metadata=None) -> ProviderUser:
        user = ProviderUser(user_id=user_id, email=email, metadata=dict(metadata or {}))
        self.users[user_id] = user
        self.tokens[token] = user_id
        return user

    def create_user(self, *, email, password, metadata=None):
        if any(u.email == email for u in self.users.values()):
            raise AuthProviderError("A user with this email address has already been registered")
        return self.add_user(f"u-{len(self.users) + 1}", email, token=f"token-{email}", metadata=metadata)

    def sign_in_with_password(self, *, email, password):
        for token, user_id in self.tokens.items():
            if self.users[user_id].email == email:
                return ProviderSession(access_token=token, user=self.users[user_id])
        raise AuthProviderError("Invalid login credentials")

    def get_user(self, access_token):
        user_id = self.tokens.get(access_token)
        if user_id is None:
            raise AuthProviderError("Invalid token")
        return self.users[user_id]

    def list_users(self):
        return list(self.users.values())


@pytest.fixture
def fake_provider():
    return FakeAuthProvider()
