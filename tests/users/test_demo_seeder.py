from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.core.enums import Role
from src.employee_directory.employee_directory.employees.store_employee_repository import StoreEmployeeRepository
from src.employee_directory.employee_directory.identity.local_provider import LocalAuthProvider
from src.employee_directory.employee_directory.users.bootstrap import DEMO_EMPLOYEES, DemoAccountSeeder
from src.employee_directory.employee_directory.users.store_user_repository import StoreUserRepository

SECRET = "test-jwt-secret-0123456789abcdefghij"


@pytest.fixture
def provider(store):
    return LocalAuthProvider(store, jwt_secret=SECRET)


@pytest.fixture
def seeder(store, provider):
    return DemoAccountSeeder(
        provider,
        StoreUserRepository(store),
        StoreEmployeeRepository(store),
        email="admin@company.com",
        password="demo123456",
    )


def test_first_run_creates_admin_and_sample_employees(seeder, store, provider):
    profile = seeder.ensure_demo_account()

    assert profile.role is Role.ADMIN
    assert store.get("user:demo")["email"] == "admin@company.com"
    assert len(StoreEmployeeRepository(store).list_all()) == len(DEMO_EMPLOYEES)
    assert provider.sign_in_with_password(email="admin@company.com", password="demo123456").user.user_id == profile.user_id


def test_second_run_is_a_no_op(seeder, store):
    first = seeder.ensure_demo_account()
    second = seeder.ensure_demo_account()

    assert second == first
    assert len(StoreEmployeeRepository(store).list_all()) == len(DEMO_EMPLOYEES)


def test_existing_provider_account_is_adopted_without_reseeding(seeder, store, provider):
    existing = provider.create_user(email="admin@company.com", password="demo123456")

    profile = seeder.ensure_demo_account()

    assert profile.user_id == existing.user_id
    assert StoreEmployeeRepository(store).list_all() == []
