from __future__ import annotations

import pytest

from src.employee_directory.employee_directory import create_app
from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.storage.filesystem_storage import FileSystemObjectStorage
from src.employee_directory.employee_directory.storage.memory_storage import InMemoryObjectStorage


def test_health_reports_demo_user(client, container):
    body = client.get("/health").get_json()
    assert body["status"] == "healthy"
    assert body["demoUserExists"] is False

    container.demo_seeder.ensure_demo_account()
    assert client.get("/health").get_json()["demoUserExists"] is True


def test_cors_headers_and_preflight(client):
    resp = client.get("/health")
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "Authorization" in resp.headers["Access-Control-Allow-Headers"]

    resp = client.open("/employees", method="OPTIONS")
    assert resp.status_code == 204
    assert "DELETE" in resp.headers["Access-Control-Allow-Methods"]


def test_unknown_route_is_json(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_debug_status_is_opt_in(client, settings, store, storage):
    assert client.get("/debug/status").status_code == 404

    settings.DEBUG_STATUS_ENABLED = True
    container = build_container(settings, store=store, storage=storage)
    container.demo_seeder.ensure_demo_account()
    app = create_app(settings, container=container)

    body = app.test_client().get("/debug/status").get_json()
    assert body["storeConnected"] is True
    assert body["providerUsers"] == 1
    assert body["demoUserInKV"] is True
    assert body["adminUserInProvider"] is True
    assert body["environment"]["recordStore"] == "memory"


def test_auto_seed_on_startup(settings, store, storage):
    settings.AUTO_SEED_DB = True
    app = create_app(settings, container=build_container(settings, store=store, storage=storage))

    assert store.get("user:demo") is not None
    resp = app.test_client().post("/auth/signin", json={"email": "admin@company.com", "password": "demo123456"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["role"] == "admin"


def test_signup_and_signin_endpoints(client):
    resp = client.post(
        "/auth/signup",
        json={"email": "amy@company.com", "password": "secret123", "firstName": "Amy", "lastName": "Lee"},
    )
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "User created successfully"

    resp = client.post("/auth/signup", json={"email": "amy@company.com"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing required fields"}

    resp = client.post("/auth/signin", json={"email": "amy@company.com", "password": "wrong-pass"})
    assert resp.status_code == 401

    resp = client.post("/auth/signin", json={"email": "amy@company.com", "password": "secret123"})
    assert resp.get_json()["accessToken"]


def test_memory_backend_from_settings(settings):
    container = build_container(settings)
    assert container.record_store_backend == "memory"
    assert container.conn is None


def test_auth_endpoints_reject_non_string_credentials(client):
    resp = client.post("/auth/signin", json={"email": 12345, "password": "secret123"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Email and password required"}

    resp = client.post("/auth/signin", json={"email": "amy@company.com", "password": 123456})
    assert resp.status_code == 400

    resp = client.post(
        "/auth/signup",
        json={"email": "amy@company.com", "password": 1234567, "firstName": "Amy", "lastName": "Lee"},
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Missing required fields"}


def test_container_accepts_injected_auth_provider(settings, store, storage, fake_provider, employee_data):
    fake_provider.add_user("u-42", "ops@company.com", token="ops-token")
    container = build_container(settings, store=store, storage=storage, auth_provider=fake_provider)
    client = create_app(settings, container=container).test_client()

    resp = client.post("/employees", json=employee_data(), headers={"Authorization": "Bearer ops-token"})

    assert resp.status_code == 201
    assert resp.get_json()["employee"]["createdBy"] == "u-42"
    assert client.get("/employees", headers={"Authorization": "Bearer other"}).status_code == 401


def test_object_storage_backend_from_settings(settings):
    assert isinstance(build_container(settings).storage, InMemoryObjectStorage)

    settings.OBJECT_STORAGE = "filesystem"
    assert isinstance(build_container(settings).storage, FileSystemObjectStorage)

    settings.OBJECT_STORAGE = "s3"
    with pytest.raises(ValueError):
        build_container(settings)
