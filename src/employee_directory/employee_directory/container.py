from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .audit.service import AuditService
from .audit.store_audit_repository import StoreAuditRepository
from .core.constants import DEFAULT_ACCESS_TOKEN_MINUTES
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .employees.photo_service import PhotoService
from .employees.service import EmployeeService
from .employees.store_employee_repository import StoreEmployeeRepository
from .identity.local_provider import LocalAuthProvider
from .identity.provider import AuthProvider
from .storage.filesystem_storage import FileSystemObjectStorage
from .storage.memory_storage import InMemoryObjectStorage
from .storage.object_storage import ObjectStorage
from .storage.signing import UrlSigner
from .store.memory_record_store import InMemoryRecordStore
from .store.mysql_record_store import MySQLRecordStore
from .store.repository import RecordStore
from .users.bootstrap import DemoAccountSeeder
from .users.service import AuthService
from .users.store_user_repository import StoreUserRepository


@dataclass(frozen=True)
class Container:
    record_store_backend: str
    conn: Optional[DatabaseConnection]
    store: RecordStore
    storage: ObjectStorage
    auth_provider: AuthProvider

    employees_repo: StoreEmployeeRepository
    users_repo: StoreUserRepository
    audit_repo: StoreAuditRepository

    audit_service: AuditService
    employee_service: EmployeeService
    photo_service: PhotoService
    dashboard_service: DashboardService
    auth_service: AuthService
    demo_seeder: DemoAccountSeeder

    demo_email: str
    debug_status_enabled: bool


def build_record_store(settings: Any) -> tuple[RecordStore, Optional[DatabaseConnection]]:
    backend = str(getattr(settings, "RECORD_STORE", "mysql")).lower()
    if backend == "memory":
        return InMemoryRecordStore(), None
    if backend != "mysql":
        raise ValueError(f"Unsupported RECORD_STORE: {backend!r}")
    conn = DatabaseConnection(DBConfig.from_mapping(getattr(settings, "DB_CONFIG")))
    return MySQLRecordStore(conn), conn


def build_object_storage(settings: Any, secret: str) -> ObjectStorage:
    backend = str(getattr(settings, "OBJECT_STORAGE", "filesystem")).lower()
    signer = UrlSigner(secret, str(getattr(settings, "PUBLIC_BASE_URL", "")))
    bucket = str(getattr(settings, "PHOTO_BUCKET", "employee-photos"))
    if backend == "memory":
        return InMemoryObjectStorage(bucket, signer=signer)
    if backend != "filesystem":
        raise ValueError(f"Unsupported OBJECT_STORAGE: {backend!r}")
    return FileSystemObjectStorage(getattr(settings, "STORAGE_DIR", "storage"), bucket, signer=signer)


def _backend_name(store: RecordStore) -> str:
    if isinstance(store, MySQLRecordStore):
        return "mysql"
    if isinstance(store, InMemoryRecordStore):
        return "memory"
    return type(store).__name__


def build_container(
    settings: Any,
    *,
    store: Optional[RecordStore] = None,
    storage: Optional[ObjectStorage] = None,
    auth_provider: Optional[AuthProvider] = None,
) -> Container:
    conn = None
    if store is None:
        store, conn = build_record_store(settings)

    secret = str(getattr(settings, "JWT_SECRET", None) or getattr(settings, "SECRET_KEY"))
    if storage is None:
        storage = build_object_storage(settings, secret)

    if auth_provider is None:
        auth_provider = LocalAuthProvider(
            store,
            jwt_secret=secret,
            token_minutes=int(getattr(settings, "ACCESS_TOKEN_MINUTES", DEFAULT_ACCESS_TOKEN_MINUTES)),
        )

    employees_repo = StoreEmployeeRepository(store)
    users_repo = StoreUserRepository(store)
    audit_repo = StoreAuditRepository(store)

    audit_service = AuditService(audit_repo)
    employee_service = EmployeeService(employees_repo, audit_service)
    photo_service = PhotoService(employee_service, storage)
    dashboard_service = DashboardService(employees_repo, audit_service)
    auth_service = AuthService(auth_provider, users_repo)

    demo_email = str(getattr(settings, "DEMO_EMAIL", "admin@company.com"))
    demo_seeder = DemoAccountSeeder(
        auth_provider,
        users_repo,
        employees_repo,
        email=demo_email,
        password=str(getattr(settings, "DEMO_PASSWORD", "demo123456")),
    )

    return Container(
        record_store_backend=_backend_name(store),
        conn=conn,
        store=store,
        storage=storage,
        auth_provider=auth_provider,
        employees_repo=employees_repo,
        users_repo=users_repo,
        audit_repo=audit_repo,
        audit_service=audit_service,
        employee_service=employee_service,
        photo_service=photo_service,
        dashboard_service=dashboard_service,
        auth_service=auth_service,
        demo_seeder=demo_seeder,
        demo_email=demo_email,
        debug_status_enabled=bool(getattr(settings, "DEBUG_STATUS_ENABLED", False)),
    )
