import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_directory"),
}

# "mysql" keeps records in the kv_store table; "memory" is process-local
RECORD_STORE = os.getenv("RECORD_STORE", "mysql")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Creates the demo admin account and sample employees on first start
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

# HS256 signing key for access tokens and photo links; keep it at least 32 bytes
JWT_SECRET = os.getenv("JWT_SECRET", "dev-jwt-secret-change-me-0123456789")
ACCESS_TOKEN_MINUTES = int(os.getenv("ACCESS_TOKEN_MINUTES", "60"))

# "filesystem" keeps photos under STORAGE_DIR; "memory" is process-local
OBJECT_STORAGE = os.getenv("OBJECT_STORAGE", "filesystem")
STORAGE_DIR = os.getenv("STORAGE_DIR", "storage")
PHOTO_BUCKET = os.getenv("PHOTO_BUCKET", "employee-photos")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5000")

DEMO_EMAIL = os.getenv("DEMO_EMAIL", "admin@company.com")
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "demo123456")

DEBUG_STATUS_ENABLED = bool(int(os.getenv("DEBUG_STATUS_ENABLED", "1")))
