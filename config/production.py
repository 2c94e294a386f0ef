import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_directory"),
}

RECORD_STORE = os.getenv("RECORD_STORE", "mysql")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

JWT_SECRET = os.getenv("JWT_SECRET", SECRET_KEY)
ACCESS_TOKEN_MINUTES = int(os.getenv("ACCESS_TOKEN_MINUTES", "60"))

# "filesystem" keeps photos under STORAGE_DIR; "memory" is process-local
OBJECT_STORAGE = os.getenv("OBJECT_STORAGE", "filesystem")
STORAGE_DIR = os.getenv("STORAGE_DIR", "/var/lib/employee-directory/storage")
PHOTO_BUCKET = os.getenv("PHOTO_BUCKET", "employee-photos")
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "")

DEMO_EMAIL = os.getenv("DEMO_EMAIL", "admin@company.com")
DEMO_PASSWORD = os.getenv("DEMO_PASSWORD", "demo123456")

# Never on in production unless explicitly requested
DEBUG_STATUS_ENABLED = bool(int(os.getenv("DEBUG_STATUS_ENABLED", "0")))
