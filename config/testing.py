import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_directory_test"),
}

RECORD_STORE = "memory"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

JWT_SECRET = "test-jwt-secret-0123456789abcdefghij"
ACCESS_TOKEN_MINUTES = 60

OBJECT_STORAGE = "memory"
STORAGE_DIR = os.getenv("STORAGE_DIR", "storage-test")
PHOTO_BUCKET = "employee-photos"
PUBLIC_BASE_URL = "http://localhost"

DEMO_EMAIL = "admin@company.com"
DEMO_PASSWORD = "demo123456"

DEBUG_STATUS_ENABLED = False
