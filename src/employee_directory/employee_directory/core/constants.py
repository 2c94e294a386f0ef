"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEE_PREFIX = "employee:"
USER_PREFIX = "user:"
AUDIT_PREFIX = "audit:"
ACCOUNT_PREFIX = "account:"
DEMO_USER_KEY = "user:demo"

REQUIRED_EMPLOYEE_FIELDS = ("firstName", "lastName", "email", "position", "department")
EDITABLE_EMPLOYEE_FIELDS = (
    "firstName",
    "lastName",
    "email",
    "phone",
    "position",
    "department",
    "salary",
    "startDate",
    "status",
    "address",
    "emergencyContact",
    "emergencyPhone",
)

ALLOWED_PHOTO_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")
MAX_PHOTO_BYTES = 5 * 1024 * 1024
SIGNED_URL_SECONDS = 365 * 24 * 60 * 60

RECENT_ACTIVITY_LIMIT = 10
MIN_PASSWORD_LENGTH = 6
DEFAULT_ACCESS_TOKEN_MINUTES = 60

DEPARTMENT_COLORS = {
    "Engineering": "#3b82f6",
    "Marketing": "#10b981",
    "Sales": "#f59e0b",
    "HR": "#ef4444",
    "Finance": "#8b5cf6",
    "Operations": "#06b6d4",
}
DEFAULT_DEPARTMENT_COLOR = "#6b7280"
