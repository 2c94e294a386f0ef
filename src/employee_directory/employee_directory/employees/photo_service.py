from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import epoch_millis, now_utc
from ..core.constants import ALLOWED_PHOTO_TYPES, MAX_PHOTO_BYTES, SIGNED_URL_SECONDS
from ..core.exceptions import StorageError, ValidationError
from ..storage.object_storage import ObjectStorage
from .service import EmployeeService

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
}


def photo_object_name(employee_id: str, filename: Optional[str], content_type: str, *, millis: int) -> str:
    """``<employeeId>-<epochMillis>.<ext>``; ext comes from the uploaded filename."""
    ext = ""
    if filename and "." in filename:
        ext = filename.rsplit(".", 1)[-1].strip().lower()
    if not ext or not ext.isalnum():
        ext = _EXTENSIONS.get(content_type, "bin")
    return f"{employee_id}-{millis}.{ext}"


class PhotoService:
    """Use case: upload a profile photo and link it to the employee record."""

    def __init__(self, employees: EmployeeService, storage: ObjectStorage):
        self._employees = employees
        self._storage = storage

    def upload_photo(
        self,
        employee_id: str,
        *,
        filename: Optional[str],
        content_type: Optional[str],
        data: Optional[bytes],
        user_id: Optional[str],
    ) -> Optional[str]:
        employee = self._employees.get_employee(employee_id)

        if data is None or not filename:
            raise ValidationError("No file provided")
        if content_type not in ALLOWED_PHOTO_TYPES:
            raise ValidationError("Invalid file type. Only JPEG, PNG, GIF, and WebP are allowed")
        if len(data) > MAX_PHOTO_BYTES:
            raise ValidationError("File size too large. Maximum 5MB allowed")

        name = photo_object_name(employee_id, filename, content_type, millis=epoch_millis(now_utc()))
        self._storage.upload(name, data, content_type=content_type)

        try:
            url = self._storage.create_signed_url(name, expires_in=SIGNED_URL_SECONDS)
        except StorageError:
            logger.exception("Could not sign URL for %s", name)
            url = None

        self._employees.attach_photo(employee, url=url, file_name=name, user_id=user_id)
        logger.info("Photo %s stored for employee %s", name, employee_id)
        return url
