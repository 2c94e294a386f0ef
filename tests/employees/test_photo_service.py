from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.core.constants import MAX_PHOTO_BYTES
from src.employee_directory.employee_directory.core.exceptions import NotFoundError, ValidationError
from src.employee_directory.employee_directory.employees.photo_service import PhotoService, photo_object_name


@pytest.fixture
def photos(employee_service, storage):
    return PhotoService(employee_service, storage)


@pytest.fixture
def employee(employee_service, employee_data):
    return employee_service.create_employee(employee_data(), user_id="u1")


def test_photo_object_name_uses_upload_extension():
    assert photo_object_name("e1", "me.PNG", "image/png", millis=1700000000000) == "e1-1700000000000.png"
    assert photo_object_name("e1", "noext", "image/webp", millis=5) == "e1-5.webp"


def test_upload_stores_object_and_links_signed_url(photos, employee, employee_service, storage):
    url = photos.upload_photo(
        employee.employee_id,
        filename="me.jpg",
        content_type="image/jpeg",
        data=b"\xff\xd8jpeg",
        user_id="u2",
    )

    [name] = list(storage.objects)
    assert name.startswith(f"{employee.employee_id}-") and name.endswith(".jpg")
    assert url.startswith(f"http://localhost/storage/employee-photos/{name}?token=")

    saved = employee_service.get_employee(employee.employee_id)
    assert saved.profile_picture == url
    assert saved.profile_picture_file_name == name
    assert saved.updated_by == "u2"


def test_disallowed_type_leaves_no_object_or_record_change(photos, employee, employee_service, storage):
    with pytest.raises(ValidationError, match="Invalid file type"):
        photos.upload_photo(
            employee.employee_id, filename="doc.pdf", content_type="application/pdf", data=b"%PDF", user_id="u1"
        )

    assert storage.objects == {}
    assert employee_service.get_employee(employee.employee_id) == employee


def test_oversized_photo_leaves_no_object_or_record_change(photos, employee, employee_service, storage):
    with pytest.raises(ValidationError, match="Maximum 5MB"):
        photos.upload_photo(
            employee.employee_id,
            filename="big.png",
            content_type="image/png",
            data=b"0" * (MAX_PHOTO_BYTES + 1),
            user_id="u1",
        )

    assert storage.objects == {}
    assert employee_service.get_employee(employee.employee_id) == employee


def test_missing_file(photos, employee):
    with pytest.raises(ValidationError, match="No file provided"):
        photos.upload_photo(employee.employee_id, filename=None, content_type=None, data=None, user_id="u1")


def test_unknown_employee(photos):
    with pytest.raises(NotFoundError):
        photos.upload_photo("missing", filename="a.png", content_type="image/png", data=b"x", user_id="u1")


def test_photo_at_size_limit_is_accepted(photos, employee, storage):
    url = photos.upload_photo(
        employee.employee_id,
        filename="max.png",
        content_type="image/png",
        data=b"0" * MAX_PHOTO_BYTES,
        user_id="u1",
    )

    assert url
    [stored] = storage.objects.values()
    assert len(stored.data) == MAX_PHOTO_BYTES
