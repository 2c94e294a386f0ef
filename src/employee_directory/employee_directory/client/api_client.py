from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response (or transport failure, status 0) from the directory API."""

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class ApiClient:
    """Thin synchronous client, one method per HTTP endpoint.

    The bearer token is explicit: ``signin`` stores the returned token and
    ``set_access_token`` replaces it (``None`` signs out).
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        access_token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = 30.0,
    ):
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)
        self._access_token = access_token

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    def set_access_token(self, token: Optional[str]) -> None:
        self._access_token = token

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"
        return headers

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise ApiError(0, str(e)) from e

        if response.is_error:
            try:
                message = response.json().get("error")
            except ValueError:
                message = None
            raise ApiError(response.status_code, message or f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        return self._send(method, path, **kwargs).json()

    # Auth
    def health(self) -> dict:
        return self._request("GET", "/health")

    def signup(self, *, email: str, password: str, first_name: str, last_name: str) -> dict:
        return self._request(
            "POST",
            "/auth/signup",
            json={"email": email, "password": password, "firstName": first_name, "lastName": last_name},
        )

    def signin(self, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/signin", json={"email": email, "password": password})
        self.set_access_token(data.get("accessToken"))
        return data

    # Employees
    def get_employees(
        self,
        *,
        q: Optional[str] = None,
        status: Optional[str] = None,
        department: Optional[str] = None,
    ) -> dict:
        params = {k: v for k, v in (("q", q), ("status", status), ("department", department)) if v}
        return self._request("GET", "/employees", params=params or None)

    def get_employee(self, employee_id: str) -> dict:
        return self._request("GET", f"/employees/{employee_id}")

    def create_employee(self, data: dict) -> dict:
        return self._request("POST", "/employees", json=data)

    def update_employee(self, employee_id: str, data: dict) -> dict:
        return self._request("PUT", f"/employees/{employee_id}", json=data)

    def delete_employee(self, employee_id: str) -> dict:
        return self._request("DELETE", f"/employees/{employee_id}")

    def upload_employee_photo(self, employee_id: str, *, filename: str, data: bytes, content_type: str) -> dict:
        return self._request(
            "POST",
            f"/employees/{employee_id}/photo",
            files={"photo": (filename, data, content_type)},
        )

    def bulk_update_employees(self, employee_ids: list[str], updates: dict) -> dict:
        return self._request("POST", "/employees/bulk-update", json={"employeeIds": employee_ids, "updates": updates})

    def export_employees(self, format: str = "csv") -> Any:
        response = self._send("GET", "/employees/export", params={"format": format})
        if format == "csv":
            return response.text
        return response.json()

    # Dashboard
    def get_dashboard_stats(self) -> dict:
        return self._request("GET", "/dashboard/stats")
