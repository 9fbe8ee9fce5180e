from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

import httpx

from app.services.employee_query import DEFAULT_DIRECTION, DEFAULT_SORT, employee_query_params


class EmployeeApiError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


logger = logging.getLogger("app.client")


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json() if response.content else {}
    except ValueError:
        return {}


class EmployeeApiClient:
    """Thin client for the employee directory API.

    Builds list queries with the same parameter mapping the server parses, so
    both sides agree on filter and sort names.
    """

    def __init__(self, base_url: str, *, transport: httpx.BaseTransport | None = None, timeout: float = 10.0):
        self._client = httpx.Client(base_url=base_url.rstrip("/"), transport=transport, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "EmployeeApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise EmployeeApiError(f"{method} {path} failed: {exc}") from exc
        payload = _decode(response)
        if response.status_code >= 400:
            detail = payload.get("detail") or payload.get("error") if isinstance(payload, dict) else None
            raise EmployeeApiError(
                f"{method} {path} returned HTTP {response.status_code}",
                status_code=response.status_code,
                detail=detail or response.text,
            )
        return payload

    def fetch_employees(
        self,
        page: int = 1,
        sort: str = DEFAULT_SORT,
        direction: str = DEFAULT_DIRECTION,
        filters: Mapping[str, Any] | None = None,
    ) -> dict:
        params = employee_query_params(page=page, sort=sort, direction=direction, filters=filters)
        return self._request("GET", "/api/employees", params=params)

    def create_employee(self, employee: Mapping[str, Any]) -> dict:
        body = dict(employee)
        hire_date = body.get("hireDate")
        if isinstance(hire_date, date):
            body["hireDate"] = hire_date.isoformat()
        return self._request("POST", "/api/employees", json=body)

    def fetch_departments(self) -> list:
        # Reference data only feeds dropdowns; an empty list is a usable fallback.
        try:
            return self._request("GET", "/api/departments")
        except EmployeeApiError as exc:
            logger.warning("departments unavailable: %s", exc)
            return []

    def fetch_positions(self, department: str) -> list:
        return self._request("GET", "/api/positions", params={"department": department})
