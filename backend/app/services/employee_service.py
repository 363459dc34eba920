"""Employee snapshots from the Intime backend (read-only)."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from app.services.intime_api import IntimeApiError, IntimeApiService, expect_list, intime_api, unwrap_object

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, api: IntimeApiService | None = None) -> None:
        self.api = api or intime_api

    @property
    def initialized(self) -> bool:
        return self.api.initialized

    async def list_employees(self, org_id: str) -> list[dict[str, Any]]:
        payload = await self.api.get_json("/employees", org_id)
        employees = [item for item in expect_list(payload) if isinstance(item, dict)]
        logger.debug("Fetched %d employee record(s) for org %s", len(employees), org_id)
        return employees

    async def get_employee(self, org_id: str, employee_id: str) -> dict[str, Any] | None:
        try:
            payload = await self.api.get_json(f"/employees/{quote(employee_id, safe='')}", org_id)
        except IntimeApiError as err:
            if err.status == 404:
                return None
            raise
        return unwrap_object(payload)


employee_service = EmployeeService()
