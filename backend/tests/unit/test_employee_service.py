from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.services.employee_service import EmployeeService
from app.services.intime_api import IntimeApiError


def _service(get_json: AsyncMock) -> EmployeeService:
    api = MagicMock()
    api.initialized = True
    api.get_json = get_json
    return EmployeeService(api)


@pytest.mark.anyio
async def test_list_employees_bare_array():
    service = _service(AsyncMock(return_value=[{"id": "1"}, {"id": "2"}]))

    result = await service.list_employees("acme")

    assert [e["id"] for e in result] == ["1", "2"]
    service.api.get_json.assert_awaited_once_with("/employees", "acme")


@pytest.mark.anyio
async def test_list_employees_wrapped_items():
    service = _service(AsyncMock(return_value={"items": [{"id": "1"}, "junk", None]}))

    result = await service.list_employees("acme")

    assert result == [{"id": "1"}]


@pytest.mark.anyio
async def test_list_employees_unexpected_shape_raises():
    service = _service(AsyncMock(return_value={"error": "session expired"}))

    with pytest.raises(IntimeApiError) as exc_info:
        await service.list_employees("acme")

    assert exc_info.value.status == 502


@pytest.mark.anyio
async def test_get_employee_escapes_id():
    service = _service(AsyncMock(return_value={"id": "x"}))

    await service.get_employee("acme", "../admin?x=1")

    service.api.get_json.assert_awaited_once_with("/employees/..%2Fadmin%3Fx%3D1", "acme")


@pytest.mark.anyio
async def test_list_employees_propagates_upstream_error():
    service = _service(AsyncMock(side_effect=IntimeApiError(502, "bad gateway")))

    with pytest.raises(IntimeApiError):
        await service.list_employees("acme")


@pytest.mark.anyio
async def test_get_employee_found():
    service = _service(AsyncMock(return_value={"data": {"id": "1", "firstName": "Ada"}}))

    result = await service.get_employee("acme", "1")

    assert result == {"id": "1", "firstName": "Ada"}
    service.api.get_json.assert_awaited_once_with("/employees/1", "acme")


@pytest.mark.anyio
async def test_get_employee_not_found():
    service = _service(AsyncMock(side_effect=IntimeApiError(404, "missing")))
    assert await service.get_employee("acme", "nope") is None


@pytest.mark.anyio
async def test_get_employee_other_errors_raise():
    service = _service(AsyncMock(side_effect=IntimeApiError(500, "boom")))

    with pytest.raises(IntimeApiError):
        await service.get_employee("acme", "1")


def test_initialized_follows_api():
    api = MagicMock()
    api.initialized = False
    assert EmployeeService(api).initialized is False
