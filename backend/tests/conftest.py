from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from app.main import app

TEST_ORG_ID = "acme"


@pytest.fixture(autouse=True)
def _org_settings():
    from app.core.config import settings

    original_default = settings.INTIME_DEFAULT_ORG_ID
    settings.INTIME_DEFAULT_ORG_ID = ""
    yield
    settings.INTIME_DEFAULT_ORG_ID = original_default


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def org_headers():
    return {"X-Org-Id": TEST_ORG_ID}


def _make_employee(
    employee_id: str | None = None,
    *,
    id: str | None = None,
    first: str = "",
    last: str = "",
    department: str | None = None,
    status: str | None = "ACTIVE",
    manager: str | dict | None = None,
) -> dict:
    record: dict = {"firstName": first, "lastName": last, "status": status}
    if employee_id is not None:
        record["employeeId"] = employee_id
    if id is not None:
        record["id"] = id
    if department is not None:
        record["department"] = department
    if isinstance(manager, str):
        record["manager"] = {"employeeId": manager, "firstName": "", "lastName": ""}
    elif manager is not None:
        record["manager"] = manager
    return record


@pytest.fixture
def employee():
    return _make_employee
