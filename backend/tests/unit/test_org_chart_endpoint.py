from __future__ import annotations

from unittest.mock import AsyncMock, patch

from app.services.employee_service import employee_service
from app.services.intime_api import IntimeApiError, intime_api

EMPLOYEES = [
    {"employeeId": "E1", "firstName": "Ada", "lastName": "King", "department": "Exec", "status": "ACTIVE"},
    {
        "employeeId": "E2",
        "firstName": "Bo",
        "lastName": "Lane",
        "department": "Eng",
        "manager": {"employeeId": "E1", "firstName": "Ada", "lastName": "King"},
    },
    {"employeeId": "E3", "firstName": "Cy", "lastName": "Moss", "status": "ALUMNI"},
]


def test_org_chart_requires_org(client):
    response = client.get("/api/v1/org-chart")
    assert response.status_code == 400


def test_org_chart_returns_forest(client, org_headers):
    with patch.object(employee_service, "list_employees", AsyncMock(return_value=EMPLOYEES)) as mock_list:
        response = client.get("/api/v1/org-chart", headers=org_headers)

    assert response.status_code == 200
    mock_list.assert_awaited_once_with("acme")

    data = response.json()
    assert data["orgId"] == "acme"
    assert len(data["roots"]) == 1
    root = data["roots"][0]
    assert root["canonicalId"] == "E1"
    assert root["initials"] == "AK"
    assert root["reports"][0]["canonicalId"] == "E2"
    assert root["reports"][0]["manager"]["displayName"] == "Ada King"
    assert data["stats"]["alumniExcluded"] == 1
    assert data["stats"]["nodes"] == 2


def test_org_chart_org_from_query(client):
    with patch.object(employee_service, "list_employees", AsyncMock(return_value=[])) as mock_list:
        response = client.get("/api/v1/org-chart", params={"orgSlug": "globex"})

    assert response.status_code == 200
    assert response.json()["roots"] == []
    mock_list.assert_awaited_once_with("globex")


def test_org_chart_default_org(client):
    from app.core.config import settings

    settings.INTIME_DEFAULT_ORG_ID = "demo-org"
    with patch.object(employee_service, "list_employees", AsyncMock(return_value=[])) as mock_list:
        response = client.get("/api/v1/org-chart")

    assert response.status_code == 200
    mock_list.assert_awaited_once_with("demo-org")


def test_org_chart_upstream_not_configured(client, org_headers):
    response = client.get("/api/v1/org-chart", headers=org_headers)
    assert response.status_code == 503


def test_org_chart_upstream_failure(client, org_headers):
    failing = AsyncMock(side_effect=IntimeApiError(500, "boom"))
    with patch.object(employee_service, "list_employees", failing):
        response = client.get("/api/v1/org-chart", headers=org_headers)

    assert response.status_code == 502
    assert response.json()["detail"] == "Unable to load employees for the org chart"


def test_list_employees_endpoint(client, org_headers):
    with patch.object(employee_service, "list_employees", AsyncMock(return_value=EMPLOYEES[:1])):
        response = client.get("/api/v1/employees", headers=org_headers)

    assert response.status_code == 200
    assert response.json()[0]["employeeId"] == "E1"


def test_get_employee_endpoint_not_found(client, org_headers):
    with patch.object(employee_service, "get_employee", AsyncMock(return_value=None)):
        response = client.get("/api/v1/employees/E404", headers=org_headers)

    assert response.status_code == 404


def test_get_employee_endpoint_found(client, org_headers):
    with patch.object(employee_service, "get_employee", AsyncMock(return_value=EMPLOYEES[0])) as mock_get:
        response = client.get("/api/v1/employees/E1", headers=org_headers)

    assert response.status_code == 200
    assert response.json()["firstName"] == "Ada"
    mock_get.assert_awaited_once_with("acme", "E1")


def test_org_chart_malformed_upstream_payload_is_an_error(client, org_headers):
    with patch.object(intime_api, "get_json", AsyncMock(return_value={"error": "session expired"})):
        response = client.get("/api/v1/org-chart", headers=org_headers)

    assert response.status_code == 502
    assert response.json()["detail"] == "Unable to load employees for the org chart"


def test_org_chart_non_json_upstream_is_an_error(client, org_headers):
    failing = AsyncMock(side_effect=IntimeApiError(200, "unexpected content type"))
    with patch.object(intime_api, "get_json", failing):
        response = client.get("/api/v1/org-chart", headers=org_headers)

    assert response.status_code == 502
