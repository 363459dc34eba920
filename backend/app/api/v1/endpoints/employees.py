from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.errors import upstream_http_error
from app.core.dependencies import OrgContext, get_org_context
from app.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[dict[str, Any]])
async def list_employees(
    org: OrgContext = Depends(get_org_context),  # noqa: B008
):
    try:
        return await employee_service.list_employees(org.org_id)
    except Exception as err:
        logger.exception("Failed to list employees for org %s", org.org_id)
        raise upstream_http_error(err, "Failed to retrieve employees") from err


@router.get("/{employee_id}", response_model=dict[str, Any])
async def get_employee(
    employee_id: str,
    org: OrgContext = Depends(get_org_context),  # noqa: B008
):
    try:
        employee = await employee_service.get_employee(org.org_id, employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise upstream_http_error(err, "Failed to retrieve employee") from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )

    return employee
