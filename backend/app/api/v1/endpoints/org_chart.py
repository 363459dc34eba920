from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.v1.errors import upstream_http_error
from app.core.dependencies import OrgContext, get_org_context
from app.models.org_chart import OrgChartResponse
from app.services.employee_service import employee_service
from app.services.org_tree import build_org_chart

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/org-chart", tags=["org-chart"])


@router.get("", response_model=OrgChartResponse)
async def get_org_chart(
    org: OrgContext = Depends(get_org_context),  # noqa: B008
):
    try:
        employees = await employee_service.list_employees(org.org_id)
    except Exception as err:
        logger.exception("Failed to load employees for org chart (org=%s)", org.org_id)
        raise upstream_http_error(err, "Unable to load employees for the org chart") from err

    build = build_org_chart(employees)
    return OrgChartResponse(org_id=org.org_id, roots=build.roots, stats=build.stats)
