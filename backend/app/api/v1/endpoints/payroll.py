from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.v1.errors import upstream_http_error
from app.core.dependencies import OrgContext, get_org_context
from app.models.payroll import BandCheckResult
from app.services.intime_api import intime_api, unwrap_list, unwrap_object
from app.services.pay_band_service import check_pay_band

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payroll", tags=["payroll"])


@router.get("/comp-changes/{change_id}/band-check", response_model=BandCheckResult)
async def check_comp_change_band(
    change_id: str,
    org: OrgContext = Depends(get_org_context),  # noqa: B008
):
    try:
        payload = await intime_api.get_json(f"/payroll/comp-changes/{quote(change_id, safe='')}", org.org_id)
    except Exception as err:
        logger.exception("Failed to load comp change %s", change_id)
        raise upstream_http_error(err, "Failed to retrieve compensation change") from err

    change = unwrap_object(payload)
    if not change:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Compensation change '{change_id}' not found",
        )

    # Bands are optional; without them every change counts as in band
    try:
        bands_payload = await intime_api.get_json("/payroll/bands", org.org_id)
    except Exception:
        logger.warning("Pay bands unavailable for org %s", org.org_id, exc_info=True)
        bands_payload = []

    bands = [band for band in unwrap_list(bands_payload) if isinstance(band, dict)]
    return check_pay_band(change, bands)
