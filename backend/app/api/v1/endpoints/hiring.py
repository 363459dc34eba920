from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.v1.errors import upstream_http_error
from app.core.dependencies import OrgContext, get_org_context
from app.models.hiring import PipelineResponse
from app.services.intime_api import expect_list, intime_api
from app.services.pipeline_service import build_pipeline

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["hiring"])


@router.get("/{job_id}/pipeline", response_model=PipelineResponse)
async def get_job_pipeline(
    job_id: str,
    org: OrgContext = Depends(get_org_context),  # noqa: B008
):
    try:
        payload = await intime_api.get_json("/candidates", org.org_id, params={"jobId": job_id})
    except Exception as err:
        logger.exception("Failed to load candidates for job %s", job_id)
        raise upstream_http_error(err, "Failed to retrieve candidates") from err

    candidates = [c for c in expect_list(payload) if isinstance(c, dict)]
    return build_pipeline(job_id, candidates)
