from __future__ import annotations

import logging

from fastapi import Header, HTTPException, Query, status
from pydantic import BaseModel

from app.core.config import settings

logger = logging.getLogger(__name__)


class OrgContext(BaseModel):
    org_id: str


async def get_org_context(
    x_org_id: str | None = Header(None),
    org_slug: str | None = Query(None, alias="orgSlug"),
) -> OrgContext:
    """Resolve the organization a request acts on: header, then query, then configured default."""
    for candidate in (x_org_id, org_slug, settings.INTIME_DEFAULT_ORG_ID):
        if candidate and candidate.strip():
            return OrgContext(org_id=candidate.strip())

    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Missing organization. Send an X-Org-Id header or orgSlug query parameter.",
    )
