from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.services.intime_api import intime_api

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {}

    try:
        if intime_api.initialized:
            ok = await intime_api.check_connection()
            services["intime_api"] = "ok" if ok else "error"
        else:
            services["intime_api"] = "not_configured"
    except Exception:
        services["intime_api"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
