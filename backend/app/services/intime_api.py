"""HTTP client for the Intime backend REST API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from app.core.config import Settings

logger = logging.getLogger(__name__)


class IntimeApiError(Exception):
    def __init__(self, status: int, detail: str = "") -> None:
        super().__init__(f"Intime API {status}: {detail}")
        self.status = status
        self.detail = detail


def unwrap_list(payload: Any) -> list[Any]:
    """Return the list inside a bare array, `{"items": [...]}` or `{"data": [...]}` response."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("items", "data"):
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def expect_list(payload: Any) -> list[Any]:
    """Like `unwrap_list`, but a payload that is not a list response is an upstream error."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("items", "data"):
            value = payload.get(key)
            if isinstance(value, list):
                return value
    raise IntimeApiError(502, "unexpected response shape")


def unwrap_object(payload: Any) -> dict[str, Any] | None:
    """Return the object inside a bare object or `{"data": {...}}` response."""
    if not isinstance(payload, dict):
        return None
    inner = payload.get("data")
    if isinstance(inner, dict):
        return inner
    return payload


class IntimeApiService:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 15.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.INTIME_API_URL:
            logger.warning("INTIME_API_URL missing — IntimeApiService not initialized")
            return

        self.base_url = settings.INTIME_API_URL.rstrip("/")
        self.timeout_seconds = settings.INTIME_API_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("IntimeApiService initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    def _headers(self, org_id: str) -> dict[str, str]:
        return {"Content-Type": "application/json", "X-Org-Id": org_id}

    async def get_json(
        self,
        path: str,
        org_id: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        if not self.initialized:
            raise RuntimeError("IntimeApiService not initialized")

        query = {"orgSlug": org_id, **(params or {})}
        url = f"{self.base_url}/{path.lstrip('/')}"

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url, headers=self._headers(org_id), params=query) as response:
                if 200 <= response.status < 300:
                    if response.status == 204:
                        return {}
                    if "application/json" not in response.headers.get("Content-Type", ""):
                        raise IntimeApiError(response.status, "unexpected content type")
                    return await response.json()

                error_text = await response.text()
                raise IntimeApiError(response.status, error_text)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(f"{self.base_url}/health") as response:
                    return response.status == 200
        except Exception:
            logger.exception("IntimeApiService connection check failed")
            return False


intime_api = IntimeApiService()
