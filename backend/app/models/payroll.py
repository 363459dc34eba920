"""Compensation change and pay band models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class BandCheckResult(BaseModel):
    """Outcome of checking a compensation change against the org's pay bands."""

    change_id: str | None = None
    amount: float = 0
    band: dict[str, Any] | None = None
    below_min: bool = False
    above_max: bool = False
    out_of_band: bool = False
    requires_override: bool = False
