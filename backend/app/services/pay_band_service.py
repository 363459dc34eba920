"""Pay band checks for compensation change approval."""

from __future__ import annotations

from typing import Any

from app.models.payroll import BandCheckResult

_AMOUNT_FIELDS = ("amount", "newAmount", "targetAmount", "comp")


def _to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    return number


def change_amount(change: dict[str, Any]) -> float:
    """First non-zero numeric amount field on the change, else 0."""
    for key in _AMOUNT_FIELDS:
        number = _to_number(change.get(key))
        if number:
            return number
    return 0


def _same(a: Any, b: Any) -> bool:
    return bool(a) and bool(b) and str(a).lower() == str(b).lower()


def find_band(change: dict[str, Any], bands: list[dict[str, Any]]) -> dict[str, Any] | None:
    """First band matching the change's role/job title or level; a band with neither is a catch-all."""
    for band in bands:
        role = band.get("role")
        level = band.get("level")
        role_match = _same(role, change.get("role")) or _same(role, change.get("jobTitle"))
        level_match = _same(level, change.get("level"))
        if role_match or level_match or (not role and not level):
            return band
    return None


def check_pay_band(change: dict[str, Any], bands: list[dict[str, Any]]) -> BandCheckResult:
    change_id = change.get("id")
    result = BandCheckResult(change_id=str(change_id) if change_id is not None else None)

    amount = change_amount(change)
    result.amount = amount
    if not amount or not bands:
        return result

    band = find_band(change, bands)
    result.band = band
    if band is None:
        return result

    band_min = _to_number(band.get("min"))
    band_max = _to_number(band.get("max"))
    result.below_min = band_min is not None and amount < band_min
    result.above_max = band_max is not None and amount > band_max
    result.out_of_band = result.below_min or result.above_max
    result.requires_override = result.out_of_band
    return result
