"""Group a job's candidates into hiring pipeline stages."""

from __future__ import annotations

from typing import Any

from app.models.hiring import PipelineResponse, PipelineStage

STAGE_CONFIG: list[tuple[str, str]] = [
    ("NEW", "New / Applied"),
    ("SCREEN", "Phone screen"),
    ("INTERVIEW", "Interviews"),
    ("OFFER", "Offer"),
    ("HIRED", "Hired"),
    ("ARCHIVED", "Archived"),
]

# Substring match, checked in order
_STAGE_MARKERS: list[tuple[str, str]] = [
    ("SCREEN", "SCREEN"),
    ("INTERVIEW", "INTERVIEW"),
    ("OFFER", "OFFER"),
    ("HIRE", "HIRED"),
    ("ARCHIVE", "ARCHIVED"),
]

_ARCHIVED_EXACT = {"REJECTED", "DECLINED"}


def normalize_stage(raw: str | None) -> str:
    if not raw or not isinstance(raw, str):
        return "NEW"
    upper = raw.upper()
    for marker, stage in _STAGE_MARKERS:
        if marker in upper:
            return stage
    if upper in _ARCHIVED_EXACT:
        return "ARCHIVED"
    return upper


def candidate_display_name(candidate: dict[str, Any]) -> str:
    first = candidate.get("firstName")
    last = candidate.get("lastName")
    if first or last:
        return f"{first or ''} {last or ''}".strip() or "Unnamed"
    return candidate.get("name") or "Unnamed"


def group_candidates_by_stage(candidates: list[dict[str, Any]]) -> list[PipelineStage]:
    """Bucket candidates by normalized stage.

    Configured stages come first in pipeline order (empty ones included),
    followed by any other stage keys in the order they were first seen.
    """
    buckets: dict[str, list[dict[str, Any]]] = {key: [] for key, _ in STAGE_CONFIG}
    for candidate in candidates:
        key = normalize_stage(candidate.get("stage"))
        buckets.setdefault(key, []).append(
            {**candidate, "stageKey": key, "displayName": candidate_display_name(candidate)}
        )

    labels = dict(STAGE_CONFIG)
    return [
        PipelineStage(key=key, label=labels.get(key, key.title()), count=len(items), candidates=items)
        for key, items in buckets.items()
    ]


def build_pipeline(job_id: str, candidates: list[dict[str, Any]]) -> PipelineResponse:
    return PipelineResponse(
        job_id=job_id,
        total_applicants=len(candidates),
        stages=group_candidates_by_stage(candidates),
    )
