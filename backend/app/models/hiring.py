"""Hiring pipeline models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class PipelineStage(BaseModel):
    key: str
    label: str
    count: int = 0
    candidates: list[dict[str, Any]] = Field(default_factory=list)


class PipelineResponse(BaseModel):
    job_id: str
    total_applicants: int = 0
    stages: list[PipelineStage] = Field(default_factory=list)
