"""Org chart models: reporting forest nodes and build statistics."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _OrgModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrgManagerRef(_OrgModel):
    canonical_id: str
    first_name: str | None = None
    last_name: str | None = None
    display_name: str = ""


class OrgNode(_OrgModel):
    """One employee in the reporting forest; owns its direct reports."""

    canonical_id: str
    first_name: str | None = None
    last_name: str | None = None
    initials: str = ""
    email: str | None = None
    title: str | None = None
    department: str | None = None
    location: str | None = None
    status: str | None = None
    start_date: str | None = None
    manager: OrgManagerRef | None = None
    depth: int = 0
    direct_reports: int = 0
    total_reports: int = 0
    reports: list[OrgNode] = Field(default_factory=list)


class OrgChartStats(_OrgModel):
    total_records: int = 0
    alumni_excluded: int = 0
    missing_id: int = 0
    duplicate_ids: int = 0
    nodes: int = 0
    roots: int = 0
    dangling_managers: int = 0
    self_managed: int = 0
    cycles_broken: int = 0
    max_depth: int = 0


class OrgChartResponse(_OrgModel):
    org_id: str | None = None
    roots: list[OrgNode] = Field(default_factory=list)
    stats: OrgChartStats = Field(default_factory=OrgChartStats)
