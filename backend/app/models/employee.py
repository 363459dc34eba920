"""Employee records as returned by the Intime backend (`GET /employees`)."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class EmployeeStatus(StrEnum):
    ACTIVE = "ACTIVE"
    ON_LEAVE = "ON_LEAVE"
    CONTRACTOR = "CONTRACTOR"
    ALUMNI = "ALUMNI"


def _loose_str(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, int | float):
        return str(value)
    return None


class _IntimeModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class ManagerRecord(_IntimeModel):
    """Manager reference embedded in an employee record."""

    employee_id: str | None = None
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @field_validator("employee_id", "id", "first_name", "last_name", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str | None:
        return _loose_str(value)


class EmployeeRecord(_IntimeModel):
    """Loose employee record; any field may be missing or inconsistent."""

    employee_id: str | None = None
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    title: str | None = None
    department: str | None = None
    location: str | None = None
    status: str | None = None
    start_date: str | None = None
    manager: ManagerRecord | None = None

    @field_validator(
        "employee_id",
        "id",
        "first_name",
        "last_name",
        "email",
        "title",
        "department",
        "location",
        "status",
        "start_date",
        mode="before",
    )
    @classmethod
    def _coerce_str(cls, value: Any) -> str | None:
        return _loose_str(value)

    @field_validator("manager", mode="before")
    @classmethod
    def _drop_non_object_manager(cls, value: Any) -> Any:
        if isinstance(value, dict | ManagerRecord):
            return value
        return None

    @property
    def is_alumni(self) -> bool:
        return (self.status or "").strip().upper() == EmployeeStatus.ALUMNI
