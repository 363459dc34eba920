"""Canonical identity for employee records and their manager references."""

from __future__ import annotations

from app.models.employee import EmployeeRecord, ManagerRecord
from app.models.org_chart import OrgManagerRef, OrgNode

_MISSING_ID_LITERAL = "undefined"


def clean_id(value: str | None) -> str | None:
    """Return the trimmed id, or None when it is empty or the literal "undefined"."""
    if value is None:
        return None
    trimmed = value.strip()
    if not trimmed or trimmed == _MISSING_ID_LITERAL:
        return None
    return trimmed


def normalize_id(primary: str | None, alternate: str | None) -> str | None:
    return clean_id(primary) or clean_id(alternate)


def canonical_employee_id(record: EmployeeRecord) -> str | None:
    return normalize_id(record.employee_id, record.id)


def canonical_manager_id(record: EmployeeRecord) -> str | None:
    if record.manager is None:
        return None
    return normalize_id(record.manager.employee_id, record.manager.id)


def display_name(first_name: str | None, last_name: str | None) -> str:
    return f"{first_name or ''} {last_name or ''}".strip()


def initials(first_name: str | None, last_name: str | None) -> str:
    return f"{(first_name or '')[:1]}{(last_name or '')[:1]}".upper()


def _manager_ref(manager: ManagerRecord, canonical_id: str) -> OrgManagerRef:
    return OrgManagerRef(
        canonical_id=canonical_id,
        first_name=manager.first_name,
        last_name=manager.last_name,
        display_name=display_name(manager.first_name, manager.last_name),
    )


def to_org_node(record: EmployeeRecord) -> OrgNode | None:
    """Build an unlinked node for a record; None when the record has no usable id."""
    canonical_id = canonical_employee_id(record)
    if canonical_id is None:
        return None

    manager_id = canonical_manager_id(record)
    manager = _manager_ref(record.manager, manager_id) if record.manager and manager_id else None

    return OrgNode(
        canonical_id=canonical_id,
        first_name=record.first_name,
        last_name=record.last_name,
        initials=initials(record.first_name, record.last_name),
        email=record.email,
        title=record.title,
        department=record.department,
        location=record.location,
        status=record.status,
        start_date=record.start_date,
        manager=manager,
    )
