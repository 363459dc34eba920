"""Deterministic ordering of the reporting forest."""

from __future__ import annotations

from app.models.org_chart import OrgNode


def name_key(node: OrgNode) -> str:
    return f"{node.last_name or ''} {node.first_name or ''}"


def root_key(node: OrgNode) -> tuple[str, str]:
    return (node.department or "", name_key(node))


def sort_forest(roots: list[OrgNode]) -> list[OrgNode]:
    """Order roots by department then name, and every reports list by name.

    Sorting is stable, so nodes with equal keys keep their input order.
    Walks the forest iteratively so long management chains cannot exhaust
    the interpreter's recursion limit.
    """
    ordered = sorted(roots, key=root_key)
    stack = list(ordered)
    while stack:
        node = stack.pop()
        if node.reports:
            node.reports = sorted(node.reports, key=name_key)
            stack.extend(node.reports)
    return ordered
