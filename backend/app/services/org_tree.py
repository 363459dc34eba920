"""Org hierarchy resolution: link a flat employee snapshot into a reporting forest."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from app.models.employee import EmployeeRecord
from app.models.org_chart import OrgChartStats, OrgNode
from app.services.org_normalizer import to_org_node
from app.services.org_sorter import sort_forest

logger = logging.getLogger(__name__)


@dataclass
class OrgChartBuild:
    roots: list[OrgNode] = field(default_factory=list)
    stats: OrgChartStats = field(default_factory=OrgChartStats)


def _coerce_records(records: Any, stats: OrgChartStats) -> list[EmployeeRecord]:
    if not isinstance(records, list | tuple):
        return []

    coerced: list[EmployeeRecord] = []
    for raw in records:
        stats.total_records += 1
        if isinstance(raw, EmployeeRecord):
            coerced.append(raw)
            continue
        if not isinstance(raw, Mapping):
            stats.missing_id += 1
            continue
        try:
            coerced.append(EmployeeRecord.model_validate(dict(raw)))
        except ValidationError:
            logger.debug("Skipping malformed employee record", exc_info=True)
            stats.missing_id += 1
    return coerced


def _index_nodes(records: list[EmployeeRecord], stats: OrgChartStats) -> dict[str, OrgNode]:
    """Normalize active records into nodes keyed by canonical id; first occurrence wins."""
    index: dict[str, OrgNode] = {}
    for record in records:
        if record.is_alumni:
            stats.alumni_excluded += 1
            continue

        node = to_org_node(record)
        if node is None:
            stats.missing_id += 1
            continue

        if node.canonical_id in index:
            stats.duplicate_ids += 1
            logger.warning("Duplicate employee id %s; keeping first occurrence", node.canonical_id)
            continue

        index[node.canonical_id] = node
    return index


def _resolve_parents(index: dict[str, OrgNode], stats: OrgChartStats) -> dict[str, str]:
    parent_of: dict[str, str] = {}
    for canonical_id, node in index.items():
        if node.manager is None:
            continue
        manager_id = node.manager.canonical_id
        if manager_id == canonical_id:
            stats.self_managed += 1
        elif manager_id not in index:
            stats.dangling_managers += 1
        else:
            parent_of[canonical_id] = manager_id
    return parent_of


def _break_cycles(parent_of: dict[str, str], stats: OrgChartStats) -> None:
    """Detach the smallest id of every manager cycle so the links form a forest.

    Every node has at most one parent, so each walk up the chain either ends
    at a root, joins an already-resolved chain, or closes a loop on the
    current path. Each node is entered at most once, which bounds the walk
    by the node count.
    """
    resolved: set[str] = set()
    for start in list(parent_of):
        path: list[str] = []
        on_path: dict[str, int] = {}
        current: str | None = start
        while current is not None and current not in resolved:
            if current in on_path:
                cycle = path[on_path[current]:]
                promoted = min(cycle)
                del parent_of[promoted]
                stats.cycles_broken += 1
                logger.warning(
                    "Manager cycle among %d employee(s); promoting %s to root",
                    len(cycle),
                    promoted,
                )
                break
            on_path[current] = len(path)
            path.append(current)
            current = parent_of.get(current)
        resolved.update(path)


def _annotate(roots: list[OrgNode], stats: OrgChartStats) -> None:
    """Fill depth and span-of-control counts, top-down then bottom-up."""
    order: list[OrgNode] = []
    stack = [(root, 0) for root in reversed(roots)]
    while stack:
        node, depth = stack.pop()
        node.depth = depth
        node.direct_reports = len(node.reports)
        stats.max_depth = max(stats.max_depth, depth)
        order.append(node)
        stack.extend((child, depth + 1) for child in reversed(node.reports))

    for node in reversed(order):
        node.total_reports = sum(1 + child.total_reports for child in node.reports)


def build_org_chart(records: Any) -> OrgChartBuild:
    """Build the sorted reporting forest for one employee snapshot, with build stats.

    Never raises for bad employee data: records without a usable id are
    dropped, and employees whose manager is missing, themselves, or part of
    a reporting cycle become roots. Anything that is not a list yields an
    empty forest.
    """
    stats = OrgChartStats()
    records = _coerce_records(records, stats)
    index = _index_nodes(records, stats)
    parent_of = _resolve_parents(index, stats)
    _break_cycles(parent_of, stats)

    roots: list[OrgNode] = []
    for canonical_id, node in index.items():
        manager_id = parent_of.get(canonical_id)
        if manager_id is None:
            roots.append(node)
        else:
            index[manager_id].reports.append(node)

    roots = sort_forest(roots)
    _annotate(roots, stats)

    stats.nodes = len(index)
    stats.roots = len(roots)
    logger.info(
        "Built org chart: %d node(s), %d root(s) from %d record(s)",
        stats.nodes,
        stats.roots,
        stats.total_records,
    )
    return OrgChartBuild(roots=roots, stats=stats)


def build_org_forest(records: Any) -> list[OrgNode]:
    return build_org_chart(records).roots
