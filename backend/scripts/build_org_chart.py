#!/usr/bin/env python3
"""Build an org chart from an employee snapshot and write it as JSON.

Run from the backend/ directory:

    python3 scripts/build_org_chart.py --input employees.json [--output chart.json]
    python3 scripts/build_org_chart.py --org-id acme [--stats] [--verbose]

The input file may hold a bare array of employee records or an object
wrapping it in "items" or "data". Without --input, the snapshot is fetched
from the Intime API configured by INTIME_API_URL.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

_project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from app.core.config import Settings  # noqa: E402
from app.services.employee_service import EmployeeService  # noqa: E402
from app.services.intime_api import IntimeApiService, unwrap_list  # noqa: E402
from app.services.org_tree import OrgChartBuild, build_org_chart  # noqa: E402

logger = logging.getLogger(__name__)


def load_snapshot(path: str) -> list[Any]:
    with open(path, encoding="utf-8") as fh:
        return unwrap_list(json.load(fh))


async def fetch_snapshot(settings: Settings, org_id: str) -> list[Any]:
    api = IntimeApiService()
    await api.initialize(settings)
    if not api.initialized:
        raise SystemExit("INTIME_API_URL is not set; pass --input or configure the API")
    try:
        return await EmployeeService(api).list_employees(org_id)
    finally:
        await api.close()


def render(build: OrgChartBuild, *, stats_only: bool = False) -> str:
    if stats_only:
        return build.stats.model_dump_json(by_alias=True, indent=2)
    return json.dumps([root.model_dump(by_alias=True) for root in build.roots], indent=2)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build the reporting forest for one organization",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        help="Path to a JSON employee snapshot",
    )
    source.add_argument(
        "--org-id",
        help="Fetch the snapshot for this organization from the Intime API",
    )
    parser.add_argument(
        "--output",
        help="Write JSON here instead of stdout",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print build statistics instead of the tree",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> None:
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s", stream=sys.stderr)

    if args.input:
        logger.info("Reading employees from %s", args.input)
        records = load_snapshot(args.input)
    else:
        logger.info("Fetching employees for org %s...", args.org_id)
        records = await fetch_snapshot(Settings(), args.org_id)

    build = build_org_chart(records)
    output = render(build, stats_only=args.stats)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(output + "\n")
        logger.info("Wrote %s", args.output)
    else:
        print(output)


if __name__ == "__main__":
    asyncio.run(run(parse_args()))
