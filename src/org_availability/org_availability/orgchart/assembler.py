from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..absences.model import AbsenceRecord
from ..aggregation.aggregator import aggregate_subordinates
from ..attendance.conventions.base import HalfDayConvention
from ..attendance.resolver import resolve_all
from ..common.validators import require_sequence
from ..core.constants import (
    DEFAULT_ORGANIZATION_NAME,
    ROOT_ANCHOR_ID,
    UNSUPERVISED_ANCHOR_ID,
    UNSUPERVISED_ANCHOR_NAME,
)
from ..core.enums import AggregationMode
from ..employees.model import Employee
from ..hierarchy.builder import Hierarchy, build_hierarchy
from ..holidays.model import PublicHoliday
from .cache import NodeCache
from .model import ChartNode

logger = logging.getLogger(__name__)


def needs_root_anchor(hierarchy: Hierarchy, organization_name: str) -> bool:
    return (
        hierarchy.root_count > 1
        or organization_name != DEFAULT_ORGANIZATION_NAME
        or bool(hierarchy.invalid_roots)
    )


def build_tree(
    employees: Sequence[Employee],
    absences: Sequence[AbsenceRecord],
    holidays: Sequence[PublicHoliday],
    mode: AggregationMode | str,
    on: date,
    *,
    organization_name: str = DEFAULT_ORGANIZATION_NAME,
    convention: Optional[HalfDayConvention] = None,
    cache: Optional[NodeCache] = None,
) -> list[ChartNode]:
    """Assemble the renderable node list for ``on``.

    Anchor nodes come first, then participating employees in input order. Only
    the single display root has an empty ``parent_id``.
    """
    require_sequence(employees, "employees")
    require_sequence(absences, "absences")
    require_sequence(holidays, "holidays")
    mode = AggregationMode.parse(mode)

    hierarchy = build_hierarchy(employees)
    daily = resolve_all(hierarchy.employees, on, holidays, absences, convention=convention)
    statuses = {emp_id: d.status for emp_id, d in daily.items()}
    summaries = aggregate_subordinates(hierarchy, statuses)
    descendants = hierarchy.descendant_counts()

    nodes: list[ChartNode] = []
    root_parent = ""
    unsupervised_parent = ""
    if needs_root_anchor(hierarchy, organization_name):
        logger.info(
            "Inserting root anchor %r (%d standard roots, %d invalid roots)",
            organization_name,
            len(hierarchy.standard_roots),
            len(hierarchy.invalid_roots),
        )
        nodes.append(ChartNode(node_id=ROOT_ANCHOR_ID, parent_id="", name=organization_name, is_virtual=True))
        root_parent = unsupervised_parent = ROOT_ANCHOR_ID
        if hierarchy.invalid_roots:
            nodes.append(
                ChartNode(
                    node_id=UNSUPERVISED_ANCHOR_ID,
                    parent_id=ROOT_ANCHOR_ID,
                    name=UNSUPERVISED_ANCHOR_NAME,
                    is_virtual=True,
                )
            )
            unsupervised_parent = UNSUPERVISED_ANCHOR_ID

    invalid = set(hierarchy.invalid_roots)
    for emp in hierarchy.employees:
        emp_id = emp.employee_id
        parent = hierarchy.parent_of(emp_id)
        if parent is not None:
            parent_id = str(parent)
        elif emp_id in invalid:
            parent_id = unsupervised_parent
        else:
            parent_id = root_parent

        status = daily[emp_id]
        own = summaries.get(emp_id, {})
        node = ChartNode(
            node_id=str(emp_id),
            parent_id=parent_id,
            name=emp.full_name,
            first_name=emp.first_name,
            last_name=emp.last_name,
            position=emp.position,
            email=emp.email,
            status=status.status,
            label=status.label,
            am_status=status.am_status,
            pm_status=status.pm_status,
            descendant_count=descendants[emp_id],
            direct_reports=[str(c) for c in hierarchy.children_of(emp_id)],
            summaries=own,
            summary=own.get(mode),
        )
        nodes.append(cache.reuse(node) if cache is not None else node)

    if cache is not None:
        cache.retain(str(emp_id) for emp_id in hierarchy.index)

    logger.debug("Assembled %d nodes for %s (mode=%s)", len(nodes), on.isoformat(), mode.value)
    return nodes
