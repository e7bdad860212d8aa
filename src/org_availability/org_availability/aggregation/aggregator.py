from __future__ import annotations

from typing import Iterable, Mapping, Optional

from ..core.enums import AggregationMode, AvailabilityStatus
from ..hierarchy.builder import Hierarchy
from .model import SubordinateSummary, Weight

_BUCKETS = {
    AvailabilityStatus.AVAILABLE: "available",
    AvailabilityStatus.ABSENT: "absent",
    AvailabilityStatus.SICK: "sick",
    AvailabilityStatus.NON_WORKING_DAY: "non_working",
}


def summarize(
    subordinate_ids: Iterable[int],
    statuses: Mapping[int, AvailabilityStatus],
    weights: Optional[Mapping[int, Weight]] = None,
) -> SubordinateSummary:
    """Bucket subordinates by status; ``weights=None`` means headcount."""
    counts: dict[str, Weight] = {name: 0 for name in _BUCKETS.values()}
    for sub_id in subordinate_ids:
        status = statuses.get(sub_id)
        if status is None:
            continue
        weight = 1 if weights is None else (weights.get(sub_id) or 0)
        counts[_BUCKETS[status]] += weight
    return SubordinateSummary(**counts)


def aggregate_subordinates(
    hierarchy: Hierarchy,
    statuses: Mapping[int, AvailabilityStatus],
    weekly_hours: Optional[Mapping[int, float]] = None,
) -> dict[int, dict[AggregationMode, SubordinateSummary]]:
    """Four summaries per manager: {direct, all descendants} x {headcount, weekly hours}.

    Employees without children get no entry. All-descendant summaries are the
    direct ones plus the all-descendant summaries of managing children, built
    children first in a single pass.
    """
    if weekly_hours is None:
        weekly_hours = {e.employee_id: e.weekly_hours for e in hierarchy.employees}

    out: dict[int, dict[AggregationMode, SubordinateSummary]] = {}
    for emp_id in hierarchy.bottom_up():
        direct = hierarchy.children_of(emp_id)
        if not direct:
            continue
        modes = {
            AggregationMode.DIRECT_COUNT: summarize(direct, statuses),
            AggregationMode.DIRECT_HOURS: summarize(direct, statuses, weekly_hours),
        }
        all_count = modes[AggregationMode.DIRECT_COUNT]
        all_hours = modes[AggregationMode.DIRECT_HOURS]
        for child in direct:
            below = out.get(child)
            if below:
                all_count += below[AggregationMode.ALL_COUNT]
                all_hours += below[AggregationMode.ALL_HOURS]
        modes[AggregationMode.ALL_COUNT] = all_count
        modes[AggregationMode.ALL_HOURS] = all_hours
        out[emp_id] = {mode: modes[mode] for mode in AggregationMode}
    return out
