from __future__ import annotations

import pytest

from org_availability.aggregation.aggregator import aggregate_subordinates, summarize
from org_availability.aggregation.model import SubordinateSummary
from org_availability.core.enums import AggregationMode, AvailabilityStatus, EmployeeStatus
from org_availability.employees.model import Employee, WorkSchedule
from org_availability.hierarchy.builder import build_hierarchy

A = AvailabilityStatus.AVAILABLE
X = AvailabilityStatus.ABSENT
S = AvailabilityStatus.SICK
N = AvailabilityStatus.NON_WORKING_DAY

FULL = WorkSchedule((480, 480, 480, 480, 480, 0, 0))  # 40h
HALF = WorkSchedule((240, 240, 240, 240, 240, None, None))  # 20h


def emp(employee_id, supervisor_id=None, schedule=None):
    return Employee(employee_id, f"E{employee_id}", "Test", EmployeeStatus.ACTIVE,
                    supervisor_id=supervisor_id, work_schedule=schedule)


@pytest.fixture
def hierarchy():
    #        1
    #      /   \
    #     2     3
    #    / \
    #   4   5
    return build_hierarchy([
        emp(1, None, FULL),
        emp(2, 1, FULL),
        emp(3, 1, HALF),
        emp(4, 2, HALF),
        emp(5, 2, None),
    ])


@pytest.fixture
def statuses():
    return {1: A, 2: X, 3: S, 4: N, 5: A}


def test_only_managers_get_summaries(hierarchy, statuses):
    out = aggregate_subordinates(hierarchy, statuses)

    assert set(out) == {1, 2}
    assert set(out[1]) == set(AggregationMode)


def test_direct_count(hierarchy, statuses):
    out = aggregate_subordinates(hierarchy, statuses)

    assert out[1][AggregationMode.DIRECT_COUNT] == SubordinateSummary(available=0, absent=1, sick=1, non_working=0)
    assert out[2][AggregationMode.DIRECT_COUNT] == SubordinateSummary(available=1, absent=0, sick=0, non_working=1)


def test_all_count_includes_transitive_descendants(hierarchy, statuses):
    summary = aggregate_subordinates(hierarchy, statuses)[1][AggregationMode.ALL_COUNT]

    assert summary == SubordinateSummary(available=1, absent=1, sick=1, non_working=1)
    assert summary.total == 4


def test_hours_weighting_and_unknown_schedule_counts_zero(hierarchy, statuses):
    out = aggregate_subordinates(hierarchy, statuses)

    assert out[1][AggregationMode.DIRECT_HOURS] == SubordinateSummary(available=0, absent=40, sick=20, non_working=0)
    all_hours = out[1][AggregationMode.ALL_HOURS]
    assert all_hours == SubordinateSummary(available=0, absent=40, sick=20, non_working=20)
    assert all_hours.total == 80


def test_totals_equal_subordinate_count_for_every_manager(hierarchy, statuses):
    out = aggregate_subordinates(hierarchy, statuses)

    for manager, modes in out.items():
        assert modes[AggregationMode.DIRECT_COUNT].total == len(hierarchy.children_of(manager))
        assert modes[AggregationMode.ALL_COUNT].total == hierarchy.descendant_count(manager)


def test_explicit_weights_override_schedules(hierarchy, statuses):
    weights = {2: 10, 3: 5}

    out = aggregate_subordinates(hierarchy, statuses, weights)

    assert out[1][AggregationMode.DIRECT_HOURS].total == 15
    assert out[2][AggregationMode.DIRECT_HOURS].total == 0


def test_summarize_skips_unresolved_subordinates():
    assert summarize([1, 2, 3], {1: A, 2: A}).total == 2


def test_share():
    s = SubordinateSummary(available=3, absent=1)

    assert s.share(A) == pytest.approx(0.75)
    assert SubordinateSummary().share(A) == 0.0


def test_parse_mode():
    assert AggregationMode.parse("ALL-HOURS") is AggregationMode.ALL_HOURS
    assert AggregationMode.ALL_HOURS.all_descendants and AggregationMode.ALL_HOURS.hour_weighted
    assert not AggregationMode.DIRECT_COUNT.hour_weighted


def test_all_descendant_modes_match_a_full_subtree_walk(hierarchy, statuses):
    out = aggregate_subordinates(hierarchy, statuses)
    hours = {e.employee_id: e.weekly_hours for e in hierarchy.employees}

    for manager, modes in out.items():
        everyone = list(hierarchy.iter_descendants(manager))
        assert modes[AggregationMode.ALL_COUNT] == summarize(everyone, statuses)
        assert modes[AggregationMode.ALL_HOURS] == summarize(everyone, statuses, hours)


def test_deep_reporting_chain():
    size = 5000
    chain = build_hierarchy([emp(1, None, FULL)] + [emp(i, i - 1, FULL) for i in range(2, size + 1)])
    out = aggregate_subordinates(chain, {i: A for i in range(1, size + 1)})

    assert out[1][AggregationMode.ALL_COUNT] == SubordinateSummary(available=size - 1)
    assert out[1][AggregationMode.DIRECT_COUNT].total == 1
    assert out[size - 1][AggregationMode.ALL_HOURS].available == 40
    assert size not in out
