from __future__ import annotations

import pytest

from org_availability.core.enums import EmployeeStatus
from org_availability.core.exceptions import ValidationError
from org_availability.employees.model import Employee
from org_availability.hierarchy.builder import build_hierarchy


def emp(employee_id: int, supervisor_id=None, status=EmployeeStatus.ACTIVE) -> Employee:
    return Employee(
        employee_id=employee_id,
        first_name=f"E{employee_id}",
        last_name="Test",
        status=status,
        supervisor_id=supervisor_id,
    )


def test_standard_tree_has_single_root_and_ordered_children():
    h = build_hierarchy([emp(1), emp(2, 1), emp(3, 1), emp(4, 2)])

    assert h.standard_roots == (1,)
    assert h.invalid_roots == ()
    assert h.adjacency() == {1: [2, 3], 2: [4]}
    assert h.parent_of(4) == 2
    assert h.parent_of(1) is None


def test_only_active_and_onboarding_participate():
    h = build_hierarchy([
        emp(1),
        emp(2, 1, EmployeeStatus.ONBOARDING),
        emp(3, 1, EmployeeStatus.PAUSED),
        emp(4, 1, EmployeeStatus.FORMER),
    ])

    assert [e.employee_id for e in h.employees] == [1, 2]
    assert h.children_of(1) == [2]
    assert 3 not in h


def test_supervisor_outside_snapshot_becomes_invalid_root():
    h = build_hierarchy([emp(1), emp(2, 1), emp(3, 99)])

    assert h.standard_roots == (1,)
    assert h.invalid_roots == (3,)
    assert h.parent_of(3) is None


def test_former_supervisor_makes_report_an_invalid_root():
    h = build_hierarchy([emp(1), emp(2, 1, EmployeeStatus.FORMER), emp(3, 2)])

    assert h.invalid_roots == (3,)
    assert h.children_of(1) == []


def test_self_supervisor_is_rejected():
    h = build_hierarchy([emp(1), emp(2, 2)])

    assert h.invalid_roots == (2,)
    assert h.children_of(2) == []


def test_supervisor_cycle_is_cut_and_every_node_reachable():
    # 2 -> 3 -> 4 -> 2, with 5 hanging below the loop
    h = build_hierarchy([emp(1), emp(2, 4), emp(3, 2), emp(4, 3), emp(5, 3)])

    assert h.standard_roots == (1,)
    assert h.invalid_roots == (2,)
    assert sorted(h.iter_descendants(2)) == [3, 4, 5]
    assert h.descendant_counts()[2] == 3


def test_no_node_is_its_own_ancestor():
    h = build_hierarchy([emp(1, 3), emp(2, 1), emp(3, 2), emp(4, 4), emp(5, 42), emp(6, 5)])

    for e in h.employees:
        seen = set()
        current = e.employee_id
        while current is not None:
            assert current not in seen
            seen.add(current)
            current = h.parent_of(current)


def test_descendant_counts():
    h = build_hierarchy([emp(1), emp(2, 1), emp(3, 1), emp(4, 2), emp(5, 4)])

    counts = h.descendant_counts()
    assert counts == {1: 4, 2: 2, 3: 0, 4: 1, 5: 0}
    assert h.descendant_count(2) == 2
    assert list(h.iter_descendants(1)) == [2, 4, 5, 3]


def test_duplicate_ids_keep_first_record():
    h = build_hierarchy([emp(1), emp(2, 1), emp(2)])

    assert len(h) == 2
    assert h.parent_of(2) == 1


def test_non_list_input_raises_validation_error():
    with pytest.raises(ValidationError):
        build_hierarchy({"id": 1})


def test_non_employee_item_raises_validation_error():
    with pytest.raises(ValidationError):
        build_hierarchy([emp(1), {"id": 2}])
